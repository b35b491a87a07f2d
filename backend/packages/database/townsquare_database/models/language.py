"""
Supported language model definition.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class SupportedLanguage(Base):
    """
    Language that content can be written in and translated into.

    Attributes:
        code: Language code (e.g. "en", "ar"), primary key.
        name: English display name.
        native_name: Name of the language in the language itself.
        is_rtl: Whether the language is written right-to-left.
        enabled: Whether fan-out translates published content into it.
    """

    __tablename__ = "supported_languages"

    code: Mapped[str] = mapped_column(String(10), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    native_name: Mapped[str] = mapped_column(String(100), nullable=False)
    is_rtl: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    @property
    def text_direction(self) -> str:
        """Canonical direction, derived from ``is_rtl``."""
        return "rtl" if self.is_rtl else "ltr"

"""
Post model definition.

This module defines the Post model for community news submissions.
"""

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin, generate_uuid


class Post(Base, TimestampMixin):
    """
    Community post.

    Posts are submitted publicly, stay hidden until an administrator
    publishes them, and are then translated into every enabled language.

    Attributes:
        id: Unique post identifier (UUID).
        author_name: Display name of the submitter.
        author_email: Optional contact address of the submitter.
        title: Post title in the original language.
        content: Optional post body in the original language.
        link_url: Optional external link.
        image_url: Optional illustration URL.
        post_type: Free-form post category (e.g. "announcement").
        original_language: Language code the post was written in.
        text_direction: Direction of the original text ("ltr" or "rtl").
        published: Whether the post is visible to readers.
    """

    __tablename__ = "posts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    author_email: Mapped[str | None] = mapped_column(String(255))
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str | None] = mapped_column(Text)
    link_url: Mapped[str | None] = mapped_column(String(2000))
    image_url: Mapped[str | None] = mapped_column(String(2000))
    post_type: Mapped[str] = mapped_column(String(50), nullable=False, default="article")
    original_language: Mapped[str] = mapped_column(
        String(10), ForeignKey("supported_languages.code"), nullable=False
    )
    text_direction: Mapped[str] = mapped_column(String(3), nullable=False, default="ltr")
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)

    @property
    def body(self) -> str | None:
        """Translatable body text."""
        return self.content

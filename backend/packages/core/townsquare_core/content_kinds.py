"""
Content kinds.

Posts and events go through the same moderation and translation pipeline.
``ContentKind`` names them and ``get_kind_info`` returns the models and
column names that let services handle both with one code path.
"""

from dataclasses import dataclass
from enum import Enum

from townsquare_database.models import Event, EventTranslation, Post, PostTranslation


class ContentKind(str, Enum):
    """Translatable content kinds."""

    POST = "post"
    EVENT = "event"


@dataclass(frozen=True)
class ContentKindInfo:
    """
    Storage layout of one content kind.

    Attributes:
        model: ORM model of the content item.
        translation_model: ORM model of its per-language translations.
        foreign_key: Column on the translation table referencing the item.
        body_column: Name of the translatable body column on both tables.
    """

    model: type[Post] | type[Event]
    translation_model: type[PostTranslation] | type[EventTranslation]
    foreign_key: str
    body_column: str


_KIND_INFO: dict[ContentKind, ContentKindInfo] = {
    ContentKind.POST: ContentKindInfo(
        model=Post,
        translation_model=PostTranslation,
        foreign_key="post_id",
        body_column="content",
    ),
    ContentKind.EVENT: ContentKindInfo(
        model=Event,
        translation_model=EventTranslation,
        foreign_key="event_id",
        body_column="description",
    ),
}


def get_kind_info(kind: ContentKind) -> ContentKindInfo:
    """
    Look up the storage layout for a content kind.

    Args:
        kind: Content kind.

    Returns:
        ContentKindInfo for the kind.
    """
    return _KIND_INFO[ContentKind(kind)]

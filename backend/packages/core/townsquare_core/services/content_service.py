"""
Content service.

Handles community submissions of posts and events and the administrator's
view over all of them, published or not.
"""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from townsquare_core import get_logger
from townsquare_core.content_kinds import ContentKind, get_kind_info
from townsquare_core.schemas import EventCreate, EventResponse, PostCreate, PostResponse
from townsquare_core.services.text_direction import classify, primary_subtag
from townsquare_core.services.translation_gateway import GatewayError, TranslationGateway
from townsquare_database.models import Event, Post, SupportedLanguage

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "en"


class ContentService:
    """Submission and administration of posts and events."""

    def __init__(
        self,
        session: AsyncSession,
        detector: TranslationGateway | None = None,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        """
        Initialize content service.

        Args:
            session: Database session.
            detector: Gateway used to detect the language of submissions
                that do not state one. None disables detection.
            default_language: Language assumed when detection is unavailable.
        """
        self.session = session
        self.detector = detector
        self.default_language = default_language

    async def _resolve_language(self, language: str | None, sample: str) -> str:
        if language:
            code = language.strip().lower()
            supported = await self.session.get(SupportedLanguage, code)
            if supported is None:
                raise ValueError(f"Unsupported language: {code}")
            return code

        if self.detector is None:
            return self.default_language

        try:
            detection = await self.detector.detect_language(sample)
        except GatewayError as e:
            logger.warning(
                "Language detection failed; using default language",
                extra={"error_kind": e.kind.value, "error": e.message},
            )
            return self.default_language

        code = primary_subtag(detection.language)
        if await self.session.get(SupportedLanguage, code) is None:
            logger.info(
                "Detected language is not supported; using default language",
                extra={"detected_language": detection.language},
            )
            return self.default_language
        return code

    async def create_post(self, data: PostCreate) -> PostResponse:
        """
        Store a new, unpublished post.

        Args:
            data: Submission payload.

        Returns:
            The stored post.

        Raises:
            ValueError: If the post's language is not supported.
        """
        sample = data.title if not data.content else f"{data.title}\n{data.content[:500]}"
        language = await self._resolve_language(data.language, sample)

        post = Post(
            author_name=data.author_name,
            author_email=data.author_email,
            title=data.title,
            content=data.content,
            link_url=data.link_url,
            image_url=data.image_url,
            post_type=data.post_type,
            original_language=language,
            text_direction=data.text_direction or classify(data.title, language),
            published=False,
        )
        self.session.add(post)
        await self.session.commit()
        await self.session.refresh(post)

        logger.info(
            "Post submitted",
            extra={"content_id": post.id, "language_code": language},
        )
        return PostResponse.model_validate(post)

    async def create_event(self, data: EventCreate) -> EventResponse:
        """
        Store a new, unpublished event.

        Args:
            data: Submission payload.

        Returns:
            The stored event.

        Raises:
            ValueError: If the event's language is not supported.
        """
        sample = (
            data.title if not data.description else f"{data.title}\n{data.description[:500]}"
        )
        language = await self._resolve_language(data.language, sample)

        event = Event(
            organizer_name=data.organizer_name,
            organizer_email=data.organizer_email,
            title=data.title,
            description=data.description,
            event_date=data.event_date,
            event_time=data.event_time,
            location=data.location,
            category=data.category,
            is_free=data.is_free,
            ticket_price=data.ticket_price,
            ticket_url=data.ticket_url,
            original_language=language,
            text_direction=data.text_direction or classify(data.title, language),
            published=False,
        )
        self.session.add(event)
        await self.session.commit()
        await self.session.refresh(event)

        logger.info(
            "Event submitted",
            extra={"content_id": event.id, "language_code": language},
        )
        return EventResponse.model_validate(event)

    @staticmethod
    def _to_response(kind: ContentKind, item: Any) -> PostResponse | EventResponse:
        if kind is ContentKind.EVENT:
            return EventResponse.model_validate(item)
        return PostResponse.model_validate(item)

    async def list_all(self, kind: ContentKind) -> list[PostResponse] | list[EventResponse]:
        """
        List every item of a kind, newest first, including unpublished ones.
        """
        kind = ContentKind(kind)
        model = get_kind_info(kind).model
        stmt = select(model).order_by(model.created_at.desc(), model.id.desc())
        result = await self.session.execute(stmt)
        return [self._to_response(kind, item) for item in result.scalars().all()]

    async def get(self, kind: ContentKind, content_id: str) -> PostResponse | EventResponse:
        """
        Get one item regardless of its published state.

        Raises:
            ValueError: If the item does not exist.
        """
        kind = ContentKind(kind)
        item = await self.session.get(get_kind_info(kind).model, content_id)
        if item is None:
            raise ValueError(f"{kind.value.capitalize()} not found")
        return self._to_response(kind, item)

    async def delete(self, kind: ContentKind, content_id: str) -> None:
        """
        Delete an item together with all of its translations.

        Raises:
            ValueError: If the item does not exist.
        """
        kind = ContentKind(kind)
        info = get_kind_info(kind)
        item = await self.session.get(info.model, content_id)
        if item is None:
            raise ValueError(f"{kind.value.capitalize()} not found")

        translation_model = info.translation_model
        await self.session.execute(
            delete(translation_model).where(
                getattr(translation_model, info.foreign_key) == content_id
            )
        )
        await self.session.delete(item)
        await self.session.commit()

        logger.info("Deleted content", extra={"kind": kind.value, "content_id": content_id})

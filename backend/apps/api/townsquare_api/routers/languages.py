"""
Languages router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from townsquare_core.schemas import LanguageListResponse
from townsquare_core.services import LanguageService

from ..dependencies import get_language_service

router = APIRouter()


@router.get("")
async def list_languages(
    language_service: Annotated[LanguageService, Depends(get_language_service)],
) -> LanguageListResponse:
    """List languages readers can choose from."""
    return LanguageListResponse(languages=await language_service.list_enabled())

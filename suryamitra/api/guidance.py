from __future__ import annotations

from fastapi import APIRouter

from suryamitra.schemas.guidance import Challenge, ChallengeType, Highlight
from suryamitra.services.guidance import HIGHLIGHTS, list_challenges

router = APIRouter()


@router.get("/challenges", response_model=list[Challenge])
def challenges(key: ChallengeType | None = None) -> list[Challenge]:
    """Common Indian rooftop solar hurdles and how to overcome them."""
    return list_challenges(key)


@router.get("/highlights", response_model=list[Highlight])
def highlights() -> list[Highlight]:
    return list(HIGHLIGHTS)

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, computed_field


class ChallengeType(str, Enum):
    """Rooftop solar hurdles in India, valued by their display title."""

    DUST = "Dust & Air Pollution"
    HEAT = "Extreme Heat Impact"
    MONSOON = "Monsoon Generation Dip"
    GRID = "Grid Instability"


class Challenge(BaseModel):
    key: ChallengeType
    problem: str
    solution: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def title(self) -> str:
        return self.key.value


class Highlight(BaseModel):
    value: str
    label: str

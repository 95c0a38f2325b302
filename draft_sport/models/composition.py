"""Roster composition data models."""

from typing import List, Union
from pydantic import BaseModel, ConfigDict

from draft_sport.models.pick import Pick
from draft_sport.models.player import Category


class PositionRequirement(BaseModel):
    """A number of active picks required at one position."""

    model_config = ConfigDict(frozen=True)

    position_name: str
    count: int

    @classmethod
    def decode(cls, data: dict) -> "PositionRequirement":
        """Create PositionRequirement from API response."""
        return cls(position_name=data["position_name"], count=data["count"])

    @property
    def label(self) -> str:
        return self.position_name


class CategoryRequirement(BaseModel):
    """A number of bench picks required from one category."""

    model_config = ConfigDict(frozen=True)

    category: Category
    count: int

    @classmethod
    def decode(cls, data: dict) -> "CategoryRequirement":
        """Create CategoryRequirement from API response."""
        return cls(category=Category.decode(data["category"]), count=data["count"])

    @property
    def label(self) -> str:
        return self.category.name


Requirement = Union[PositionRequirement, CategoryRequirement]


class Composition(BaseModel):
    """The ordered slot template a roster is evaluated against."""

    model_config = ConfigDict(frozen=True)

    position_requirements: List[PositionRequirement] = []
    category_requirements: List[CategoryRequirement] = []

    @classmethod
    def decode(cls, data: dict) -> "Composition":
        """Create Composition from API response."""
        return cls(
            position_requirements=[
                PositionRequirement.decode(r) for r in data.get("position_requirements") or []
            ],
            category_requirements=[
                CategoryRequirement.decode(r) for r in data.get("category_requirements") or []
            ]
        )


class FilledRequirement(BaseModel):
    """A requirement paired with the picks that satisfy it.

    Holding fewer picks than ``requirement.count`` is a normal state.
    """

    model_config = ConfigDict(frozen=True)

    requirement: Requirement
    picks: List[Pick]

    @property
    def is_filled(self) -> bool:
        return len(self.picks) >= self.requirement.count

    @property
    def shortfall(self) -> int:
        return max(self.requirement.count - len(self.picks), 0)


class FilledComposition(BaseModel):
    """All filled requirements of a team, in composition order."""

    model_config = ConfigDict(frozen=True)

    filled_requirements: List[FilledRequirement]

    @property
    def picks(self) -> List[Pick]:
        """Every placed pick, in slot order."""
        return [pick for filled in self.filled_requirements for pick in filled.picks]

    @property
    def is_complete(self) -> bool:
        return all(filled.is_filled for filled in self.filled_requirements)

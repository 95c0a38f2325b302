"""Player, position and category data models."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class Category(BaseModel):
    """A classification grouping several positions, e.g. "Forward"."""

    model_config = ConfigDict(frozen=True)

    public_id: Optional[str] = None
    name: str

    @classmethod
    def decode(cls, data: dict) -> "Category":
        """Create Category from API response."""
        public_id = data.get("public_id")
        return cls(
            public_id=str(public_id) if public_id is not None else None,
            name=data["name"]
        )


class Position(BaseModel):
    """A playing position and the categories it belongs to."""

    model_config = ConfigDict(frozen=True)

    public_id: Optional[str] = None
    name: str
    categories: List[Category] = []

    @classmethod
    def decode(cls, data: dict) -> "Position":
        """Create Position from API response."""
        public_id = data.get("public_id")
        return cls(
            public_id=str(public_id) if public_id is not None else None,
            name=data["name"],
            categories=[Category.decode(c) for c in data.get("categories") or []]
        )

    def is_in_category(self, category: Category) -> bool:
        """Check whether this position belongs to ``category``."""
        return any(c.name == category.name for c in self.categories)


class Player(BaseModel):
    """Player model."""

    model_config = ConfigDict(frozen=True)

    public_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    position: Optional[Position] = None

    @classmethod
    def decode(cls, data: dict) -> "Player":
        """Create Player from API response."""
        position = data.get("position")
        return cls(
            public_id=str(data["public_id"]),
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            position=Position.decode(position) if position is not None else None
        )

    @property
    def position_name(self) -> Optional[str]:
        if self.position is None:
            return None
        return self.position.name

    @property
    def full_name(self) -> str:
        """Get player's full name."""
        if self.first_name and self.last_name:
            return f"{self.first_name} {self.last_name}"
        elif self.last_name:
            return self.last_name
        elif self.first_name:
            return self.first_name
        else:
            return "Unknown Player"

"""League pick data models."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from draft_sport.models.player import Player


class Pick(BaseModel):
    """One player's assignment to a manager's roster in a league."""

    model_config = ConfigDict(frozen=True)

    public_id: str
    league_id: Optional[str] = None
    manager_id: Optional[str] = None
    player: Player
    benched: bool = False
    created: datetime
    round_sequence: Optional[int] = None

    @classmethod
    def decode(cls, data: dict) -> "Pick":
        """Create Pick from API response."""
        league_id = data.get("league_id")
        manager_id = data.get("manager_id")
        return cls(
            public_id=str(data["public_id"]),
            league_id=str(league_id) if league_id is not None else None,
            manager_id=str(manager_id) if manager_id is not None else None,
            player=Player.decode(data["player"]),
            benched=data.get("benched", False),
            created=data["created"],
            round_sequence=data.get("round_sequence")
        )

    @classmethod
    def decode_many(cls, data: list) -> List["Pick"]:
        return [cls.decode(p) for p in data]

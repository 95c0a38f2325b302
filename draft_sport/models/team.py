"""League team data models."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from draft_sport.models.composition import Composition, FilledComposition
from draft_sport.models.pick import Pick
from draft_sport.services.composition import fill_composition


class LeagueTeam(BaseModel):
    """A manager's team in a league, as at a given round."""

    model_config = ConfigDict(frozen=True)

    league_id: str
    picks: List[Pick]
    manager_id: str
    manager_display_name: Optional[str] = None
    name: Optional[str] = None
    as_at: Optional[str] = None
    as_at_round: Optional[int] = None
    composition: Composition

    @classmethod
    def decode(cls, data: dict) -> "LeagueTeam":
        """Create LeagueTeam from API response."""
        return cls(
            league_id=str(data["league_id"]),
            picks=Pick.decode_many(data["picks"]),
            manager_id=str(data["manager_id"]),
            manager_display_name=data.get("manager_display_name"),
            name=data.get("name"),
            as_at=data.get("as_at"),
            as_at_round=data.get("as_at_round_sequence"),
            composition=Composition.decode(data["composition"])
        )

    @classmethod
    def decode_many(cls, data: list) -> List["LeagueTeam"]:
        return [cls.decode(t) for t in data]

    @property
    def display_name(self) -> str:
        """Get the most appropriate team name."""
        return self.name or self.manager_display_name or self.manager_id

    @property
    def filled_composition(self) -> FilledComposition:
        """Picks assigned to this team's composition slots."""
        return fill_composition(self.picks, self.composition)

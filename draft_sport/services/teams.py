"""League team services."""

from typing import Optional
from rich.console import Console

from draft_sport.models.composition import FilledComposition
from draft_sport.models.session import Session
from draft_sport.models.team import LeagueTeam
from draft_sport.services.api import ApiRequest
from draft_sport.services.decoding import decode_one
from draft_sport.services.parameters import UrlParameter, UrlParameters

console = Console()


class TeamService:
    """Service for retrieving and removing league teams."""

    PATH = "/league/team"

    def __init__(self, api: ApiRequest):
        self.api = api

    async def retrieve(
        self,
        league_id: str,
        manager_id: str,
        as_at_round: Optional[int] = None,
        session: Optional[Session] = None
    ) -> Optional[LeagueTeam]:
        """Get a manager's team, optionally as at an earlier round.

        Returns None when the league has no team for the manager.
        """
        parameters = UrlParameters([
            UrlParameter("league", league_id),
            UrlParameter("manager", manager_id),
        ])
        if as_at_round is not None:
            parameters.append(UrlParameter("as_at_round", as_at_round))

        team = await decode_one(
            self.api.make(self.PATH, "GET", parameters, session=session),
            LeagueTeam
        )

        if team is None:
            console.print(f"[yellow]No team found for manager {manager_id} in league {league_id}[/yellow]")
        else:
            console.print(f"[green]Found team: {team.display_name} ({len(team.picks)} picks)[/green]")
        return team

    async def retrieve_filled_composition(
        self,
        league_id: str,
        manager_id: str,
        as_at_round: Optional[int] = None,
        session: Optional[Session] = None
    ) -> Optional[FilledComposition]:
        """Get a manager's team and assign its picks to composition slots."""
        team = await self.retrieve(league_id, manager_id, as_at_round, session)
        if team is None:
            return None
        return team.filled_composition

    async def delete(self, team: LeagueTeam, session: Optional[Session] = None) -> None:
        """Remove the manager's team from its league."""
        parameters = UrlParameters([
            UrlParameter("league", team.league_id),
            UrlParameter("manager", team.manager_id),
        ])
        await self.api.make(self.PATH, "DELETE", parameters, session=session)
        console.print(f"[green]Removed {team.display_name} from league {team.league_id}[/green]")

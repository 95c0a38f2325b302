"""Command line interface for the Draft Sport client."""

import asyncio
from typing import Optional
import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt, Confirm
from rich.table import Table

from draft_sport.config import ClientConfig, ConfigManager
from draft_sport.errors import DraftSportError
from draft_sport.io.csv_export import CSVExporter
from draft_sport.io.files import FileManager
from draft_sport.models.composition import PositionRequirement
from draft_sport.models.team import LeagueTeam
from draft_sport.services.api import ApiRequest
from draft_sport.services.sessions import SessionService
from draft_sport.services.teams import TeamService

app = typer.Typer(
    name="draft-sport",
    help="Draft Sport fantasy league client",
    add_completion=False
)
console = Console()


def _build_api(config_manager: ConfigManager) -> ApiRequest:
    return ApiRequest(ClientConfig.from_env(config_manager.load_config()))


def _resolve_league(config_manager: ConfigManager, league_id: Optional[str]) -> str:
    """Use the given league, falling back to the cached one."""
    if league_id:
        return league_id

    cached = config_manager.load_config().league_id
    if cached:
        console.print(f"[blue]Using cached league ID: {cached}[/blue]")
        return cached

    console.print("[red]❌ No league ID given and none cached. Pass --league[/red]")
    raise typer.Exit(code=1)


def _fail(error: Exception) -> None:
    console.print(f"[red]❌ {escape(str(error))}[/red]")
    raise typer.Exit(code=1)


def render_filled_composition(team: LeagueTeam) -> Table:
    """Build a table of the team's composition slots and the picks in them."""
    title = f"{team.display_name}"
    if team.as_at_round is not None:
        title += f" (round {team.as_at_round})"

    table = Table(title=title)
    table.add_column("Slot", style="bold cyan")
    table.add_column("Filled", justify="right")
    table.add_column("Players")

    for filled in team.filled_composition.filled_requirements:
        requirement = filled.requirement
        kind = "" if isinstance(requirement, PositionRequirement) else " (bench)"
        style = "green" if filled.is_filled else "yellow"
        table.add_row(
            f"{requirement.label}{kind}",
            f"[{style}]{len(filled.picks)}/{requirement.count}[/{style}]",
            ", ".join(pick.player.full_name for pick in filled.picks) or "-"
        )

    return table


@app.command()
def login(
    email: str = typer.Argument(..., help="Account email address"),
    secret: Optional[str] = typer.Option(None, "--secret", help="Account secret (prompted when omitted)")
):
    """Create a session and remember its credentials."""
    config_manager = ConfigManager()
    if not secret:
        secret = Prompt.ask("Secret", password=True)

    try:
        session = asyncio.run(SessionService(_build_api(config_manager)).create(email, secret))
    except DraftSportError as e:
        _fail(e)

    config = config_manager.load_config()
    config.session_id = session.session_id
    config.api_key = session.api_key
    config_manager.save_config(config)
    console.print(f"[green]Logged in as agent {session.agent_id}[/green]")


@app.command()
def logout():
    """Forget remembered session credentials."""
    config_manager = ConfigManager()
    config = config_manager.load_config()
    config.session_id = None
    config.api_key = None
    config_manager.save_config(config)
    console.print("[green]Session credentials cleared[/green]")


@app.command()
def team(
    manager_id: str = typer.Argument(..., help="Manager identifier"),
    league_id: Optional[str] = typer.Option(None, "--league", "-l", help="League identifier (defaults to the last league used)"),
    as_at_round: Optional[int] = typer.Option(None, "--round", "-r", help="Show the team as at this round"),
    export: bool = typer.Option(False, "--export", "-e", help="Also export the composition to CSV")
):
    """Show a manager's team arranged into its composition slots."""
    config_manager = ConfigManager()
    league_id = _resolve_league(config_manager, league_id)

    try:
        service = TeamService(_build_api(config_manager))
        league_team = asyncio.run(service.retrieve(league_id, manager_id, as_at_round))
        if league_team is None:
            raise typer.Exit(code=1)
        console.print(render_filled_composition(league_team))
    except DraftSportError as e:
        _fail(e)

    config = config_manager.load_config()
    config.league_id = league_id
    config_manager.save_config(config)

    if export:
        CSVExporter(FileManager(config_manager)).export_filled_composition(league_team)


@app.command("delete-team")
def delete_team(
    manager_id: str = typer.Argument(..., help="Manager identifier"),
    league_id: Optional[str] = typer.Option(None, "--league", "-l", help="League identifier (defaults to the last league used)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation")
):
    """Remove a manager's team from a league."""
    config_manager = ConfigManager()
    league_id = _resolve_league(config_manager, league_id)

    try:
        service = TeamService(_build_api(config_manager))
        league_team = asyncio.run(service.retrieve(league_id, manager_id))
        if league_team is None:
            raise typer.Exit(code=1)

        if not yes and not Confirm.ask(f"Remove {league_team.display_name} from league {league_id}?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

        asyncio.run(service.delete(league_team))
    except DraftSportError as e:
        _fail(e)


if __name__ == "__main__":
    app()

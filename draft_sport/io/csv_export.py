"""CSV export utilities for filled compositions."""

from pathlib import Path
from typing import Optional
import pandas as pd
from rich.console import Console

from draft_sport.io.files import FileManager
from draft_sport.models.composition import PositionRequirement
from draft_sport.models.team import LeagueTeam

console = Console()

COLUMNS = [
    "requirement_type", "requirement", "slot", "pick_id",
    "player_id", "player_name", "position", "benched", "created"
]


class CSVExporter:
    """Handles CSV export operations."""

    def __init__(self, file_manager: Optional[FileManager] = None):
        self.file_manager = file_manager or FileManager()

    @staticmethod
    def build_composition_dataframe(team: LeagueTeam) -> pd.DataFrame:
        """One row per composition slot; unfilled slots have empty pick columns."""
        rows = []
        for filled in team.filled_composition.filled_requirements:
            requirement = filled.requirement
            requirement_type = "position" if isinstance(requirement, PositionRequirement) else "category"

            for slot in range(max(requirement.count, len(filled.picks))):
                row = {
                    "requirement_type": requirement_type,
                    "requirement": requirement.label,
                    "slot": slot + 1,
                    "pick_id": "",
                    "player_id": "",
                    "player_name": "",
                    "position": "",
                    "benched": "",
                    "created": ""
                }
                if slot < len(filled.picks):
                    pick = filled.picks[slot]
                    row.update({
                        "pick_id": pick.public_id,
                        "player_id": pick.player.public_id,
                        "player_name": pick.player.full_name,
                        "position": pick.player.position_name or "",
                        "benched": pick.benched,
                        "created": pick.created.isoformat()
                    })
                rows.append(row)

        return pd.DataFrame(rows, columns=COLUMNS)

    def export_filled_composition(self, team: LeagueTeam) -> Path:
        """Export a team's filled composition to CSV."""
        df = self.build_composition_dataframe(team)
        if df.empty:
            raise ValueError("No composition slots to export")

        filename = self.file_manager.composition_filename(team.league_id, team.manager_id, team.as_at_round)
        output_path = self.file_manager.get_output_path(filename)

        self.file_manager.ensure_output_dir()

        df.to_csv(output_path, index=False, encoding='utf-8')

        filled = int((df["pick_id"] != "").sum())
        console.print(f"[green]✅ Composition exported: {output_path}[/green]")
        console.print(f"[blue]📊 {filled} of {len(df)} slots filled[/blue]")

        return output_path

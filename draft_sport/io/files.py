"""File management utilities."""

from pathlib import Path
from typing import Optional
from draft_sport.config import ConfigManager


def _safe_name(value: str) -> str:
    return "".join(c for c in value if c.isalnum() or c in "._-")


class FileManager:
    """Manages file paths and directories."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self.config_manager = config_manager or ConfigManager()

    def get_output_path(self, filename: str) -> Path:
        """Get output file path."""
        output_dir = self.config_manager.get_output_dir()
        return output_dir / filename

    def composition_filename(self, league_id: str, manager_id: str, as_at_round: Optional[int] = None) -> str:
        """Generate filled composition CSV filename."""
        stem = f"composition_{_safe_name(league_id)}_{_safe_name(manager_id)}"
        if as_at_round is None:
            return f"{stem}.csv"
        return f"{stem}_round{as_at_round}.csv"

    def ensure_output_dir(self) -> Path:
        """Ensure output directory exists and return path."""
        return self.config_manager.get_output_dir()

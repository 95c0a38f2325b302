"""Configuration management for the Draft Sport client."""

import json
import os
from pathlib import Path
from typing import Any, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, model_validator
from rich.console import Console

from draft_sport.errors import ConfigurationError

console = Console()

ENV_API_ENDPOINT = "DRAFT_SPORT_API_ENDPOINT"
ENV_DEBUG = "DRAFT_SPORT_DEBUG"
ENV_API_KEY = "DRAFT_SPORT_API_KEY"
ENV_SESSION_ID = "DRAFT_SPORT_SESSION_ID"
ENV_TIMEOUT = "DRAFT_SPORT_TIMEOUT"

DEFAULT_TIMEOUT = 30.0


class Config(BaseModel):
    """Persisted application configuration."""

    api_endpoint: Optional[str] = None
    debug: Optional[bool] = None
    api_key: Optional[str] = None
    session_id: Optional[str] = None
    league_id: Optional[str] = None


class ClientConfig(BaseModel):
    """Process-wide request defaults, built once and handed to ApiRequest.

    Every value except ``debug`` may be left unset; requests then have to
    supply the matching override or fail with a ConfigurationError.
    """

    api_endpoint: Optional[str] = None
    debug: bool
    api_key: Optional[str] = None
    session_id: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @model_validator(mode="before")
    @classmethod
    def _require_boolean_debug(cls, data: Any) -> Any:
        """Reject a missing or non-boolean debug flag before field coercion."""
        if isinstance(data, dict):
            debug = data.get("debug")
            if debug is not True and debug is not False:
                raise ConfigurationError(
                    f"Debug flag must be exactly true or false, got {debug!r}. "
                    f"Set {ENV_DEBUG} or pass debug= to ClientConfig"
                )
        return data

    @classmethod
    def from_env(cls, defaults: Optional[Config] = None) -> "ClientConfig":
        """Build configuration from the environment, then persisted defaults."""
        load_environment()
        defaults = defaults or Config()

        timeout = os.getenv(ENV_TIMEOUT)
        try:
            timeout_seconds = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"{ENV_TIMEOUT} must be a number of seconds, got {timeout!r}")

        return cls(
            api_endpoint=os.getenv(ENV_API_ENDPOINT) or defaults.api_endpoint,
            debug=_parse_debug(os.getenv(ENV_DEBUG), defaults.debug),
            api_key=os.getenv(ENV_API_KEY) or defaults.api_key,
            session_id=os.getenv(ENV_SESSION_ID) or defaults.session_id,
            timeout=timeout_seconds
        )


def _parse_debug(raw: Optional[str], fallback: Optional[bool]) -> Any:
    if raw is None:
        return fallback
    if raw == "true":
        return True
    if raw == "false":
        return False
    # Anything else is handed through so validation names the bad value
    return raw


def load_environment() -> None:
    """Load a .env file from the home directory, falling back to the working directory."""
    global_env_path = Path.home() / ".env"
    if global_env_path.exists():
        load_dotenv(global_env_path)
        return

    local_env_path = Path.cwd() / ".env"
    if local_env_path.exists():
        load_dotenv(local_env_path)


class ConfigManager:
    """Manages application configuration persistence."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path.home() / ".draft_sport"
        self.config_file = self.config_dir / "config.json"
        self._ensure_config_dir()

    def _ensure_config_dir(self) -> None:
        """Ensure config directory exists."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

    def load_config(self) -> Config:
        """Load configuration from file."""
        if not self.config_file.exists():
            return Config()

        try:
            with open(self.config_file, 'r') as f:
                data = json.load(f)
                return Config(**data)
        except (json.JSONDecodeError, ValueError) as e:
            console.print(f"[yellow]Warning: Invalid config file, using defaults: {e}[/yellow]")
            return Config()

    def save_config(self, config: Config) -> None:
        """Save configuration to file."""
        try:
            with open(self.config_file, 'w') as f:
                json.dump(config.model_dump(), f, indent=2)
        except OSError as e:
            console.print(f"[yellow]Warning: Could not save config: {e}[/yellow]")

    def get_output_dir(self) -> Path:
        """Get output directory path."""
        output_dir = Path("out")
        output_dir.mkdir(exist_ok=True)
        return output_dir

"""Session data models."""

from typing import Optional
from pydantic import BaseModel


class Session(BaseModel):
    """Draft Sport session model."""

    session_id: str
    session_key: str
    api_key: str
    agent_id: str
    created: Optional[str] = None

    @classmethod
    def decode(cls, data: dict) -> "Session":
        """Create Session from API response."""
        return cls(
            session_id=str(data["session_id"]),
            session_key=data["session_key"],
            api_key=data["api_key"],
            agent_id=str(data["agent_id"]),
            created=data.get("created")
        )

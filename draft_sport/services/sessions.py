"""Session services."""

from rich.console import Console

from draft_sport.errors import ApiError
from draft_sport.models.session import Session
from draft_sport.services.api import ApiRequest
from draft_sport.services.decoding import decode_one

console = Console()


class SessionService:
    """Service for creating sessions."""

    PATH = "/session"

    def __init__(self, api: ApiRequest):
        self.api = api

    async def create(self, email: str, secret: str) -> Session:
        """Create a session from account credentials."""
        payload = {
            "email": email,
            "secret": secret
        }

        # Logging in happens before any session exists
        session = await decode_one(
            self.api.make(self.PATH, "POST", data=payload, without_auth=True),
            Session
        )
        if session is None:
            raise ApiError(404)

        console.print(f"[green]Session created for agent {session.agent_id}[/green]")
        return session

"""HTTP API client for the Draft Sport API."""

import json
from typing import Any, Awaitable, Dict, Optional
import httpx
from rich.console import Console

from draft_sport.config import ClientConfig, ENV_API_ENDPOINT, ENV_API_KEY, ENV_SESSION_ID
from draft_sport.errors import (
    ApiConnectionError,
    ApiError,
    ApiResponseDecodingError,
    ConfigurationError,
    InvalidArgumentError
)
from draft_sport.io import large_ints
from draft_sport.models.session import Session
from draft_sport.services.parameters import UrlParameters

console = Console()

METHODS = ("GET", "POST", "PUT", "UPDATE", "DELETE")


class ApiRequest:
    """Builds and sends requests to the Draft Sport API.

    Argument and configuration problems raise from ``make`` itself so they
    surface at the call site. Everything that depends on the network is
    raised from the returned awaitable instead.
    """

    KEY_HEADER = "x-draft-sport-api-key"
    SESSION_ID_HEADER = "x-draft-sport-session-id"
    JSON_HEADER = "application/json;charset=UTF-8"

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config
        self._transport = transport

    def make(
        self,
        path: str,
        method: str,
        parameters: Optional[UrlParameters] = None,
        data: Optional[Any] = None,
        session: Optional[Session] = None,
        api_endpoint: Optional[str] = None,
        without_auth: bool = False
    ) -> Awaitable[Any]:
        """Prepare a request and return an awaitable resolving to its payload.

        The payload is ``None`` when the API answers 404.
        """
        if not path:
            raise InvalidArgumentError("Cannot make request to empty path")
        if method not in METHODS:
            raise InvalidArgumentError(f"Method appears invalid: {method}")

        endpoint = self._choose_api_endpoint(api_endpoint)
        url = self._build_url(path, parameters, endpoint)

        headers: Dict[str, str] = {}
        if not without_auth:
            headers[self.SESSION_ID_HEADER] = self._choose_session_id(session)
            headers[self.KEY_HEADER] = self._choose_api_key(session)

        content: Optional[str] = None
        if data is not None:
            headers["content-type"] = self.JSON_HEADER
            content = json.dumps(data)

        return self._send(method, url, headers, content)

    async def _send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        content: Optional[str]
    ) -> Any:
        """Send one request on its own client and parse the response."""
        if self.config.debug:
            sending = "with body" if content is not None else "without body"
            console.print(f"[dim]{method} {url} ({sending})[/dim]")

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(self.config.timeout)
        ) as client:
            try:
                response = await client.request(method, url, headers=headers, content=content)
            except httpx.RequestError as e:
                console.print(f"[red]Request error: {e}[/red]")
                raise ApiConnectionError(url, e) from e

        if self.config.debug:
            console.print(f"[dim]{method} {url} -> {response.status_code}[/dim]")

        return self._parse_response(response)

    @staticmethod
    def _build_url(path: str, parameters: Optional[UrlParameters], api_endpoint: str) -> str:
        base = api_endpoint + path
        if parameters:
            return base + parameters.query
        return base

    @staticmethod
    def _parse_response(response: httpx.Response) -> Any:
        """Map a completed response onto a payload, absence or error."""
        status = response.status_code

        if status == 200:
            try:
                return large_ints.loads(response.text)
            except ValueError as e:
                raise ApiResponseDecodingError(response.text, e) from e

        if status == 404:
            return None

        try:
            error_content = json.loads(response.text)
        except ValueError:
            raise ApiError(status)

        raise ApiError(status, error_content)

    def _choose_api_key(self, override: Optional[Session]) -> str:
        if override:
            return override.api_key
        if self.config.api_key is not None:
            return self.config.api_key
        raise ConfigurationError(
            f"No API Key available. Set `api_key` on ClientConfig (or {ENV_API_KEY}) "
            "or supply a Session instance to ApiRequest.make()"
        )

    def _choose_session_id(self, override: Optional[Session]) -> str:
        if override:
            return override.session_id
        if self.config.session_id is not None:
            return self.config.session_id
        raise ConfigurationError(
            f"No Session ID available. Set `session_id` on ClientConfig (or {ENV_SESSION_ID}) "
            "or supply a Session instance to ApiRequest.make()"
        )

    def _choose_api_endpoint(self, override: Optional[str]) -> str:
        if override:
            return override
        if self.config.api_endpoint:
            return self.config.api_endpoint
        raise ConfigurationError(
            f"No API endpoint available. Set `api_endpoint` on ClientConfig (or {ENV_API_ENDPOINT}) "
            "or supply an api_endpoint string to ApiRequest.make()"
        )

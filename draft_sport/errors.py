"""Exceptions raised by the Draft Sport client."""

from typing import Any, Optional


class DraftSportError(Exception):
    """Base exception for Draft Sport client errors."""
    pass


class ConfigurationError(DraftSportError):
    """A required default is missing and no per-call override was supplied."""
    pass


class InvalidArgumentError(DraftSportError):
    """A request was built with arguments that can never succeed."""
    pass


class ApiError(DraftSportError):
    """Exception raised for non-200, non-404 API responses."""

    def __init__(self, status_code: int, content: Optional[Any] = None):
        self.status_code = status_code
        self.content = content
        if content is None:
            super().__init__(f"API Error {status_code}")
        else:
            super().__init__(f"API Error {status_code}: {content}")


class ApiConnectionError(DraftSportError):
    """The request never produced a response (transport failure or timeout)."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")


class DecodingError(DraftSportError):
    """Base exception for payloads that could not be decoded."""
    pass


class ApiResponseDecodingError(DecodingError):
    """A 200 response body was not valid JSON."""

    def __init__(self, raw_text: str, cause: Exception):
        self.raw_text = raw_text
        self.cause = cause
        super().__init__(f"Invalid JSON response: {cause}")


class ModelDecodingError(DecodingError):
    """A parsed payload did not fit the requested model."""

    def __init__(self, output_type: Any, cause: Exception):
        self.output_type = output_type
        self.cause = cause
        name = getattr(output_type, "__name__", repr(output_type))
        super().__init__(f"Could not decode {name}: {cause}")


class CompositionError(DraftSportError):
    """A pick cannot be placed into a composition."""

    def __init__(self, pick_id: str, message: str):
        self.pick_id = pick_id
        super().__init__(f"Pick {pick_id}: {message}")

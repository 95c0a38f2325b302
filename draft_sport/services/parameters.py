"""URL query parameters."""

from typing import Any, Iterable, List
from urllib.parse import urlencode


class UrlParameter:
    """A single key/value query parameter."""

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"UrlParameter({self.key!r}, {self.value!r})"


class UrlParameters:
    """An ordered collection of query parameters."""

    def __init__(self, parameters: Iterable[UrlParameter]):
        self.parameters: List[UrlParameter] = list(parameters)

    def append(self, parameter: UrlParameter) -> None:
        self.parameters.append(parameter)

    @property
    def query(self) -> str:
        """Serialized query string, including the leading ``?``."""
        if not self.parameters:
            return ""
        pairs = [(p.key, _stringify(p.value)) for p in self.parameters]
        return "?" + urlencode(pairs)


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

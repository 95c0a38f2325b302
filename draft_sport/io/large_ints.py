"""Guard 64-bit integer identifiers in JSON text.

The API emits identifiers as bare 64-bit integers. Clients that read JSON
numbers as IEEE doubles silently round anything above 2**53 - 1, so the
client treats such identifiers as strings everywhere: before a body is
parsed, every unquoted integer literal beyond the safe range is wrapped in
quotes. String contents, fractions and exponent forms are left alone.
"""

import json
import re
from typing import Any

MAX_SAFE_INTEGER = 2 ** 53 - 1

# A JSON string (skipped) or a complete JSON number token. Matching strings
# first keeps the scanner from ever starting inside one.
_TOKEN_EXPRESSION = re.compile(
    r'(?P<string>"(?:[^"\\]|\\.)*")'
    r'|(?P<number>-?(?:0|[1-9]\d*)(?P<fraction>\.\d+)?(?P<exponent>[eE][+-]?\d+)?)'
)


def _quote_if_unsafe(match: "re.Match[str]") -> str:
    token = match.group(0)
    if match.group("number") is None:
        return token
    if match.group("fraction") or match.group("exponent"):
        return token
    if abs(int(token)) > MAX_SAFE_INTEGER:
        return f'"{token}"'
    return token


def quote_large_integers(text: str) -> str:
    """Return ``text`` with unsafely large integer literals quoted."""
    return _TOKEN_EXPRESSION.sub(_quote_if_unsafe, text)


def loads(text: str) -> Any:
    """Parse JSON after guarding large integers."""
    return json.loads(quote_large_integers(text))

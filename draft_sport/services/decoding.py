"""Turn API payloads into typed models."""

from typing import Any, Awaitable, Callable, List, Optional, Protocol, TypeVar

from draft_sport.errors import ModelDecodingError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

# Errors a model's decode() raises for payloads of the wrong shape.
# pydantic's ValidationError is a ValueError.
_DECODE_ERRORS = (KeyError, TypeError, ValueError, IndexError, AttributeError)


class Decodable(Protocol[T_co]):
    """Anything exposing ``decode(data)``, typically a model class."""

    def decode(self, data: Any) -> T_co: ...


def _decode(output_type: Decodable[T], step: Callable[[], T]) -> T:
    try:
        return step()
    except _DECODE_ERRORS as e:
        raise ModelDecodingError(output_type, e) from e


async def decode_one(response: Awaitable[Any], output_type: Decodable[T]) -> Optional[T]:
    """Decode the payload object itself, or ``None`` when absent."""
    data = await response
    if data is None:
        return None
    return _decode(output_type, lambda: output_type.decode(data))


async def decode_single(response: Awaitable[Any], output_type: Decodable[T]) -> Optional[T]:
    """Decode the first element of an array payload, or ``None`` when absent."""
    data = await response
    if data is None:
        return None
    return _decode(output_type, lambda: output_type.decode(data[0]))


async def decode_many(response: Awaitable[Any], output_type: Decodable[T]) -> Optional[List[T]]:
    """Decode every element of an array payload, or ``None`` when absent.

    One bad element fails the whole batch.
    """
    data = await response
    if data is None:
        return None
    return _decode(output_type, lambda: [output_type.decode(d) for d in data])

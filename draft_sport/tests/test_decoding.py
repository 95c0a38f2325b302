"""Tests for the payload decode helpers."""

import asyncio
from typing import Any

import pytest

from draft_sport.errors import ApiError, ModelDecodingError
from draft_sport.models.session import Session
from draft_sport.models.team import LeagueTeam
from draft_sport.services.decoding import decode_many, decode_one, decode_single


async def resolved(payload: Any) -> Any:
    return payload


async def failed(error: Exception) -> Any:
    raise error


def session_data(index: int) -> dict:
    return {
        "session_id": f"s-{index}",
        "session_key": f"k-{index}",
        "api_key": "api",
        "agent_id": f"a-{index}",
    }


class Counter:
    """Decodable that records how many payloads it has seen."""

    def __init__(self):
        self.calls = 0

    def decode(self, data: dict) -> str:
        self.calls += 1
        return data["value"]


class TestDecodeOne:

    def test_decodes_object(self):
        session = asyncio.run(decode_one(resolved(session_data(1)), Session))

        assert isinstance(session, Session)
        assert session.session_id == "s-1"

    def test_absence(self):
        assert asyncio.run(decode_one(resolved(None), Session)) is None

    def test_upstream_error_propagates(self):
        with pytest.raises(ApiError) as exc_info:
            asyncio.run(decode_one(failed(ApiError(500)), Session))

        assert exc_info.value.status_code == 500

    def test_decode_failure(self):
        with pytest.raises(ModelDecodingError) as exc_info:
            asyncio.run(decode_one(resolved({"session_id": "s"}), Session))

        assert exc_info.value.output_type is Session
        assert isinstance(exc_info.value.cause, KeyError)

    def test_wrong_payload_shape(self):
        with pytest.raises(ModelDecodingError):
            asyncio.run(decode_one(resolved(["not", "an", "object"]), Session))

    def test_nested_pick_of_wrong_shape(self):
        payload = {"league_id": 1, "manager_id": 2, "picks": ["oops"], "composition": {}}

        with pytest.raises(ModelDecodingError) as exc_info:
            asyncio.run(decode_one(resolved(payload), LeagueTeam))

        assert exc_info.value.output_type is LeagueTeam
        assert isinstance(exc_info.value.cause, AttributeError)

    def test_nested_composition_of_wrong_shape(self):
        payload = {"league_id": 1, "manager_id": 2, "picks": [], "composition": []}

        with pytest.raises(ModelDecodingError) as exc_info:
            asyncio.run(decode_one(resolved(payload), LeagueTeam))

        assert isinstance(exc_info.value.cause, AttributeError)


class TestDecodeSingle:

    def test_first_element(self):
        session = asyncio.run(decode_single(resolved([session_data(1), session_data(2)]), Session))

        assert session.session_id == "s-1"

    def test_empty_array(self):
        with pytest.raises(ModelDecodingError) as exc_info:
            asyncio.run(decode_single(resolved([]), Session))

        assert isinstance(exc_info.value.cause, IndexError)

    def test_absence(self):
        assert asyncio.run(decode_single(resolved(None), Session)) is None


class TestDecodeMany:

    def test_every_element(self):
        sessions = asyncio.run(decode_many(resolved([session_data(i) for i in range(3)]), Session))

        assert [s.session_id for s in sessions] == ["s-0", "s-1", "s-2"]

    def test_empty_array(self):
        assert asyncio.run(decode_many(resolved([]), Session)) == []

    def test_one_failure_aborts_batch(self):
        counter = Counter()
        payload = [{"value": "a"}, {"wrong": "b"}, {"value": "c"}]

        with pytest.raises(ModelDecodingError) as exc_info:
            asyncio.run(decode_many(resolved(payload), counter))

        assert isinstance(exc_info.value.cause, KeyError)
        assert counter.calls == 2

    def test_upstream_error_skips_decoding(self):
        counter = Counter()

        with pytest.raises(ApiError):
            asyncio.run(decode_many(failed(ApiError(403, {"message": "forbidden"})), counter))

        assert counter.calls == 0

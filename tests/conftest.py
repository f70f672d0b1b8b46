from __future__ import annotations

from pathlib import Path

import pytest
import requests

FIXTURES_DIRECTORY = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    return (FIXTURES_DIRECTORY / name).read_bytes()


class FakeResponse:
    """Stand-in for requests.Response with a fixed body and status code."""

    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if not 200 <= self.status_code < 300:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Stand-in for requests.Session that records calls instead of hitting the network."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
        self.headers: dict[str, str] = {}
        self.calls: list[dict] = []
        self.response = response
        self.error = error

    def get(self, url: str, params: dict | None = None, timeout: float | None = None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def science_history_session() -> FakeSession:
    return FakeSession(response=FakeResponse(load_fixture("science_history.json")))

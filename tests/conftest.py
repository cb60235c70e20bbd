"""Pytest configuration and fixtures."""

import json
from typing import Any, Callable

import httpx
import pytest

FIXED_NOW = 1700000000.75

TransportFactory = Callable[..., httpx.MockTransport]


@pytest.fixture
def required_inputs() -> dict[str, str]:
    """Minimal inputs every run needs."""
    return {
        "dx_instance": "acme",
        "bearer": "test-token",
        "service": "checkout-api",
    }


@pytest.fixture
def commit_inputs(required_inputs: dict[str, str]) -> dict[str, str]:
    """Inputs in single-commit mode."""
    return {
        **required_inputs,
        "repository": "acme/checkout",
        "commit_sha": "abc123",
    }


@pytest.fixture
def fixed_clock() -> Callable[[], float]:
    return lambda: FIXED_NOW


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_transport(requests_seen: list[httpx.Request]) -> TransportFactory:
    """Build a mock transport answering with a fixed response.

    ``body`` may be a string (sent verbatim) or any JSON-serializable value.
    """

    def factory(status_code: int = 200, body: Any = None) -> httpx.MockTransport:
        text = body if isinstance(body, str) else json.dumps(body)

        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return httpx.Response(status_code, text=text)

        return httpx.MockTransport(handler)

    return factory

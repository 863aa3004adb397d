"""Pytest configuration for the explorer test suite.

Provides an isolated configuration rooted in ``tmp_path``, a factory for
``httpx.MockTransport`` backed clients that record their requests, and a
collector for structured log events.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Iterator, List, Tuple

import httpx
import pytest

from or_models.base.http import close_all_clients
from or_models.base.logging import configure_logger, get_logger
from or_models.config import ExplorerConfig, load_config
from or_models.tests.utils import listing, raw_record

Responder = Callable[[httpx.Request], httpx.Response]


@pytest.fixture()
def config(tmp_path) -> ExplorerConfig:
    """Configuration whose cache lives under ``tmp_path`` (no real env)."""
    return load_config(env={"HOME": str(tmp_path)})


@pytest.fixture()
def sample_payload() -> Dict[str, Any]:
    return listing(
        raw_record("acme/model-a"),
        raw_record("other/model-b", pricing={"prompt": "0", "completion": "0"}),
        raw_record("openrouter/auto", pricing={"prompt": "-1", "completion": "-1"}),
    )


class RecordingTransport:
    """Handler for ``httpx.MockTransport``; the last responder repeats."""

    def __init__(self, responders: List[Responder]) -> None:
        self._responders = list(responders)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self._responders)) - 1
        return self._responders[index](request)


@pytest.fixture()
def mock_client_factory() -> Iterator[Callable[..., Tuple[httpx.Client, RecordingTransport]]]:
    clients: List[httpx.Client] = []

    def factory(*responders: Responder) -> Tuple[httpx.Client, RecordingTransport]:
        recorder = RecordingTransport(list(responders))
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        clients.append(client)
        return client, recorder

    yield factory
    for c in clients:
        c.close()


class EventCollector(logging.Handler):
    """Collect decoded ``log_event`` payloads emitted under ``or_models``."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[Dict[str, Any]] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            payload = {"event": None, "msg": record.getMessage()}
        payload["_level"] = record.levelno
        self.events.append(payload)

    def names(self) -> List[str]:
        return [e.get("event") for e in self.events]

    def find(self, event: str) -> Dict[str, Any]:
        for e in self.events:
            if e.get("event") == event:
                return e
        raise AssertionError(f"event {event!r} not logged; got {self.names()}")


@pytest.fixture()
def log_events() -> Iterator[EventCollector]:
    """Attach a collector to the shared logger at DEBUG for one test."""
    base = get_logger()
    collector = EventCollector()
    previous = base.level
    base.setLevel(logging.DEBUG)
    base.addHandler(collector)
    yield collector
    base.removeHandler(collector)
    base.setLevel(previous)


@pytest.fixture(autouse=True)
def _reset_shared_state() -> Iterator[None]:
    yield
    close_all_clients()
    configure_logger(level=logging.INFO, json_mode=True)

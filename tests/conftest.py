"""Shared fixtures for fixflow tests."""

from __future__ import annotations

import pytest

from fixflow.graph import Answer, Step, TroubleshootingGraph, default_graph
from fixflow.notify import RecordingNotifier
from fixflow.storage import MemoryStorage
from fixflow.store import GraphStore


class FailingStorage(MemoryStorage):
    """Storage whose writes always fail."""

    def set_item(self, key: str, value: str) -> None:
        raise OSError("disk full")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep tests away from the user's config, flow and editor."""
    for name in ("FIXFLOW_STORAGE_DIR", "FIXFLOW_STORAGE_KEY", "VISUAL", "EDITOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def recorder():
    return RecordingNotifier()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage, recorder):
    """A loaded store backed by empty in-memory storage."""
    s = GraphStore(storage, notify=recorder)
    s.load()
    return s


@pytest.fixture
def failing_store(recorder):
    s = GraphStore(FailingStorage(), notify=recorder)
    s.load()
    return s


@pytest.fixture
def graph():
    return default_graph()


@pytest.fixture
def small_graph():
    """Two-step flow with a cycle back to start and a dangling reference."""
    return TroubleshootingGraph.from_steps(
        [
            Step(
                id="start",
                question="Is it plugged in?",
                answers=[
                    Answer("No", "plug-in", "Play"),
                    Answer("Yes", "ghost"),
                ],
            ),
            Step(
                id="plug-in",
                question="Plug it in. Does it work now?",
                answers=[
                    Answer("No, ask again", "start", "Bogus"),
                    Answer("Solution: It was unplugged.", None, "Wrench"),
                    Answer("Give up", ""),
                ],
            ),
        ]
    )

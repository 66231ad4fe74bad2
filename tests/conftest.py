"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from yamlci import executor
from yamlci.config import RunOptions


def make_doc(*steps: dict, name: str = "demo", variables: dict | None = None, **jobs) -> dict:
    """Build a document mapping; positional steps go into a single job 'main'."""
    doc: dict = {"name": name, "jobs": dict(jobs)}
    if steps:
        doc["jobs"] = {"main": {"steps": list(steps)}, **doc["jobs"]}
    if variables is not None:
        doc["variables"] = variables
    return doc


@pytest.fixture
def options(tmp_path):
    return RunOptions(pwd=str(tmp_path))


@pytest.fixture
def recorded(monkeypatch):
    """Replace subprocess execution; records argv and echoes it back."""
    calls: list[list[str]] = []

    def fake_execute(argv, cwd=None):
        calls.append(list(argv))
        return " ".join(argv[1:]) if argv and argv[0] == "echo" else ""

    monkeypatch.setattr(executor, "execute", fake_execute)
    return calls

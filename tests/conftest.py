# Copyright (c) Syntropy Systems
"""Pytest fixtures for slmbench tests."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Generator, Mapping
from pathlib import Path

import pytest

from slmbench.client import CompletionError

# Store original cwd at module load time
_original_cwd = Path.cwd()


class FakeBackend:
    """In-memory completion backend that records every call."""

    def __init__(self, response: str = "a b  c", fail_calls: set[int] | None = None) -> None:
        self.response = response
        self.fail_calls = fail_calls or set()
        self.calls: list[dict[str, object]] = []

    def generate(
        self,
        model: str,
        prompt: str,
        options: Mapping[str, float],
        system: str | None = None,
    ) -> str:
        index = len(self.calls)
        self.calls.append(
            {"model": model, "prompt": prompt, "options": dict(options), "system": system}
        )
        if index in self.fail_calls:
            msg = "Server error: model crashed"
            raise CompletionError(msg)
        return self.response

    def __enter__(self) -> FakeBackend:
        return self

    def __exit__(self, *exc: object) -> None:
        return None


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_env(
    temp_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[Path, None, None]:
    """Run from an empty directory with no slmbench env vars or home config."""
    for name in ("SLMBENCH_URL", "SLMBENCH_MODEL", "SLMBENCH_TIMEOUT", "SLMBENCH_EXPORT_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(temp_dir))
    os.chdir(temp_dir)

    yield temp_dir

    # Always return to original cwd
    os.chdir(_original_cwd)


@pytest.fixture
def fake_backend() -> FakeBackend:
    """A backend that always answers "a b  c"."""
    return FakeBackend()

"""Shared pytest fixtures for the cscaffold test suite.

Provides reusable fixtures for:
- An isolated working directory with no ``CSCAFFOLD_*`` environment
- Settings pointing at a temporary output directory
- A scripted prompter standing in for the terminal
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from cscaffold.config import Settings


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary current directory with cscaffold environment variables cleared."""
    for key in list(os.environ):
        if key.startswith("CSCAFFOLD_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings whose output directory is the test's temporary directory."""
    return Settings(output_dir=tmp_path)


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------

class FakePrompter:
    """Prompter that replays scripted answers and records what was asked."""

    def __init__(self, names: list[str], language: str = "C") -> None:
        self.names = list(names)
        self.language = language
        self.name_calls: list[dict[str, str | None]] = []
        self.language_calls: list[str | None] = []

    def ask_name(self, os_id: str, default: str | None = None) -> str:
        self.name_calls.append({"os_id": os_id, "default": default})
        return self.names.pop(0)

    def ask_language(self, default: str | None = None) -> str:
        self.language_calls.append(default)
        return self.language


@pytest.fixture
def fake_prompter_cls() -> type[FakePrompter]:
    return FakePrompter

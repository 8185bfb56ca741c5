"""Exception hierarchy shared by the resolver, the scaffolder and the CLI."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure that ends a run with exit status 1."""


class InvalidInputError(ScaffoldError):
    """Raised when a project name or language token cannot be used."""


class ProjectExistsError(ScaffoldError):
    """Raised when the project root is already present on disk."""

    def __init__(self, name: str) -> None:
        super().__init__(f'"{name}" folder already exists')


class MaterializeError(ScaffoldError):
    """Raised when creating or writing part of the project fails.

    By the time this is raised the partially built project root has already
    been removed.
    """

    def __init__(self, step: str, path: Path, cause: BaseException) -> None:
        self.step = step
        self.path = path
        self.rollback_error: OSError | None = None
        super().__init__(f"Could not create {step}: {cause}")


class PromptAborted(Exception):
    """Raised when the user cancels an interactive prompt."""

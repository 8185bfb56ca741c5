"""Input resolution: turn command-line values or prompt answers into a
``ResolvedConfig``.

When both a name and a language are given on the command line they are
validated and used directly.  Otherwise the user is prompted for both, with
any value that was given offered as the default.  Interactive answers are
re-prompted until valid; bad command-line values raise ``InvalidInputError``.
"""

from __future__ import annotations

import sys
from typing import Protocol

import questionary
from pydantic import BaseModel

from cscaffold.config import Language, ResolvedConfig, Settings
from cscaffold.errors import InvalidInputError, PromptAborted


# ---------------------------------------------------------------------------
# Name legality
# ---------------------------------------------------------------------------

_UNIX_FORBIDDEN = frozenset("/")

FORBIDDEN_CHARACTERS: dict[str, frozenset[str]] = {
    "linux": _UNIX_FORBIDDEN,
    "freebsd": _UNIX_FORBIDDEN,
    "openbsd": _UNIX_FORBIDDEN,
    "netbsd": _UNIX_FORBIDDEN,
    "macos": frozenset("/:"),
    "windows": frozenset('<>:"/\\|?*'),
}

EMPTY_NAME_MESSAGE = "Project name necessary"
INVALID_CHARACTER_MESSAGE = "Invalid character in name"
UNKNOWN_OS_MESSAGE = "Could not identify the OS"
INVALID_LANGUAGE_MESSAGE = "Language: Only C and CPP (C++) available."
LANGUAGE_HELP = "For the creation of CMake file and the main script"


def current_os() -> str:
    """Return the OS identifier used by :func:`forbidden_characters`.

    Unrecognised platforms are returned unchanged, which
    :func:`forbidden_characters` then rejects.
    """
    platform = sys.platform
    if platform.startswith("linux"):
        return "linux"
    if platform == "darwin":
        return "macos"
    if platform in ("win32", "cygwin"):
        return "windows"
    for bsd in ("freebsd", "openbsd", "netbsd"):
        if platform.startswith(bsd):
            return bsd
    return platform


def forbidden_characters(os_id: str) -> frozenset[str]:
    """Return the characters a directory name may not contain on *os_id*.

    Raises:
        InvalidInputError: *os_id* is not a known operating system.
    """
    try:
        return FORBIDDEN_CHARACTERS[os_id]
    except KeyError:
        raise InvalidInputError(UNKNOWN_OS_MESSAGE) from None


def validate_project_name(name: str, os_id: str | None = None) -> str | None:
    """Check that *name* can be used as a single directory name.

    Returns:
        ``None`` when the name is acceptable, otherwise the message to show.
    """
    if not name.strip():
        return EMPTY_NAME_MESSAGE
    try:
        forbidden = forbidden_characters(os_id or current_os())
    except InvalidInputError as exc:
        return str(exc)
    if any(ch in forbidden for ch in name):
        return INVALID_CHARACTER_MESSAGE
    return None


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------


class Prompter(Protocol):
    """Source of interactive answers."""

    def ask_name(self, os_id: str, default: str | None = None) -> str: ...

    def ask_language(self, default: str | None = None) -> str: ...


class QuestionaryPrompter:
    """Terminal prompts backed by ``questionary``."""

    def ask_name(self, os_id: str, default: str | None = None) -> str:
        answer = questionary.text(
            "Project name",
            default=default or "",
            validate=lambda value: validate_project_name(value, os_id) or True,
        ).ask()
        if answer is None:
            raise PromptAborted("Project name prompt cancelled")
        return answer

    def ask_language(self, default: str | None = None) -> str:
        answer = questionary.select(
            "Language:",
            choices=Language.tokens(),
            default=default if Language.is_valid(default) else None,
            instruction=LANGUAGE_HELP,
        ).ask()
        if answer is None:
            raise PromptAborted("Language prompt cancelled")
        return answer


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class RawInput(BaseModel):
    """Unvalidated name and language as they arrived."""

    name: str | None = None
    language: str | None = None

    @property
    def is_complete(self) -> bool:
        return self.name is not None and self.language is not None


def resolve_input(
    raw: RawInput,
    settings: Settings | None = None,
    prompter: Prompter | None = None,
    os_id: str | None = None,
) -> ResolvedConfig:
    """Produce a ``ResolvedConfig`` from *raw*, prompting if it is incomplete.

    Raises:
        InvalidInputError: A command-line value is unusable.
        PromptAborted: The user cancelled a prompt.
    """
    settings = settings or Settings()
    os_id = os_id or current_os()

    if raw.is_complete:
        return _resolve_direct(raw, settings, os_id)

    prompter = prompter or QuestionaryPrompter()
    # Re-ask until the answer is valid; prompters are not trusted to validate.
    while True:
        name = prompter.ask_name(os_id, default=raw.name)
        if validate_project_name(name, os_id) is None:
            break
    language = prompter.ask_language(default=raw.language)
    return ResolvedConfig.from_tokens(name, language)


def _resolve_direct(raw: RawInput, settings: Settings, os_id: str) -> ResolvedConfig:
    assert raw.name is not None and raw.language is not None
    if not Language.is_valid(raw.language):
        raise InvalidInputError(INVALID_LANGUAGE_MESSAGE)
    if settings.strict_names:
        problem = validate_project_name(raw.name, os_id)
        if problem is not None:
            raise InvalidInputError(f"{problem}: {raw.name!r}")
    return ResolvedConfig.from_tokens(raw.name, raw.language)

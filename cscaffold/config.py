"""cscaffold configuration.

Typed configuration for a scaffolding run.  ``Settings`` carries the tunable
knobs (output directory, CMake generator, name strictness) and can be built
from environment variables.  ``ResolvedConfig`` is the validated
``(name, language)`` pair handed to the scaffolder; every language-dependent
value it exposes is derived from a single ``LanguageProfile`` lookup.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"

# Loaded once at import and shared read-only.
GITIGNORE_TEMPLATES: MappingProxyType[str, str] = MappingProxyType(
    {
        key: (_TEMPLATE_DIR / f"{key}.gitignore").read_text(encoding="utf-8")
        for key in ("c", "cpp")
    }
)


class Language(str, Enum):
    """Languages a project can be scaffolded for."""

    C = "C"
    CPP = "CPP"

    @classmethod
    def tokens(cls) -> list[str]:
        """Return the accepted command-line tokens, in prompt order."""
        return [member.value for member in cls]

    @classmethod
    def is_valid(cls, token: str | None) -> bool:
        """Return ``True`` when *token* names a language exactly (case-sensitive)."""
        return token in cls.tokens()

    @classmethod
    def parse(cls, token: str | Language | None) -> Language:
        """Map *token* to a ``Language``, falling back to ``C`` when unrecognised."""
        if isinstance(token, Language):
            return token
        if cls.is_valid(token):
            return cls(token)
        return cls.C


class LanguageProfile(BaseModel):
    """Everything about a project that depends on its language."""

    model_config = ConfigDict(frozen=True)

    source_extension: str
    gitignore_key: str
    build_language_tag: str
    source_template: str

    @property
    def gitignore_template(self) -> str:
        return GITIGNORE_TEMPLATES[self.gitignore_key]


LANGUAGE_PROFILES: dict[Language, LanguageProfile] = {
    Language.C: LanguageProfile(
        source_extension=".c",
        gitignore_key="c",
        build_language_tag="C",
        source_template="main.c.j2",
    ),
    Language.CPP: LanguageProfile(
        source_extension=".cpp",
        gitignore_key="cpp",
        build_language_tag="CXX",
        source_template="main.cpp.j2",
    ),
}


class ResolvedConfig(BaseModel):
    """Validated project configuration consumed once by the scaffolder."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, also the root directory name")
    language: Language = Field(default=Language.C)

    @classmethod
    def from_tokens(cls, name: str, language: str | Language | None) -> ResolvedConfig:
        """Build a config from a raw language token.

        Unrecognised tokens produce the C configuration.
        """
        return cls(name=name, language=Language.parse(language))

    @property
    def profile(self) -> LanguageProfile:
        return LANGUAGE_PROFILES[self.language]

    @property
    def source_extension(self) -> str:
        return self.profile.source_extension

    @property
    def gitignore_template(self) -> str:
        return self.profile.gitignore_template

    @property
    def build_language_tag(self) -> str:
        return self.profile.build_language_tag


_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings(BaseModel):
    """Run-wide settings.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and passed to the resolver and the scaffolder.
    """

    output_dir: Path = Field(default=Path("."), description="Parent of the project root")
    generator: str = Field(default="Ninja", min_length=1, description="CMake generator for build.sh")
    cmake_minimum_version: str = Field(default="3.11", min_length=1)
    strict_names: bool = Field(
        default=True,
        description="Apply the name-legality check to flag-supplied names as well",
    )

    @classmethod
    def from_env(cls) -> Settings:
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CSCAFFOLD_OUTPUT_DIR, CSCAFFOLD_GENERATOR,
            CSCAFFOLD_CMAKE_VERSION, CSCAFFOLD_STRICT_NAMES.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("CSCAFFOLD_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CSCAFFOLD_OUTPUT_DIR"])
        if os.environ.get("CSCAFFOLD_GENERATOR"):
            kwargs["generator"] = os.environ["CSCAFFOLD_GENERATOR"]
        if os.environ.get("CSCAFFOLD_CMAKE_VERSION"):
            kwargs["cmake_minimum_version"] = os.environ["CSCAFFOLD_CMAKE_VERSION"]
        if os.environ.get("CSCAFFOLD_STRICT_NAMES"):
            kwargs["strict_names"] = (
                os.environ["CSCAFFOLD_STRICT_NAMES"].strip().lower() not in _FALSE_VALUES
            )
        return cls(**kwargs)

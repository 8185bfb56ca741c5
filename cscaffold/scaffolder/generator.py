"""Main scaffolding orchestrator.

Takes a ``ResolvedConfig`` and materializes a CMake project skeleton:

    <name>/
      CMakeLists.txt
      build.sh
      .gitignore
      src/main.c | src/main.cpp
      build/
      include/

Either the whole skeleton is written or the project root is removed again
before the error propagates.
"""

from __future__ import annotations

import shutil
import stat
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from cscaffold.config import ResolvedConfig, Settings
from cscaffold.errors import MaterializeError, ProjectExistsError

from .templates import TemplateRenderer, write_file


SUBDIRECTORIES: tuple[str, ...] = ("src", "build", "include")


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes one project skeleton for a ``ResolvedConfig``.

    Steps run strictly in order: root directory, subdirectories, build
    descriptor, hello-world source, build script, ``.gitignore``.  A failure
    in any step after the root exists removes the root before a
    ``MaterializeError`` is raised.

    Attributes:
        config: The validated project configuration.
        settings: Output directory and build-script settings.
        created: Every path created so far, in creation order.
    """

    def __init__(
        self,
        config: ResolvedConfig,
        settings: Settings | None = None,
        *,
        on_created: Callable[[Path], None] | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.renderer = TemplateRenderer()
        self.created: list[Path] = []
        self._on_created = on_created

    # -- Public API --------------------------------------------------------

    def generate(self, output_dir: str | Path | None = None) -> Path:
        """Generate the project skeleton.

        Args:
            output_dir: Parent directory of the project root.  Defaults to
                ``settings.output_dir``.

        Returns:
            Path to the generated project root.

        Raises:
            ProjectExistsError: The project root already exists.  Nothing
                was touched.
            MaterializeError: A directory or file could not be created.  The
                project root no longer exists.
        """
        parent = Path(output_dir) if output_dir is not None else self.settings.output_dir
        root = parent / self.config.name

        self._create_root(root)

        context = self._build_context()
        try:
            self._create_directory_structure(root)
            self._render_build_descriptor(root, context)
            self._render_main_source(root, context)
            self._render_build_script(root, context)
            self._write_gitignore(root)
        except MaterializeError as exc:
            self._rollback(root, exc)
            raise
        except BaseException:
            self._rollback(root)
            raise

        return root

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the config and settings."""
        return {
            "project_name": self.config.name,
            "language": self.config.language.value,
            "source_extension": self.config.source_extension,
            "build_language_tag": self.config.build_language_tag,
            "cmake_minimum_version": self.settings.cmake_minimum_version,
            "generator": self.settings.generator,
        }

    # -- Directory structure -----------------------------------------------

    def _create_root(self, root: Path) -> None:
        try:
            root.mkdir()
        except FileExistsError as exc:
            raise ProjectExistsError(self.config.name) from exc
        except OSError as exc:
            raise MaterializeError("project folder", root, exc) from exc
        self._record(root)

    def _create_directory_structure(self, root: Path) -> None:
        """Create ``src``, ``build`` and ``include`` under the root."""
        for name in SUBDIRECTORIES:
            path = root / name
            with _step(f'"{name}" folder', path):
                path.mkdir()
            self._record(path)

    # -- File rendering ----------------------------------------------------

    def _render_build_descriptor(self, root: Path, ctx: dict[str, Any]) -> None:
        path = root / "CMakeLists.txt"
        with _step("CMakeLists.txt script", path):
            self.renderer.render_to_file("CMakeLists.txt.j2", path, ctx)
        self._record(path)

    def _render_main_source(self, root: Path, ctx: dict[str, Any]) -> None:
        path = root / "src" / f"main{self.config.source_extension}"
        with _step("main script file", path):
            self.renderer.render_to_file(self.config.profile.source_template, path, ctx)
        self._record(path)

    def _render_build_script(self, root: Path, ctx: dict[str, Any]) -> None:
        """Render ``build.sh`` and set executable permissions."""
        path = root / "build.sh"
        with _step("build script", path):
            self.renderer.render_to_file("build.sh.j2", path, ctx)
            _make_executable(path)
        self._record(path)

    def _write_gitignore(self, root: Path) -> None:
        path = root / ".gitignore"
        with _step(".gitignore", path):
            write_file(path, self.config.gitignore_template)
        self._record(path)

    # -- Rollback ----------------------------------------------------------

    def _rollback(self, root: Path, error: MaterializeError | None = None) -> None:
        """Remove the project root, attaching any removal failure to *error*."""
        try:
            shutil.rmtree(root)
        except FileNotFoundError:
            pass
        except OSError as exc:
            if error is None:
                raise
            error.rollback_error = exc
        self.created.clear()

    def _record(self, path: Path) -> None:
        self.created.append(path)
        if self._on_created is not None:
            self._on_created(path)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


@contextmanager
def _step(description: str, path: Path) -> Iterator[None]:
    """Translate I/O and encoding failures inside the block into ``MaterializeError``."""
    try:
        yield
    except (OSError, UnicodeError) as exc:
        raise MaterializeError(description, path, exc) from exc


def _make_executable(path: Path) -> None:
    """Set the executable bit on a file."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

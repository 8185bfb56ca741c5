"""Integration tests: run the installed ``cscaffold`` module as a subprocess.

The CMake build test only runs when both ``cmake`` and ``ninja`` are on
PATH; everything else needs nothing beyond the Python interpreter.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _cscaffold(cwd: Path, *args: str) -> subprocess.CompletedProcess[str]:
    env = {k: v for k, v in os.environ.items() if not k.startswith("CSCAFFOLD_")}
    return subprocess.run(
        [sys.executable, "-m", "cscaffold", *args],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScaffoldEndToEnd:
    """Run the CLI the way a user would."""

    def test_cpp_layout(self, tmp_path: Path):
        result = _cscaffold(tmp_path, "--name", "demo", "--language", "CPP")

        assert result.returncode == 0, result.stderr
        root = tmp_path / "demo"
        assert sorted(p.name for p in root.iterdir()) == sorted(
            [".gitignore", "CMakeLists.txt", "build", "build.sh", "include", "src"]
        )
        assert (root / "src" / "main.cpp").is_file()

    def test_bad_language_exits_1(self, tmp_path: Path):
        result = _cscaffold(tmp_path, "-n", "demo", "-l", "JAVA")

        assert result.returncode == 1
        assert "Only C and CPP" in result.stderr
        assert list(tmp_path.iterdir()) == []

    def test_existing_folder_exits_1(self, tmp_path: Path):
        (tmp_path / "demo").mkdir()

        result = _cscaffold(tmp_path, "-n", "demo", "-l", "C")

        assert result.returncode == 1
        assert "already exists" in result.stderr
        assert list((tmp_path / "demo").iterdir()) == []

    @pytest.mark.skipif(shutil.which("sh") is None, reason="needs a POSIX shell")
    def test_build_script_is_valid_shell(self, tmp_path: Path):
        assert _cscaffold(tmp_path, "-n", "demo", "-l", "C").returncode == 0

        check = subprocess.run(
            ["sh", "-n", "build.sh"],
            cwd=tmp_path / "demo",
            capture_output=True,
            text=True,
        )
        assert check.returncode == 0, check.stderr

    @pytest.mark.skipif(
        shutil.which("cmake") is None or shutil.which("ninja") is None,
        reason="needs cmake and ninja",
    )
    @pytest.mark.parametrize(("language", "compiler"), [("C", "cc"), ("CPP", "c++")])
    def test_generated_project_builds_and_runs(self, tmp_path: Path, language, compiler):
        if shutil.which(compiler) is None:
            pytest.skip(f"needs {compiler}")
        assert _cscaffold(tmp_path, "-n", "hello", "-l", language).returncode == 0

        run = subprocess.run(
            ["sh", "build.sh"],
            cwd=tmp_path / "hello",
            capture_output=True,
            text=True,
            timeout=300,
        )
        assert run.returncode == 0, run.stderr
        assert "Hello World" in run.stdout

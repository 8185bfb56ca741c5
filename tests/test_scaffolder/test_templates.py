"""Tests for the Jinja2 template renderer (cscaffold.scaffolder.templates)."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from cscaffold.scaffolder.templates import TemplateRenderer, write_file

pytestmark = pytest.mark.unit


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def context() -> dict[str, str]:
    return {
        "project_name": "demo",
        "language": "CPP",
        "source_extension": ".cpp",
        "build_language_tag": "CXX",
        "cmake_minimum_version": "3.11",
        "generator": "Ninja",
    }


class TestRender:
    def test_cmakelists(self, renderer, context):
        content = renderer.render("CMakeLists.txt.j2", context)
        assert content.startswith("cmake_minimum_required(VERSION 3.11)\n")
        assert "set(PROJECT_NAME demo)" in content
        assert "project(${PROJECT_NAME} CXX)" in content
        assert 'file(GLOB_RECURSE SOURCES "src/*.cpp")' in content
        assert "include_directories(${CMAKE_SOURCE_DIR}/include)" in content
        assert content.endswith("add_executable(${PROJECT_NAME} ${SOURCES})\n")

    def test_build_script_quotes_words(self, renderer, context):
        context = {**context, "project_name": "my app", "generator": "Unix Makefiles"}
        content = renderer.render("build.sh.j2", context)
        assert content.splitlines() == [
            "#!/bin/sh",
            "cmake -S . -B build -G 'Unix Makefiles'",
            "cmake --build build",
            "./build/'my app'",
        ]

    def test_missing_variable_is_an_error(self, renderer):
        with pytest.raises(UndefinedError):
            renderer.render("CMakeLists.txt.j2", {"project_name": "demo"})

    def test_render_to_file(self, renderer, context, tmp_path):
        out = renderer.render_to_file("main.cpp.j2", tmp_path / "main.cpp", context)
        assert out == tmp_path / "main.cpp"
        assert "std::cout" in out.read_text(encoding="utf-8")

    def test_render_to_file_needs_parent(self, renderer, context, tmp_path):
        with pytest.raises(FileNotFoundError):
            renderer.render_to_file("main.c.j2", tmp_path / "missing" / "main.c", context)


class TestWriteFile:
    def test_writes_lf_line_endings(self, tmp_path: Path):
        path = tmp_path / "out.txt"
        write_file(path, "a\nb\n")
        assert path.read_bytes() == b"a\nb\n"

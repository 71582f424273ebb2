"""Tests for conventional source/test directory resolution."""

from pathlib import Path

import pytest

from testgen.detector.directories import (
    find_first_existing,
    resolve_source_directory,
    resolve_test_directory,
)
from testgen.detector.types import ProjectType


def _mkdirs(root: Path, *names: str) -> None:
    for name in names:
        (root / name).mkdir(parents=True)


def _snapshot(root: Path) -> list[str]:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*"))


class TestFindFirstExisting:
    def test_returns_first_in_list_order(self, tmp_path):
        _mkdirs(tmp_path, "test", "tests")
        assert find_first_existing(tmp_path, ("tests", "test")) == "tests"

    def test_dir_kind_ignores_files(self, tmp_path):
        (tmp_path / "tests").write_text("")
        assert find_first_existing(tmp_path, ("tests",)) is None

    def test_any_kind_accepts_files(self, tmp_path):
        (tmp_path / "jest.config.js").write_text("")
        assert find_first_existing(tmp_path, ("jest.config.js",), kind="any") == "jest.config.js"

    def test_none_when_nothing_exists(self, tmp_path):
        assert find_first_existing(tmp_path, ("a", "b")) is None


class TestResolveTestDirectory:
    @pytest.mark.parametrize("name", ["__tests__", "tests", "test", "spec", "specs"])
    def test_js_conventional_names(self, tmp_path, name):
        _mkdirs(tmp_path, name)
        assert resolve_test_directory(tmp_path, ProjectType.REACT) == name

    def test_js_priority_order(self, tmp_path):
        _mkdirs(tmp_path, "spec", "__tests__", "test")
        assert resolve_test_directory(tmp_path, ProjectType.NODEJS) == "__tests__"

    def test_js_co_located_returns_none(self, tmp_path):
        assert resolve_test_directory(tmp_path, ProjectType.UNKNOWN) is None

    def test_dotnet_existing_dir(self, tmp_path):
        _mkdirs(tmp_path, "test")
        assert resolve_test_directory(tmp_path, ProjectType.DOTNET) == "test"

    def test_dotnet_capitalised_first(self, tmp_path):
        _mkdirs(tmp_path, "Test", "tests")
        # On case-insensitive filesystems "Tests" would also match "tests"
        assert resolve_test_directory(tmp_path, ProjectType.DOTNET) in {"Tests", "tests"}

    def test_dotnet_defaults_to_tests(self, tmp_path):
        assert resolve_test_directory(tmp_path, ProjectType.DOTNET) == "Tests"

    def test_dotnet_default_is_not_created(self, tmp_path):
        resolve_test_directory(tmp_path, ProjectType.DOTNET)
        assert not (tmp_path / "Tests").exists()

    def test_dotnet_ignores_js_only_names(self, tmp_path):
        _mkdirs(tmp_path, "__tests__")
        assert resolve_test_directory(tmp_path, ProjectType.DOTNET) == "Tests"


class TestResolveSourceDirectory:
    def test_first_existing(self, tmp_path):
        _mkdirs(tmp_path, "lib", "app")
        assert resolve_source_directory(tmp_path, ProjectType.REACT) == "lib"

    def test_js_default_src(self, tmp_path):
        assert resolve_source_directory(tmp_path, ProjectType.UNKNOWN) == "src"

    def test_dotnet_has_no_default(self, tmp_path):
        assert resolve_source_directory(tmp_path, ProjectType.DOTNET) is None

    def test_dotnet_existing_dir_is_reported(self, tmp_path):
        _mkdirs(tmp_path, "src")
        assert resolve_source_directory(tmp_path, ProjectType.DOTNET) == "src"


class TestIdempotence:
    def test_repeated_calls_same_result_and_no_side_effects(self, tmp_path):
        _mkdirs(tmp_path, "specs", "source")
        before = _snapshot(tmp_path)

        for project_type in (ProjectType.VUE, ProjectType.DOTNET):
            first = resolve_test_directory(tmp_path, project_type)
            second = resolve_test_directory(tmp_path, project_type)
            assert first == second
            assert resolve_source_directory(tmp_path, project_type) == resolve_source_directory(
                tmp_path, project_type
            )

        assert _snapshot(tmp_path) == before

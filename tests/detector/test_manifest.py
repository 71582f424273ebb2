"""Unit tests for the package.json reader.

All tests use minimal fixtures written to tmp_path.
"""

import dataclasses
import json
import logging
from pathlib import Path

import pytest

from testgen.detector.manifest import Manifest, read_manifest


def _write_pkg(root: Path, data) -> None:
    (root / "package.json").write_text(json.dumps(data), encoding="utf-8")


class TestReadManifest:
    def test_missing_file_returns_empty(self, tmp_path):
        manifest = read_manifest(tmp_path)
        assert manifest.is_empty
        assert dict(manifest.dependencies) == {}

    def test_merges_runtime_and_dev_dependencies(self, tmp_path):
        _write_pkg(tmp_path, {
            "dependencies": {"react": "^18.2.0"},
            "devDependencies": {"jest": "^29.0.0"},
        })
        manifest = read_manifest(tmp_path)
        assert dict(manifest.dependencies) == {"react": "^18.2.0", "jest": "^29.0.0"}

    def test_dev_dependency_wins_on_name_clash(self, tmp_path):
        _write_pkg(tmp_path, {
            "dependencies": {"jest": "1.0.0"},
            "devDependencies": {"jest": "2.0.0"},
        })
        assert read_manifest(tmp_path).dependencies["jest"] == "2.0.0"

    def test_reads_scripts(self, tmp_path):
        _write_pkg(tmp_path, {"scripts": {"test": "jest --ci"}})
        assert read_manifest(tmp_path).scripts["test"] == "jest --ci"

    def test_invalid_json_returns_empty_and_warns(self, tmp_path, caplog):
        (tmp_path / "package.json").write_text("not json {{", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="testgen.detector.manifest"):
            manifest = read_manifest(tmp_path)
        assert manifest.is_empty
        assert "Failed to parse" in caplog.text

    def test_non_object_top_level_returns_empty(self, tmp_path):
        _write_pkg(tmp_path, ["react"])
        assert read_manifest(tmp_path).is_empty

    def test_non_object_dependency_block_is_ignored(self, tmp_path):
        _write_pkg(tmp_path, {
            "dependencies": ["react"],
            "devDependencies": {"vitest": "^1.0.0"},
        })
        assert dict(read_manifest(tmp_path).dependencies) == {"vitest": "^1.0.0"}

    def test_manifest_is_read_only(self, tmp_path):
        _write_pkg(tmp_path, {"dependencies": {"react": "18"}})
        manifest = read_manifest(tmp_path)
        with pytest.raises(TypeError):
            manifest.dependencies["vue"] = "3"  # type: ignore[index]


class TestAliasMembership:
    def test_has_any_matches_any_alias(self):
        manifest = Manifest(dependencies={"react-dom": "18"})
        assert manifest.has_any(("react", "react-dom"))

    def test_has_any_is_case_sensitive(self):
        manifest = Manifest(dependencies={"React": "18"})
        assert not manifest.has_any(("react",))

    def test_first_version_follows_alias_order(self):
        manifest = Manifest(dependencies={"@jest/globals": "^29.1.0", "jest": "~29.7.0"})
        assert manifest.first_version(("jest", "@jest/globals")) == "~29.7.0"

    def test_first_version_falls_back_to_later_alias(self):
        manifest = Manifest(dependencies={"@jest/globals": "^29.1.0"})
        assert manifest.first_version(("jest", "@jest/globals")) == "^29.1.0"

    def test_first_version_none_when_absent(self):
        assert Manifest().first_version(("jest",)) is None


class TestDefaultManifest:
    def test_default_mappings_are_empty_and_read_only(self):
        manifest = Manifest()
        assert manifest.is_empty
        assert dict(manifest.dependencies) == {}
        with pytest.raises(TypeError):
            manifest.scripts["test"] = "jest"  # type: ignore[index]

    def test_fields_use_default_factories(self):
        fields = {f.name: f for f in dataclasses.fields(Manifest)}
        for name in ("dependencies", "scripts"):
            assert fields[name].default is dataclasses.MISSING
            assert fields[name].default_factory is not dataclasses.MISSING

# tests/core/test_loader.py
from __future__ import annotations

import os
import pytest
from pathlib import Path

from bval.annotations.core.loader import (
    import_attr,
    substitute_env_vars,
    load_yaml_files,
)
from tests.helpers.constraints import Size


class TestImportAttr:
    def test_import_valid_path(self):
        assert import_attr("os.path:join") is os.path.join

    def test_import_annotation_type(self):
        assert import_attr("tests.helpers.constraints:Size") is Size

    def test_import_nested_attribute(self):
        assert import_attr("tests.helpers.constraints:Size.max") is Size.max

    def test_import_invalid_format_no_colon(self):
        with pytest.raises(ValueError, match="expected 'module:attr'"):
            import_attr("os.path.join")

    def test_import_nonexistent_module(self):
        with pytest.raises(ImportError):
            import_attr("nonexistent.module:attr")

    def test_import_nonexistent_attr(self):
        with pytest.raises(AttributeError):
            import_attr("os.path:nonexistent_function")


class TestSubstituteEnvVars:
    def test_substitute_simple_var(self, monkeypatch):
        monkeypatch.setenv("TEST_VAR", "hello")
        assert substitute_env_vars("${TEST_VAR}") == "hello"

    def test_substitute_var_with_default_uses_default(self, monkeypatch):
        monkeypatch.delenv("MISSING_VAR", raising=False)
        assert substitute_env_vars("${MISSING_VAR:-10}") == "10"

    def test_substitute_missing_var_no_default_raises(self, monkeypatch):
        monkeypatch.delenv("MISSING_VAR", raising=False)
        with pytest.raises(ValueError, match="not set"):
            substitute_env_vars("${MISSING_VAR}")

    def test_substitute_nested(self, monkeypatch):
        monkeypatch.setenv("MSG", "too long")

        result = substitute_env_vars({"elements": {"max": 3}, "message": "${MSG}", "groups": ["${MSG}"]})

        assert result == {"elements": {"max": 3}, "message": "too long", "groups": ["too long"]}

    def test_substitute_non_string_passthrough(self):
        assert substitute_env_vars(42) == 42
        assert substitute_env_vars(None) is None


class TestLoadYamlFiles:
    def test_load_single_file(self, tmp_path: Path):
        config_file = tmp_path / "constraints.yaml"
        config_file.write_text("key: value\n", encoding="utf-8")

        result = load_yaml_files([str(config_file)])

        assert result == [(config_file.resolve(), {"key": "value"})]

    def test_load_multiple_files_sorted(self, tmp_path: Path):
        (tmp_path / "02_second.yaml").write_text("order: 2\n", encoding="utf-8")
        (tmp_path / "01_first.yaml").write_text("order: 1\n", encoding="utf-8")

        result = load_yaml_files([str(tmp_path / "*.yaml")])

        assert [data for _, data in result] == [{"order": 1}, {"order": 2}]

    def test_overlapping_patterns_load_once(self, tmp_path: Path):
        config_file = tmp_path / "constraints.yaml"
        config_file.write_text("order: 1\n", encoding="utf-8")

        result = load_yaml_files([str(config_file), str(tmp_path / "*.yaml")])

        assert len(result) == 1

    def test_empty_file_is_empty_dict(self, tmp_path: Path):
        (tmp_path / "empty.yaml").write_text("", encoding="utf-8")

        result = load_yaml_files([str(tmp_path / "empty.yaml")])

        assert result[0][1] == {}

    def test_load_no_matching_files_returns_empty(self, tmp_path: Path):
        assert load_yaml_files([str(tmp_path / "nonexistent/*.yaml")]) == []

"""Tests for environment variable helpers."""

import os

import pytest

from fieldrules.env import expand_env_vars, expand_options, load_env_file


class TestExpandEnvVars:
    """${VAR} expansion in strings."""

    def test_expands_braced_reference(self, monkeypatch):
        monkeypatch.setenv("SKU_PREFIX", "AB")
        assert expand_env_vars("${SKU_PREFIX}-[0-9]{4}") == "AB-[0-9]{4}"

    def test_missing_left_as_is(self, monkeypatch):
        monkeypatch.delenv("MISSING", raising=False)
        assert expand_env_vars("${MISSING}") == "${MISSING}"

    def test_missing_strict_raises(self, monkeypatch):
        monkeypatch.delenv("MISSING", raising=False)
        with pytest.raises(KeyError, match="MISSING"):
            expand_env_vars("${MISSING}", strict=True)

    def test_bare_dollar_untouched(self, monkeypatch):
        """Regex anchors and escaped dollars are not variable references."""
        monkeypatch.setenv("HOME", "/root")
        assert expand_env_vars(r"^\$HOME[0-9]+$") == r"^\$HOME[0-9]+$"
        assert expand_env_vars("$HOME") == "$HOME"


class TestExpandOptions:
    """Recursive expansion of config mappings."""

    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv("KEY", "value")
        cfg = {"a": "${KEY}", "b": ["${KEY}", {"c": "${KEY}"}], "d": 1, "e": None}
        assert expand_options(cfg) == {
            "a": "value",
            "b": ["value", {"c": "value"}],
            "d": 1,
            "e": None,
        }

    def test_input_not_mutated(self, monkeypatch):
        monkeypatch.setenv("KEY", "value")
        cfg = {"a": "${KEY}", "b": {"c": "${KEY}"}}
        expand_options(cfg)
        assert cfg == {"a": "${KEY}", "b": {"c": "${KEY}"}}

    def test_strict_raises_from_nested_value(self, monkeypatch):
        monkeypatch.delenv("MISSING", raising=False)
        with pytest.raises(KeyError, match="MISSING"):
            expand_options({"patterns": {"x": "${MISSING}"}}, strict=True)


class TestLoadEnvFile:
    """Loading .env files."""

    def test_loads_variables(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FIELDRULES_TEST_VAR", "placeholder")
        monkeypatch.delenv("FIELDRULES_TEST_VAR")
        env_file = tmp_path / ".env"
        env_file.write_text("FIELDRULES_TEST_VAR=loaded\n", encoding="utf-8")

        assert load_env_file(env_file) is True
        assert os.environ["FIELDRULES_TEST_VAR"] == "loaded"

    def test_existing_variable_kept_without_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FIELDRULES_TEST_VAR", "original")
        env_file = tmp_path / ".env"
        env_file.write_text("FIELDRULES_TEST_VAR=from-file\n", encoding="utf-8")

        load_env_file(env_file)
        assert os.environ["FIELDRULES_TEST_VAR"] == "original"

        load_env_file(env_file, override=True)
        assert os.environ["FIELDRULES_TEST_VAR"] == "from-file"

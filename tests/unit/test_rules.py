"""Tests for rule set loading and settings resolution.

Uses isolated directories via tmp_path and RESCISAO_CONFIG_PATH
to avoid touching the real configuration.
"""

import json

import pytest
import yaml

from rescisao.sdk import (
    RulesNotFoundError,
    RulesValidationError,
    SeveranceRules,
    default_rules,
    get_default_rules_path,
    get_setting,
    load_rules,
    resolve_rules_path,
    set_setting,
    clear_setting,
)


# === FIXTURES ===


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Set up isolated config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    monkeypatch.setenv("RESCISAO_CONFIG_PATH", str(config_dir))

    return {"config_dir": config_dir, "tmp_path": tmp_path}


@pytest.fixture
def custom_rules_file(tmp_path):
    """Rules file with a 20% FGTS fine and a 60-day notice cap."""
    path = tmp_path / "custom.yaml"
    path.write_text(yaml.safe_dump({
        "days_per_month": 30,
        "fifteen_day_threshold": 15,
        "fgts_rate": 0.08,
        "fgts_penalty_rate": 0.20,
        "notice": {"base_days": 30, "days_per_year": 3, "max_days": 60},
    }))
    return path


class TestDefaultRules:
    """Tests for the packaged rule set."""

    def test_packaged_file_exists(self):
        assert get_default_rules_path().exists()

    def test_packaged_values(self):
        rules = default_rules()
        assert rules.days_per_month == 30
        assert rules.fifteen_day_threshold == 15
        assert rules.fgts_rate == pytest.approx(0.08)
        assert rules.fgts_penalty_rate == pytest.approx(0.40)
        assert rules.notice.base_days == 30
        assert rules.notice.days_per_year == 3
        assert rules.notice.max_days == 90

    def test_packaged_matches_model_defaults(self):
        assert default_rules() == SeveranceRules()

    def test_load_without_settings_uses_default(self, isolated_env):
        path, source = resolve_rules_path()
        assert source == "default"
        assert path == get_default_rules_path()
        assert load_rules() == default_rules()


class TestCustomRules:
    """Tests for explicit and configured rule files."""

    def test_explicit_path(self, isolated_env, custom_rules_file):
        rules = load_rules(custom_rules_file)
        assert rules.fgts_penalty_rate == pytest.approx(0.20)
        assert rules.notice.max_days == 60

    def test_settings_path(self, isolated_env, custom_rules_file):
        set_setting("rules", str(custom_rules_file))

        path, source = resolve_rules_path()
        assert source == "settings"
        assert path == custom_rules_file
        assert load_rules().fgts_penalty_rate == pytest.approx(0.20)

    def test_explicit_path_wins_over_settings(self, isolated_env, custom_rules_file):
        set_setting("rules", str(isolated_env["tmp_path"] / "missing.yaml"))
        _, source = resolve_rules_path(custom_rules_file)
        assert source == "argument"

    def test_clear_setting(self, isolated_env, custom_rules_file):
        set_setting("rules", str(custom_rules_file))
        assert clear_setting("rules") is True
        assert get_setting("rules") is None
        assert clear_setting("rules") is False

    def test_settings_file_is_json(self, isolated_env, custom_rules_file):
        set_setting("rules", str(custom_rules_file))
        data = json.loads((isolated_env["config_dir"] / "settings.json").read_text())
        assert data == {"rules": str(custom_rules_file)}


class TestRulesErrors:
    """Tests for invalid or missing rule files."""

    def test_missing_file(self, isolated_env):
        with pytest.raises(RulesNotFoundError):
            load_rules(isolated_env["tmp_path"] / "nope.yaml")

    def test_unknown_key(self, isolated_env):
        path = isolated_env["tmp_path"] / "bad.yaml"
        path.write_text("days_per_month: 30\ninss_rate: 0.11\n")
        with pytest.raises(RulesValidationError, match="inss_rate"):
            load_rules(path)

    def test_rate_out_of_range(self, isolated_env):
        path = isolated_env["tmp_path"] / "bad.yaml"
        path.write_text("fgts_rate: 8\n")
        with pytest.raises(RulesValidationError):
            load_rules(path)

    def test_cap_below_base(self, isolated_env):
        path = isolated_env["tmp_path"] / "bad.yaml"
        path.write_text("notice:\n  base_days: 30\n  max_days: 20\n")
        with pytest.raises(RulesValidationError, match="max_days"):
            load_rules(path)

    def test_not_a_mapping(self, isolated_env):
        path = isolated_env["tmp_path"] / "bad.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(RulesValidationError, match="mapping"):
            load_rules(path)

    def test_malformed_yaml(self, isolated_env):
        path = isolated_env["tmp_path"] / "bad.yaml"
        path.write_text("notice: [unclosed\n")
        with pytest.raises(RulesValidationError, match="Invalid YAML"):
            load_rules(path)

    def test_empty_file_uses_model_defaults(self, isolated_env):
        path = isolated_env["tmp_path"] / "empty.yaml"
        path.write_text("")
        assert load_rules(path) == SeveranceRules()

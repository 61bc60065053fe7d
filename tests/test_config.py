import pytest

from spam_risk_checker.config.settings import DEFAULT_CONFIG_PATH, RiskConfig, load_config
from spam_risk_checker.core.errors import ConfigError


def test_load_config_defaults(clean_risk_env):
    cfg, raw = load_config()
    assert DEFAULT_CONFIG_PATH.exists()
    assert isinstance(raw, dict)
    assert cfg.medium_threshold == 30
    assert cfg.high_threshold == 60
    assert cfg.short_text_length == 20
    assert cfg.short_text_score_floor == 30
    assert cfg == RiskConfig(log_level=cfg.log_level, log_format=cfg.log_format)


def test_load_config_env_overrides_yaml(clean_risk_env):
    clean_risk_env.setenv("SPAM_RISK_HIGH_THRESHOLD", "75")
    clean_risk_env.setenv("SPAM_RISK_LOG_FORMAT", "json")
    cfg, _ = load_config()
    assert cfg.high_threshold == 75
    assert cfg.log_format == "json"


def test_load_config_from_custom_yaml(clean_risk_env, tmp_path):
    path = tmp_path / "risk.yaml"
    path.write_text("medium_threshold: 25\nshort_text_length: 10\n", encoding="utf-8")
    cfg, raw = load_config(path)
    assert raw["medium_threshold"] == 25
    assert cfg.medium_threshold == 25
    assert cfg.short_text_length == 10
    assert cfg.high_threshold == 60


def test_load_config_path_from_env(clean_risk_env, tmp_path):
    path = tmp_path / "env.yaml"
    path.write_text("high_threshold: 80\n", encoding="utf-8")
    clean_risk_env.setenv("SPAM_RISK_CONFIG_PATH", str(path))
    cfg, _ = load_config()
    assert cfg.high_threshold == 80


def test_missing_yaml_falls_back_to_defaults(clean_risk_env, tmp_path):
    cfg, raw = load_config(tmp_path / "missing.yaml")
    assert raw == {}
    assert cfg.medium_threshold == 30


def test_inverted_thresholds_raise_config_error(clean_risk_env):
    clean_risk_env.setenv("SPAM_RISK_MEDIUM_THRESHOLD", "70")
    with pytest.raises(ConfigError):
        load_config()


def test_invalid_yaml_raises_config_error(clean_risk_env, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("medium_threshold: [1, 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)

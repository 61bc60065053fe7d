"""Runtime configuration."""

from spam_risk_checker.config.settings import DEFAULT_CONFIG_PATH, RiskConfig, load_config, setup_logging

__all__ = ["DEFAULT_CONFIG_PATH", "RiskConfig", "load_config", "setup_logging"]

"""Config loader from env + yaml."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from spam_risk_checker.core.errors import ConfigError
from spam_risk_checker.core.logging import configure_logging, get_logger

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
ENV_PREFIX = "SPAM_RISK_"

log = get_logger(__name__)


class RiskConfig(BaseModel):
    """Band thresholds and short-text suppression knobs for the aggregator."""

    model_config = ConfigDict(frozen=True)

    medium_threshold: int = Field(default=30, ge=0, le=100)
    high_threshold: int = Field(default=60, ge=0, le=100)
    short_text_length: int = Field(default=20, ge=0)
    short_text_score_floor: int = Field(default=30, ge=0, le=100)
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")

    @model_validator(mode="after")
    def _check_band_order(self) -> "RiskConfig":
        if self.medium_threshold >= self.high_threshold:
            raise ValueError("medium_threshold must be lower than high_threshold")
        return self


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    try:
        payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid yaml in {p}: {exc}") from exc
    return payload if isinstance(payload, dict) else {}


def _pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(f"{ENV_PREFIX}{name}")
    return value if value not in (None, "") else fallback


def _parse_int(raw: Any, fallback: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return fallback


def _parse_str(raw: Any, fallback: str) -> str:
    value = str(raw if raw is not None else "").strip()
    return value or fallback


def _resolve_default_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_default_path = os.getenv(f"{ENV_PREFIX}CONFIG_PATH")
    if env_default_path:
        return Path(env_default_path)
    return DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> tuple[RiskConfig, dict[str, Any]]:
    """Load ``RiskConfig`` from yaml defaults, letting ``SPAM_RISK_*`` env vars win.

    Returns the validated config and the raw merged yaml mapping.
    """

    default_path = _resolve_default_config_path(path)
    merged = load_yaml(default_path)

    payload = {
        "medium_threshold": _parse_int(
            _pick_env("MEDIUM_THRESHOLD", merged.get("medium_threshold", 30)),
            30,
        ),
        "high_threshold": _parse_int(
            _pick_env("HIGH_THRESHOLD", merged.get("high_threshold", 60)),
            60,
        ),
        "short_text_length": _parse_int(
            _pick_env("SHORT_TEXT_LENGTH", merged.get("short_text_length", 20)),
            20,
        ),
        "short_text_score_floor": _parse_int(
            _pick_env("SHORT_TEXT_SCORE_FLOOR", merged.get("short_text_score_floor", 30)),
            30,
        ),
        "log_level": _parse_str(_pick_env("LOG_LEVEL", merged.get("log_level", "INFO")), "INFO"),
        "log_format": _parse_str(_pick_env("LOG_FORMAT", merged.get("log_format", "console")), "console"),
    }

    try:
        cfg = RiskConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid risk config from {default_path}: {exc}") from exc

    log.debug(
        "config_loaded",
        path=str(default_path),
        medium_threshold=cfg.medium_threshold,
        high_threshold=cfg.high_threshold,
    )
    return cfg, merged


def setup_logging(cfg: RiskConfig) -> None:
    """Apply the config's ``log_level`` and ``log_format`` at host startup."""

    configure_logging(level=cfg.log_level, fmt=cfg.log_format)

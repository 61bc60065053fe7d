"""Fold rule hits into the final score, band and reasons."""

from __future__ import annotations

from collections.abc import Iterable

from spam_risk_checker.config.settings import RiskConfig
from spam_risk_checker.domain.content.models import AnalysisResult, RiskLevel
from spam_risk_checker.orchestrator.rules import RuleHit
from spam_risk_checker.tools.text.features import text_length


def clip_score(value: int) -> int:
    return max(0, min(100, int(value)))


def classify_risk(score: int, config: RiskConfig | None = None) -> RiskLevel:
    cfg = config or RiskConfig()
    if score >= cfg.high_threshold:
        return "High"
    if score >= cfg.medium_threshold:
        return "Medium"
    return "Low"


def is_suppressed(score: int, content: str, config: RiskConfig | None = None) -> bool:
    """Short bodies are not flagged unless something strong fired.

    Only the body length counts here, not the title. Length is measured in
    UTF-16 code units, so each emoji outside the BMP counts as two.
    """

    cfg = config or RiskConfig()
    return text_length(content) < cfg.short_text_length and score < cfg.short_text_score_floor


def aggregate(
    hits: Iterable[RuleHit],
    *,
    content: str,
    config: RiskConfig | None = None,
) -> AnalysisResult:
    cfg = config or RiskConfig()
    total = 0
    reasons: list[str] = []
    for item in hits:
        total += item.points
        reasons.extend(item.reasons)

    score = clip_score(total)
    if is_suppressed(score, content, cfg):
        score = 0
        reasons = []

    return AnalysisResult(
        score=score,
        risk_level=classify_risk(score, cfg),
        reasons=list(dict.fromkeys(reasons)),
    )

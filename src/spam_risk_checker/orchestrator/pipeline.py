"""Single entry point: platform rules, then universal rules, then aggregation."""

from __future__ import annotations

from spam_risk_checker.config.settings import RiskConfig
from spam_risk_checker.core.logging import get_logger
from spam_risk_checker.domain.content.models import AnalysisInput, AnalysisResult
from spam_risk_checker.orchestrator.aggregate import aggregate
from spam_risk_checker.orchestrator.platform_rules import score_platform
from spam_risk_checker.orchestrator.rules import RuleHit
from spam_risk_checker.orchestrator.universal_rules import score_universal

log = get_logger(__name__)


def evaluate_rules(item: AnalysisInput) -> list[RuleHit]:
    """Every rule that fired, platform rules first, before clamping or suppression."""

    return score_platform(item) + score_universal(item)


def analyze_spam_risk(item: AnalysisInput, *, config: RiskConfig | None = None) -> AnalysisResult:
    """Score one piece of content. Pure and total: never raises for a valid input."""

    hits = evaluate_rules(item)
    result = aggregate(hits, content=item.content, config=config)
    log.debug(
        "spam_risk_scored",
        platform=item.platform,
        score=result.score,
        risk_level=result.risk_level,
        rules=[hit.rule for hit in hits],
        suppressed=bool(hits) and not result.reasons,
    )
    return result

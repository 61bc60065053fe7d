"""Scoring orchestration: rules, aggregation and the analysis entry point."""

from spam_risk_checker.orchestrator.aggregate import aggregate, classify_risk, clip_score
from spam_risk_checker.orchestrator.pipeline import analyze_spam_risk, evaluate_rules
from spam_risk_checker.orchestrator.rules import RuleHit

__all__ = [
    "RuleHit",
    "aggregate",
    "analyze_spam_risk",
    "classify_risk",
    "clip_score",
    "evaluate_rules",
]

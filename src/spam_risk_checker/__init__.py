"""Deterministic spam/abuse risk scoring for short user-authored content."""

from spam_risk_checker.config.settings import RiskConfig, load_config, setup_logging
from spam_risk_checker.domain.content import (
    AnalysisInput,
    AnalysisResult,
    EmailContent,
    FacebookPost,
    RedditPost,
    parse_analysis_input,
)
from spam_risk_checker.orchestrator.pipeline import analyze_spam_risk, evaluate_rules
from spam_risk_checker.orchestrator.rules import RuleHit

__all__ = [
    "AnalysisInput",
    "AnalysisResult",
    "EmailContent",
    "FacebookPost",
    "RedditPost",
    "RiskConfig",
    "RuleHit",
    "analyze_spam_risk",
    "evaluate_rules",
    "load_config",
    "parse_analysis_input",
    "setup_logging",
]

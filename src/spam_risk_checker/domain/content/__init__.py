"""Content input/output models and payload parsing."""

from spam_risk_checker.domain.content.models import (
    AnalysisInput,
    AnalysisResult,
    EmailContent,
    FacebookPost,
    Platform,
    RedditPost,
    RiskLevel,
    title_of,
)
from spam_risk_checker.domain.content.parse import parse_analysis_input

__all__ = [
    "AnalysisInput",
    "AnalysisResult",
    "EmailContent",
    "FacebookPost",
    "Platform",
    "RedditPost",
    "RiskLevel",
    "parse_analysis_input",
    "title_of",
]

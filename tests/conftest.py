from __future__ import annotations

import pytest

from spam_risk_checker import AnalysisResult, analyze_spam_risk, parse_analysis_input


@pytest.fixture
def analyze_payload():
    def _run(**fields: object) -> AnalysisResult:
        return analyze_spam_risk(parse_analysis_input(fields))

    return _run


@pytest.fixture
def clean_risk_env(monkeypatch):
    for name in (
        "SPAM_RISK_CONFIG_PATH",
        "SPAM_RISK_MEDIUM_THRESHOLD",
        "SPAM_RISK_HIGH_THRESHOLD",
        "SPAM_RISK_SHORT_TEXT_LENGTH",
        "SPAM_RISK_SHORT_TEXT_SCORE_FLOOR",
        "SPAM_RISK_LOG_LEVEL",
        "SPAM_RISK_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

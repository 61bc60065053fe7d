import pytest

from spam_risk_checker.config.settings import RiskConfig
from spam_risk_checker.orchestrator.aggregate import aggregate, classify_risk, clip_score, is_suppressed
from spam_risk_checker.orchestrator.rules import RuleHit

LONG_BODY = "This body is comfortably longer than twenty characters."


@pytest.mark.parametrize(
    ("score", "level"),
    [(0, "Low"), (29, "Low"), (30, "Medium"), (59, "Medium"), (60, "High"), (100, "High")],
)
def test_classify_risk_thresholds_are_inclusive(score, level):
    assert classify_risk(score) == level


def test_clip_score_bounds():
    assert clip_score(-5) == 0
    assert clip_score(140) == 100
    assert clip_score(42) == 42


def test_aggregate_sums_clamps_and_dedupes_reasons():
    hits = [
        RuleHit("a", 60, ("same reason", "first")),
        RuleHit("b", 70, ("same reason", "second")),
    ]
    result = aggregate(hits, content=LONG_BODY)
    assert result.score == 100
    assert result.risk_level == "High"
    assert result.reasons == ["same reason", "first", "second"]


def test_short_text_below_floor_is_suppressed():
    result = aggregate([RuleHit("a", 25, ("weak signal",))], content="short")
    assert result.score == 0
    assert result.risk_level == "Low"
    assert result.reasons == []


def test_short_text_with_strong_signal_is_kept():
    result = aggregate([RuleHit("a", 30, ("strong signal",))], content="short")
    assert result.score == 30
    assert result.risk_level == "Medium"
    assert result.reasons == ["strong signal"]


def test_suppression_only_looks_at_body_length():
    assert is_suppressed(10, "x" * 19) is True
    assert is_suppressed(10, "x" * 20) is False


def test_aggregate_respects_custom_config():
    cfg = RiskConfig(medium_threshold=10, high_threshold=20, short_text_length=0)
    result = aggregate([RuleHit("a", 15, ("r",))], content="", config=cfg)
    assert result.risk_level == "Medium"


def test_empty_hits_give_low_result():
    result = aggregate([], content="")
    assert result.score == 0
    assert result.risk_level == "Low"
    assert result.reasons == []


def test_suppression_counts_emoji_as_two_units():
    assert is_suppressed(10, "🔥" * 9) is True
    result = aggregate([RuleHit("a", 10, ("emoji body",))], content="🔥" * 10)
    assert result.score == 10
    assert result.reasons == ["emoji body"]

from spam_risk_checker.orchestrator.universal_rules import (
    TextView,
    body_caps,
    emoji_density,
    financial,
    hostility,
    links,
    marketing_buzzwords,
    obfuscation,
    punctuation_clusters,
    urgency,
)


def test_keyword_rules_scale_linearly():
    assert hostility(TextView("", "you idiot, shut up")).points == 20 + 5 * 2
    assert urgency(TextView("Act now", "last chance")).points == 10 + 5 * 2
    assert financial(TextView("", "free bitcoin and ethereum airdrop")).points == 10 + 5 * 3
    assert hostility(TextView("", "have a nice day")) is None


def test_title_counts_toward_combined_text():
    assert urgency(TextView("HURRY", "nothing else")).points == 15


def test_obfuscation_adds_flat_points_and_one_reason_per_style():
    outcome = obfuscation(TextView("", "F R E E stuff and C.a.s.h"))
    assert outcome.points == 30
    assert len(outcome.reasons) == 2


def test_marketing_requires_more_than_two_hits():
    assert marketing_buzzwords(TextView("", "buy now, sign up")) is None
    outcome = marketing_buzzwords(TextView("", "buy now, sign up, free trial, discount"))
    assert outcome.points == 10


def test_emoji_rule_reads_body_only():
    assert emoji_density(TextView("🔥🔥🔥🔥🔥", "calm body")) is None
    assert emoji_density(TextView("", "deal 🔥🔥💰🚀")).points == 10
    assert emoji_density(TextView("", "deal 🔥🔥💰")) is None


def test_body_caps_needs_long_body():
    shouting = "THIS IS A VERY LOUD MESSAGE THAT KEEPS ON GOING FOREVER"
    assert body_caps(TextView("", shouting)).points == 15
    assert body_caps(TextView("", "SHORT LOUD")) is None


def test_links_rule_points():
    outcome = links(TextView("", "https://bit.ly/a https://shop.example.com/?ref=me"))
    assert outcome.points == 5 * 2 + 15
    assert len(outcome.reasons) == 2
    assert links(TextView("", "read https://example.com")) is None


def test_links_rule_link_heavy_without_shortener():
    body = " ".join(f"https://n{i}.example.com" for i in range(5))
    outcome = links(TextView("", body))
    assert outcome.points == 25


def test_punctuation_clusters_body_only():
    assert punctuation_clusters(TextView("WOW!!", "calm")) is None
    assert punctuation_clusters(TextView("", "WOW!!")).points == 10

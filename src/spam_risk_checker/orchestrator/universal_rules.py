"""Platform-independent rules over the combined title and body."""

from __future__ import annotations

from dataclasses import dataclass

from spam_risk_checker.domain.content.models import EmailContent, FacebookPost, RedditPost, title_of
from spam_risk_checker.domain.url.extract import analyze_links
from spam_risk_checker.orchestrator.rules import Rule, RuleHit, hit, run_rules
from spam_risk_checker.tools.text.features import (
    caps_ratio,
    count_emoji,
    detect_obfuscation,
    has_punctuation_cluster,
    text_length,
)
from spam_risk_checker.tools.text.lexicon import (
    FINANCIAL_PHRASES,
    HOSTILITY_PHRASES,
    MARKETING_PHRASES,
    URGENCY_PHRASES,
    count_hits,
)

MARKETING_MIN_HITS = 3
EMOJI_LIMIT = 3
BODY_CAPS_RATIO = 0.3
BODY_CAPS_MIN_LENGTH = 50


@dataclass(frozen=True)
class TextView:
    title: str
    body: str

    @classmethod
    def of(cls, item: EmailContent | RedditPost | FacebookPost) -> "TextView":
        return cls(title=title_of(item), body=item.content or "")

    @property
    def combined(self) -> str:
        return f"{self.title} {self.body}"

    @property
    def lowered(self) -> str:
        return self.combined.lower()


def _scaled(rule: str, base: int, count: int, reason: str) -> RuleHit | None:
    if count <= 0:
        return None
    return hit(rule, base + 5 * count, reason)


def hostility(view: TextView) -> RuleHit | None:
    return _scaled(
        "universal.hostility",
        20,
        count_hits(view.lowered, HOSTILITY_PHRASES),
        "Hostile or profane language triggers moderation filters.",
    )


def urgency(view: TextView) -> RuleHit | None:
    return _scaled(
        "universal.urgency",
        10,
        count_hits(view.lowered, URGENCY_PHRASES),
        "Contains high-pressure urgency keywords.",
    )


def financial(view: TextView) -> RuleHit | None:
    return _scaled(
        "universal.financial",
        10,
        count_hits(view.lowered, FINANCIAL_PHRASES),
        "Contains high-risk money, crypto or scam terminology.",
    )


def obfuscation(view: TextView) -> RuleHit | None:
    findings = detect_obfuscation(view.combined)
    if not findings:
        return None
    return hit("universal.obfuscation", 30, *findings)


def marketing_buzzwords(view: TextView) -> RuleHit | None:
    if count_hits(view.lowered, MARKETING_PHRASES) >= MARKETING_MIN_HITS:
        return hit("universal.marketing", 10, "Uses overly 'salesy' marketing language typical of spam.")
    return None


def emoji_density(view: TextView) -> RuleHit | None:
    if count_emoji(view.body) > EMOJI_LIMIT:
        return hit("universal.emoji", 10, "Heavy emoji use reads as promotional spam.")
    return None


def body_caps(view: TextView) -> RuleHit | None:
    if caps_ratio(view.body) > BODY_CAPS_RATIO and text_length(view.body) > BODY_CAPS_MIN_LENGTH:
        return hit("universal.body_caps", 15, "Excessive use of CAPITAL LETTERS in the body text.")
    return None


def links(view: TextView) -> RuleHit | None:
    report = analyze_links(view.body)
    if not report.findings:
        return None
    points = 5 * report.total
    if report.has_affiliate:
        points += 15
    return hit("universal.links", points, *report.findings)


def punctuation_clusters(view: TextView) -> RuleHit | None:
    if has_punctuation_cluster(view.body):
        return hit("universal.punctuation", 10, "Uses spammy punctuation runs (e.g. '!!', '$$$', '??').")
    return None


UNIVERSAL_RULES: tuple[Rule[TextView], ...] = (
    hostility,
    urgency,
    financial,
    obfuscation,
    marketing_buzzwords,
    emoji_density,
    body_caps,
    links,
    punctuation_clusters,
)


def score_universal(item: EmailContent | RedditPost | FacebookPost) -> list[RuleHit]:
    return run_rules(UNIVERSAL_RULES, TextView.of(item))

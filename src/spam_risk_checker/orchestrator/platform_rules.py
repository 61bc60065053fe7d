"""Platform-specific scoring rules.

Each rule reads only the fields of its own input case and returns a
``RuleHit`` or ``None``.
"""

from __future__ import annotations

import re

from spam_risk_checker.domain.content.models import (
    EmailContent,
    FacebookPost,
    RedditPost,
    title_of,
)
from spam_risk_checker.orchestrator.rules import Rule, RuleHit, hit, run_rules
from spam_risk_checker.tools.text.features import caps_ratio, text_length
from spam_risk_checker.tools.text.lexicon import (
    CHAIN_LETTER_PHRASES,
    ENGAGEMENT_BAIT_PHRASES,
    FINANCIAL_PHRASES,
    GURU_PHRASES,
    OFF_PLATFORM_PHRASES,
    SELF_PROMOTION_PHRASES,
    URGENCY_PHRASES,
    count_hits,
    is_free_email_domain,
    matched_phrases,
)

_GENERIC_GREETING = re.compile(r"\bdear\s+(?:customer|friend|sir|madam)\b", re.IGNORECASE)
_DONT_SHARE_JUST_COPY = re.compile(r"\bdon[’']?t\s+share\W{0,3}\s*(?:just\s+)?copy\b", re.IGNORECASE)
_REPLY_PREFIXES = ("re:", "fwd:")


def sender_domain(from_email: str) -> str:
    parts = (from_email or "").split("@")
    if len(parts) < 2:
        return ""
    return parts[1].strip().lower()


# --- email ---


def email_free_provider(item: EmailContent) -> RuleHit | None:
    domain = sender_domain(item.from_email)
    if domain and is_free_email_domain(domain):
        return hit(
            "email.free_provider",
            25,
            f"Sending from a free email provider ({domain}) raises spam filter scores.",
        )
    return None


def email_subject_caps(item: EmailContent) -> RuleHit | None:
    if caps_ratio(item.title) > 0.5 and text_length(item.title) > 10:
        return hit("email.subject_caps", 20, "Subject line uses excessive CAPITAL LETTERS.")
    return None


def email_reply_prefix(item: EmailContent) -> RuleHit | None:
    if item.title.lower().startswith(_REPLY_PREFIXES):
        return hit(
            "email.reply_prefix",
            30,
            "A fake 'Re:' or 'Fwd:' prefix on a cold email is a major spam trigger.",
        )
    return None


def email_subject_urgency(item: EmailContent) -> RuleHit | None:
    if count_hits(item.title, URGENCY_PHRASES):
        return hit("email.subject_urgency", 20, "Urgency keywords in the subject line are high risk.")
    return None


def email_subject_financial(item: EmailContent) -> RuleHit | None:
    if count_hits(item.title, FINANCIAL_PHRASES):
        return hit("email.subject_financial", 15, "Money or crypto terms in the subject line look like a scam.")
    return None


def email_generic_greeting(item: EmailContent) -> RuleHit | None:
    if _GENERIC_GREETING.search(item.content):
        return hit(
            "email.generic_greeting",
            10,
            "Generic greetings like 'Dear Customer' are typical of bulk spam.",
        )
    return None


EMAIL_RULES: tuple[Rule[EmailContent], ...] = (
    email_free_provider,
    email_subject_caps,
    email_reply_prefix,
    email_subject_urgency,
    email_subject_financial,
    email_generic_greeting,
)


# --- reddit-like ---


def reddit_guru_language(item: RedditPost) -> RuleHit | None:
    found = matched_phrases(item.content, GURU_PHRASES)
    if not found:
        return None
    return hit(
        "reddit.guru_language",
        15 + 5 * len(found),
        f"Guru or course-selling language ({', '.join(found)}) is removed by most communities.",
    )


def reddit_self_promotion(item: RedditPost) -> RuleHit | None:
    found = count_hits(item.content, SELF_PROMOTION_PHRASES)
    if not found:
        return None
    return hit(
        "reddit.self_promotion",
        5 * found,
        "Self-promotion phrasing ('check out my', 'I made') often breaks subreddit rules.",
    )


def reddit_short_title(item: RedditPost) -> RuleHit | None:
    if 0 < text_length(item.title) < 15:
        return hit("reddit.short_title", 15, "Very short titles often get flagged by auto-moderators.")
    return None


def reddit_title_caps(item: RedditPost) -> RuleHit | None:
    if caps_ratio(item.title) > 0.7 and text_length(item.title) > 10:
        return hit("reddit.title_caps", 25, "ALL CAPS titles are removed almost instantly on many subreddits.")
    return None


def reddit_off_platform(item: RedditPost) -> RuleHit | None:
    if count_hits(item.content, OFF_PLATFORM_PHRASES):
        return hit(
            "reddit.off_platform",
            25,
            "Redirecting readers off-platform ('check my bio', 'DM me') is a common spam pattern.",
        )
    return None


REDDIT_RULES: tuple[Rule[RedditPost], ...] = (
    reddit_guru_language,
    reddit_self_promotion,
    reddit_short_title,
    reddit_title_caps,
    reddit_off_platform,
)


# --- facebook-like ---


def facebook_engagement_bait(item: FacebookPost) -> RuleHit | None:
    combined = f"{title_of(item)} {item.content}"
    if count_hits(combined, ENGAGEMENT_BAIT_PHRASES):
        return hit(
            "facebook.engagement_bait",
            30,
            "Engagement bait ('like this post', 'tag a friend') is demoted by the feed algorithm.",
        )
    return None


def facebook_chain_letter(item: FacebookPost) -> RuleHit | None:
    combined = f"{title_of(item)} {item.content}"
    if count_hits(combined, CHAIN_LETTER_PHRASES) or _DONT_SHARE_JUST_COPY.search(combined):
        return hit("facebook.chain_letter", 40, "Chain-letter wording ('copy and paste') is flagged as spam.")
    return None


FACEBOOK_RULES: tuple[Rule[FacebookPost], ...] = (
    facebook_engagement_bait,
    facebook_chain_letter,
)


def score_platform(item: EmailContent | RedditPost | FacebookPost) -> list[RuleHit]:
    """Dispatch to the rule set of the input's platform."""

    if isinstance(item, EmailContent):
        return run_rules(EMAIL_RULES, item)
    if isinstance(item, RedditPost):
        return run_rules(REDDIT_RULES, item)
    if isinstance(item, FacebookPost):
        return run_rules(FACEBOOK_RULES, item)
    return []

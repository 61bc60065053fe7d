"""Static phrase tables used by the scoring rules.

Every table is lowercase and immutable. Phrase tables are scanned in full and
matched as substrings so callers get a count of distinct hits, not just a
yes/no.
"""

from __future__ import annotations

URGENCY_PHRASES = (
    "act now",
    "limited time",
    "hurry",
    "last chance",
    "expires soon",
    "don't miss out",
    "once in a lifetime",
    "urgent",
    "immediately",
    "today only",
    "final notice",
    "ends tonight",
    "before it's too late",
)

FINANCIAL_PHRASES = (
    "crypto",
    "bitcoin",
    "ethereum",
    "airdrop",
    "presale",
    "100x",
    "forex",
    "investment opportunity",
    "double your money",
    "guaranteed return",
    "passive income",
    "make money fast",
    "get rich",
    "wire transfer",
    "gift card",
    "cash prize",
    "claim your prize",
    "bank details",
)

GURU_PHRASES = (
    "mentorship",
    "program",
    "coaching",
    "masterclass",
    "course",
    "blueprint",
    "six figures",
    "6 figures",
    "7 figures",
    "financial freedom",
    "quit your job",
    "secret method",
    "mindset",
    "limited spots",
)

SELF_PROMOTION_PHRASES = (
    "my app",
    "my game",
    "my website",
    "i made",
    "i created",
    "check out my",
)

HOSTILITY_PHRASES = (
    "idiot",
    "stupid",
    "moron",
    "shut up",
    "hate you",
    "loser",
    "kill yourself",
    "pathetic",
    "scumbag",
    "fuck",
    "shit",
    "bitch",
    "asshole",
    "bastard",
)

MARKETING_PHRASES = (
    "buy now",
    "order now",
    "sign up",
    "click here",
    "guaranteed",
    "risk-free",
    "no obligation",
    "free trial",
    "winner",
    "congratulations",
    "selected",
    "exclusive deal",
    "special offer",
    "best price",
    "100% free",
    "discount",
    "promo code",
)

ENGAGEMENT_BAIT_PHRASES = (
    "like this post",
    "like and share",
    "like if you agree",
    "share this post",
    "share if you",
    "tag a friend",
    "tag someone",
    "comment below",
    "comment yes",
    "type amen",
    "smash that like",
    "1 like =",
)

OFF_PLATFORM_PHRASES = (
    "check my bio",
    "link in bio",
    "link in my bio",
    "dm me",
    "message me on",
    "contact me on",
    "add me on",
    "whatsapp",
    "telegram",
    "my discord",
)

CHAIN_LETTER_PHRASES = ("copy and paste",)

FREE_EMAIL_DOMAINS = frozenset(
    {
        "gmail.com",
        "googlemail.com",
        "yahoo.com",
        "hotmail.com",
        "outlook.com",
        "live.com",
        "aol.com",
        "icloud.com",
        "protonmail.com",
        "proton.me",
        "gmx.com",
        "mail.com",
        "yandex.com",
        "zoho.com",
    }
)

SHORTENER_DOMAINS = frozenset(
    {
        "bit.ly",
        "tinyurl.com",
        "t.co",
        "rb.gy",
        "goo.gl",
        "ow.ly",
        "is.gd",
        "buff.ly",
        "cutt.ly",
        "shorturl.at",
        "tiny.cc",
        "rebrand.ly",
    }
)


def matched_phrases(text: str, lexicon: tuple[str, ...]) -> list[str]:
    """Phrases from ``lexicon`` found in ``text``, in table order."""

    lowered = (text or "").lower()
    return [phrase for phrase in lexicon if phrase in lowered]


def count_hits(text: str, lexicon: tuple[str, ...]) -> int:
    lowered = (text or "").lower()
    return sum(1 for phrase in lexicon if phrase in lowered)


def is_free_email_domain(domain: str) -> bool:
    return (domain or "").strip().lower() in FREE_EMAIL_DOMAINS


def is_shortener_host(host: str) -> bool:
    clean = (host or "").strip().lower()
    return any(clean == item or clean.endswith(f".{item}") for item in SHORTENER_DOMAINS)

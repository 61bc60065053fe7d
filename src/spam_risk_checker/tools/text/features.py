"""Scalar text features: caps ratio, text length, filter-evasion spacing, emoji, punctuation runs."""

from __future__ import annotations

import re

# Unicode letter without digits/underscore.
_LETTER = r"[^\W\d_]"

_OBFUSCATION_STYLES = (
    (
        re.compile(rf"(?<!{_LETTER})(?:{_LETTER} ){{3,}}{_LETTER}(?!{_LETTER})"),
        "Letters separated by spaces (e.g. 'F R E E') look like filter evasion.",
    ),
    (
        re.compile(rf"(?<!{_LETTER})(?:{_LETTER}\.){{3,}}{_LETTER}(?!{_LETTER})"),
        "Letters separated by dots (e.g. 'F.r.e.e') look like filter evasion.",
    ),
)

_EMOJI_PATTERN = re.compile(
    "["
    "\U0001F300-\U0001FAFF"  # pictographs and emoticons
    "\U0001F004\U0001F0CF\U0001F18E\U0001F191-\U0001F19A"
    "\U0000231A\U0000231B\U000023E9-\U000023EC\U000023F0\U000023F3"
    "\U000025FD\U000025FE\U00002614\U00002615\U00002648-\U00002653"
    "\U0000267F\U00002693\U000026A1\U000026AA\U000026AB\U000026BD\U000026BE"
    "\U000026C4\U000026C5\U000026CE\U000026D4\U000026EA\U000026F2\U000026F3"
    "\U000026F5\U000026FA\U000026FD\U00002705\U0000270A\U0000270B\U00002728"
    "\U0000274C\U0000274E\U00002753-\U00002755\U00002757\U00002764"
    "\U00002795-\U00002797\U000027B0\U000027BF"
    "\U00002B1B\U00002B1C\U00002B50\U00002B55"
    "]"
)

_ASCII_LETTER = re.compile(r"[A-Za-z]")
_PUNCTUATION_CLUSTER = re.compile(r"!{2,}|\${2,}|\?{2,}")


def text_length(text: str) -> int:
    """Length in UTF-16 code units, so an emoji outside the BMP counts as 2."""

    return len((text or "").encode("utf-16-le", "surrogatepass")) // 2


def caps_ratio(text: str) -> float:
    """Share of uppercase letters among ASCII letters only.

    Digits, punctuation, whitespace and non-ASCII letters are ignored. Text
    without ASCII letters scores 0.0.
    """

    letters = _ASCII_LETTER.findall(text or "")
    if not letters:
        return 0.0
    upper = sum(1 for ch in letters if ch.isupper())
    return upper / len(letters)


def detect_obfuscation(text: str) -> list[str]:
    """One finding per obfuscation style present in ``text``."""

    raw = text or ""
    return [message for pattern, message in _OBFUSCATION_STYLES if pattern.search(raw)]


def count_emoji(text: str) -> int:
    return len(_EMOJI_PATTERN.findall(text or ""))


def has_punctuation_cluster(text: str) -> bool:
    return bool(_PUNCTUATION_CLUSTER.search(text or ""))

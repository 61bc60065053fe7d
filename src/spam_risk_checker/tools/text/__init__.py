"""Text analysis tools."""

from spam_risk_checker.tools.text.features import (
    caps_ratio,
    count_emoji,
    detect_obfuscation,
    has_punctuation_cluster,
    text_length,
)
from spam_risk_checker.tools.text.lexicon import count_hits, matched_phrases

__all__ = [
    "caps_ratio",
    "count_emoji",
    "count_hits",
    "detect_obfuscation",
    "has_punctuation_cluster",
    "matched_phrases",
    "text_length",
]

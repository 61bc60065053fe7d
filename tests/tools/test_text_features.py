import pytest

from spam_risk_checker.tools.text.features import (
    caps_ratio,
    count_emoji,
    detect_obfuscation,
    has_punctuation_cluster,
    text_length,
)


def test_caps_ratio_counts_letters_only():
    assert caps_ratio("ABC def") == pytest.approx(0.5)
    assert caps_ratio("HI!!! 12345 ...") == pytest.approx(1.0)


def test_caps_ratio_without_letters_is_zero():
    assert caps_ratio("") == 0.0
    assert caps_ratio("123 !!! ???") == 0.0


def test_detect_obfuscation_spaced_letters():
    findings = detect_obfuscation("Get it F R E E today")
    assert len(findings) == 1
    assert "spaces" in findings[0]


def test_detect_obfuscation_dotted_letters():
    findings = detect_obfuscation("totally F.r.e.e money")
    assert len(findings) == 1
    assert "dots" in findings[0]


def test_detect_obfuscation_reports_each_style_once():
    findings = detect_obfuscation("F R E E and C A S H and F.r.e.e")
    assert len(findings) == 2


def test_detect_obfuscation_ignores_normal_text_and_short_runs():
    assert detect_obfuscation("A normal sentence, e.g. with U.S.A. in it") == []
    assert detect_obfuscation("I am a B C") == []


def test_count_emoji():
    assert count_emoji("great deal 🔥🔥💰🚀 now") == 4
    assert count_emoji("plain text") == 0


def test_punctuation_clusters():
    assert has_punctuation_cluster("wow!!") is True
    assert has_punctuation_cluster("cash $$$") is True
    assert has_punctuation_cluster("really??") is True
    assert has_punctuation_cluster("Hi! Is it $5? Yes.") is False


def test_caps_ratio_ignores_non_ascii_letters():
    assert caps_ratio("SALE été à prït") == pytest.approx(0.5)
    assert caps_ratio("ÉTÉ") == 0.0


def test_count_emoji_skips_arrows_checks_and_symbols():
    assert count_emoji("Features: ➤ fast ➤ cheap ✓ simple ⌘ keys ⮕ go") == 0
    assert count_emoji("done ✅ star ⭐ love ❤") == 3


def test_text_length_counts_utf16_units():
    assert text_length("abc") == 3
    assert text_length("🔥") == 2
    assert text_length("été") == 3
    assert text_length("") == 0

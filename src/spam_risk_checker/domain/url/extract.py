"""URL extraction and link classification."""

from __future__ import annotations

from urllib.parse import urlparse
import re

from spam_risk_checker.domain.url.models import LinkReport
from spam_risk_checker.tools.text.lexicon import is_shortener_host

URL_PATTERN = re.compile(r"https?://[^\s<>()\[\]{}\"']+", re.IGNORECASE)
_AFFILIATE_PARAM = re.compile(r"(?:^|&)(?:aff|ref)=", re.IGNORECASE)

MANY_LINKS_THRESHOLD = 3


def extract_urls(text: str) -> list[str]:
    """Every HTTP(S) token in ``text``, repeats included, in order of appearance."""

    return [item for item in URL_PATTERN.findall(text or "") if item.strip()]


def url_host(url: str) -> str:
    try:
        parsed = urlparse((url or "").strip())
        return (parsed.hostname or "").lower()
    except ValueError:
        return ""


def is_shortener_url(url: str) -> bool:
    return is_shortener_host(url_host(url))


def is_affiliate_url(url: str) -> bool:
    """``aff=`` or ``ref=`` as a query parameter; the path and fragment are not checked."""

    try:
        query = urlparse((url or "").strip()).query
    except ValueError:
        return False
    return bool(_AFFILIATE_PARAM.search(query))


def analyze_links(text: str) -> LinkReport:
    """Classify all links in a body of text."""

    urls = extract_urls(text)
    has_shortener = any(is_shortener_url(item) for item in urls)
    has_affiliate = any(is_affiliate_url(item) for item in urls)

    findings: list[str] = []
    if has_shortener:
        findings.append("Link shorteners hide the destination and are often filtered.")
    if has_affiliate:
        findings.append("Affiliate or referral tagged links (aff=/ref=) look like paid promotion.")
    if len(urls) > MANY_LINKS_THRESHOLD:
        findings.append(f"Contains {len(urls)} links; link-heavy posts are frequently flagged.")

    return LinkReport(
        urls=tuple(urls),
        has_shortener=has_shortener,
        has_affiliate=has_affiliate,
        findings=tuple(findings),
    )

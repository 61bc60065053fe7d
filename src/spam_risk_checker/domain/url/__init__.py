"""URL extraction and link models."""

from spam_risk_checker.domain.url.extract import (
    analyze_links,
    extract_urls,
    is_affiliate_url,
    is_shortener_url,
    url_host,
)
from spam_risk_checker.domain.url.models import LinkReport

__all__ = [
    "LinkReport",
    "analyze_links",
    "extract_urls",
    "is_affiliate_url",
    "is_shortener_url",
    "url_host",
]

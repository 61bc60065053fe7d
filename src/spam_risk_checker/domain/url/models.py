"""URL domain-level models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LinkReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    urls: tuple[str, ...] = ()
    has_shortener: bool = False
    has_affiliate: bool = False
    findings: tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return len(self.urls)

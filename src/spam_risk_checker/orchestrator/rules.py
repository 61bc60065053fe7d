"""Rule outcome type shared by platform and universal scorers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RuleHit:
    rule: str
    points: int
    reasons: tuple[str, ...] = ()


Rule = Callable[[T], RuleHit | None]


def hit(rule: str, points: int, *reasons: str) -> RuleHit:
    return RuleHit(rule=rule, points=int(points), reasons=tuple(reasons))


def run_rules(rules: tuple[Rule[T], ...], item: T) -> list[RuleHit]:
    """Apply each rule in order and keep the ones that fired."""

    hits: list[RuleHit] = []
    for rule in rules:
        outcome = rule(item)
        if outcome is not None:
            hits.append(outcome)
    return hits

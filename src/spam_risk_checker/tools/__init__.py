"""Deterministic text tooling shared by the scoring rules."""

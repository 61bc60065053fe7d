"""Custom exceptions for spam_risk_checker."""


class SpamRiskError(Exception):
    """Base exception for application-level errors."""


class ConfigError(SpamRiskError):
    """Raised when configuration cannot be loaded or validated."""


class InputError(SpamRiskError):
    """Raised when a raw analysis payload cannot be turned into an input model."""

"""Custom exceptions for novel catalog."""


class NovelCatalogError(Exception):
    """Base exception for novel catalog errors."""
    pass


class ValidationError(NovelCatalogError, ValueError):
    """Raised when caller-supplied data violates a catalog constraint."""
    pass


class InvariantViolation(NovelCatalogError, RuntimeError):
    """Raised when an internal self-check fails.

    This signals a defect in the seed data or population logic rather than
    bad input, and is not meant to be caught and retried.
    """
    pass


class ConfigurationError(NovelCatalogError):
    """Raised when there's an error in configuration."""
    pass

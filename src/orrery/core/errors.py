from __future__ import annotations


class DomainError(ValueError):
    """Input lies outside the range the orbital solver can handle."""


class InvalidArgumentError(ValueError):
    """Caller passed an argument the operation does not accept."""

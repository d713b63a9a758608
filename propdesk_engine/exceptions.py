# ## File: propdesk_engine/exceptions.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Exception hierarchy for the Proposal Desk derivation engine.
#          Every error the engine surfaces to the host is one of these.


class PropdeskException(Exception):
    """Base exception for all Proposal Desk engine errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ValidationError(PropdeskException):
    """Raised when caller input is rejected (bad preset name, malformed colour...)."""
    pass


class NotFoundError(PropdeskException):
    """Raised when a named preset, theme or pattern does not exist."""
    pass


class PersistenceError(PropdeskException):
    """Raised when the preference store cannot be written."""
    pass

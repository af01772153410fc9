# backend/player_profile/core/exceptions.py
"""
Error kinds raised by the service and data-access layers.

Each layer adds its own context with ``wrap`` on the way up; the kind of the
error (not-found, conflict, ...) never changes while it propagates.
"""


class ProfileError(Exception):
    """Base class for every player-profile failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def wrap(self, context: str) -> "ProfileError":
        """Returns a new error of the same kind with ``context`` prefixed."""
        wrapped = type(self)(f"{context}: {self.message}")
        wrapped.__cause__ = self
        return wrapped

    def __str__(self) -> str:
        return self.message


class ValidationError(ProfileError):
    """A required identifying field is missing or empty."""


class NotFoundError(ProfileError):
    """No active player matches the lookup."""


class ConflictError(ProfileError):
    """An active player already holds the requested nickname."""


class StoreError(ProfileError):
    """The relational store rejected or failed a statement."""

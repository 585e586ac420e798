"""Upgrader exception hierarchy.

Lookup misses are not errors: an unsupported language resolves to None.
Exceptions are reserved for programming errors at the API boundary.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "InvalidOverrideError",
    "UnknownMessageError",
    "UpgraderError",
]


class UpgraderError(Exception):
    """Base exception for all upgrader errors."""


class UnknownMessageError(UpgraderError, ValueError):
    """Message identifier is not one of the UpgraderMessage members.

    Attributes:
        message_id: The rejected identifier, as given by the caller
    """

    def __init__(self, message_id: object) -> None:
        """Initialize UnknownMessageError.

        Args:
            message_id: The identifier that failed to coerce
        """
        super().__init__(f"Unknown upgrader message identifier: {message_id!r}")
        self.message_id = message_id


class InvalidOverrideError(UpgraderError, TypeError):
    """Override value is neither a string nor a callable resolver."""

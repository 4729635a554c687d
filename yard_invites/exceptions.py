"""
Exceptions raised by the invitation notifier.
"""

from typing import List, Optional


class NotifierError(Exception):
    """Base class for notifier errors."""


class InvitationValidationError(NotifierError, ValueError):
    """
    Raised when an invitation payload is missing or has malformed fields.

    Attributes:
        missing_fields: Required fields that were absent or falsy
        invalid_fields: Fields that were present but of the wrong type
    """

    def __init__(
        self,
        missing_fields: Optional[List[str]] = None,
        invalid_fields: Optional[List[str]] = None,
    ) -> None:
        self.missing_fields = list(missing_fields or [])
        self.invalid_fields = list(invalid_fields or [])
        if self.missing_fields:
            message = "Missing required fields: " + ", ".join(self.missing_fields)
        else:
            message = "Invalid fields: " + ", ".join(self.invalid_fields)
        super().__init__(message)


class ConfigurationError(NotifierError, ValueError):
    """Raised when an explicitly requested delivery backend lacks credentials."""

"""
Result type for soft failures.

Provides a standardized way to report success/failure from registration
calls without raising.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class InitResult:
    """
    Result of a registration or initializer lookup.

    Truthy on success and falsy on failure, so callers that only care
    about the boolean outcome can keep writing ``if group.add(...)``.

    Attributes:
        success: True if the operation succeeded, False otherwise
        message: Optional error or success message
        data: Optional result data
    """

    success: bool
    message: str | None = None
    data: dict[str, Any] | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, message: str | None = None, data: dict[str, Any] | None = None) -> "InitResult":
        """
        Create a successful result.

        Args:
            message: Optional success message
            data: Optional result data

        Returns:
            InitResult with success=True
        """
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str, data: dict[str, Any] | None = None) -> "InitResult":
        """
        Create an error result.

        Args:
            message: Error message
            data: Optional error data

        Returns:
            InitResult with success=False
        """
        return cls(success=False, message=message, data=data)

"""
Custom Exceptions for ClickNGoAI

Hierarchical exception classes for proper error handling across layers.
"""

from typing import Optional, Dict, Any


class ClickNGoAIError(Exception):
    """Base exception for all ClickNGoAI errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ValidationError(ClickNGoAIError):
    """Raised when input validation fails."""
    pass


class AccessDeniedError(ClickNGoAIError):
    """Raised when an authenticated user may not act on a resource."""

    def __init__(
        self,
        message: str = "Access denied",
        required_role: Optional[str] = None,
    ):
        details = {}
        if required_role:
            details["required_role"] = required_role
        super().__init__(message, details)


class QuotaExceededError(ClickNGoAIError):
    """Raised when a user has reached the app limit of their plan."""

    def __init__(self, limit: int):
        super().__init__(
            f"App limit reached. You can create up to {limit} apps with your current plan.",
            details={"limit": limit},
        )
        self.limit = limit


class DatabaseError(ClickNGoAIError):
    """Raised when database operations fail."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        table: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table
        super().__init__(message, details, original_error)


class NotFoundError(DatabaseError):
    """Raised when a requested resource is not found."""
    pass


class AIServiceError(ClickNGoAIError):
    """Raised when AI (Gemini) operations fail."""

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if model:
            details["model"] = model
        if operation:
            details["operation"] = operation
        super().__init__(message, details, original_error)


class ConfigurationError(ClickNGoAIError):
    """Raised when configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        missing_keys: Optional[list] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if missing_keys:
            details["missing_keys"] = missing_keys
        super().__init__(message, details, original_error)

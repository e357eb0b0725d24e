"""
Exception Hierarchy for Resource Doc Generator

All errors raised while loading resource records, rendering pages or writing
them out derive from ResourceDocGenError so the CLI can report them uniformly.
"""

from typing import Any, Dict, Optional


class ResourceDocGenError(Exception):
    """
    Base exception class for all resource documentation errors.

    Provides structured error information including context, error codes,
    and optional recovery suggestions.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        recovery_suggestion: Optional[str] = None,
    ) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional dictionary with error context
            cause: Optional underlying exception that caused this error
            recovery_suggestion: Optional suggestion for error recovery
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause
        self.recovery_suggestion = recovery_suggestion

    def __str__(self) -> str:
        """Return a formatted error message with context."""
        result = self.message
        if self.error_code:
            result = f"[{self.error_code}] {result}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            result += f" (context: {context_str})"
        if self.cause:
            result += f" (caused by: {self.cause})"
        if self.recovery_suggestion:
            result += f" (suggestion: {self.recovery_suggestion})"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None,
            "recovery_suggestion": self.recovery_suggestion,
        }


class RecordSourceError(ResourceDocGenError):
    """Raised when the resource inspection data cannot be obtained or parsed."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs: Any) -> None:
        context = kwargs.get("context", {})
        if source:
            context["source"] = source
        kwargs["context"] = context
        kwargs.setdefault("error_code", "RECORD_SOURCE_FAILED")
        kwargs.setdefault(
            "recovery_suggestion",
            "Check that the inspector output is a JSON object keyed by resource name",
        )
        super().__init__(message, **kwargs)


class InvalidResourceRecordError(ResourceDocGenError):
    """Raised when a single resource record is missing required fields."""

    def __init__(
        self, message: str, resource_name: Optional[str] = None, **kwargs: Any
    ) -> None:
        context = kwargs.get("context", {})
        if resource_name is not None:
            context["resource_name"] = resource_name
        kwargs["context"] = context
        kwargs.setdefault("error_code", "INVALID_RESOURCE_RECORD")
        super().__init__(message, **kwargs)


class DocumentWriteError(ResourceDocGenError):
    """Raised when a rendered page cannot be written to disk."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs: Any) -> None:
        context = kwargs.get("context", {})
        if path:
            context["path"] = path
        kwargs["context"] = context
        kwargs.setdefault("error_code", "DOCUMENT_WRITE_FAILED")
        kwargs.setdefault(
            "recovery_suggestion",
            "Check that the output directory exists and is writable",
        )
        super().__init__(message, **kwargs)


class ConfigurationError(ResourceDocGenError):
    """Raised when configuration is invalid."""

    def __init__(
        self, message: str, config_key: Optional[str] = None, **kwargs: Any
    ) -> None:
        context = kwargs.get("context", {})
        if config_key:
            context["config_key"] = config_key
        kwargs["context"] = context
        kwargs.setdefault("error_code", "CONFIG_INVALID")
        super().__init__(message, **kwargs)

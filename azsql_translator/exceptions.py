"""
Exception hierarchy for the Azure SQL property translator.

The translator itself never raises: unknown enum values fall back to defaults.
These exceptions belong to the layers around it (configuration, manifest
loading and the opt-in strict validation).
"""

from typing import Any, Dict, Optional


class AzureSqlTranslatorError(Exception):
    """
    Base exception class for all translator related errors.

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


class ConfigError(AzureSqlTranslatorError):
    """Raised when configuration cannot be loaded or is invalid."""

    def __init__(
        self, message: str, config_path: Optional[str] = None, **kwargs: Any
    ) -> None:
        context = kwargs.get("context", {})
        if config_path:
            context["config_path"] = config_path
        kwargs["context"] = context
        kwargs.setdefault("error_code", "CONFIG_ERROR")
        super().__init__(message, **kwargs)


class ManifestError(AzureSqlTranslatorError):
    """Raised when a custom-resource manifest document cannot be read."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        document_index: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.get("context", {})
        if source:
            context["source"] = source
        if document_index is not None:
            context["document_index"] = document_index
        kwargs["context"] = context
        kwargs.setdefault("error_code", "MANIFEST_ERROR")
        kwargs.setdefault(
            "recovery_suggestion",
            "Each YAML document must be a mapping with 'kind' and 'spec'",
        )
        super().__init__(message, **kwargs)


# Strict validation exceptions
class ValidationError(AzureSqlTranslatorError):
    """Base class for strict validation failures."""

    pass


class UnknownEditionError(ValidationError):
    """Raised in strict mode for an edition the translator would default."""

    def __init__(self, message: str, edition: Any = None, **kwargs: Any) -> None:
        context = kwargs.get("context", {})
        context["edition"] = edition
        kwargs["context"] = context
        kwargs.setdefault("error_code", "UNKNOWN_EDITION")
        kwargs.setdefault(
            "recovery_suggestion",
            "Use an edition ordinal between 0 and 13 or an edition name",
        )
        super().__init__(message, **kwargs)


class UnknownFailoverPolicyError(ValidationError):
    """Raised in strict mode for a failover policy the translator would default."""

    def __init__(self, message: str, policy: Any = None, **kwargs: Any) -> None:
        context = kwargs.get("context", {})
        context["failover_policy"] = policy
        kwargs["context"] = context
        kwargs.setdefault("error_code", "UNKNOWN_FAILOVER_POLICY")
        kwargs.setdefault(
            "recovery_suggestion", "Use 'Automatic' or 'Manual' as failover policy"
        )
        super().__init__(message, **kwargs)


class InvalidPropertiesError(ValidationError):
    """Raised in strict mode for structurally incomplete properties."""

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs: Any) -> None:
        context = kwargs.get("context", {})
        if field_name:
            context["field"] = field_name
        kwargs["context"] = context
        kwargs.setdefault("error_code", "INVALID_PROPERTIES")
        super().__init__(message, **kwargs)

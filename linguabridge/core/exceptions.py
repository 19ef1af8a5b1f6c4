"""
Exception hierarchy for LinguaBridge.

Only InvalidRequest and SameLanguageError ever leave the resolution engine.
ProviderFailure and AllProvidersExhausted are raised and recovered inside it.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, List


class LinguaBridgeError(Exception):
    """Base exception for all LinguaBridge errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        recoverable: bool = False,
        suggestion: Optional[str] = None
    ):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            details: Additional error details
            recoverable: Whether error can be recovered from
            suggestion: Suggested fix or workaround
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable
        self.suggestion = suggestion

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
            "suggestion": self.suggestion
        }

    def __str__(self) -> str:
        result = self.message
        if self.suggestion:
            result += f"\nSuggestion: {self.suggestion}"
        return result


class InvalidRequest(LinguaBridgeError):
    """Raised when a request has no usable message or language identifiers."""

    def __init__(self, message: str, field: Optional[str] = None):
        """
        Args:
            message: Error message
            field: Request field that failed validation
        """
        suggestion = None
        if field == "message":
            suggestion = "Send a non-empty message of at most 500 characters"
        elif field in ("source_lang", "target_lang"):
            suggestion = "Both source and target languages must be specified"

        super().__init__(message, {"field": field}, recoverable=False, suggestion=suggestion)
        self.field = field


class SameLanguageError(LinguaBridgeError):
    """Raised when source and target normalize to the same language."""

    def __init__(self, language: str):
        super().__init__(
            "Source and target languages cannot be the same",
            {"language": language},
            recoverable=False,
            suggestion="Pick a different target language"
        )
        self.language = language


class ProviderFailure(LinguaBridgeError):
    """Raised by a provider adapter when it cannot produce a candidate."""

    def __init__(
        self,
        provider: str,
        message: str,
        original_error: Optional[Exception] = None,
        status_code: Optional[int] = None
    ):
        """
        Initialize provider failure.

        Args:
            provider: Provider name
            message: Error message
            original_error: Original exception if any
            status_code: HTTP status code if the provider answered
        """
        full_message = f"Provider '{provider}' failed: {message}"
        details = {
            "provider": provider,
            "original_error": str(original_error) if original_error else None,
            "status_code": status_code
        }
        super().__init__(full_message, details, recoverable=True)
        self.provider = provider
        self.original_error = original_error
        self.status_code = status_code


class AllProvidersExhausted(LinguaBridgeError):
    """Raised when every routed provider failed or was filtered out."""

    def __init__(self, providers: List[str], failures: Optional[Dict[str, str]] = None):
        super().__init__(
            f"All translation providers failed ({', '.join(providers) or 'none routed'})",
            {"providers": providers, "failures": failures or {}},
            recoverable=True,
            suggestion="A synthetic fallback response is returned instead"
        )
        self.providers = providers
        self.failures = failures or {}


class ConfigurationError(LinguaBridgeError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        invalid_value: Optional[Any] = None,
        valid_values: Optional[List[Any]] = None
    ):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_key: Configuration key that's invalid
            invalid_value: Invalid value provided
            valid_values: List of valid values
        """
        details = {
            "config_key": config_key,
            "invalid_value": invalid_value,
            "valid_values": valid_values
        }

        suggestion = None
        if config_key and valid_values:
            suggestion = f"Valid values for {config_key}: {', '.join(map(str, valid_values))}"
        elif config_key:
            suggestion = f"Check configuration for '{config_key}'"

        super().__init__(message, details, recoverable=False, suggestion=suggestion)
        self.config_key = config_key
        self.invalid_value = invalid_value
        self.valid_values = valid_values

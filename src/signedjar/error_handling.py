"""
Standardized Error Handling for signedjar
=========================================

This module provides the exception hierarchy and error conversion helpers used
across signing, verification, key loading and configuration.

Verification failures have their own branch of the hierarchy. The three kinds
stay distinct for diagnostics and tests, but the public verification API never
surfaces them: callers only ever see "authenticated" or ``None``.
"""

import functools
import logging
from typing import Any, Callable, Dict, Optional, Type

logger = logging.getLogger(__name__)


class SignedJarError(Exception):
    """Base exception for all signedjar errors."""

    log_level = logging.ERROR

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.context = context or {}
        super().__init__(message)

        # Log error with context for debugging
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        logger.log(
            self.log_level,
            f"signedjar error: {message}" + (f" ({context_str})" if context_str else ""),
        )


class SignedJarConfigurationError(SignedJarError):
    """Raised when signing configuration is invalid."""

    pass


class KeyLengthError(SignedJarError):
    """Raised when key material has the wrong length."""

    pass


class KeyFileError(SignedJarError):
    """Raised when a key file cannot be read or written."""

    pass


class VerificationError(SignedJarError):
    """
    Base class for the reasons a framed value is rejected.

    Rejections are routine under attack, so they are logged at DEBUG only.
    """

    log_level = logging.DEBUG


class MalformedFramingError(VerificationError):
    """The value is too short or the split point falls inside a character."""

    pass


class BadDigestEncodingError(VerificationError):
    """The tag segment is not the canonical base64 encoding of a 32-byte tag."""

    pass


class VerificationFailedError(VerificationError):
    """The tag decoded cleanly but does not match the value."""

    pass


def with_error_handling(
    error_type: Type[SignedJarError] = SignedJarError,
    context: Optional[Dict[str, Any]] = None,
    reraise: bool = True,
    default_return: Any = None,
):
    """
    Decorator converting foreign exceptions into signedjar errors.

    Args:
        error_type: Type of SignedJarError to raise
        context: Additional context to include in error
        reraise: Whether to reraise the exception after logging
        default_return: Value to return if not reraising
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SignedJarError:
                raise
            except Exception as e:
                error_context = (context or {}).copy()
                error_context.update(
                    {
                        "function": func.__name__,
                        "original_error": str(e),
                        "original_error_type": type(e).__name__,
                    }
                )

                error_msg = f"Error in {func.__name__}: {e}"
                converted = error_type(error_msg, error_context)

                if reraise:
                    raise converted from e
                logger.warning(f"Suppressed error in {func.__name__}: {e}")
                return default_return

        return wrapper

    return decorator

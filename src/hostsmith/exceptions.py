"""
hostsmith custom exceptions and error handling utilities.

This module provides the exception hierarchy used across hostsmith together
with a couple of helpers for consistent error reporting.
"""

from __future__ import annotations

import logging
import traceback
from functools import wraps
from typing import Any, Dict, Optional


class HostsmithError(Exception):
    """Base exception for all hostsmith-related errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class HostsmithConfigError(HostsmithError):
    """Raised when there's an issue with hostsmith configuration."""

    pass


class SourceUnavailableError(HostsmithError):
    """Raised when the backing hosts file cannot be read."""

    pass


class HostsWriteError(HostsmithError):
    """Raised when the hosts file cannot be written back."""

    pass


class HostsEntryError(HostsmithError):
    """Raised when a hostname entry is rejected by the store."""

    def __init__(self, message: str, domain: str, ip: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.domain = domain
        self.ip = ip


class DuplicateEntryError(HostsEntryError):
    """The domain is already bound to the very same address."""

    def __init__(self, domain: str, ip: str):
        super().__init__(
            f"Duplicate hostname entry for {domain} -> {ip}",
            domain,
            ip,
            {"domain": domain, "ip": ip},
        )


class ConflictingEntryError(HostsEntryError):
    """The domain is already bound to a different address."""

    def __init__(self, domain: str, ip: str, existing_ip: str):
        super().__init__(
            f"Conflicting hostname entries for {domain} -> {ip} and -> {existing_ip}",
            domain,
            ip,
            {"domain": domain, "ip": ip, "existing_ip": existing_ip},
        )
        self.existing_ip = existing_ip


class ErrorHandler:
    """Centralized error handling utilities."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def log_and_raise(
        self,
        exception_class: type[HostsmithError],
        message: str,
        original_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an error and raise a hostsmith exception."""
        error_details = details or {}

        if original_error:
            error_details["original_error"] = str(original_error)
            error_details["original_type"] = type(original_error).__name__

        self.logger.error(f"❌ {message}")
        if original_error:
            self.logger.debug(f"Original error: {original_error}")
            self.logger.debug(f"Traceback: {traceback.format_exc()}")

        raise exception_class(message, error_details) from original_error


def handle_errors(
    exception_class: type[HostsmithError] = HostsmithError,
    logger: Optional[logging.Logger] = None,
):
    """Decorator for standardized error handling."""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            handler = ErrorHandler(logger)
            try:
                return func(*args, **kwargs)
            except HostsmithError:
                # Re-raise hostsmith errors as-is
                raise
            except Exception as e:
                handler.log_and_raise(exception_class, f"Error in {func.__name__}: {e}", e)

        return wrapper

    return decorator


def format_error_message(error: Exception, include_traceback: bool = False) -> str:
    """Format error messages consistently."""
    if isinstance(error, HostsmithError):
        message = f"hostsmith error: {error.message}"
        if error.details:
            details = ", ".join(f"{k}={v}" for k, v in error.details.items())
            message += f" ({details})"
    else:
        message = f"{type(error).__name__}: {str(error)}"

    if include_traceback:
        message += f"\n{traceback.format_exc()}"

    return message

"""
Custom exception classes for the modinfo build-info codec

This module defines structured exceptions that provide detailed error information
for build-info decoding failures and configuration problems.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class ModInfoException(Exception):
    """
    Base exception class for all modinfo-specific errors

    Provides structured error information that can be easily converted
    to a serializable error payload.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "MODINFO_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for error reporting"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat()
        }


class FormatError(ModInfoException):
    """
    Raised when embedded build-info text is malformed

    Covers bad column counts on mod/dep and replacement lines, and
    replacement lines with no module on the previous line. The line
    number is 1-based over the whole input.
    """

    def __init__(self, line: int, cause: str):
        super().__init__(
            message=f"could not parse build info: line {line}: {cause}",
            error_code="FORMAT_ERROR",
            details={"line": line, "cause": cause}
        )
        self.line = line
        self.cause = cause


class ConfigurationError(ModInfoException):
    """
    Raised when configuration values are invalid

    Includes unknown log levels and unsupported environment names.
    """

    def __init__(self, message: str, config_key: str = None, config_value: Any = None):
        details = {}
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = str(config_value)

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=details
        )

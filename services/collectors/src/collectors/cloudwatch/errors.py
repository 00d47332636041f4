"""Errors raised by the log action handlers.

Each subclass is reported against the refId that raised it; nothing here is
retried.
"""
from __future__ import annotations


class LogActionError(Exception):
    error_type = "LogActionError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidTimeRange(LogActionError):
    error_type = "InvalidTimeRange"


class InvalidParameters(LogActionError):
    error_type = "InvalidParameters"


class UnrecognizedAction(LogActionError):
    error_type = "UnrecognizedAction"

    def __init__(self, action: str):
        super().__init__(f"Unrecognized log action: {action}")
        self.action = action


class RemoteServiceError(LogActionError):
    """A failure returned by CloudWatch Logs; message is the service's own."""

    error_type = "RemoteServiceError"

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code

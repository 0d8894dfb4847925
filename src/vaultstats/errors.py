"""Structured error codes for vaultstats tools.

Pure functions raise standard Python exceptions (FileNotFoundError,
NotADirectoryError, PermissionError, ValueError, FileExistsError). The FastMCP
registration wrappers and the CLI catch these and turn them into structured
error strings.

Error string format: "ERROR [{CODE}]: {message}"
"""
from enum import Enum


class ErrorCode(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    OUTSIDE_VAULT = "OUTSIDE_VAULT"
    ACCESS_DENIED = "ACCESS_DENIED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


NOT_FOUND = ErrorCode.NOT_FOUND
ALREADY_EXISTS = ErrorCode.ALREADY_EXISTS
OUTSIDE_VAULT = ErrorCode.OUTSIDE_VAULT
ACCESS_DENIED = ErrorCode.ACCESS_DENIED
INVALID_ARGUMENT = ErrorCode.INVALID_ARGUMENT


def error(code: ErrorCode, message: str) -> str:
    """Format a structured error string for tool return values."""
    return f"ERROR [{code.value}]: {message}"


def root_error(exc: OSError) -> str:
    """Map a fatal vault-root exception to its structured error string."""
    if isinstance(exc, PermissionError):
        return error(ACCESS_DENIED, str(exc))
    if isinstance(exc, FileNotFoundError):
        return error(NOT_FOUND, str(exc))
    return error(INVALID_ARGUMENT, str(exc))

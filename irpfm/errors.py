"""Error codes and exceptions raised while processing input."""

from enum import IntEnum
from typing import Optional


class ErrorCode(IntEnum):
    """Numbered error categories."""

    SYNTAX = 0
    TYPE = 1
    UNDEFINED = 2
    REDECLARED = 3
    SCOPE = 4
    PARAM = 5
    RETURN = 6
    EXPRESSION = 7
    MEMORY = 8
    FILE = 9
    TOKEN = 10
    UNEXPECTED = 11
    LIMIT = 12
    INTERNAL = 13

    def describe(self) -> str:
        """Return the human-readable description of this code."""
        return _DESCRIPTIONS.get(self, _UNKNOWN)


_UNKNOWN = "unknown error"

# RETURN has no description of its own and reports as unknown.
_DESCRIPTIONS = {
    ErrorCode.SYNTAX: "syntax error",
    ErrorCode.TYPE: "type mismatch",
    ErrorCode.UNDEFINED: "undefined identifier",
    ErrorCode.REDECLARED: "identifier redeclared",
    ErrorCode.SCOPE: "invalid scope",
    ErrorCode.PARAM: "parameter error",
    ErrorCode.EXPRESSION: "invalid expression",
    ErrorCode.MEMORY: "memory allocation failed",
    ErrorCode.FILE: "file operation failed",
    ErrorCode.TOKEN: "invalid token",
    ErrorCode.UNEXPECTED: "unexpected token/symbol",
    ErrorCode.LIMIT: "limit exceeded",
    ErrorCode.INTERNAL: "internal compiler error",
}


def error_message(code: int) -> str:
    """Format the report line for a numbered error."""
    try:
        description = ErrorCode(code).describe()
    except ValueError:
        description = _UNKNOWN
    return f"error {int(code)}: {description}"


class IrpError(Exception):
    """A fatal processing error with an optional detail."""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message, detail)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        if self.detail is None:
            return self.message
        return f"{self.message}: {self.detail}"


class CodedError(IrpError):
    """An error identified by an :class:`ErrorCode` number."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(error_message(code))
"""Error codes and the exception raised for fatal scene problems."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Numeric codes for the ways loading or rendering a scene can fail."""

    NO_INPUT = 0
    CANNOT_OPEN_FILE = 1
    FILE_TYPE = 2
    PARSE = 3
    NO_ELEMENT = 4


_MESSAGES = {
    ErrorCode.NO_INPUT: "no file input",
    ErrorCode.CANNOT_OPEN_FILE: "cannot open file",
    ErrorCode.PARSE: "parsing error",
}


def error_message(code: int) -> str:
    """Return the user-facing message for an error code."""
    message = _MESSAGES.get(code)
    if message is None:
        return f"error not specified yet : {int(code)}"
    return message


class MiniRTError(Exception):
    """A fatal error; the command reports its message and exits with status 1."""

    exit_status = 1

    def __init__(self, code: int, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        message = error_message(code)
        super().__init__(message if detail is None else f"{message}: {detail}")

    @property
    def message(self) -> str:
        """The message that belongs to this error's code."""
        return error_message(self.code)
# =====================================================================
# File: tokargs_pkg/core/errors.py
# Error taxonomy and canned, argument-anchored messages
# =====================================================================
from __future__ import annotations
from typing import Optional


class TokargsError(Exception):
    """Base class for every error raised by tokargs."""


class ConfigError(TokargsError):
    """Unreadable or invalid configuration."""


class ArgError(TokargsError):
    """
    An error anchored at one command-line argument.
    `arg` is the offending argument as the user typed it, or None when
    nothing had been consumed yet.
    """

    def __init__(self, arg: Optional[str]):
        self.arg = arg
        super().__init__(self.message())

    def message(self) -> str:
        return f"invalid argument {self.arg!r}"


class MissingValue(ArgError):
    def message(self) -> str:
        if self.arg is None:
            return "missing value"
        return f"missing value after argument {self.arg!r}"


class UnexpectedArgument(ArgError):
    def message(self) -> str:
        return f"unexpected argument {self.arg!r}"


class MalformedArgument(ArgError):
    def __init__(self, arg: Optional[str], fragment: str):
        self.fragment = fragment
        super().__init__(arg)

    def message(self) -> str:
        return f"malformed argument {self.arg!r}: unexpected {self.fragment!r}"


class ParseError(ArgError):
    def __init__(self, arg: Optional[str], cause: BaseException):
        self.cause = cause
        super().__init__(arg)

    def message(self) -> str:
        return f"error parsing argument {self.arg!r}: {self.cause}"

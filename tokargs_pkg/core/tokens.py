# =====================================================================
# File: tokargs_pkg/core/tokens.py
# Token and outcome types produced by Parser.next()
# =====================================================================
from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import Union

from .errors import ArgError


@dataclass(frozen=True)
class Short:
    """One single-character flag, possibly taken out of a cluster like -abc."""
    char: str

    def __str__(self) -> str:
        return f"-{self.char}"


@dataclass(frozen=True)
class Long:
    """A --name option; an attached =value is left for Parser.value()."""
    name: str

    def __str__(self) -> str:
        return f"--{self.name}"


@dataclass(frozen=True)
class Value:
    """A positional argument (including the bare "-")."""
    text: str

    def __str__(self) -> str:
        return self.text


class End:
    """No more tokens. Use the END singleton."""

    def __repr__(self) -> str:
        return "END"

    def __bool__(self) -> bool:
        return False


END = End()


@dataclass(frozen=True, eq=False)
class Failure:
    """Latched malformed-input outcome; the same instance is returned until discarded."""
    error: ArgError

    def __str__(self) -> str:
        return str(self.error)


class State(enum.Enum):
    IDLE = "idle"
    CLUSTER = "cluster"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


Token = Union[Short, Long, Value]
Outcome = Union[Short, Long, Value, End, Failure]

# =====================================================================
# File: tokargs_pkg/core/parser.py
# Tokenizer/cursor over an argument vector (short, long, value tokens)
# Schema-free: callers match tokens themselves and pull values on demand
# =====================================================================
from __future__ import annotations
import sys
from typing import Iterator, List, Optional, Sequence

from .config import ParserConfig
from .errors import MalformedArgument, MissingValue
from .tokens import END, Failure, Long, Outcome, Short, State, Token, Value
from ..utils.constants import AFTER_DASH_STOP


class Parser:
    """
    Walk an argument vector one token at a time.

    The cursor is (index, offset): index selects args[index], offset is 0 at
    the start of an argument and nonzero inside a short-option cluster or
    after an attached "=value". offset never equals len(args[index]); the
    cursor moves to the next argument instead. args[0] is the program name
    and is skipped.

    next() returns a Short, Long or Value token, END, or a latched Failure.
    value() and values() raise MissingValue when nothing is left. The
    parser never prints or logs.
    """

    def __init__(self, args: Sequence[str], config: Optional[ParserConfig] = None):
        self.args = args
        self.config = config or ParserConfig()
        self.index = min(1, len(args))
        self.offset = 0
        self._last: Optional[int] = None
        self._pending_empty = False   # "--name=" / "-c=" left an empty value
        self._stopped = False         # "--" seen, stop policy
        self._positional = False      # "--" seen, values policy
        self._failure: Optional[Failure] = None

    @classmethod
    def from_argv(cls, config: Optional[ParserConfig] = None) -> "Parser":
        return cls(sys.argv, config)

    # ------------------------------ Inspection ------------------------------
    @property
    def bin_name(self) -> Optional[str]:
        return self.args[0] if self.args else None

    @property
    def last_arg(self) -> Optional[str]:
        """The argument currently or most recently under the cursor."""
        if self._last is None:
            return None
        return self.args[self._last]

    @property
    def state(self) -> State:
        if self._failure is not None:
            return State.FAILED
        if self._stopped or self.index >= len(self.args):
            return State.EXHAUSTED
        if self.offset:
            return State.CLUSTER
        return State.IDLE

    # ------------------------------ Cursor ------------------------------
    def _advance(self):
        self.index += 1
        self.offset = 0

    def _attach(self, offset: int):
        """Point the cursor at an attached value starting at `offset`."""
        if offset >= len(self.args[self.index]):
            self._advance()
            self._pending_empty = True
        else:
            self.offset = offset

    # ------------------------------ Tokens ------------------------------
    def next(self) -> Outcome:
        if self._failure is not None:
            return self._failure
        # An empty attached value the caller did not ask for is dropped
        self._pending_empty = False
        if self._stopped or self.index >= len(self.args):
            return END

        arg = self.args[self.index]
        self._last = self.index
        if self.offset:
            return self._next_in_cluster(arg)

        if self._positional:
            self._advance()
            return Value(arg)

        if arg.startswith("--"):
            if arg == "--":
                self._advance()
                if self.config.after_double_dash == AFTER_DASH_STOP:
                    self._stopped = True
                    return END
                self._positional = True
                return self.next()
            name, eq, _ = arg[2:].partition("=")
            if eq:
                self._attach(len(name) + 3)
            else:
                self._advance()
            return Long(name)

        if arg.startswith("-"):
            if len(arg) == 1:
                self._advance()
                return Value(arg)
            if len(arg) == 2:
                self._advance()
            elif arg[2] == "=":
                self._attach(3)
            else:
                self.offset = 2
            return Short(arg[1])

        self._advance()
        return Value(arg)

    def _next_in_cluster(self, arg: str) -> Outcome:
        rest = arg[self.offset:]
        if rest.startswith("--"):
            self._failure = Failure(MalformedArgument(arg, rest))
            return self._failure

        char = arg[self.offset]
        if self.offset + 1 >= len(arg):
            self._advance()
        else:
            self.offset += 1
        return Short(char)

    def __iter__(self) -> Iterator[Token]:
        while True:
            outcome = self.next()
            if isinstance(outcome, Failure):
                raise outcome.error
            if outcome is END:
                return
            yield outcome

    # ------------------------------ Values ------------------------------
    def value(self) -> str:
        """Consume the rest of the current argument, or the next whole one."""
        if self._pending_empty:
            self._pending_empty = False
            return ""
        if self.index >= len(self.args):
            raise MissingValue(self.last_arg)

        arg = self.args[self.index]
        self._last = self.index
        value = arg[self.offset:]
        self._advance()
        return value

    def values(self) -> List[str]:
        """
        Consume a run of values. A partly consumed argument yields only its
        remainder. Otherwise the current argument is always taken, followed
        by every argument up to the next one starting with "-".
        """
        if self.offset or self._pending_empty:
            return [self.value()]

        collected: List[str] = []
        while self.index < len(self.args):
            arg = self.args[self.index]
            if collected and arg.startswith("-") and not self._positional:
                break
            collected.append(arg)
            self._last = self.index
            self._advance()
        return collected

    def rest(self) -> List[str]:
        """Consume every remaining raw argument, e.g. the ones after a "--" stop."""
        remaining: List[str] = []
        if self._pending_empty:
            self._pending_empty = False
            remaining.append("")
        if self.index < len(self.args):
            remaining.append(self.args[self.index][self.offset:])
            remaining.extend(self.args[self.index + 1:])
            self._last = len(self.args) - 1
        self.index = len(self.args)
        self.offset = 0
        return remaining

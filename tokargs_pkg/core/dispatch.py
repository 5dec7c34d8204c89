# =====================================================================
# File: tokargs_pkg/core/dispatch.py
# Option descriptors and first-match-wins dispatch over a Parser
# =====================================================================
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Union

from .errors import UnexpectedArgument
from .parser import Parser
from .tokens import Long, Short, Token, Value
from ..utils.constants import FLAG, MANY, ONE
from ..utils.logger import Logger


@dataclass(frozen=True)
class Option:
    """
    One option a program understands. A descriptor without short and long
    forms stands for positional arguments and matches any Value token.
    """
    key: str
    short: Optional[str] = None
    long: Optional[str] = None
    arity: str = FLAG
    metavar: Optional[str] = None
    help: str = ""

    @property
    def positional(self) -> bool:
        return self.short is None and self.long is None

    def matches(self, token: Token) -> bool:
        if isinstance(token, Short):
            return self.short is not None and token.char == self.short
        if isinstance(token, Long):
            return self.long is not None and token.name == self.long
        if isinstance(token, Value):
            return self.positional
        return False

    def label(self) -> str:
        parts = []
        if self.short is not None:
            parts.append(f"-{self.short}")
        if self.long is not None:
            parts.append(f"--{self.long}")
        label = ", ".join(parts)
        metavar = self.metavar or self.key.upper()
        if self.positional:
            return f"{metavar}..."
        if self.arity == ONE:
            label += f" {metavar}"
        elif self.arity == MANY:
            label += f" {metavar}..."
        return label


Handler = Callable[[Option, Token], None]


class OptionTable:
    """A closed set of Option descriptors, built once per program."""

    def __init__(self, options: Iterable[Option]):
        self.options = tuple(options)
        seen = set()
        for opt in self.options:
            if opt.arity not in (FLAG, ONE, MANY):
                raise ValueError(f"option {opt.key!r}: unknown arity {opt.arity!r}")
            if opt.short is not None and len(opt.short) != 1:
                raise ValueError(f"option {opt.key!r}: short form must be one character")
            for form in (("key", opt.key), ("short", opt.short), ("long", opt.long)):
                if form[1] is None:
                    continue
                if form in seen:
                    raise ValueError(f"duplicate {form[0]} {form[1]!r}")
                seen.add(form)

    def __iter__(self):
        return iter(self.options)

    def match(self, token: Token) -> Optional[Option]:
        for opt in self.options:
            if opt.matches(token):
                return opt
        return None

    def dispatch(self, parser: Parser, handler: Handler, log: Optional[Logger] = None):
        """
        Drive `parser` to the end, calling `handler(option, token)` for each
        token. Unknown tokens raise UnexpectedArgument; a malformed sequence
        raises the parser's latched error.
        """
        for token in parser:
            opt = self.match(token)
            if opt is None:
                raise UnexpectedArgument(str(token))
            if log:
                log.debug(f"{token} -> {opt.key}")
            handler(opt, token)

    def fetch(self, parser: Parser, option: Option) -> Union[None, str, List[str]]:
        """Pull the argument(s) `option` takes from the parser."""
        if option.arity == ONE:
            return parser.value()
        if option.arity == MANY:
            return parser.values()
        return None

    def usage(self, prog: str) -> List[str]:
        flags = [o for o in self.options if not o.positional]
        positionals = [o for o in self.options if o.positional]
        head = f"usage: {prog}"
        if flags:
            head += " [OPTIONS]"
        for o in positionals:
            head += f" [{o.label()}]"

        lines = [head]
        if flags:
            lines += ["", "options:"]
            width = max(len(o.label()) for o in flags)
            lines += [f"  {o.label():<{width}}  {o.help}".rstrip() for o in flags]
        if positionals:
            lines += ["", "arguments:"]
            width = max(len(o.label()) for o in positionals)
            lines += [f"  {o.label():<{width}}  {o.help}".rstrip() for o in positionals]
        return lines

# =====================================================================
# File: tokargs_pkg/core/args.py
# Command-line argument parsing for the tokargs greeter
# =====================================================================
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .coerce import coerce, parse_path
from .config import AppConfig
from .dispatch import Option, OptionTable
from .parser import Parser
from .tokens import Token, Value
from ..utils.constants import MANY, ONE, PROG
from ..utils.logger import Logger

OPTIONS = OptionTable([
    Option("help", short="h", long="help", help="Show this help and exit"),
    Option("debug", short="d", long="debug", help="Increase verbosity (repeatable)"),
    Option("count", short="n", long="count", arity=ONE, metavar="NUM", help="Repeat every greeting NUM times"),
    Option("shout", short="s", long="shout", help="Upper-case the output"),
    Option("greeting", short="g", long="greeting", arity=ONE, metavar="WORD", help="Greeting word"),
    Option("tags", short="t", long="tags", arity=MANY, metavar="TAG", help="Tags appended to every line"),
    Option("output", short="o", long="output", arity=ONE, metavar="PATH", help="Write to PATH instead of stdout"),
    Option("name", metavar="NAME", help="Names to greet; '-' reads one line from stdin"),
])


def _count(text: str) -> int:
    count = int(text)
    if count < 0:
        raise ValueError("count must not be negative")
    return count


@dataclass
class GreetArgs:
    names: List[str] = field(default_factory=list)
    greeting: str = "Hello"
    count: int = 1
    shout: bool = False
    tags: List[str] = field(default_factory=list)
    output: Optional[Path] = None
    debug: int = 0
    help: bool = False


def parse_args(argv: List[str], cfg: AppConfig, log: Logger) -> GreetArgs:
    """Parse `argv` (without the program name) on top of the configured defaults."""
    parser = Parser([PROG, *argv], cfg.parser)
    args = GreetArgs(greeting=cfg.greeting, count=cfg.count, shout=cfg.shout)

    def handle(opt: Option, token: Token):
        if opt.key == "help":
            args.help = True
        elif opt.key == "debug":
            args.debug += 1
            log.set_level(log.level + 1)
        elif opt.key == "count":
            args.count = coerce(parser, OPTIONS.fetch(parser, opt), _count)
        elif opt.key == "shout":
            args.shout = True
        elif opt.key == "greeting":
            args.greeting = OPTIONS.fetch(parser, opt)
        elif opt.key == "tags":
            args.tags.extend(OPTIONS.fetch(parser, opt))
        elif opt.key == "output":
            args.output = parse_path(parser, OPTIONS.fetch(parser, opt))
        elif opt.key == "name" and isinstance(token, Value):
            args.names.append(token.text)

    OPTIONS.dispatch(parser, handle, log)
    # Whatever followed a "--" under the stop policy
    trailing = parser.rest()
    if trailing:
        log.debug(f"trailing arguments: {trailing}")
    args.names.extend(trailing)
    return args


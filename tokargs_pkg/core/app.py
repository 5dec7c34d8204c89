# =====================================================================
# File: tokargs_pkg/core/app.py
# Greeter front end: config + argument parsing + output
# =====================================================================
from __future__ import annotations
import sys
from typing import List, Optional

from .args import OPTIONS, GreetArgs, parse_args
from .config import AppConfig, load_config
from .errors import TokargsError
from ..utils.constants import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, PROG
from ..utils.files import find_config
from ..utils.logger import Logger


def resolve_names(args: GreetArgs, cfg: AppConfig) -> List[str]:
    """Apply the default name and replace each "-" with one line of stdin."""
    names = args.names or [cfg.default_name]
    resolved = []
    for name in names:
        if name == "-":
            name = sys.stdin.readline().strip()
        resolved.append(name)
    return resolved


def build_lines(args: GreetArgs, names: List[str]) -> List[str]:
    suffix = f" [{', '.join(args.tags)}]" if args.tags else ""
    lines = []
    for name in names:
        line = f"{args.greeting}, {name}!{suffix}"
        if args.shout:
            line = line.upper()
        lines += [line] * args.count
    return lines


# ============================== Entrypoint ==============================
def main(argv: Optional[List[str]] = None) -> int:
    log = Logger(level=2)
    if argv is None:
        argv = sys.argv[1:]

    try:
        cfg = load_config(find_config())
        args = parse_args(argv, cfg, log)
    except TokargsError as exc:
        log.error(f"{PROG}: {exc}")
        return EXIT_USAGE

    if cfg.source:
        log.debug(f"config: {cfg.source}")

    if args.help:
        print("\n".join(OPTIONS.usage(PROG)))
        return EXIT_OK

    lines = build_lines(args, resolve_names(args, cfg))
    text = "".join(f"{line}\n" for line in lines)
    if args.output is None:
        sys.stdout.write(text)
        return EXIT_OK

    try:
        args.output.write_text(text, encoding="utf-8")
    except OSError as exc:
        log.error(f"{PROG}: cannot write {args.output}: {exc.strerror or exc}")
        return EXIT_FAILURE
    log.info(f"wrote {len(lines)} line(s) to {args.output}")
    return EXIT_OK

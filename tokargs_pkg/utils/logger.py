# =====================================================================
# File: tokargs_pkg/utils/logger.py
# Simple leveled logger for the command-line front end
# =====================================================================
from __future__ import annotations
import sys
from typing import Optional, TextIO

LEVELS = {0: "ERROR", 1: "WARN", 2: "INFO", 3: "DEBUG"}


class Logger:
    def __init__(self, level: int = 2, stream: Optional[TextIO] = None):
        self.level = 0
        self.stream = stream
        self.set_level(level)

    def set_level(self, level: int):
        self.level = max(0, min(3, level))

    def _log(self, lvl: int, msg: str):
        if self.level >= lvl:
            # Resolved per call so redirected stderr is honoured
            print(f"[{LEVELS.get(lvl, lvl)}] {msg}", file=self.stream or sys.stderr)

    def error(self, msg: str):
        self._log(0, msg)

    def warn(self, msg: str):
        self._log(1, msg)

    def info(self, msg: str):
        self._log(2, msg)

    def debug(self, msg: str):
        self._log(3, msg)

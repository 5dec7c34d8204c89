# =====================================================================
# File: tests/test_dispatch.py
# Option tables: matching, dispatch loop, arity fetch, usage text
# =====================================================================
from __future__ import annotations
import io

import pytest

from tokargs_pkg.core.dispatch import Option, OptionTable
from tokargs_pkg.core.errors import MalformedArgument, UnexpectedArgument
from tokargs_pkg.core.parser import Parser
from tokargs_pkg.core.tokens import Long, Short, Value
from tokargs_pkg.utils.constants import MANY, ONE
from tokargs_pkg.utils.logger import Logger

VERBOSE = Option("verbose", short="v", long="verbose", help="Be chatty")
NUMBER = Option("number", short="n", long="number", arity=ONE, metavar="N")
FILES = Option("files", long="files", arity=MANY)
POSITIONAL = Option("path", metavar="PATH")
TABLE = OptionTable([VERBOSE, NUMBER, FILES, POSITIONAL])


class TestMatch:
    def test_short_and_long_forms(self):
        assert TABLE.match(Short("v")) is VERBOSE
        assert TABLE.match(Long("verbose")) is VERBOSE
        assert TABLE.match(Long("files")) is FILES

    def test_positional_catch_all(self):
        assert TABLE.match(Value("anything")) is POSITIONAL
        assert TABLE.match(Value("-")) is POSITIONAL

    def test_no_match(self):
        assert TABLE.match(Short("z")) is None
        assert TABLE.match(Long("v")) is None
        assert OptionTable([VERBOSE]).match(Value("x")) is None

    def test_first_match_wins(self):
        first, second = Option("a", metavar="A"), Option("b", metavar="B")
        assert OptionTable([first, second]).match(Value("x")) is first


class TestTableValidation:
    def test_duplicate_short(self):
        with pytest.raises(ValueError, match="duplicate short 'v'"):
            OptionTable([VERBOSE, Option("other", short="v")])

    def test_duplicate_key(self):
        with pytest.raises(ValueError, match="duplicate key"):
            OptionTable([VERBOSE, Option("verbose", long="chatty")])

    def test_short_must_be_one_character(self):
        with pytest.raises(ValueError, match="one character"):
            OptionTable([Option("bad", short="ab")])

    def test_unknown_arity(self):
        with pytest.raises(ValueError, match="arity"):
            OptionTable([Option("bad", short="b", arity="two")])


class TestDispatch:
    def collect(self, argv, log=None):
        parser = Parser(["prog", *argv])
        seen = []

        def handler(opt, token):
            seen.append((opt.key, token, TABLE.fetch(parser, opt)))

        TABLE.dispatch(parser, handler, log)
        return seen

    def test_handler_called_per_token(self):
        seen = self.collect(["-vn3", "--files", "a", "b", "-v", "x"])
        assert seen == [
            ("verbose", Short("v"), None),
            ("number", Short("n"), "3"),
            ("files", Long("files"), ["a", "b"]),
            ("verbose", Short("v"), None),
            ("path", Value("x"), None),
        ]

    def test_unexpected_argument(self):
        with pytest.raises(UnexpectedArgument) as info:
            self.collect(["-v", "-z"])
        assert info.value.arg == "-z"
        assert str(info.value) == "unexpected argument '-z'"

    def test_unexpected_long(self):
        with pytest.raises(UnexpectedArgument, match="'--nope'"):
            self.collect(["--nope=1"])

    def test_malformed_propagates(self):
        with pytest.raises(MalformedArgument):
            self.collect(["-v--x"])

    def test_debug_log(self):
        stream = io.StringIO()
        self.collect(["-v", "x"], Logger(level=3, stream=stream))
        assert stream.getvalue().splitlines() == ["[DEBUG] -v -> verbose", "[DEBUG] x -> path"]


class TestUsage:
    def test_usage_lines(self):
        lines = TABLE.usage("prog")
        assert lines[0] == "usage: prog [OPTIONS] [PATH...]"
        verbose = next(line for line in lines if line.startswith("  -v, --verbose"))
        assert verbose.split() == ["-v,", "--verbose", "Be", "chatty"]
        assert any(line.startswith("  -n, --number N") for line in lines)
        assert any(line.startswith("  --files FILES...") for line in lines)
        assert "arguments:" in lines

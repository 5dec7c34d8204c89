# =====================================================================
# File: tokargs_pkg/__init__.py
# Schema-free command-line argument tokenizer
# =====================================================================

"""
tokargs: split an argument vector into short options, long options and
values, and let the caller decide what each one means.

    parser = Parser(sys.argv)
    for token in parser:
        if token == Short("n") or token == Long("number"):
            number = value_int(parser)
        elif isinstance(token, Value):
            paths.append(token.text)
        else:
            raise UnexpectedArgument(str(token))
"""
from .core.coerce import coerce, parse_int, parse_path, value_int, value_path
from .core.config import AppConfig, ParserConfig, load_config
from .core.dispatch import Option, OptionTable
from .core.errors import (
    ArgError, ConfigError, MalformedArgument, MissingValue, ParseError,
    TokargsError, UnexpectedArgument,
)
from .core.parser import Parser
from .core.tokens import END, End, Failure, Long, Outcome, Short, State, Token, Value

__version__ = "0.1.0"

__all__ = [
    "Parser", "ParserConfig", "AppConfig", "load_config",
    "Short", "Long", "Value", "End", "END", "Failure", "State", "Token", "Outcome",
    "Option", "OptionTable",
    "coerce", "parse_int", "parse_path", "value_int", "value_path",
    "TokargsError", "ConfigError", "ArgError", "MissingValue",
    "UnexpectedArgument", "MalformedArgument", "ParseError",
]

"""
Argloom Argument Parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentDefinition
from .argument_parser import HELP_NAMES, ArgumentHandle, ArgumentParser
from .arity import Arity, ArityMode, Fixed, OneOrMore, VariableUpTo
from .result import ArgumentRecord, ParsedArgument, ParsedValue, ParseResult

__all__ = [
    "ArgumentDefinition",
    "ArgumentHandle",
    "ArgumentParser",
    "ArgumentRecord",
    "Arity",
    "ArityMode",
    "Fixed",
    "HELP_NAMES",
    "OneOrMore",
    "ParsedArgument",
    "ParsedValue",
    "ParseResult",
    "VariableUpTo",
]

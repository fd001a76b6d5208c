"""
Argloom Argument Parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgloomError,
    ArgumentDefinitionError,
    ArgumentInputError,
    UnknownLabelError,
)
from .parser import (
    ArgumentParser,
    Fixed,
    OneOrMore,
    ParsedArgument,
    ParsedValue,
    ParseResult,
    VariableUpTo,
)

logger = logging.getLogger("argloom")

__version__ = "0.1.0"

__all__ = [
    "ArgloomError",
    "ArgumentDefinitionError",
    "ArgumentInputError",
    "ArgumentParser",
    "Fixed",
    "OneOrMore",
    "ParsedArgument",
    "ParsedValue",
    "ParseResult",
    "UnknownLabelError",
    "VariableUpTo",
]

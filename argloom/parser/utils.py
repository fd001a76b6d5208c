# Argloom Argument Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains option-name validation and token pre-processing utilities for
Argloom argument parsing.

Functions:
- is_option_shaped: Check whether a token starts with the option marker.
- check_option_name: Return an error message if a name breaks the option-name rules.
- is_valid_option_name: Boolean form of `check_option_name`.
- validate_option_name: Raise `ArgumentDefinitionError` for an invalid option name.
- strip_executable_path: Drop a leading token that names the running executable.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

from argloom.exceptions import ArgumentDefinitionError
from argloom.logger import logger

OPTION_MARKER = "-"


def is_option_shaped(token: str) -> bool:
    """Return True if the token starts with the option marker."""
    return token.startswith(OPTION_MARKER)


def check_option_name(name: str, context: str = "") -> str | None:
    """
    Check a name against the option-name rules.

    A valid option name starts with '-', has text after its leading dashes,
    has at most two leading dashes, and when it has a single leading dash it is
    followed by exactly one character.

    Args:
        name (str): The name to check.
        context (str): Optional text inserted into the error message.

    Returns:
        str | None: The error message, or None if the name is valid.
    """
    if not name.startswith(OPTION_MARKER):
        return f"Invalid option name \"{name}\",{context} must start with '-' or '--'"

    text_start = len(name) - len(name.lstrip(OPTION_MARKER))
    if text_start == len(name):
        return f"Invalid option name \"{name}\",{context} must contain text after '-' or '--'"
    if text_start > 2:
        return (
            f"Invalid option name \"{name}\",{context} "
            "initial characters must only be '-' or '--'"
        )
    if text_start == 1 and len(name) > 2:
        return (
            f"Invalid option name \"{name}\",{context} "
            "options starting with '-' must be followed by only a single character"
        )
    return None


def is_valid_option_name(name: str) -> bool:
    return check_option_name(name) is None


def validate_option_name(name: str, context: str = "") -> None:
    """Raise `ArgumentDefinitionError` if `name` is not a valid option name."""
    error = check_option_name(name, context)
    if error:
        raise ArgumentDefinitionError(error)


def strip_executable_path(
    tokens: Sequence[str],
    executable_path: Callable[[], str | Path | None],
) -> list[str]:
    """
    Drop the first token if it names the running executable.

    The first token is made absolute, resolved strictly and compared with the
    path returned by `executable_path`. A token naming no existing file, any
    failure while resolving either path, or a mismatch leaves the tokens
    untouched.

    Args:
        tokens (Sequence[str]): The raw input tokens.
        executable_path (Callable): Returns the absolute path of the running executable.

    Returns:
        list[str]: The tokens, without the executable path if one was found.
    """
    tokens = list(tokens)
    if not tokens:
        return tokens
    try:
        current = executable_path()
        if current is None:
            return tokens
        candidate = Path(tokens[0]).absolute().resolve(strict=True)
        current = Path(current).absolute().resolve()
    except (OSError, RuntimeError, ValueError) as error:
        logger.debug("Could not resolve executable path for %r: %s", tokens[0], error)
        return tokens

    if candidate == current:
        logger.debug("Dropping executable path token: %s", tokens[0])
        return tokens[1:]
    return tokens

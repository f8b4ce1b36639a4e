"""Typed environment-variable readers: required, optional, or with a default."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Callable, Mapping, Optional, TypeVar

from env_option.utils.errors import NotPresent, ParseFailed
from env_option.utils.logger import get_reader_logger

# Get logger for this module
logger = get_reader_logger()

T = TypeVar("T")

Parser = Callable[[str], T]

# Exceptions a parser raises to reject a value (pydantic.ValidationError is a ValueError)
PARSE_ERRORS = (ValueError, TypeError)


class OptionType(Enum):
    """What to do when the variable is not set."""

    OPTIONAL = "optional"  # return None
    REQUIRED = "required"  # raise NotPresent
    DEFAULT = "default"  # return the supplied default


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


# ── Public API ────────────────────────────────────────────────────────────────
def get(
        name: str,
        parse: Parser = str,
        mode: OptionType = OptionType.OPTIONAL,
        default: Any = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
) -> Any:
    """
    Look up *name* and run *parse* over its value.

    Args:
        name: Variable name, matched case-sensitively.
        parse: Callable turning the raw string into the target type.
        mode: Behaviour when the variable is absent.
        default: Returned as-is when absent and ``mode`` is ``DEFAULT``.
        environ: Mapping to read from instead of ``os.environ``.

    Raises:
        NotPresent: absent and ``mode`` is ``REQUIRED``.
        ParseFailed: present but *parse* raised ``ValueError`` or ``TypeError``.
    """
    source = os.environ if environ is None else environ
    raw = source.get(name)

    if raw is None:
        logger.debug(f"{name} is not set (mode={mode.value})")
        if mode is OptionType.REQUIRED:
            raise NotPresent(name)
        if mode is OptionType.DEFAULT:
            return default
        return None

    try:
        value = parse(raw)
    except PARSE_ERRORS as err:
        raise ParseFailed(name, err) from err

    logger.debug(f"{name} parsed with {getattr(parse, '__name__', repr(parse))}")
    return value


def require(
        name: str,
        parse: Parser[T] = str,
        default: Any = MISSING,
        *,
        environ: Optional[Mapping[str, str]] = None,
) -> T:
    """Return the parsed value of *name*; raise ``NotPresent`` if it is unset.

    Passing *default* turns absence into that value, same as ``with_default``.
    """
    if default is MISSING:
        return get(name, parse, OptionType.REQUIRED, environ=environ)
    return get(name, parse, OptionType.DEFAULT, default, environ=environ)


def optional(
        name: str,
        parse: Parser[T] = str,
        *,
        environ: Optional[Mapping[str, str]] = None,
) -> Optional[T]:
    """Return the parsed value of *name*, or ``None`` if it is unset."""
    return get(name, parse, OptionType.OPTIONAL, environ=environ)


def with_default(
        name: str,
        parse: Parser[T],
        default: T,
        *,
        environ: Optional[Mapping[str, str]] = None,
) -> T:
    """Return the parsed value of *name*, or *default* (not parsed) if it is unset."""
    return get(name, parse, OptionType.DEFAULT, default, environ=environ)

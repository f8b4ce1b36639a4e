"""
parse_utils.py  - ready-made parsers for environment values

* ``int``, ``float`` and ``str`` work as parsers unchanged; this module adds
  the conversions Python does not ship (booleans, lists).
* ``adapter`` / ``json_adapter`` build parsers for arbitrary types on top of
  pydantic's ``TypeAdapter``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, TypeVar

from pydantic import TypeAdapter

from env_option.constants.flags import (
    FALSE_FLAG_VALUES,
    STRICT_FALSE,
    STRICT_TRUE,
    TRUE_FLAG_VALUES,
)

T = TypeVar("T")


def parse_bool(raw: str) -> bool:
    """Accept exactly ``true`` or ``false``."""
    if raw == STRICT_TRUE:
        return True
    if raw == STRICT_FALSE:
        return False
    raise ValueError(f"provided string was not `true` or `false`: {raw!r}")


def parse_flag(raw: str) -> bool:
    """Lenient on/off switch: 1/true/yes/on or 0/false/no/off, any case."""
    value = raw.strip().lower()
    if value in TRUE_FLAG_VALUES:
        return True
    if value in FALSE_FLAG_VALUES:
        return False
    raise ValueError(f"not a recognised flag value: {raw!r}")


def parse_list(item: Callable[[str], T] = str, sep: str = ",") -> Callable[[str], List[T]]:
    """Build a parser for ``a,b,c`` style values; blank items are dropped."""

    def _parse(raw: str) -> List[T]:
        return [item(part.strip()) for part in raw.split(sep) if part.strip()]

    _parse.__name__ = f"list[{getattr(item, '__name__', 'item')}]"
    return _parse


def adapter(tp: Any) -> Callable[[str], Any]:
    """Parser validating the raw string as *tp* (pydantic lax mode)."""
    type_adapter = TypeAdapter(tp)

    def _parse(raw: str) -> Any:
        return type_adapter.validate_python(raw)

    _parse.__name__ = f"adapter[{getattr(tp, '__name__', repr(tp))}]"
    return _parse


def json_adapter(tp: Any = Any) -> Callable[[str], Any]:
    """Parser decoding the raw string as JSON and validating it as *tp*."""
    type_adapter = TypeAdapter(tp)

    def _parse(raw: str) -> Any:
        return type_adapter.validate_json(raw)

    _parse.__name__ = f"json[{getattr(tp, '__name__', repr(tp))}]"
    return _parse


# Name → parser table used by declarations
PARSERS: Dict[str, Callable[[str], Any]] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": parse_bool,
    "flag": parse_flag,
    "list": parse_list(),
    "json": json_adapter(),
}

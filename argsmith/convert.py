"""Strict string-to-number / string-to-bool conversion."""

import re
from collections.abc import Callable
from typing import Any, TypeVar

from argsmith.exceptions import ConversionError

T = TypeVar("T", int, float, bool, str)

_TRUE = {"true", "on", "yes", "y", "1"}
_FALSE = {"false", "off", "no", "n", "0"}

_HEX = re.compile(r"[+-]?0[xX][0-9a-fA-F]+")
_OCT = re.compile(r"[+-]?0[oO]?[0-7]+")
_BIN = re.compile(r"[+-]?0[bB][01]+")
_DEC = re.compile(r"[+-]?\d+")
_LEADING_ZERO = re.compile(r"[+-]?0\d+")


def _bool(s: str) -> bool:
    # Accept lower, Title and UPPER case only; "tRUE" is rejected.
    if s not in (s.lower(), s.title(), s.upper()):
        raise ConversionError(value=s, target_type=bool)
    if s.lower() in _TRUE:
        return True
    elif s.lower() in _FALSE:
        return False
    else:
        raise ConversionError(value=s, target_type=bool)


def _int(s: str) -> int:
    if _HEX.fullmatch(s):
        return int(s, 16)
    elif _BIN.fullmatch(s):
        return int(s, 2)
    elif _OCT.fullmatch(s):
        # C-style leading zero ("010") and Python-style "0o10" are both octal.
        sign = "-" if s.startswith("-") else ""
        digits = s.lstrip("+-")[1:].lstrip("oO")
        return int(sign + digits, 8)
    elif _DEC.fullmatch(s) and not _LEADING_ZERO.fullmatch(s):
        return int(s)
    else:
        raise ConversionError(value=s, target_type=int)


def _float(s: str) -> float:
    try:
        return float(s)
    except ValueError:
        raise ConversionError(value=s, target_type=float) from None


_converters: dict[Any, Callable[[str], Any]] = {
    bool: _bool,
    int: _int,
    float: _float,
    str: str,
}


def convert(value: str, target: type[T]) -> T:
    """Strictly convert a raw command-line string.

    Parameters
    ----------
    value: str
        Raw string.
    target: type
        One of :class:`int`, :class:`float`, :class:`bool` or :class:`str`.

    Raises
    ------
    ConversionError
        ``value`` is not a complete literal of ``target``, or ``target`` is unsupported.

    Returns
    -------
    Converted value.
    """
    try:
        converter = _converters[target]
    except KeyError:
        raise ConversionError(f"unsupported conversion type {target!r}") from None
    return converter(value)

"""To prevent circular dependencies, this module should never import anything else from argsmith."""

import functools
import re
import shlex
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING

# https://threeofwands.com/attra-iv-zero-overhead-frozen-attrs-classes/
if TYPE_CHECKING:
    from attrs import frozen
    from rich.console import Console
else:
    from attrs import define

    frozen = functools.partial(define, unsafe_hash=True)

END_OF_OPTIONS = "--"

_FLAG_CHARACTERS = re.compile(r"[A-Za-z0-9_-]+")
_ALIAS_SEPARATORS = re.compile(r"[^A-Za-z0-9_-]+")


def is_short_option(token: str) -> bool:
    """``-`` followed by a non-empty run that does not start with another ``-``."""
    return len(token) > 1 and token[0] == "-" and token[1] != "-"


def is_long_option(token: str) -> bool:
    """``--`` followed by non-empty text."""
    return len(token) > 2 and token.startswith("--")


def is_end_of_options(token: str) -> bool:
    return token == END_OF_OPTIONS


def is_flag_text(text: str) -> bool:
    """Whether ``text`` only holds characters allowed in an alias body."""
    return _FLAG_CHARACTERS.fullmatch(text) is not None


def split_inline(token: str) -> tuple[str, str | None]:
    """Split ``name=value`` on the first ``=``.

    Returns
    -------
    tuple[str, str | None]
        The name part, and the inline value (``None`` when no ``=`` is present).
        The inline value may be an empty string.
    """
    name, sep, value = token.partition("=")
    return (name, value) if sep else (token, None)


def split_aliases(names: str) -> list[str]:
    """Split ``"-s, --simple"`` / ``"-h|--help"`` style strings into individual aliases."""
    return [x for x in _ALIAS_SEPARATORS.split(names) if x]


def alias_sort_key(alias: str) -> tuple[bool, str]:
    """Short aliases before long aliases, then alphabetical."""
    return (not is_short_option(alias), alias)


def normalize_tokens(tokens: None | str | Iterable[str]) -> list[str]:
    if tokens is None:
        tokens = sys.argv[1:]  # Remove the executable
    elif isinstance(tokens, str):
        tokens = shlex.split(tokens)
    else:
        tokens = list(tokens)
    return tokens


def to_tuple_converter(value: None | str | Iterable[str]) -> tuple[str, ...]:
    """Convert a single element or an iterable of elements into a tuple.

    Intended to be used in an ``attrs.Field``. If :obj:`None` is provided, returns an empty tuple.
    """
    if value is None:
        return ()
    elif isinstance(value, str):
        return (value,)
    else:
        return tuple(value)


def create_error_console_from_console(console: "Console") -> "Console":
    """Create an error console (stderr=True) that inherits settings from a source console.

    Parameters
    ----------
    console : Console
        Source Rich Console to copy settings from.

    Returns
    -------
    Console
        New Rich Console with stderr=True and inherited settings.
    """
    from rich.console import Console

    color_system = console.color_system or "auto"

    return Console(
        stderr=True,
        color_system=color_system,  # type: ignore[arg-type]
        force_terminal=getattr(console, "_force_terminal", None),
        width=getattr(console, "_width", None),
        highlight=getattr(console, "_highlight", True),
        no_color=console.no_color,
        legacy_windows=console.legacy_windows,
    )

# Don't manually change, let hatch-vcs handle it.
__version__ = "0.0.0"

__all__ = [
    "AccessError",
    "ArgsmithError",
    "ArgumentView",
    "ConfigurationError",
    "ConversionError",
    "ErrorKind",
    "ErrorPanel",
    "Kind",
    "ParseError",
    "ParseResult",
    "Parser",
    "Registry",
    "RequiredMissingError",
    "Spec",
    "VARIADIC",
    "convert",
    "parse_tokens",
]

from argsmith.convert import convert
from argsmith.core import Parser
from argsmith.exceptions import (
    AccessError,
    ArgsmithError,
    ConfigurationError,
    ConversionError,
    ErrorKind,
    ParseError,
    RequiredMissingError,
)
from argsmith.kind import VARIADIC, Kind
from argsmith.panel import ErrorPanel
from argsmith.parse import ParseResult, parse_tokens
from argsmith.registry import Registry
from argsmith.spec import Spec
from argsmith.view import ArgumentView

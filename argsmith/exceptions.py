from enum import Enum
from typing import Any, ClassVar

from attrs import define, field

__all__ = [
    "AccessError",
    "ArgsmithError",
    "ConfigurationError",
    "ConversionError",
    "ErrorKind",
    "ParseError",
    "RequiredMissingError",
]


class ErrorKind(Enum):
    CONFIGURATION = "configuration"
    PARSE = "parse"
    REQUIRED_MISSING = "required-missing"
    ACCESS = "access"
    CONVERSION = "conversion"


@define
class ArgsmithError(Exception):
    """Root exception for every error raised by argsmith.

    Carries the :class:`ErrorKind`, the offending alias/token verbatim, and a short message.
    """

    msg: str = ""
    """
    Short, lowercase description of what went wrong.
    """

    argument: str = ""
    """
    Offending alias or token. Empty when the error is not tied to a single one.
    """

    kind: ClassVar[ErrorKind]

    def __str__(self):
        if self.argument:
            return f"{self.msg} -- '{self.argument}'"
        return self.msg


class ConfigurationError(ArgsmithError):
    """A specification was registered with a bad alias, a duplicate alias, or mismatching defaults.

    This is a developer error rather than a runtime error.
    """

    kind = ErrorKind.CONFIGURATION


class ParseError(ArgsmithError):
    """The command-line tokens could not be matched against the registered specifications."""

    kind = ErrorKind.PARSE


class RequiredMissingError(ParseError):
    """A required option or positional argument was never provided."""

    kind = ErrorKind.REQUIRED_MISSING


class AccessError(ArgsmithError):
    """Lookup of an alias that was never registered."""

    kind = ErrorKind.ACCESS


@define
class ConversionError(ArgsmithError):
    """A value was read through a view incompatible with its kind, or failed strict conversion."""

    kind = ErrorKind.CONVERSION

    value: Any = field(default=None, kw_only=True)
    """
    Raw string that couldn't be converted.
    """

    target_type: type | None = field(default=None, kw_only=True)
    """
    Intended type to convert into.
    """

    def __str__(self):
        if self.target_type is not None and not self.msg:
            return f"can't convert {self.value!r} with type {self.target_type.__name__!r}"
        return super().__str__()

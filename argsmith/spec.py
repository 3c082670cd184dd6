from collections.abc import Iterable, Sequence

from attrs import define, field

from argsmith.exceptions import ConfigurationError
from argsmith.kind import VARIADIC, Kind
from argsmith.node import ValueNode
from argsmith.utils import (
    alias_sort_key,
    is_flag_text,
    is_long_option,
    is_short_option,
    to_tuple_converter,
)


def _aliases_converter(value: str | Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(to_tuple_converter(value), key=alias_sort_key))


def _check_option_alias(alias: str):
    if not alias.startswith("-"):
        raise ConfigurationError("invalid flag not start by '-' character", alias)
    if alias == "-":
        raise ConfigurationError("invalid flag not be only '-' character", alias)
    if alias == "--":
        raise ConfigurationError("invalid flag not be only '--' characters", alias)
    if is_short_option(alias) and len(alias) != 2:
        raise ConfigurationError("invalid short flag has not only one character", alias)
    if not is_flag_text(alias.lstrip("-")) or (is_long_option(alias) and alias.startswith("---")):
        raise ConfigurationError("invalid flag character", alias)


def _check_positional_alias(alias: str):
    if not alias or alias.startswith("-"):
        raise ConfigurationError("bad name argument", alias)
    if not is_flag_text(alias):
        raise ConfigurationError("bad name argument character", alias)


def _default_arg_help(aliases: Sequence[str], kind: Kind, fixed_count: int) -> str:
    long = next((x for x in aliases if is_long_option(x)), None)
    base = (long or aliases[0]).lstrip("-").upper()
    if kind.is_variadic:
        return base + "..."
    return " ".join([base] * (kind.token_count(fixed_count) or 1))


def _defaults_fit(kind: Kind, fixed_count: int, defaults: Sequence[str]) -> bool:
    if kind.is_flag:
        return False
    elif kind in (Kind.SIMPLE, Kind.FIXED_TUPLE, Kind.POSITIONAL):
        return len(defaults) == (fixed_count if kind is Kind.FIXED_TUPLE else 1)
    elif kind is Kind.REPEATED_TUPLE:
        return len(defaults) % fixed_count == 0
    else:
        return True


@define
class Spec:
    """A registered argument definition.

    Instances are built and owned by :class:`~argsmith.registry.Registry`;
    construction validates everything that does not depend on other specifications.
    """

    aliases: tuple[str, ...] = field(converter=_aliases_converter)
    """
    Sorted short-before-long, then alphabetically. The first entry is the primary alias.
    """

    kind: Kind = Kind.BOOLEAN

    help: str = field(default="", kw_only=True)

    required: bool = field(default=False, kw_only=True)

    arg_help: str = field(default="", kw_only=True)
    """
    Placeholder text for the consumed value(s) on the help-page.
    Derived from the aliases when empty.
    """

    fixed_count: int = field(default=1, kw_only=True)
    """
    Number of values per occurrence for tuple kinds.
    """

    defaults: tuple[str, ...] = field(default=(), converter=to_tuple_converter, kw_only=True)
    """
    Declared defaults; ignored when :attr:`required` is set.
    """

    is_help: bool = field(default=False, kw_only=True)

    node: ValueNode = field(init=False)

    def __attrs_post_init__(self):
        if not self.aliases:
            raise ConfigurationError("invalid empty flag")

        if self.kind.is_positional:
            if len(self.aliases) != 1:
                raise ConfigurationError("positional argument has only one name", self.aliases[0])
            _check_positional_alias(self.aliases[0])
        else:
            for alias in self.aliases:
                _check_option_alias(alias)

        if self.is_help and self.kind is not Kind.BOOLEAN:
            raise ConfigurationError("help option must be a boolean", self.name)

        if self.kind.is_tuple:
            if self.fixed_count == VARIADIC or not isinstance(self.fixed_count, int) or self.fixed_count < 2:
                raise ConfigurationError("tuple option needs a number of argument greater than 1", self.name)
        else:
            self.fixed_count = 1

        if self.required:
            self.defaults = ()
        elif self.defaults and not _defaults_fit(self.kind, self.fixed_count, self.defaults):
            long = next((x for x in self.aliases if is_long_option(x)), self.name)
            raise ConfigurationError("invalid number of argument with number of default argument", long)

        if not self.arg_help and self.kind.takes_values and not self.kind.is_positional:
            self.arg_help = _default_arg_help(self.aliases, self.kind, self.fixed_count)

        self.node = ValueNode.from_defaults(self.kind, self.fixed_count, self.defaults)

    @property
    def name(self) -> str:
        """Primary alias."""
        return self.aliases[0]

    @property
    def is_positional(self) -> bool:
        return self.kind.is_positional

    @property
    def short_aliases(self) -> tuple[str, ...]:
        return tuple(x for x in self.aliases if is_short_option(x))

    @property
    def default_text(self) -> str:
        """Rendering of the declared defaults, in the same format as parsed values."""
        return ValueNode.from_defaults(self.kind, self.fixed_count, self.defaults).render() if self.defaults else ""


def display_sort_key(spec: Spec) -> tuple[int, str]:
    """Short-form options first, then long-only options, then positionals; each alphabetical."""
    if spec.is_positional:
        return (2, spec.name)
    elif spec.short_aliases:
        return (0, spec.short_aliases[0])
    else:
        return (1, spec.name)

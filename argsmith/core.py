import os
import sys
from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import TYPE_CHECKING, Optional

from attrs import define, field

from argsmith.exceptions import ConfigurationError, ParseError
from argsmith.help import format_usage, print_usage
from argsmith.kind import VARIADIC, Kind
from argsmith.panel import ErrorPanel
from argsmith.parse import ParseResult, parse_tokens
from argsmith.registry import Registry
from argsmith.spec import Spec
from argsmith.utils import (
    create_error_console_from_console,
    normalize_tokens,
    split_aliases,
    to_tuple_converter,
)
from argsmith.view import ArgumentView

if TYPE_CHECKING:
    from rich.console import Console

ACTIONS = ("store_true", "store_false", "append", "extend", "help")


def _resolve_kind(action: str | None, nargs: int | str | None) -> Kind:
    """Map an argparse-flavoured ``(action, nargs)`` pair to a :class:`Kind`."""
    if action is not None and action not in ACTIONS:
        raise ConfigurationError("invalid action", action)

    if action in ("store_true", "store_false", "help"):
        if nargs not in (None, 0):
            raise ConfigurationError("flag action does not take a number of argument", str(nargs))
        return Kind.REVERSE_BOOLEAN if action == "store_false" else Kind.BOOLEAN

    if action == "extend":
        if nargs not in (None, VARIADIC):
            raise ConfigurationError("extend action takes a variadic number of argument", str(nargs))
        return Kind.REPEATED_VARIADIC

    if nargs == VARIADIC:
        return Kind.REPEATED_VARIADIC if action == "append" else Kind.VARIADIC
    if nargs is None:
        nargs = 1
    if not isinstance(nargs, int) or isinstance(nargs, bool) or nargs < 1:
        raise ConfigurationError("invalid number of argument", str(nargs))

    if action == "append":
        return Kind.REPEATED_SIMPLE if nargs == 1 else Kind.REPEATED_TUPLE
    return Kind.SIMPLE if nargs == 1 else Kind.FIXED_TUPLE


def _running_under_pytest() -> bool:
    # "PYTEST_VERSION" is set as of pytest v8.2.0
    return "pytest" in sys.modules and os.environ.get("PYTEST_VERSION") is not None


@lru_cache  # Prevent logging of multiple warnings
def _warn_argv_under_pytest() -> None:
    """Catch developers parsing during unit-tests without providing tokens and erroneously reading :obj:`sys.argv`."""
    import warnings

    warnings.warn(
        "Parser invoked without tokens while running under pytest; falling back to sys.argv. "
        "Pass tokens explicitly, e.g. parser([]).",
        UserWarning,
        stacklevel=3,
    )


@define
class Parser:
    """Declarative command-line parser.

    Register arguments with :meth:`add_argument` (or :meth:`register`), then call the
    parser with the command-line tokens and read results with :meth:`get`.
    """

    _prog: str | None = field(default=None, alias="prog", kw_only=True)

    description: str = field(default="", kw_only=True)

    epilog: str = field(default="", kw_only=True)

    usage: str = field(default="", kw_only=True)
    """
    Custom help-page text; replaces the generated one entirely.
    """

    alternative: bool = field(default=False, kw_only=True)
    """
    Resolve single-dash long-style names: ``-name`` matches ``--name``.
    """

    strict: bool = field(default=False, kw_only=True)
    """
    Reject tokens that match no positional instead of collecting them in :attr:`additional_arguments`.
    """

    _console: Optional["Console"] = field(default=None, kw_only=True, alias="console")

    _error_console: Optional["Console"] = field(default=None, kw_only=True, alias="error_console")

    print_error: bool = field(default=True, kw_only=True)

    exit_on_error: bool = field(default=True, kw_only=True)

    registry: Registry = field(factory=Registry, init=False, repr=False)

    _result: ParseResult | None = field(default=None, init=False, repr=False)

    _fallback_console: Optional["Console"] = field(default=None, init=False, repr=False)

    _fallback_error_console: Optional["Console"] = field(default=None, init=False, repr=False)

    ###########
    # Methods #
    ###########
    @property
    def prog(self) -> str:
        if self._prog is not None:
            return self._prog
        return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "prog"

    @prog.setter
    def prog(self, value: str | None):
        self._prog = value

    @property
    def console(self) -> "Console":
        if self._console is not None:
            return self._console

        if self._fallback_console is None:
            from rich.console import Console

            self._fallback_console = Console()

        return self._fallback_console

    @console.setter
    def console(self, console: Optional["Console"]):
        self._console = console

    @property
    def error_console(self) -> "Console":
        if self._error_console is not None:
            return self._error_console

        if self._fallback_error_console is None:
            self._fallback_error_console = create_error_console_from_console(self.console)

        return self._fallback_error_console

    @error_console.setter
    def error_console(self, console: Optional["Console"]):
        self._error_console = console

    def register(
        self,
        aliases: str | Iterable[str],
        kind: Kind = Kind.BOOLEAN,
        *,
        help: str = "",
        required: bool = False,
        arg_help: str = "",
        fixed_count: int = 1,
        defaults: Sequence[str] = (),
        is_help: bool = False,
    ) -> Spec:
        """Register a specification with an explicit :class:`Kind`.

        See :meth:`Registry.register <argsmith.registry.Registry.register>`.
        """
        return self.registry.register(
            aliases,
            kind,
            help=help,
            required=required,
            arg_help=arg_help,
            fixed_count=fixed_count,
            defaults=defaults,
            is_help=is_help,
        )

    def add_argument(
        self,
        *names: str,
        action: str | None = None,
        help: str = "",
        required: bool = False,
        metavar: str = "",
        nargs: int | str | None = None,
        default: None | str | Iterable[str] = None,
    ) -> Spec | None:
        """Register an argument, argparse-style.

        Parameters
        ----------
        *names: str
            Aliases. Each string may hold several aliases separated by spaces, commas or ``|``
            (e.g. ``"-s, --simple"``). A single bare name registers a positional argument.
        action: str | None
            One of ``"store_true"``, ``"store_false"``, ``"append"``, ``"extend"``, ``"help"``.
            ``None`` stores the value(s) of the last occurrence.
        help: str
            Help text.
        required: bool
            Parsing fails if the argument was never provided.
        metavar: str
            Placeholder for the value(s) on the help-page.
        nargs: int | str | None
            Values per occurrence (``>= 1``), or ``"+"`` for one-or-more.
        default: None | str | Iterable[str]
            Default value(s).

        Returns
        -------
        Spec | None
            The registered specification; ``None`` when ``action="help"`` without names
            disabled the help option.
        """
        aliases = [alias for x in names for alias in split_aliases(x)]
        defaults = to_tuple_converter(default)

        if len(aliases) == 1 and not aliases[0].startswith("-"):
            if action is not None or nargs not in (None, 1):
                raise ConfigurationError("positional argument takes exactly one value", aliases[0])
            return self.register(aliases, Kind.POSITIONAL, help=help, required=required, arg_help=metavar, defaults=defaults)

        if action == "help" and not aliases:
            self.registry.remove_help()
            return None

        kind = _resolve_kind(action, nargs)
        return self.register(
            aliases,
            kind,
            help=help,
            required=required,
            arg_help=metavar,
            fixed_count=nargs if isinstance(nargs, int) else 1,
            defaults=defaults,
            is_help=action == "help",
        )

    def remove_help(self):
        self.registry.remove_help()

    def parse_known(
        self,
        tokens: None | str | Iterable[str] = None,
        *,
        alternative: bool | None = None,
        strict: bool | None = None,
    ) -> ParseResult:
        """Parse ``tokens`` and raise on failure; nothing is printed.

        Raises
        ------
        ParseError
            Input could not be matched against the registered specifications.
        RequiredMissingError
            A required argument was never provided.
        """
        if tokens is None:
            if _running_under_pytest():
                _warn_argv_under_pytest()
            if self._prog is None and sys.argv:
                self._prog = os.path.basename(sys.argv[0])

        self._result = parse_tokens(
            self.registry,
            normalize_tokens(tokens),
            alternative=self.alternative if alternative is None else alternative,
            strict=self.strict if strict is None else strict,
        )
        return self._result

    def __call__(
        self,
        tokens: None | str | Iterable[str] = None,
        *,
        console: Optional["Console"] = None,
        error_console: Optional["Console"] = None,
        print_error: bool | None = None,
        exit_on_error: bool | None = None,
        alternative: bool | None = None,
        strict: bool | None = None,
    ) -> ParseResult:
        """Parse ``tokens``, handling errors and help at the process boundary.

        Parameters
        ----------
        tokens : None | str | Iterable[str]
            Either a string, or a list of strings.
            Defaults to ``sys.argv[1:]``.
        console: ~rich.console.Console
            Console to print the help-page.
            If not provided, defaults to :attr:`Parser.console`.
        error_console: ~rich.console.Console
            Console to print error messages.
            If not provided, defaults to :attr:`Parser.error_console`.
        print_error: bool | None
            Print a rich-formatted error on error.
            If :obj:`None`, inherits from :attr:`Parser.print_error`.
        exit_on_error: bool | None
            On a parse error, or when the help option was given, invoke ``sys.exit(1)``.
            Otherwise, raise the exception (or return the result with ``help_requested`` set).
            If :obj:`None`, inherits from :attr:`Parser.exit_on_error`.
        alternative: bool | None
            If :obj:`None`, inherits from :attr:`Parser.alternative`.
        strict: bool | None
            If :obj:`None`, inherits from :attr:`Parser.strict`.

        Returns
        -------
        ParseResult
        """
        print_error = self.print_error if print_error is None else print_error
        exit_on_error = self.exit_on_error if exit_on_error is None else exit_on_error

        try:
            result = self.parse_known(tokens, alternative=alternative, strict=strict)
        except ParseError as e:
            if print_error:
                (error_console or self.error_console).print(ErrorPanel(e, self.prog))
            if exit_on_error:
                sys.exit(1)
            raise

        if result.help_requested:
            self.print_usage(console=console)
            if exit_on_error:
                sys.exit(1)
        return result

    parse_args = __call__

    @property
    def additional_arguments(self) -> list[str]:
        """Tokens that matched no positional argument during the last parse."""
        return [] if self._result is None else list(self._result.overflow)

    def get(self, alias: str) -> ArgumentView:
        """Read-only snapshot of the argument registered under ``alias``.

        Raises
        ------
        AccessError
            ``alias`` was never registered.
        """
        return ArgumentView.from_spec(self.registry.lookup(alias))

    def __getitem__(self, alias: str) -> ArgumentView:
        return self.get(alias)

    def __contains__(self, alias: str) -> bool:
        return alias in self.registry

    def format_usage(self) -> str:
        return format_usage(self)

    def print_usage(self, console: Optional["Console"] = None):
        print_usage(self, console or self.console)

    def dump(self) -> str:
        """One line per argument, in help-page order; intended for debugging."""
        lines = []
        for spec in self.registry.sorted():
            lines.append(
                f"{', '.join(spec.aliases)}  "
                f"exists: {int(spec.node.exists)}, "
                f"kind: {spec.kind.name}, "
                f"values: {spec.node.render()}"
            )
        return "\n".join(lines) + "\n" if lines else ""

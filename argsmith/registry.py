from collections.abc import Iterable, Iterator, Sequence

from attrs import define, field

from argsmith.exceptions import AccessError, ConfigurationError
from argsmith.kind import Kind
from argsmith.spec import Spec, display_sort_key

DEFAULT_HELP_ALIASES = ("-h", "--help")
DEFAULT_HELP_TEXT = "show this help message and exit"


@define
class Registry:
    """Owns every :class:`~argsmith.spec.Spec` and indexes each alias to its spec.

    A boolean help option (``-h``, ``--help``) is registered on construction.
    """

    _specs: list[Spec] = field(factory=list, init=False, repr=False)
    _index: dict[str, Spec] = field(factory=dict, init=False, repr=False)
    _help: Spec | None = field(default=None, init=False, repr=False)

    def __attrs_post_init__(self):
        self.register(DEFAULT_HELP_ALIASES, Kind.BOOLEAN, help=DEFAULT_HELP_TEXT, is_help=True)

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
        """Register a new argument specification.

        Parameters
        ----------
        aliases: str | Iterable[str]
            Short (``-v``) and/or long (``--verbose``) aliases, or a single bare positional name.
        kind: Kind
            Cardinality of the argument.
        help: str
            Help text shown on the help-page.
        required: bool
            Parsing fails when a required argument was never provided.
        arg_help: str
            Placeholder for the consumed value(s) on the help-page.
        fixed_count: int
            Values per occurrence; only meaningful for tuple kinds.
        defaults: Sequence[str]
            Pre-loaded values, expanded into the final value shape.
        is_help: bool
            Replace the active help option with this (boolean) specification.

        Raises
        ------
        ConfigurationError
            Bad alias shape, duplicate alias, or default/count mismatch.

        Returns
        -------
        Spec
            The newly registered specification.
        """
        spec = Spec(
            aliases,
            kind,
            help=help,
            required=required,
            arg_help=arg_help,
            fixed_count=fixed_count,
            defaults=defaults,
            is_help=is_help,
        )

        evicted = self._help if is_help else None
        for alias in spec.aliases:
            owner = self._index.get(alias)
            if owner is not None and owner is not evicted:
                if spec.is_positional:
                    raise ConfigurationError("bad name argument already exist", alias)
                raise ConfigurationError("invalid flag already exist", alias)
        if len(set(spec.aliases)) != len(spec.aliases):
            raise ConfigurationError("invalid flag already exist", spec.name)

        if is_help:
            self.remove_help()
            self._help = spec

        self._specs.append(spec)
        for alias in spec.aliases:
            self._index[alias] = spec
        return spec

    def remove_help(self):
        """Drop the active help option, if any."""
        if self._help is None:
            return
        self._specs.remove(self._help)
        for alias in self._help.aliases:
            del self._index[alias]
        self._help = None

    @property
    def help_spec(self) -> Spec | None:
        return self._help

    def find(self, alias: str) -> Spec | None:
        """Side-effect-free lookup; ``None`` when ``alias`` is not registered."""
        return self._index.get(alias)

    def lookup(self, alias: str) -> Spec:
        try:
            return self._index[alias]
        except KeyError:
            raise AccessError("option not found", alias) from None

    def __contains__(self, alias: str) -> bool:
        return alias in self._index

    def __iter__(self) -> Iterator[Spec]:
        """Specifications in registration order."""
        return iter(self._specs)

    def __len__(self):
        return len(self._specs)

    @property
    def positionals(self) -> list[Spec]:
        return [x for x in self._specs if x.is_positional]

    def sorted(self) -> list[Spec]:
        """Specifications in help-page display order."""
        return sorted(self._specs, key=display_sort_key)

from typing import Any

from argsmith.convert import convert
from argsmith.exceptions import ConversionError
from argsmith.kind import Kind
from argsmith.spec import Spec
from argsmith.utils import frozen


def _snapshot(spec: Spec) -> Any:
    node = spec.node
    if spec.kind.is_flag:
        return None
    elif spec.kind.depth == 0 or spec.kind is Kind.SIMPLE:
        return node.scalar()
    elif spec.kind.depth == 1:
        return tuple(node.flat())
    else:
        return tuple(node.nested())


@frozen
class ArgumentView:
    """Read-only snapshot of a registered argument, as returned by :meth:`Parser.get <argsmith.Parser.get>`.

    Value views are only available for compatible kinds:

    * :attr:`flag`: ``BOOLEAN`` and ``REVERSE_BOOLEAN``.
    * :attr:`value`: ``SIMPLE`` and ``POSITIONAL``.
    * :attr:`values`: ``FIXED_TUPLE``, ``VARIADIC``, ``REPEATED_SIMPLE`` and ``REPEATED_VARIADIC``.
    * :attr:`tuples`: ``REPEATED_TUPLE``.

    Any other combination raises :exc:`~argsmith.ConversionError`.
    """

    aliases: tuple[str, ...]
    kind: Kind
    exists: bool
    count: int
    required: bool
    help: str
    arg_help: str
    _data: Any
    _text: str

    @classmethod
    def from_spec(cls, spec: Spec) -> "ArgumentView":
        return cls(
            spec.aliases,
            spec.kind,
            spec.node.exists,
            spec.node.count,
            spec.required,
            spec.help,
            spec.arg_help,
            _snapshot(spec),
            spec.node.render(),
        )

    @property
    def name(self) -> str:
        return self.aliases[0]

    def _incompatible(self, view: str) -> ConversionError:
        return ConversionError(f"conversion of {self.kind.name.lower()} to {view} not authorized", self.name)

    @property
    def flag(self) -> bool:
        """Logical reading of a boolean; inverted for ``REVERSE_BOOLEAN``."""
        if self.kind is Kind.BOOLEAN:
            return self.exists
        elif self.kind is Kind.REVERSE_BOOLEAN:
            return not self.exists
        raise self._incompatible("bool")

    @property
    def value(self) -> str | None:
        """Scalar value; ``None`` when neither given nor defaulted."""
        if self.kind not in (Kind.SIMPLE, Kind.POSITIONAL):
            raise self._incompatible("string")
        return self._data

    @property
    def values(self) -> list[str]:
        if self.kind not in (Kind.FIXED_TUPLE, Kind.VARIADIC, Kind.REPEATED_SIMPLE, Kind.REPEATED_VARIADIC):
            raise self._incompatible("list of string")
        return list(self._data)

    @property
    def tuples(self) -> list[tuple[str, ...]]:
        if self.kind is not Kind.REPEATED_TUPLE:
            raise self._incompatible("list of tuple")
        return list(self._data)

    def convert(self, target: type) -> Any:
        """Strictly convert the stored value(s), preserving their shape.

        Parameters
        ----------
        target: type
            One of :class:`int`, :class:`float`, :class:`bool` or :class:`str`.
        """
        if self.kind.is_flag:
            return target(self.flag)
        elif self.kind in (Kind.SIMPLE, Kind.POSITIONAL):
            return None if self._data is None else convert(self._data, target)
        elif self.kind is Kind.REPEATED_TUPLE:
            return [tuple(convert(x, target) for x in group) for group in self._data]
        else:
            return [convert(x, target) for x in self._data]

    def __bool__(self):
        return self.exists

    def __len__(self):
        """Number of stored values; ``0`` or ``1`` for scalars.

        Booleans hold no value and raise :exc:`~argsmith.ConversionError`; use :attr:`count`.
        """
        if self.kind.is_flag:
            raise self._incompatible("list")
        if self.kind.depth == 0 or self.kind is Kind.SIMPLE:
            return int(self._data is not None)
        return len(self._data)

    def __getitem__(self, index: int):
        if self.kind.depth == 0 or self.kind is Kind.SIMPLE:
            raise self._incompatible("list")
        return self._data[index]

    def __str__(self):
        return self._text

"""Storage for the values of a single specification.

A stored value is a tagged tree of :class:`Leaf` and :class:`Group`.
Its depth is fixed by the owning :class:`~argsmith.kind.Kind`:

* depth ``0``: ``Leaf`` (positionals), or unused (booleans).
* depth ``1``: ``Group[Leaf, ...]``.
* depth ``2``: ``Group[Group[Leaf, ...], ...]`` where every inner group has the same size.
"""

from collections.abc import Iterable, Sequence
from typing import Union

from attrs import define, field

from argsmith.exceptions import ConversionError
from argsmith.kind import Kind
from argsmith.utils import frozen


@frozen
class Leaf:
    value: str = ""


@define
class Group:
    children: list["Node"] = field(factory=list)

    def __len__(self):
        return len(self.children)


Node = Union[Leaf, Group]


def _leaves(values: Iterable[str]) -> list[Node]:
    return [Leaf(x) for x in values]


def render(node: Node | None) -> str:
    """Human readable rendering; lists are comma separated and nested groups are parenthesised."""
    if node is None:
        return ""
    if isinstance(node, Leaf):
        return node.value
    parts = []
    for child in node.children:
        if isinstance(child, Group):
            parts.append("(" + render(child) + ")")
        else:
            parts.append(child.value)
    return ", ".join(parts)


@define
class ValueNode:
    """Mutable container for the parsed values of one specification.

    Only the parsing machinery mutates a :class:`ValueNode`; readers go through
    :class:`~argsmith.view.ArgumentView` snapshots.
    """

    kind: Kind
    fixed_count: int = 1

    root: Node | None = field(default=None)
    """
    ``None`` for booleans and for positionals that were never assigned.
    """

    exists: bool = False
    """
    ``True`` after the first successful match.
    """

    count: int = 0
    """
    Incremented on every successful match, including repeats and bundled booleans.
    """

    def __attrs_post_init__(self):
        if self.root is None and self.kind.depth > 0:
            self.root = Group()

    @classmethod
    def from_defaults(cls, kind: Kind, fixed_count: int, defaults: Sequence[str]) -> "ValueNode":
        """Build a node whose pre-loaded state already has the final shape of ``kind``."""
        node = cls(kind, fixed_count)
        if not defaults:
            return node
        if kind.is_positional:
            node.root = Leaf(defaults[0])
        elif kind is Kind.REPEATED_TUPLE:
            for i in range(0, len(defaults), fixed_count):
                node.append_group(defaults[i : i + fixed_count])
        else:
            node.extend(defaults)
        return node

    @property
    def group(self) -> Group:
        if not isinstance(self.root, Group):
            raise ConversionError(f"{self.kind.name.lower()} value is not a list")
        return self.root

    def mark(self):
        """Record one successful match."""
        self.exists = True
        self.count += 1

    def set_leaf(self, value: str):
        if self.kind.depth != 0 or self.kind.is_flag:
            raise ConversionError(f"{self.kind.name.lower()} value is not a scalar")
        self.root = Leaf(value)

    def clear(self):
        self.group.children.clear()

    def replace(self, values: Iterable[str]):
        self.group.children[:] = _leaves(values)

    def extend(self, values: Iterable[str]):
        if self.kind.depth != 1:
            raise ConversionError(f"{self.kind.name.lower()} value is not a flat list")
        self.group.children.extend(_leaves(values))

    def append_group(self, values: Sequence[str]):
        if self.kind.depth != 2:
            raise ConversionError(f"{self.kind.name.lower()} value is not a list of tuples")
        if len(values) != self.fixed_count:
            raise ConversionError(f"expected {self.fixed_count} values, got {len(values)}")
        self.group.children.append(Group(_leaves(values)))

    def scalar(self) -> str | None:
        if isinstance(self.root, Leaf):
            return self.root.value
        if isinstance(self.root, Group) and self.kind is Kind.SIMPLE:
            return self.root.children[0].value if self.root.children else None  # pyright: ignore[reportAttributeAccessIssue]
        return None

    def flat(self) -> list[str]:
        return [child.value for child in self.group.children]  # pyright: ignore[reportAttributeAccessIssue]

    def nested(self) -> list[tuple[str, ...]]:
        return [tuple(leaf.value for leaf in child.children) for child in self.group.children]  # pyright: ignore[reportAttributeAccessIssue]

    def render(self) -> str:
        if self.kind is Kind.BOOLEAN:
            return "true" if self.exists else "false"
        elif self.kind is Kind.REVERSE_BOOLEAN:
            return "false" if self.exists else "true"
        return render(self.root)

from enum import Enum

VARIADIC = "+"
"""``fixed_count`` marker for kinds that consume a run of one-or-more values."""


class Kind(Enum):
    """Cardinality of a registered argument.

    The kind alone decides how many tokens an occurrence consumes, whether an inline
    ``name=value`` form is accepted, how repeats accumulate, and the depth of the
    stored value.
    """

    BOOLEAN = "boolean"
    REVERSE_BOOLEAN = "reverse_boolean"
    SIMPLE = "simple"
    FIXED_TUPLE = "fixed_tuple"
    VARIADIC = "variadic"
    REPEATED_SIMPLE = "repeated_simple"
    REPEATED_VARIADIC = "repeated_variadic"
    REPEATED_TUPLE = "repeated_tuple"
    POSITIONAL = "positional"

    @property
    def is_flag(self) -> bool:
        """Consumes no value; may be bundled in a short-option cluster."""
        return self in (Kind.BOOLEAN, Kind.REVERSE_BOOLEAN)

    @property
    def is_positional(self) -> bool:
        return self is Kind.POSITIONAL

    @property
    def is_repeated(self) -> bool:
        """Every occurrence appends; the first one clears pre-loaded defaults."""
        return self in (Kind.REPEATED_SIMPLE, Kind.REPEATED_VARIADIC, Kind.REPEATED_TUPLE)

    @property
    def is_variadic(self) -> bool:
        return self in (Kind.VARIADIC, Kind.REPEATED_VARIADIC)

    @property
    def is_tuple(self) -> bool:
        return self in (Kind.FIXED_TUPLE, Kind.REPEATED_TUPLE)

    @property
    def accepts_inline(self) -> bool:
        """Whether a single ``name=value`` token can satisfy one occurrence."""
        return not (self.is_flag or self.is_tuple or self.is_positional)

    @property
    def takes_values(self) -> bool:
        return not self.is_flag

    @property
    def depth(self) -> int:
        """Nesting depth of the stored value.

        * ``0``: a single leaf (positional) or nothing at all (booleans).
        * ``1``: flat list of leaves.
        * ``2``: list of fixed-size leaf tuples.
        """
        if self.is_flag or self.is_positional:
            return 0
        elif self is Kind.REPEATED_TUPLE:
            return 2
        else:
            return 1

    def token_count(self, fixed_count: int) -> int | None:
        """Number of tokens a single occurrence consumes; ``None`` for variadic runs."""
        if self.is_flag:
            return 0
        elif self.is_variadic:
            return None
        elif self.is_tuple:
            return fixed_count
        else:
            return 1

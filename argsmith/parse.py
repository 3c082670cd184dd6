"""Left-to-right tokenizing state machine."""

from collections.abc import Sequence

from attrs import define, field

from argsmith.consume import consume
from argsmith.exceptions import ParseError
from argsmith.registry import Registry
from argsmith.spec import Spec
from argsmith.utils import (
    END_OF_OPTIONS,
    frozen,
    is_end_of_options,
    is_long_option,
    is_short_option,
    split_inline,
)
from argsmith.validate import validate


@frozen
class ParseResult:
    overflow: tuple[str, ...] = ()
    """
    Tokens that did not match any positional specification (non-strict mode only).
    """

    help_requested: bool = False
    """
    The help option was given; usage printing is left to the caller.
    """


def end_index(tokens: Sequence[str]) -> int:
    """Index of the first end-of-options marker, or ``len(tokens)``."""
    try:
        return list(tokens).index(END_OF_OPTIONS)
    except ValueError:
        return len(tokens)


@define
class Dispatcher:
    registry: Registry
    tokens: Sequence[str]
    alternative: bool = False
    strict: bool = False

    overflow: list[str] = field(factory=list, init=False)
    _end: int = field(init=False)

    def __attrs_post_init__(self):
        self._end = end_index(self.tokens)

    def run(self) -> list[str]:
        """Scan every token once, mutating the registered value nodes.

        Returns
        -------
        list[str]
            Overflow tokens.
        """
        i = 0
        while i < len(self.tokens):
            token = self.tokens[i]
            if is_short_option(token):
                i += self._short(i)
            elif is_long_option(token):
                i += self._long(i)
            elif is_end_of_options(token):
                for positional in self.tokens[i + 1 :]:
                    self._positional(positional)
                break
            else:
                self._positional(token)
            i += 1
        return self.overflow

    def _consume(self, spec: Spec, option: str, inline: str | None, index: int) -> int:
        return consume(spec, option, inline, self.tokens, index, self._end, self.is_option)

    def _short(self, index: int) -> int:
        name, inline = split_inline(self.tokens[index])

        if self.alternative:
            # "-name" resolves as "--name".
            spec = self.registry.find("-" + name)
            if spec is not None:
                return self._consume(spec, name[1:], inline, index)

        cluster = name[1:]
        if not cluster:
            raise ParseError("invalid option", self.tokens[index])

        for char in cluster[:-1]:
            spec = self.registry.find("-" + char)
            if spec is None:
                raise ParseError("invalid option", char)
            if not spec.kind.is_flag:
                raise ParseError("only last option can use a parameter", char)
            spec.node.mark()

        last = cluster[-1]
        spec = self.registry.find("-" + last)
        if spec is None:
            raise ParseError("invalid option", last)
        return self._consume(spec, last, inline, index)

    def _long(self, index: int) -> int:
        name, inline = split_inline(self.tokens[index])
        spec = self.registry.find(name)
        if spec is None:
            raise ParseError("invalid option", name[2:])
        return self._consume(spec, name[2:], inline, index)

    def _positional(self, token: str):
        for spec in self.registry.positionals:
            if not spec.node.exists:
                spec.node.set_leaf(token)
                spec.node.mark()
                return
        if self.strict:
            raise ParseError("invalid additional argument", token)
        self.overflow.append(token)

    def is_option(self, token: str) -> bool:
        """Side-effect-free lookahead: would ``token`` resolve to a registered option?

        Unregistered dash-prefixed tokens (e.g. ``-1``) are **not** options.
        """
        if is_short_option(token):
            name, _ = split_inline(token)
            if self.alternative and ("-" + name) in self.registry:
                return True
            cluster = name[1:]
            if not cluster:
                return False
            for char in cluster[:-1]:
                spec = self.registry.find("-" + char)
                if spec is None or not spec.kind.is_flag:
                    return False
            return ("-" + cluster[-1]) in self.registry
        elif is_long_option(token):
            name, _ = split_inline(token)
            return name in self.registry
        return False


def parse_tokens(
    registry: Registry,
    tokens: Sequence[str],
    *,
    alternative: bool = False,
    strict: bool = False,
) -> ParseResult:
    """Scan ``tokens`` against ``registry`` and run the required-argument validation pass.

    Parameters
    ----------
    registry: Registry
        Fully configured registry; its value nodes are updated in place.
    tokens: Sequence[str]
        Command-line tokens, **without** the program name.
    alternative: bool
        Allow single-dash long-style names (``-name``).
    strict: bool
        Reject tokens that match no positional instead of collecting them.

    Raises
    ------
    ParseError
        Unknown option, bad arity, invalid bundling, or strict-mode overflow.
    RequiredMissingError
        A required specification was never provided.

    Returns
    -------
    ParseResult
    """
    dispatcher = Dispatcher(registry, tokens, alternative=alternative, strict=strict)
    overflow = dispatcher.run()
    help_requested = validate(registry)
    return ParseResult(overflow=tuple(overflow), help_requested=help_requested)

"""Per-cardinality value consumption.

Decides how many tokens following an option are pulled, how an inline ``name=value``
interacts with each kind, and whether an occurrence overwrites or accumulates.
"""

from collections.abc import Callable, Sequence

from argsmith.exceptions import ParseError
from argsmith.kind import Kind
from argsmith.spec import Spec


def _store(spec: Spec, values: Sequence[str]):
    node = spec.node
    kind = spec.kind
    if kind.is_repeated and not node.exists:
        # First occurrence discards the pre-loaded defaults.
        node.clear()

    if kind is Kind.REPEATED_TUPLE:
        node.append_group(values)
    elif kind.is_repeated:
        node.extend(values)
    else:
        node.replace(values)


def _consume_inline(spec: Spec, option: str, inline: str):
    if spec.kind.is_flag:
        raise ParseError("option cannot use with argument", option)
    if spec.kind.is_tuple:
        raise ParseError("option cannot use with only 1 argument", option)
    _store(spec, [inline])


def _consume_following(
    spec: Spec,
    option: str,
    tokens: Sequence[str],
    index: int,
    end: int,
    is_terminator: Callable[[str], bool],
) -> int:
    count = spec.kind.token_count(spec.fixed_count)
    if count == 0:
        return 0

    start = index + 1
    if count is None:
        stop = start
        while stop < end and not is_terminator(tokens[stop]):
            stop += 1
    else:
        stop = start + count
        if stop > end:
            raise ParseError("bad number of argument", option)

    if stop == start:
        raise ParseError("bad number of argument", option)

    _store(spec, tokens[start:stop])
    return stop - start


def consume(
    spec: Spec,
    option: str,
    inline: str | None,
    tokens: Sequence[str],
    index: int,
    end: int,
    is_terminator: Callable[[str], bool],
) -> int:
    """Feed one occurrence of ``spec`` and record the match.

    Parameters
    ----------
    spec: Spec
        Resolved specification.
    option: str
        Option name as written on the command line, without dashes; used in error messages.
    inline: str | None
        Value given as ``name=value``, or ``None``.
    tokens: Sequence[str]
        Full token sequence.
    index: int
        Index of the option token within ``tokens``.
    end: int
        Index of the end-of-options marker; values are never pulled from there onwards.
    is_terminator: Callable[[str], bool]
        Side-effect-free lookahead that stops a variadic run.

    Raises
    ------
    ParseError
        Inline value rejected by the kind, or not enough values before ``end``.

    Returns
    -------
    int
        Number of tokens after ``index`` that were consumed.
    """
    if inline is not None:
        _consume_inline(spec, option, inline)
        consumed = 0
    else:
        consumed = _consume_following(spec, option, tokens, index, end, is_terminator)
    spec.node.mark()
    return consumed

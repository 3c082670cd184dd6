"""Plain-text usage/help-page layout."""

from typing import TYPE_CHECKING

from argsmith.spec import Spec

if TYPE_CHECKING:
    from rich.console import Console

    from argsmith.core import Parser


def _usage_item(spec: Spec) -> str:
    item = spec.name
    if not spec.is_positional and spec.kind.takes_values:
        item += " " + spec.arg_help
    return item if spec.required else f"[{item}]"


def _entry(spec: Spec) -> tuple[str, str]:
    left = "  " + ", ".join(spec.aliases)
    if spec.kind.takes_values and spec.arg_help:
        left += " " + spec.arg_help

    notes = [spec.help] if spec.help else []
    if spec.required:
        notes.append("(required)")
    elif spec.kind.takes_values and spec.defaults:
        notes.append(f"(default: {spec.default_text})")
    return left, " ".join(notes)


def format_usage(parser: "Parser") -> str:
    """Render the help-page of ``parser``.

    A custom :attr:`Parser.usage <argsmith.Parser.usage>` replaces the whole generated text.
    """
    if parser.usage:
        return parser.usage

    specs = parser.registry.sorted()
    options = [x for x in specs if not x.is_positional]
    positionals = [x for x in specs if x.is_positional]

    lines = [" ".join(["usage:", parser.prog, *(_usage_item(x) for x in options + positionals)])]

    if parser.description:
        lines += ["", parser.description]

    positional_entries = [_entry(x) for x in positionals]
    option_entries = [_entry(x) for x in options]
    width = max((len(left) for left, _ in positional_entries + option_entries), default=0)

    for title, entries in (("positional arguments:", positional_entries), ("optional arguments:", option_entries)):
        if not entries:
            continue
        lines += ["", title]
        lines += [(left.ljust(width) + "  " + right).rstrip() for left, right in entries]

    if parser.epilog:
        lines += ["", parser.epilog]

    return "\n".join(lines) + "\n"


def print_usage(parser: "Parser", console: "Console"):
    console.print(format_usage(parser), end="", markup=False, highlight=False, soft_wrap=True)

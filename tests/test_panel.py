from textwrap import dedent

import pytest

from argsmith import (
    AccessError,
    ConfigurationError,
    ConversionError,
    ErrorPanel,
    Kind,
    ParseError,
    RequiredMissingError,
)


@pytest.mark.parametrize(
    "error, title",
    [
        (ConfigurationError("invalid empty flag"), "Configuration Error"),
        (ParseError("invalid option", "x"), "Parse Error"),
        (RequiredMissingError("option is required", "-f"), "Missing Argument"),
        (AccessError("option not found", "--x"), "Access Error"),
        (ConversionError(value="a", target_type=int), "Conversion Error"),
    ],
)
def test_error_panel_title(error, title):
    assert ErrorPanel(error).title == title


def test_error_panel_body(console):
    with console.capture() as capture:
        console.print(ErrorPanel(ParseError("bad number of argument", "n")))

    expected = dedent(
        """\
        ╭─ Parse Error ──────────────────────────────────────────────────────╮
        │ bad number of argument -- 'n'                                      │
        ╰────────────────────────────────────────────────────────────────────╯
        """
    )
    assert capture.get() == expected


def test_error_panel_required_missing(parser, console):
    parser.register(["-f", "--file"], Kind.SIMPLE, required=True)
    with console.capture() as capture, pytest.raises(RequiredMissingError):
        parser([], error_console=console, exit_on_error=False)

    expected = dedent(
        """\
        ╭─ Missing Argument ─────────────────────────────────────────────────╮
        │ prog: option is required -- '-f'                                   │
        ╰────────────────────────────────────────────────────────────────────╯
        """
    )
    assert capture.get() == expected

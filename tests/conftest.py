import pytest
from rich.console import Console

import argsmith


@pytest.fixture
def parser():
    return argsmith.Parser(prog="prog")


@pytest.fixture
def registry():
    return argsmith.Registry()


@pytest.fixture
def console():
    return Console(width=70, force_terminal=True, highlight=False, color_system=None, legacy_windows=False)


@pytest.fixture
def parse(parser):
    """Parse without any printing or exiting; errors propagate."""

    def inner(cmd, **kwargs):
        return parser(cmd, print_error=False, exit_on_error=False, **kwargs)

    return inner

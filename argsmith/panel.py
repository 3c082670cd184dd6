"""Rich-based terminal output for errors."""

from typing import TYPE_CHECKING

from argsmith.exceptions import ArgsmithError, ErrorKind

if TYPE_CHECKING:
    from rich.panel import Panel

_TITLES = {
    ErrorKind.CONFIGURATION: "Configuration Error",
    ErrorKind.PARSE: "Parse Error",
    ErrorKind.REQUIRED_MISSING: "Missing Argument",
    ErrorKind.ACCESS: "Access Error",
    ErrorKind.CONVERSION: "Conversion Error",
}


def ErrorPanel(error: ArgsmithError, prog: str = "") -> "Panel":  # noqa: N802
    """Render ``error`` the way it is reported at the process boundary.

    The title names the :class:`~argsmith.exceptions.ErrorKind`; the body is the
    ``prog: msg -- 'argument'`` line.

    .. code-block:: text

        ╭─ Parse Error ────────────────────────────╮
        │ prog: bad number of argument -- 'n'      │
        ╰──────────────────────────────────────────╯

    Parameters
    ----------
    error: ArgsmithError
        Error to display.
    prog: str
        Program name prefixed to the message. Omitted when empty.

    Returns
    -------
    ~rich.panel.Panel
    """
    from rich import box
    from rich.panel import Panel
    from rich.text import Text

    body = f"{prog}: {error}" if prog else str(error)
    return Panel(
        Text(body, "default"),
        title=_TITLES[error.kind],
        style="red",
        box=box.ROUNDED,
        expand=True,
        title_align="left",
    )

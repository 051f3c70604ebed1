"""
ELFScope Console Interface
===========================

Rich-powered console abstraction providing a unified presentation layer
for ELFScope.

The class wraps :class:`rich.console.Console` and adds convenience methods
for section headers and severity-coloured messages, all with
consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all ELFScope output
# ---------------------------------------------------------------------------
_SCOPE_THEME = Theme(
    {
        "scope.section": "bold bright_magenta",
        "scope.success": "bold green",
        "scope.error": "bold red",
    }
)


class ScopeConsole:
    """Unified console interface for ELFScope.

    Usage::

        con = ScopeConsole()
        con.section("ELF Header")
        con.success("Decoded 13 program headers")
    """

    # ------------------------------------------------------------------ #
    #  Construction
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        *,
        quiet: bool = False,
        record: bool = False,
        stderr: bool = False,
    ) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text / HTML export.
            stderr: Write to stderr instead of stdout.
        """
        self._console = Console(
            theme=_SCOPE_THEME,
            quiet=quiet,
            record=record,
            stderr=stderr,
            highlight=False,
        )

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="scope.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[scope.success][✔] SUCCESS:[/scope.success] {message}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[scope.error][✘] ERROR:[/scope.error] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def plain(self, text: str) -> None:
        """Print *text* verbatim: no markup, no highlighting, no wrapping."""
        self._console.print(text, markup=False, highlight=False, soft_wrap=True)

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()

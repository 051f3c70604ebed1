"""
ELFScope Console Output
========================

Rich-powered terminal display for a decoded ELF file.  The fixed-layout
text reports are printed verbatim; ``--pretty`` adds a summary panel and
a colour-coded table of the program headers.

Uses the ScopeConsole abstraction for consistent styling.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from shared.console import ScopeConsole

from elfscope.core.engine import ElfSession
from elfscope.core.models import ElfHeader, ProgramHeaderTable
from elfscope.parsers.codes import (
    class_name,
    data_encoding_name,
    machine_name,
    object_type_name,
    segment_flags_name,
    segment_type_name,
)


# Flags containing W and X together are highlighted
_FLAG_COLOURS: dict[str, str] = {
    "RWX": "bright_red",
    " WX": "bright_red",
    "R X": "bright_green",
    "RW": "bright_yellow",
    "R": "bright_cyan",
}


class ElfConsoleOutput:
    """Render ELFScope results to the terminal.

    Usage::

        output = ElfConsoleOutput()
        output.display(session)
    """

    def __init__(self, console: ScopeConsole | None = None) -> None:
        self._con = console or ScopeConsole()

    def display(
        self,
        session: ElfSession,
        *,
        header: bool = True,
        program_headers: bool = True,
        pretty: bool = False,
    ) -> None:
        """Print the requested reports for *session*."""
        if header:
            if pretty:
                self._con.section("ELF Header")
                self._display_summary(session.header)
            self._con.plain(session.header_report())

        if program_headers:
            if pretty:
                self._con.section("Program Headers")
                self._display_segments(session.program_headers)
            else:
                self._con.plain(session.program_headers_report())

    # ------------------------------------------------------------------ #
    #  Internal
    # ------------------------------------------------------------------ #

    def _display_summary(self, header: ElfHeader) -> None:
        lines = [
            f"[bold]Class:[/bold]    {class_name(header.ei_class)}",
            f"[bold]Data:[/bold]     {data_encoding_name(header.ei_data)}",
            f"[bold]Type:[/bold]     {object_type_name(header.e_type)}",
            f"[bold]Machine:[/bold]  {machine_name(header.e_machine)}",
            f"[bold]Entry:[/bold]    0x{header.e_entry:x}",
        ]
        self._con.print(
            Panel(
                "\n".join(lines),
                title="[bold bright_cyan]File Header[/bold bright_cyan]",
                border_style="bright_cyan",
                expand=False,
            )
        )

    def _display_segments(self, table: ProgramHeaderTable) -> None:
        tbl = Table(
            title=f"Located {len(table.entries)} program headers",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        tbl.add_column("#", justify="right", style="dim")
        tbl.add_column("Type", style="bold")
        tbl.add_column("Offset", justify="right")
        tbl.add_column("VirtAddr", justify="right")
        tbl.add_column("PhysAddr", justify="right")
        tbl.add_column("FileSize", justify="right")
        tbl.add_column("MemSize", justify="right")
        tbl.add_column("Flags")
        tbl.add_column("Align", justify="right")

        for idx, ph in enumerate(table.entries):
            flags = segment_flags_name(ph.p_flags)
            colour = _FLAG_COLOURS.get(flags, "dim")
            tbl.add_row(
                str(idx),
                segment_type_name(ph.p_type, table.machine),
                f"0x{ph.p_offset:x}",
                f"0x{ph.p_vaddr:x}",
                f"0x{ph.p_paddr:x}",
                f"0x{ph.p_filesz:x}",
                f"0x{ph.p_memsz:x}",
                f"[{colour}]{flags}[/{colour}]",
                f"0x{ph.p_align:x}",
            )

        self._con.print(tbl)

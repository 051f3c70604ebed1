"""
ELFScope Engine
================

Orchestrates the decode pipeline for one ELF file:

    1. Sniff the ELF class from ``e_ident[EI_CLASS]``
    2. Decode the file header (byte order from ``e_ident[EI_DATA]``)
    3. Read the program-header table located by the header
    4. Render text reports or a JSON document

The module-level functions are stateless: each call re-opens and
re-decodes the file, so asking for both reports reads the header twice.
:class:`ElfSession` is the decode-once alternative; it produces the same
output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from shared.config import ScopeConfig
from shared.logger import ScopeLogger

from elfscope.core.models import ElfHeader, ProgramHeaderTable
from elfscope.output.report import ElfReportGenerator
from elfscope.output.text import render_header, render_program_headers
from elfscope.parsers import header as header_parser
from elfscope.parsers import program_headers as ph_parser
from elfscope.parsers.ident import PathLike


# ---------------------------------------------------------------------------
# Stateless entry points
# ---------------------------------------------------------------------------

def read_header(path: PathLike, *, swap_elf32_flags: bool = False) -> ElfHeader:
    """Decode the file header of *path*."""
    return header_parser.read_header(path, swap_elf32_flags=swap_elf32_flags)


def read_program_headers(
    path: PathLike,
    *,
    swap_elf32_flags: bool = False,
) -> ProgramHeaderTable:
    """Decode the program-header table of *path* (decodes the header again)."""
    return ph_parser.read_program_headers(path, swap_elf32_flags=swap_elf32_flags)


def header_report(path: PathLike, *, swap_elf32_flags: bool = False) -> str:
    """Text report of the file header of *path*."""
    return render_header(read_header(path, swap_elf32_flags=swap_elf32_flags))


def program_headers_report(path: PathLike, *, swap_elf32_flags: bool = False) -> str:
    """Text report of the program-header table of *path*."""
    return render_program_headers(
        read_program_headers(path, swap_elf32_flags=swap_elf32_flags)
    )


# ---------------------------------------------------------------------------
# ElfSession
# ---------------------------------------------------------------------------

class ElfSession:
    """Decode-once view of a single ELF file.

    The file header and program-header table are decoded lazily on first
    access and kept for the lifetime of the session.  The file is assumed
    not to change while the session is in use.

    Usage::

        session = ElfSession("/bin/ls")
        print(session.header_report())
        print(session.program_headers_report())
    """

    def __init__(
        self,
        path: PathLike,
        config: ScopeConfig | None = None,
        logger: ScopeLogger | None = None,
    ) -> None:
        """Initialise the session.

        Args:
            path: ELF file to inspect.
            config: ELFScope configuration.  Defaults are used if not provided.
            logger: Logger instance.  A new one is created if not provided.
        """
        self._path = Path(path)
        self._config: ScopeConfig = config or ScopeConfig()
        self._logger: ScopeLogger = logger or ScopeLogger("engine")
        self._header: Optional[ElfHeader] = None
        self._program_headers: Optional[ProgramHeaderTable] = None

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------ #
    #  Decoded structures
    # ------------------------------------------------------------------ #

    @property
    def header(self) -> ElfHeader:
        """The decoded file header."""
        if self._header is None:
            with self._logger.operation("read_header"), self._logger.timed(str(self._path)):
                hdr = header_parser.read_header(
                    self._path,
                    swap_elf32_flags=self._config.elfscope.swap_elf32_flags,
                )
                self._logger.debug(
                    "%s: %s, %s-endian, machine=%d, e_phnum=%d",
                    self._path,
                    hdr.elf_class.value,
                    hdr.byte_order.value,
                    hdr.e_machine,
                    hdr.e_phnum,
                )
            self._header = hdr
        return self._header

    @property
    def program_headers(self) -> ProgramHeaderTable:
        """The decoded program-header table, in table order."""
        if self._program_headers is None:
            settings = self._config.elfscope
            header = self.header if settings.reuse_header else None
            with self._logger.operation("read_program_headers"), self._logger.timed(str(self._path)):
                table = ph_parser.read_program_headers(
                    self._path,
                    header,
                    swap_elf32_flags=settings.swap_elf32_flags,
                )
                self._logger.debug(
                    "%s: read %d program headers", self._path, len(table.entries)
                )
            self._program_headers = table
        return self._program_headers

    # ------------------------------------------------------------------ #
    #  Rendering
    # ------------------------------------------------------------------ #

    def header_report(self) -> str:
        return render_header(self.header)

    def program_headers_report(self) -> str:
        return render_program_headers(self.program_headers)

    def to_dict(self, *, header: bool = True, program_headers: bool = True) -> dict[str, Any]:
        """Structured report of the requested parts (see :class:`ElfReportGenerator`)."""
        generator = ElfReportGenerator(indent=self._config.elfscope.json_indent)
        return generator.build(
            str(self._path),
            self.header if header else None,
            self.program_headers if program_headers else None,
        )

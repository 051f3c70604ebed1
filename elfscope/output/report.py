"""
ELFScope JSON Report
=====================

Builds a structured, JSON-serialisable document from a decoded file
header and program-header table.  Raw integer fields are kept as-is and
accompanied by their decoded names so that consumers need no code tables
of their own.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from elfscope import __version__
from elfscope.core.models import ElfHeader, ProgramHeaderTable
from elfscope.parsers.codes import (
    class_name,
    data_encoding_name,
    machine_name,
    object_type_name,
    osabi_name,
    segment_flags_name,
    segment_type_name,
)


class ElfReportGenerator:
    """Generate JSON reports from decoded ELF structures.

    Usage::

        gen = ElfReportGenerator()
        data = gen.build(path, header, table)
        gen.write_json(data, "report.json")
    """

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def header_dict(self, header: ElfHeader) -> dict[str, Any]:
        """Raw and decoded fields of a file header."""
        data: dict[str, Any] = header.model_dump(exclude={"e_ident"})
        data["e_ident"] = header.e_ident.hex()
        data["decoded"] = {
            "class": class_name(header.ei_class),
            "data": data_encoding_name(header.ei_data),
            "osabi": osabi_name(header.ei_osabi),
            "type": object_type_name(header.e_type),
            "machine": machine_name(header.e_machine),
        }
        return data

    def program_headers_dict(
        self,
        table: ProgramHeaderTable,
    ) -> dict[str, Any]:
        """Raw and decoded fields of every program-header entry."""
        return {
            "kind": table.kind,
            "count": len(table.entries),
            "entries": [
                {
                    **ph.model_dump(exclude={"kind"}),
                    "type_name": segment_type_name(ph.p_type, table.machine),
                    "flags_name": segment_flags_name(ph.p_flags),
                }
                for ph in table.entries
            ],
        }

    def build(
        self,
        path: str,
        header: ElfHeader | None = None,
        table: ProgramHeaderTable | None = None,
    ) -> dict[str, Any]:
        """Assemble the full report document.

        Either part may be omitted; its key is then absent.
        """
        report: dict[str, Any] = {
            "report_type": "elf_headers",
            "version": __version__,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "path": path,
        }
        if header is not None:
            report["header"] = self.header_dict(header)
        if table is not None:
            report["program_headers"] = self.program_headers_dict(table)
        return report

    def dumps(self, report: dict[str, Any]) -> str:
        """Serialise *report* to a JSON string."""
        return json.dumps(report, indent=self._indent, ensure_ascii=False, default=str)

    def write_json(self, report: dict[str, Any], output_path: str) -> str:
        """Write *report* to *output_path* and return its absolute path."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(self.dumps(report))
            f.write("\n")

        return str(path.resolve())

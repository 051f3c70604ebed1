"""
ELFScope Text Reports
======================

Pure formatting of decoded ELF structures into fixed-layout text blocks,
in the style of a minimal ``readelf``.  Nothing here performs I/O; the
same input always renders to the same text.

File header::

    ELF Header:
      Magic:                             [7f, 45, 4c, 46, 2, 1, 1, 0, ...]
      Class:                             ELF64
      ...

Program headers (two lines per entry, each entry followed by a rule)::

    Located 2 program headers:
      Type                Offset              VirtAddr            PhysAddr
                          FileSize            MemSize             Flags     Align
    =-=-=-=-...
    PT_PHDR               0x40                0x40                0x40
                          0x2d8               0x2d8               R         0x8
    ________...
"""

from __future__ import annotations

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

LABEL_WIDTH: int = 34
RULE_WIDTH: int = 78
HEADER_RULE: str = "=-" * (RULE_WIDTH // 2)
ENTRY_RULE: str = "_" * RULE_WIDTH

_COLUMN: int = 20
_TYPE_COLUMN: int = 22
_HEX_COLUMN: int = 18
_FLAGS_COLUMN: int = 10
_FLAGS_MAX: int = 3


def format_magic(ident: bytes) -> str:
    """Render identification bytes as ``[7f, 45, 4c, 46, 2, ...]``."""
    return "[" + ", ".join(f"{b:x}" for b in ident) + "]"


def _field(label: str, value: object) -> str:
    return f"  {label:<{LABEL_WIDTH}} {value}"


def render_header(header: ElfHeader) -> str:
    """Render a decoded file header as a labelled multi-line block."""
    lines = [
        "ELF Header:",
        _field("Magic:", format_magic(header.e_ident)),
        _field("Class:", class_name(header.ei_class)),
        _field("Endianness:", data_encoding_name(header.ei_data)),
        _field("ABI:", osabi_name(header.ei_osabi)),
        _field("Binary type:", object_type_name(header.e_type)),
        _field("Machine:", machine_name(header.e_machine)),
        _field("Entry point:", f"0x{header.e_entry:x}"),
        _field("Program headers offset:", f"0x{header.e_phoff:x}"),
        _field("Section headers offset:", f"0x{header.e_shoff:x}"),
        _field("Size of program header table:", f"{header.e_phentsize} (in bytes)"),
        _field("Size of section header table:", f"{header.e_shentsize} (in bytes)"),
        _field("Number of program headers:", header.e_phnum),
        _field("Number of section headers:", header.e_shnum),
        _field("Flags:", f"{header.e_flags:x}"),
        _field("Section header string table index:", header.e_shstrndx),
    ]
    return "\n".join(lines) + "\n"


def render_program_headers(table: ProgramHeaderTable) -> str:
    """Render a program-header table: title, column header, one record per entry."""
    c = _COLUMN
    lines = [
        f"Located {len(table.entries)} program headers:",
        f"  {'Type':<{c}}{'Offset':<{c}}{'VirtAddr':<{c}}{'PhysAddr':<{c}}",
        f"  {'':<{c}}{'FileSize':<{c}}{'MemSize':<{c}}{'Flags':<{_FLAGS_COLUMN}}{'Align':<{_FLAGS_COLUMN}}",
        HEADER_RULE,
    ]

    for ph in table.entries:
        type_name = segment_type_name(ph.p_type, table.machine)
        flags = segment_flags_name(ph.p_flags)[:_FLAGS_MAX]
        lines.append(
            f"{type_name:<{_TYPE_COLUMN}}"
            f"0x{ph.p_offset:<{_HEX_COLUMN}x}"
            f"0x{ph.p_vaddr:<{_HEX_COLUMN}x}"
            f"0x{ph.p_paddr:x}"
        )
        lines.append(
            f"{'':<{_TYPE_COLUMN}}"
            f"0x{ph.p_filesz:<{_HEX_COLUMN}x}"
            f"0x{ph.p_memsz:<{_HEX_COLUMN}x}"
            f"{flags:<{_FLAGS_COLUMN}}"
            f"0x{ph.p_align:x}"
        )
        lines.append(ENTRY_RULE)

    return "\n".join(lines) + "\n"

"""
ELF Program Header Reader
==========================

Reads the program-header (segment) table located by the file header's
``e_phoff`` / ``e_phentsize`` / ``e_phnum`` triple.

Entry *i* is read from ``e_phoff + i * e_phentsize``; exactly 32 (ELF32)
or 56 (ELF64) bytes are decoded from there regardless of
``e_phentsize``.  Every field, ``p_flags`` included, is decoded with the
file's byte order.

On-disk layouts differ in where ``p_flags`` sits::

    Elf32_Phdr: p_type, p_offset, p_vaddr, p_paddr, p_filesz, p_memsz, p_flags, p_align
    Elf64_Phdr: p_type, p_flags, p_offset, p_vaddr, p_paddr, p_filesz, p_memsz, p_align

The read is all-or-nothing: a short read anywhere raises and no partial
table is returned.
"""

from __future__ import annotations

import struct
from typing import BinaryIO, Optional

from elfscope.core.exceptions import ElfClassMismatch, ElfDecodeError
from elfscope.core.models import (
    ElfHeader,
    ElfHeader32,
    ElfHeader64,
    ProgramHeader32,
    ProgramHeader64,
    ProgramHeaderTable,
    ProgramHeaderTable32,
    ProgramHeaderTable64,
)
from elfscope.parsers.header import read_header
from elfscope.parsers.ident import PathLike

SIZEOF_PHDR32: int = 32
SIZEOF_PHDR64: int = 56

_PHDR32_FMT: str = "IIIIIIII"
_PHDR64_FMT: str = "IIQQQQQQ"

_PHDR32_FIELDS: tuple[str, ...] = (
    "p_type", "p_offset", "p_vaddr", "p_paddr",
    "p_filesz", "p_memsz", "p_flags", "p_align",
)
_PHDR64_FIELDS: tuple[str, ...] = (
    "p_type", "p_flags", "p_offset", "p_vaddr",
    "p_paddr", "p_filesz", "p_memsz", "p_align",
)


def entry_offsets(header: ElfHeader) -> list[int]:
    """File offsets of every program-header entry, in table order."""
    return [header.e_phoff + i * header.e_phentsize for i in range(header.e_phnum)]


def _read_exact(fh: BinaryIO, offset: int, size: int, what: str) -> bytes:
    fh.seek(offset)
    raw = fh.read(size)
    if len(raw) != size:
        raise ElfDecodeError(what, offset, size, len(raw))
    return raw


def decode_program_header_32(raw: bytes, endian: str) -> ProgramHeader32:
    """Decode one ``Elf32_Phdr`` from *raw* (``endian`` is ``"<"`` or ``">"``)."""
    values = struct.unpack_from(f"{endian}{_PHDR32_FMT}", raw)
    return ProgramHeader32(**dict(zip(_PHDR32_FIELDS, values)))


def decode_program_header_64(raw: bytes, endian: str) -> ProgramHeader64:
    """Decode one ``Elf64_Phdr`` from *raw* (``endian`` is ``"<"`` or ``">"``)."""
    values = struct.unpack_from(f"{endian}{_PHDR64_FMT}", raw)
    return ProgramHeader64(**dict(zip(_PHDR64_FIELDS, values)))


def read_program_headers_32(fh: BinaryIO, header: ElfHeader32) -> ProgramHeaderTable32:
    """Read the ELF32 program-header table described by *header* from *fh*."""
    if not isinstance(header, ElfHeader32):
        raise ElfClassMismatch(
            f"ELF32 program-header reader got a {type(header).__name__}"
        )

    endian = header.byte_order.struct_prefix
    entries = tuple(
        decode_program_header_32(
            _read_exact(fh, offset, SIZEOF_PHDR32, f"ELF32 program header {idx}"),
            endian,
        )
        for idx, offset in enumerate(entry_offsets(header))
    )
    return ProgramHeaderTable32(machine=header.e_machine, entries=entries)


def read_program_headers_64(fh: BinaryIO, header: ElfHeader64) -> ProgramHeaderTable64:
    """Read the ELF64 program-header table described by *header* from *fh*."""
    if not isinstance(header, ElfHeader64):
        raise ElfClassMismatch(
            f"ELF64 program-header reader got a {type(header).__name__}"
        )

    endian = header.byte_order.struct_prefix
    entries = tuple(
        decode_program_header_64(
            _read_exact(fh, offset, SIZEOF_PHDR64, f"ELF64 program header {idx}"),
            endian,
        )
        for idx, offset in enumerate(entry_offsets(header))
    )
    return ProgramHeaderTable64(machine=header.e_machine, entries=entries)


def read_program_headers(
    path: PathLike,
    header: Optional[ElfHeader] = None,
    *,
    swap_elf32_flags: bool = False,
) -> ProgramHeaderTable:
    """Read the program-header table of the file at *path*.

    Args:
        path: ELF file to read.
        header: Already-decoded file header of the same file.  When
                ``None`` the header is decoded again from *path*.
        swap_elf32_flags: Forwarded to the header decoder when *header*
                          is not supplied.

    Raises:
        ElfDecodeError: If the file header or any entry is truncated.
        OSError: If the file cannot be opened, seeked or read.
    """
    if header is None:
        header = read_header(path, swap_elf32_flags=swap_elf32_flags)

    with open(path, "rb") as fh:
        if header.kind == "ELF32":
            return read_program_headers_32(fh, header)
        return read_program_headers_64(fh, header)

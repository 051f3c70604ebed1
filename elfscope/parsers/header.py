"""
ELF File Header Decoder
========================

Manual :mod:`struct`-based decoding of ``Elf32_Ehdr`` and ``Elf64_Ehdr``.

The buffer is reinterpreted as-is: there is no magic-number check, and a
non-ELF buffer of sufficient length decodes to meaningless values.  A
buffer that is too short raises :class:`ElfDecodeError`; a zero-filled
header is never fabricated.

Byte order follows ``e_ident[EI_DATA]``: ``2`` decodes every multi-byte
field big-endian, anything else little-endian.  One exception: for
ELF32, ``e_flags`` stays in file order (little-endian) unless
``swap_elf32_flags`` is set.  ELF64 always decodes
``e_flags`` with the file's byte order.

Layouts (after the 16 identification bytes)::

    ELF32: e_type H, e_machine H, e_version I, e_entry I, e_phoff I,
           e_shoff I, e_flags I, e_ehsize H, e_phentsize H, e_phnum H,
           e_shentsize H, e_shnum H, e_shstrndx H
    ELF64: same, with e_entry / e_phoff / e_shoff widened to Q
"""

from __future__ import annotations

import struct

from elfscope.core.exceptions import ElfDecodeError
from elfscope.core.models import (
    ByteOrder,
    ElfClass,
    ElfHeader,
    ElfHeader32,
    ElfHeader64,
)
from elfscope.parsers.codes import EI_NIDENT
from elfscope.parsers.ident import PathLike, identify, sniff_class

# Minimum buffer lengths.  The ELF32 fields span 52 bytes but 54 are
# required before decoding.
SIZEOF_EHDR32: int = 54
SIZEOF_EHDR64: int = 64

_EHDR32_FMT: str = "HHIIIIIHHHHHH"
_EHDR64_FMT: str = "HHIQQQIHHHHHH"

# Offset of e_flags inside Elf32_Ehdr
_EHDR32_FLAGS_OFFSET: int = EI_NIDENT + 2 + 2 + 4 + 4 + 4 + 4

_FIELD_NAMES: tuple[str, ...] = (
    "e_type", "e_machine", "e_version", "e_entry",
    "e_phoff", "e_shoff", "e_flags", "e_ehsize",
    "e_phentsize", "e_phnum", "e_shentsize", "e_shnum",
    "e_shstrndx",
)


def header_size(elf_class: ElfClass) -> int:
    """Number of leading bytes :func:`decode_header` needs for *elf_class*."""
    return SIZEOF_EHDR32 if elf_class is ElfClass.ELF32 else SIZEOF_EHDR64


def decode_header(
    data: bytes,
    elf_class: ElfClass,
    *,
    swap_elf32_flags: bool = False,
) -> ElfHeader:
    """Decode the file header at the start of *data*.

    Args:
        data: At least :func:`header_size` leading bytes of the file.
        elf_class: Class chosen by the identification sniffer.  It is
                   trusted even if ``data[EI_CLASS]`` disagrees.
        swap_elf32_flags: Decode ELF32 ``e_flags`` with the file's byte
                          order instead of leaving it in file order.

    Returns:
        :class:`ElfHeader32` or :class:`ElfHeader64`.

    Raises:
        ElfDecodeError: If *data* is shorter than the header.
    """
    wanted = header_size(elf_class)
    if len(data) < wanted:
        raise ElfDecodeError(f"{elf_class.value} file header", 0, wanted, len(data))

    e_ident = bytes(data[:EI_NIDENT])
    byte_order = identify(e_ident).byte_order
    endian = byte_order.struct_prefix

    if elf_class is ElfClass.ELF32:
        fields = dict(zip(_FIELD_NAMES, struct.unpack_from(f"{endian}{_EHDR32_FMT}", data, EI_NIDENT)))
        if byte_order is ByteOrder.BIG and not swap_elf32_flags:
            (fields["e_flags"],) = struct.unpack_from("<I", data, _EHDR32_FLAGS_OFFSET)
        return ElfHeader32(e_ident=e_ident, **fields)

    fields = dict(zip(_FIELD_NAMES, struct.unpack_from(f"{endian}{_EHDR64_FMT}", data, EI_NIDENT)))
    return ElfHeader64(e_ident=e_ident, **fields)


def read_header(
    path: PathLike,
    *,
    swap_elf32_flags: bool = False,
) -> ElfHeader:
    """Sniff the class of the file at *path* and decode its header.

    Raises:
        ElfDecodeError: If the file is too short.
        OSError: If the file cannot be opened or read.
    """
    with open(path, "rb") as fh:
        elf_class = sniff_class(fh)
        fh.seek(0)
        data = fh.read(header_size(elf_class))
    return decode_header(data, elf_class, swap_elf32_flags=swap_elf32_flags)

"""
ELF Identification Sniffer
===========================

Reads the minimum needed from the identification bytes to choose a
decoding path.

The class test is two-way: ``EI_CLASS == 1`` selects the
32-bit layouts and *every* other value, including ``ELFCLASSNONE`` and
garbage, selects the 64-bit layouts.  No magic-number check is made.
"""

from __future__ import annotations

import os
from typing import BinaryIO, Union

from elfscope.core.exceptions import ElfDecodeError
from elfscope.core.models import ByteOrder, ElfClass, Identification
from elfscope.parsers.codes import EI_CLASS, EI_DATA

PathLike = Union[str, "os.PathLike[str]"]


def sniff_class(source: BinaryIO) -> ElfClass:
    """Determine the ELF class of an open binary stream.

    Seeks to ``EI_CLASS`` and reads one byte.  The stream position is left
    just past that byte; callers that need the header re-seek or re-open.

    Raises:
        ElfDecodeError: If the stream ends before ``EI_CLASS``.
        OSError: If seeking or reading fails.
    """
    source.seek(EI_CLASS)
    raw = source.read(1)
    if len(raw) != 1:
        raise ElfDecodeError("identification", EI_CLASS, 1, len(raw))
    return ElfClass.from_ident(raw[0])


def sniff_path(path: PathLike) -> ElfClass:
    """Open *path* and return its ELF class (see :func:`sniff_class`)."""
    with open(path, "rb") as fh:
        return sniff_class(fh)


def identify(ident: bytes) -> Identification:
    """Derive class and byte order from in-memory identification bytes.

    Raises:
        ElfDecodeError: If *ident* does not reach ``EI_DATA``.
    """
    if len(ident) <= EI_DATA:
        raise ElfDecodeError("identification", 0, EI_DATA + 1, len(ident))
    return Identification(
        elf_class=ElfClass.from_ident(ident[EI_CLASS]),
        byte_order=ByteOrder.from_ident(ident[EI_DATA]),
    )

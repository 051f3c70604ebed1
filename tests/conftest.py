"""Synthetic ELF images for the ELFScope test suite."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Any, Callable

import pytest

EM_MIPS = 8
EM_ARM = 40
EM_X86_64 = 62

_PH_FIELDS = ("p_type", "p_flags", "p_offset", "p_vaddr", "p_paddr", "p_filesz", "p_memsz", "p_align")


def build_elf(
    *,
    bits: int = 64,
    big_endian: bool = False,
    class_byte: int | None = None,
    magic: bytes = b"\x7fELF",
    osabi: int = 0,
    e_type: int = 2,
    machine: int = EM_X86_64,
    entry: int = 0x401000,
    phoff: int = 64,
    shoff: int = 0x1000,
    flags: int = 0,
    phentsize: int | None = None,
    shentsize: int | None = None,
    shnum: int = 0,
    shstrndx: int = 0,
    phdrs: list[dict[str, int]] | None = None,
    phnum: int | None = None,
) -> bytes:
    """Assemble a file header followed by a program-header table.

    Every multi-byte field, ``e_flags`` included, is written in the
    requested byte order.
    """
    phdrs = phdrs or []
    endian = ">" if big_endian else "<"
    if class_byte is None:
        class_byte = 1 if bits == 32 else 2
    if phentsize is None:
        phentsize = 32 if bits == 32 else 56
    if shentsize is None:
        shentsize = 40 if bits == 32 else 64
    if phnum is None:
        phnum = len(phdrs)

    ident = magic + bytes([class_byte, 2 if big_endian else 1, 1, osabi]) + bytes(8)
    if bits == 32:
        body = struct.pack(
            f"{endian}HHIIIIIHHHHHH",
            e_type, machine, 1, entry, phoff, shoff, flags,
            52, phentsize, phnum, shentsize, shnum, shstrndx,
        )
    else:
        body = struct.pack(
            f"{endian}HHIQQQIHHHHHH",
            e_type, machine, 1, entry, phoff, shoff, flags,
            64, phentsize, phnum, shentsize, shnum, shstrndx,
        )

    image = bytearray(ident + body)
    if len(image) < phoff:
        image.extend(bytes(phoff - len(image)))

    for ph in phdrs:
        values = {name: ph.get(name, 0) for name in _PH_FIELDS}
        if bits == 32:
            raw = struct.pack(
                f"{endian}IIIIIIII",
                values["p_type"], values["p_offset"], values["p_vaddr"], values["p_paddr"],
                values["p_filesz"], values["p_memsz"], values["p_flags"], values["p_align"],
            )
        else:
            raw = struct.pack(
                f"{endian}IIQQQQQQ",
                values["p_type"], values["p_flags"], values["p_offset"], values["p_vaddr"],
                values["p_paddr"], values["p_filesz"], values["p_memsz"], values["p_align"],
            )
        image.extend(raw.ljust(phentsize, b"\x00"))

    return bytes(image)


# Program headers of a typical dynamically linked x86-64 executable
LS_PHDRS: list[dict[str, int]] = [
    {"p_type": 6, "p_flags": 4, "p_offset": 0x40, "p_vaddr": 0x40, "p_paddr": 0x40,
     "p_filesz": 0x2D8, "p_memsz": 0x2D8, "p_align": 0x8},
    {"p_type": 3, "p_flags": 4, "p_offset": 0x318, "p_vaddr": 0x318, "p_paddr": 0x318,
     "p_filesz": 0x1C, "p_memsz": 0x1C, "p_align": 0x1},
    {"p_type": 1, "p_flags": 4, "p_filesz": 0x3510, "p_memsz": 0x3510, "p_align": 0x1000},
    {"p_type": 1, "p_flags": 5, "p_offset": 0x4000, "p_vaddr": 0x4000, "p_paddr": 0x4000,
     "p_filesz": 0x13146, "p_memsz": 0x13146, "p_align": 0x1000},
    {"p_type": 1, "p_flags": 4, "p_offset": 0x18000, "p_vaddr": 0x18000, "p_paddr": 0x18000,
     "p_filesz": 0x74B8, "p_memsz": 0x74B8, "p_align": 0x1000},
    {"p_type": 1, "p_flags": 6, "p_offset": 0x1FFD0, "p_vaddr": 0x20FD0, "p_paddr": 0x20FD0,
     "p_filesz": 0x12A8, "p_memsz": 0x2568, "p_align": 0x1000},
    {"p_type": 2, "p_flags": 6, "p_offset": 0x20A58, "p_vaddr": 0x21A58, "p_paddr": 0x21A58,
     "p_filesz": 0x200, "p_memsz": 0x200, "p_align": 0x8},
    {"p_type": 4, "p_flags": 4, "p_offset": 0x338, "p_vaddr": 0x338, "p_paddr": 0x338,
     "p_filesz": 0x30, "p_memsz": 0x30, "p_align": 0x8},
    {"p_type": 4, "p_flags": 4, "p_offset": 0x368, "p_vaddr": 0x368, "p_paddr": 0x368,
     "p_filesz": 0x44, "p_memsz": 0x44, "p_align": 0x4},
    {"p_type": 0x6474E553, "p_flags": 4, "p_offset": 0x338, "p_vaddr": 0x338, "p_paddr": 0x338,
     "p_filesz": 0x30, "p_memsz": 0x30, "p_align": 0x8},
    {"p_type": 0x6474E550, "p_flags": 4, "p_offset": 0x1CDCC, "p_vaddr": 0x1CDCC, "p_paddr": 0x1CDCC,
     "p_filesz": 0x56C, "p_memsz": 0x56C, "p_align": 0x4},
    {"p_type": 0x6474E551, "p_flags": 6, "p_align": 0x10},
    {"p_type": 0x6474E552, "p_flags": 4, "p_offset": 0x1FFD0, "p_vaddr": 0x20FD0, "p_paddr": 0x20FD0,
     "p_filesz": 0x1030, "p_memsz": 0x1030, "p_align": 0x1},
]


@pytest.fixture
def make_elf() -> Callable[..., bytes]:
    return build_elf


@pytest.fixture
def write_elf(tmp_path: Path) -> Callable[..., Path]:
    """Return ``write(name="a.out", data=None, **build_kwargs) -> Path``."""

    def _write(name: str = "a.out", data: bytes | None = None, **kwargs: Any) -> Path:
        path = tmp_path / name
        path.write_bytes(build_elf(**kwargs) if data is None else data)
        return path

    return _write


@pytest.fixture
def ls_like(write_elf: Callable[..., Path]) -> Path:
    """Little-endian ELF64 x86-64 executable with 13 program headers."""
    return write_elf("ls", e_type=3, entry=0x6AB0, shoff=0x22E28, shnum=30, shstrndx=29, phdrs=LS_PHDRS)


@pytest.fixture
def armel(write_elf: Callable[..., Path]) -> Path:
    """Little-endian ELF32 ARM executable with processor-specific segments."""
    return write_elf(
        "dd.armel",
        bits=32,
        machine=EM_ARM,
        entry=0x10D7C,
        phoff=52 + 12,
        shoff=0xA4F8,
        flags=0x5000200,
        phdrs=[
            {"p_type": 0x70000001, "p_flags": 4, "p_offset": 0x9B04, "p_vaddr": 0x19B04,
             "p_paddr": 0x19B04, "p_filesz": 0x8, "p_memsz": 0x8, "p_align": 0x4},
            {"p_type": 0x70000000, "p_flags": 4, "p_offset": 0x9B0C, "p_filesz": 0x10, "p_memsz": 0x10,
             "p_align": 0x1},
            {"p_type": 1, "p_flags": 5, "p_vaddr": 0x10000, "p_paddr": 0x10000,
             "p_filesz": 0x9B10, "p_memsz": 0x9B10, "p_align": 0x10000},
        ],
    )


@pytest.fixture
def mipsel(write_elf: Callable[..., Path]) -> Path:
    """Little-endian ELF32 MIPS executable with a register-info segment second."""
    return write_elf(
        "objdump.mips",
        bits=32,
        machine=EM_MIPS,
        entry=0x404F40,
        flags=0x70001007,
        phdrs=[
            {"p_type": 6, "p_flags": 5, "p_offset": 0x34, "p_vaddr": 0x400034, "p_paddr": 0x400034,
             "p_filesz": 0x160, "p_memsz": 0x160, "p_align": 0x4},
            {"p_type": 0x70000000, "p_flags": 4, "p_offset": 0x1B8, "p_vaddr": 0x4001B8,
             "p_paddr": 0x4001B8, "p_filesz": 0x18, "p_memsz": 0x18, "p_align": 0x4},
            {"p_type": 0x70000003, "p_flags": 4, "p_offset": 0x1D0, "p_vaddr": 0x4001D0,
             "p_paddr": 0x4001D0, "p_filesz": 0x18, "p_memsz": 0x18, "p_align": 0x8},
        ],
    )

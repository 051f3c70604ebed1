"""
ELFScope Data Models
=====================

Pydantic models for the decoded ELF file header and program-header
table.  Each concept exists in two variants, one per ELF class, tagged
by a ``kind`` literal so that the pair forms a discriminated union:

    ElfHeader          = ElfHeader32 | ElfHeader64
    ProgramHeader      = ProgramHeader32 | ProgramHeader64
    ProgramHeaderTable = ProgramHeaderTable32 | ProgramHeaderTable64

All models are frozen: once a decoder has produced one it is never
mutated.  Multi-byte fields hold host-natural integers.

References:
    - System V Application Binary Interface, Edition 4.1, chapter 4 and 5.
"""

from __future__ import annotations

import enum
from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from elfscope.parsers.codes import EI_CLASS, EI_DATA, EI_OSABI, ELFCLASS32, ELFDATA2MSB


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ElfClass(str, enum.Enum):
    """Address width selected from ``e_ident[EI_CLASS]``."""
    ELF32 = "ELF32"
    ELF64 = "ELF64"

    @classmethod
    def from_ident(cls, value: int) -> ElfClass:
        """Anything but ``ELFCLASS32`` decodes as 64-bit."""
        return cls.ELF32 if value == ELFCLASS32 else cls.ELF64


class ByteOrder(str, enum.Enum):
    """Byte order selected from ``e_ident[EI_DATA]``."""
    LITTLE = "little"
    BIG = "big"

    @classmethod
    def from_ident(cls, value: int) -> ByteOrder:
        """Only ``ELFDATA2MSB`` selects big-endian decoding."""
        return cls.BIG if value == ELFDATA2MSB else cls.LITTLE

    @property
    def struct_prefix(self) -> str:
        """The :mod:`struct` byte-order character for this order."""
        return ">" if self is ByteOrder.BIG else "<"


class Identification(BaseModel):
    """Class and byte order derived once from the identification bytes."""
    model_config = ConfigDict(frozen=True)

    elf_class: ElfClass
    byte_order: ByteOrder


# ---------------------------------------------------------------------------
# File header
# ---------------------------------------------------------------------------

class _ElfHeaderBase(BaseModel):
    """Fields shared by both ELF header variants.

    Attributes:
        e_ident: The 16 identification bytes, exactly as read from disk.
        e_type: Object file type.
        e_machine: Target instruction-set architecture.
        e_version: Object file version.
        e_entry: Entry point virtual address.
        e_phoff: File offset of the program-header table.
        e_shoff: File offset of the section-header table.
        e_flags: Processor-specific flags.
        e_ehsize: Size of this header in bytes.
        e_phentsize: Size of one program-header entry.
        e_phnum: Number of program-header entries.
        e_shentsize: Size of one section-header entry.
        e_shnum: Number of section-header entries.
        e_shstrndx: Section index of the section-name string table.
    """
    model_config = ConfigDict(frozen=True)

    e_ident: bytes = Field(min_length=16, max_length=16)
    e_type: int
    e_machine: int
    e_version: int
    e_entry: int
    e_phoff: int
    e_shoff: int
    e_flags: int
    e_ehsize: int
    e_phentsize: int
    e_phnum: int
    e_shentsize: int
    e_shnum: int
    e_shstrndx: int

    @property
    def ei_class(self) -> int:
        return self.e_ident[EI_CLASS]

    @property
    def ei_data(self) -> int:
        return self.e_ident[EI_DATA]

    @property
    def ei_osabi(self) -> int:
        return self.e_ident[EI_OSABI]

    @property
    def elf_class(self) -> ElfClass:
        return ElfClass(self.kind)  # type: ignore[attr-defined]

    @property
    def byte_order(self) -> ByteOrder:
        return ByteOrder.from_ident(self.ei_data)

    @property
    def identification(self) -> Identification:
        return Identification(elf_class=self.elf_class, byte_order=self.byte_order)


class ElfHeader32(_ElfHeaderBase):
    """``Elf32_Ehdr``: addresses and offsets are 32-bit."""
    kind: Literal["ELF32"] = "ELF32"


class ElfHeader64(_ElfHeaderBase):
    """``Elf64_Ehdr``: addresses and offsets are 64-bit."""
    kind: Literal["ELF64"] = "ELF64"


ElfHeader = Annotated[Union[ElfHeader32, ElfHeader64], Field(discriminator="kind")]


# ---------------------------------------------------------------------------
# Program header
# ---------------------------------------------------------------------------

class _ProgramHeaderBase(BaseModel):
    """Fields shared by both program-header variants.

    The on-disk position of ``p_flags`` differs between the classes
    (last-but-one in ELF32, second in ELF64); the decoders handle that,
    the models only carry the values.
    """
    model_config = ConfigDict(frozen=True)

    p_type: int
    p_flags: int
    p_offset: int
    p_vaddr: int
    p_paddr: int
    p_filesz: int
    p_memsz: int
    p_align: int


class ProgramHeader32(_ProgramHeaderBase):
    """``Elf32_Phdr``"""
    kind: Literal["ELF32"] = "ELF32"


class ProgramHeader64(_ProgramHeaderBase):
    """``Elf64_Phdr``"""
    kind: Literal["ELF64"] = "ELF64"


ProgramHeader = Annotated[Union[ProgramHeader32, ProgramHeader64], Field(discriminator="kind")]


class _ProgramHeaderTableBase(BaseModel):
    """An ordered, immutable program-header table.

    ``machine`` is the owning header's ``e_machine``; segment type names
    depend on it.  Entries are kept in table (load) order.
    """
    model_config = ConfigDict(frozen=True)

    machine: int

    def __len__(self) -> int:
        return len(self.entries)  # type: ignore[attr-defined]

    def __getitem__(self, index: int) -> ProgramHeader:
        return self.entries[index]  # type: ignore[attr-defined]

    # Iterates entries, not (field, value) pairs as BaseModel does
    def __iter__(self) -> Iterator[ProgramHeader]:  # type: ignore[override]
        return iter(self.entries)  # type: ignore[attr-defined]


class ProgramHeaderTable32(_ProgramHeaderTableBase):
    kind: Literal["ELF32"] = "ELF32"
    entries: tuple[ProgramHeader32, ...] = ()


class ProgramHeaderTable64(_ProgramHeaderTableBase):
    kind: Literal["ELF64"] = "ELF64"
    entries: tuple[ProgramHeader64, ...] = ()


ProgramHeaderTable = Annotated[
    Union[ProgramHeaderTable32, ProgramHeaderTable64], Field(discriminator="kind")
]

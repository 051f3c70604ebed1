"""
ELF Code Tables
================

Lookup tables mapping the raw integer codes found in ELF identification
bytes, file headers and program headers to descriptive names.

Every lookup is a total function: codes missing from a table fall back to
the :data:`UNKNOWN` sentinel (or :data:`UNKNOWN_FLAGS` for segment
permission bits) instead of raising.

Processor-specific segment types (``PT_LOPROC`` .. ``PT_HIPROC``) overlap
between architectures.  :func:`segment_type_name` resolves them from the
*name* of the target machine, matched by case-insensitive substring
against ``"arm"`` and ``"mips"``.  This is looser than comparing
``e_machine`` numerically (AArch64 matches ``"arm"`` too) and is kept
that way on purpose.

References:
    - System V Application Binary Interface, Edition 4.1, chapter 4 and 5.
    - ELF for the Arm Architecture (IHI 0044), section 5.2.
    - MIPS ABI Supplement, chapter 5.
"""

from __future__ import annotations


UNKNOWN: str = "Unknown"
UNKNOWN_FLAGS: str = "???"


# ---------------------------------------------------------------------------
# Identification bytes
# ---------------------------------------------------------------------------

# e_ident offsets
EI_CLASS: int = 0x4
EI_DATA: int = 0x5
EI_VERSION: int = 0x6
EI_OSABI: int = 0x7
EI_NIDENT: int = 16

# ELF Class (32-bit vs 64-bit)
ELFCLASS32: int = 1
ELFCLASS64: int = 2

_CLASS_NAMES: dict[int, str] = {
    ELFCLASS32: "ELF32",
    ELFCLASS64: "ELF64",
}

# Data encoding (endianness)
ELFDATA2LSB: int = 1  # Little-endian
ELFDATA2MSB: int = 2  # Big-endian

_DATA_NAMES: dict[int, str] = {
    ELFDATA2LSB: "Little endian",
    ELFDATA2MSB: "Big endian",
}

_OSABI_NAMES: dict[int, str] = {
    0: "System V",
    1: "HP-UX",
    2: "NetBSD",
    3: "Linux",
    4: "GNU Hurd",
    6: "Solaris",
    7: "AIX",
    8: "IRIX",
    9: "FreeBSD",
    10: "Tru64",
    11: "Novell Modesto",
    12: "OpenBSD",
    13: "OpenVMS",
    14: "NonStop Kernel",
    15: "AROS",
    16: "Fenix OS",
    17: "CloudABI",
    18: "Stratus Technologies OpenVOS",
}


# ---------------------------------------------------------------------------
# File header
# ---------------------------------------------------------------------------

# ELF type
ET_NONE: int = 0
ET_REL: int = 1
ET_EXEC: int = 2
ET_DYN: int = 3
ET_CORE: int = 4
ET_LOOS: int = 0xFE00
ET_HIOS: int = 0xFEFF
ET_LOPROC: int = 0xFF00
ET_HIPROC: int = 0xFFFF

_ET_NAMES: dict[int, str] = {
    ET_NONE: "No file type",
    ET_REL: "Relocatable file",
    ET_EXEC: "Executable file",
    ET_DYN: "Shared object file",
    ET_CORE: "Core file",
    ET_LOOS: "Operating system-specific",
    ET_HIOS: "Operating system-specific",
    ET_LOPROC: "Processor-specific",
    ET_HIPROC: "Processor-specific",
}

# Machine architectures
EM_386: int = 3
EM_MIPS: int = 8
EM_ARM: int = 40
EM_X86_64: int = 62
EM_AARCH64: int = 183

_EM_NAMES: dict[int, str] = {
    0: "No machine",
    1: "AT&T WE 32100",
    2: "SUN SPARC",
    EM_386: "Intel 80386",
    4: "Motorola 68000",
    5: "Motorola 88000",
    7: "Intel 80860",
    EM_MIPS: "MIPS R3000 big-endian",
    15: "Hewlett-Packard PA-RISC",
    18: "Enhanced instruction set SPARC",
    20: "PowerPC",
    21: "PowerPC64",
    22: "IBM S/390",
    23: "Cell BE SPU",
    EM_ARM: "Advanced RISC Machines ARM",
    41: "Digital Alpha",
    42: "Hitachi SH",
    43: "SPARC Version 9 64-bit",
    46: "Renesas H8/300",
    50: "Intel IA-64 processor architecture",
    EM_X86_64: "AMD x86-64 architecture",
    76: "Axis Communications 32-bit embedded processor",
    88: "Renesas M32R",
    89: "Panasonic/MEI MN10300, AM33",
    92: "OpenRISC 32-bit embedded processor",
    93: "ARC Cores Tangent-A5",
    94: "Tensilica Xtensa Architecture",
    106: "ADI Blackfin processor",
    110: "UniCore-32",
    113: "Altera Nios II soft-core processor",
    140: "TMS320C6000 Family",
    164: "QUALCOMM Hexagon",
    167: "Andes Technology embedded RISC processor",
    EM_AARCH64: "ARM 64-bits (ARMv8/Aarch64)",
    188: "Tilera TILE-Gx",
    195: "ARCv2 Cores",
    243: "RISC-V",
    247: "Linux BPF",
    252: "C-SKY",
}


# ---------------------------------------------------------------------------
# Program header
# ---------------------------------------------------------------------------

PT_NULL: int = 0
PT_LOAD: int = 1
PT_DYNAMIC: int = 2
PT_INTERP: int = 3
PT_NOTE: int = 4
PT_SHLIB: int = 5
PT_PHDR: int = 6
PT_TLS: int = 7
PT_LOOS: int = 0x60000000
PT_GNU_EH_FRAME: int = 0x6474E550
PT_GNU_STACK: int = 0x6474E551
PT_GNU_RELRO: int = 0x6474E552
PT_GNU_PROPERTY: int = 0x6474E553
PT_HIOS: int = 0x6FFFFFFF
PT_LOPROC: int = 0x70000000
PT_HIPROC: int = 0x7FFFFFFF

_PT_NAMES: dict[int, str] = {
    PT_NULL: "PT_NULL",
    PT_LOAD: "PT_LOAD",
    PT_DYNAMIC: "PT_DYNAMIC",
    PT_INTERP: "PT_INTERP",
    PT_NOTE: "PT_NOTE",
    PT_SHLIB: "PT_SHLIB",
    PT_PHDR: "PT_PHDR",
    PT_TLS: "PT_TLS",
    PT_LOOS: "PT_LOOS",
    PT_HIOS: "PT_HIOS",
    PT_HIPROC: "PT_HIPROC",
    PT_GNU_PROPERTY: "GNU_PROPERTY",
    PT_GNU_EH_FRAME: "GNU_EH_FRAME",
    PT_GNU_STACK: "GNU_STACK",
    PT_GNU_RELRO: "GNU_RELRO",
    PT_LOPROC + 2: "PT_MIPS_OPTIONS",
    PT_LOPROC + 3: "PT_MIPS_ABI_FLAGS",
}

# Processor-specific types whose meaning depends on the target machine.
# Each entry is a list of (architecture fragment, name) checked in order,
# followed by the fallback name.
_PT_ARCH_OVERRIDES: dict[int, tuple[list[tuple[str, str]], str]] = {
    PT_LOPROC: (
        [("arm", "PT_ARM_ARCHEXT"), ("mips", "PT_MIPS_REGINFO")],
        "PT_LOPROC",
    ),
    PT_LOPROC + 1: (
        [("arm", "PT_ARM_EXIDX")],
        "PT_MIPS_RTPROC",
    ),
}

# Program header flags
PF_X: int = 0x1  # Execute
PF_W: int = 0x2  # Write
PF_R: int = 0x4  # Read

_PF_NAMES: dict[int, str] = {
    PF_X: "X",
    PF_W: "W",
    PF_W | PF_X: " WX",
    PF_R: "R",
    PF_R | PF_X: "R X",
    PF_R | PF_W: "RW",
    PF_R | PF_W | PF_X: "RWX",
}


# ---------------------------------------------------------------------------
# Lookup functions
# ---------------------------------------------------------------------------

def class_name(code: int) -> str:
    """Name of an ``EI_CLASS`` value (``"ELF32"`` / ``"ELF64"``)."""
    return _CLASS_NAMES.get(code, UNKNOWN)


def data_encoding_name(code: int) -> str:
    """Name of an ``EI_DATA`` value."""
    return _DATA_NAMES.get(code, UNKNOWN)


def osabi_name(code: int) -> str:
    """Name of an ``EI_OSABI`` value."""
    return _OSABI_NAMES.get(code, UNKNOWN)


def object_type_name(code: int) -> str:
    """Name of an ``e_type`` value.

    Only the bounds of the OS- and processor-specific ranges are named;
    codes strictly inside those ranges are reported as unknown.
    """
    return _ET_NAMES.get(code, UNKNOWN)


def machine_name(code: int) -> str:
    """Name of an ``e_machine`` value."""
    return _EM_NAMES.get(code, UNKNOWN)


def segment_flags_name(code: int) -> str:
    """Render ``p_flags`` as a permission string such as ``"R X"``.

    Any value other than a non-empty combination of the three low bits,
    including ``0``, renders as :data:`UNKNOWN_FLAGS`.
    """
    return _PF_NAMES.get(code, UNKNOWN_FLAGS)


def segment_type_name(code: int, machine: int) -> str:
    """Name of a ``p_type`` value for a binary targeting *machine*.

    Args:
        code: Raw ``p_type``.
        machine: ``e_machine`` of the owning file header.
    """
    override = _PT_ARCH_OVERRIDES.get(code)
    if override is None:
        return _PT_NAMES.get(code, UNKNOWN)

    candidates, fallback = override
    arch = machine_name(machine).lower()
    for fragment, name in candidates:
        if fragment in arch:
            return name
    return fallback

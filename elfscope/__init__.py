"""
ELFScope -- ELF Header and Program-Header Reader
=================================================

ELFScope reads the identification bytes, the file header and the
program-header (segment) table of an ELF binary and renders them in the
style of a minimal ``readelf``.  Both ELF classes and both byte orders
are supported, auto-detected from the identification bytes.

Capabilities:
    - ELF32 / ELF64 class sniffing from ``e_ident[EI_CLASS]``
    - Little- and big-endian decoding from ``e_ident[EI_DATA]``
    - Offset-driven program-header table reads
    - Name tables for class, data encoding, OS/ABI, object type, machine,
      segment type (with ARM / MIPS processor-specific overrides) and
      segment flags
    - Fixed-layout text reports and JSON export

References:
    - TIS Committee. (1995). Executable and Linking Format (ELF)
      Specification, Version 1.2.
    - System V Application Binary Interface, Edition 4.1.
"""

__version__ = "1.0.0"

from elfscope.core.engine import (  # noqa: E402
    ElfSession,
    header_report,
    program_headers_report,
    read_header,
    read_program_headers,
)

__all__ = [
    "ElfSession",
    "header_report",
    "program_headers_report",
    "read_header",
    "read_program_headers",
]

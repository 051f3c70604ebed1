"""
ELFScope Exceptions
====================

``ElfScopeError`` is the base of every recoverable failure raised by the
decoders; the CLI reports these and exits non-zero.  Operating-system
errors (missing file, permission denied, ...) are *not* wrapped and
propagate as :class:`OSError`.

:class:`ElfClassMismatch` signals a programming error inside the package
and is not an :class:`ElfScopeError`; nothing catches it.
"""

from __future__ import annotations


class ElfScopeError(Exception):
    """Base class for recoverable ELFScope failures."""


class ElfDecodeError(ElfScopeError, ValueError):
    """Raised when a buffer or read is too short for the structure expected.

    Attributes:
        what: Name of the structure being decoded.
        offset: File offset the structure starts at.
        wanted: Number of bytes the structure needs.
        got: Number of bytes actually available.
    """

    def __init__(self, what: str, offset: int, wanted: int, got: int) -> None:
        self.what = what
        self.offset = offset
        self.wanted = wanted
        self.got = got
        super().__init__(
            f"truncated {what} at offset 0x{offset:x}: "
            f"need {wanted} bytes, got {got}"
        )


class ElfClassMismatch(AssertionError):
    """A decoder was handed a structure of the other ELF class."""

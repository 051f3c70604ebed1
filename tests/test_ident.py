"""Tests for elfscope.parsers.ident"""

from __future__ import annotations

import io

import pytest

from elfscope.core.exceptions import ElfDecodeError, ElfScopeError
from elfscope.core.models import ByteOrder, ElfClass
from elfscope.parsers.ident import identify, sniff_class, sniff_path


class TestSniffClass:
    def test_class_one_is_elf32(self):
        assert sniff_class(io.BytesIO(b"\x7fELF\x01")) is ElfClass.ELF32

    @pytest.mark.parametrize("value", [0, 2, 3, 0xFF])
    def test_anything_else_is_elf64(self, value):
        assert sniff_class(io.BytesIO(b"\x7fELF" + bytes([value]))) is ElfClass.ELF64

    def test_no_magic_check(self):
        assert sniff_class(io.BytesIO(b"MZ\x90\x00\x01")) is ElfClass.ELF32

    def test_short_source(self):
        with pytest.raises(ElfDecodeError) as info:
            sniff_class(io.BytesIO(b"\x7fELF"))
        assert info.value.offset == 4
        assert info.value.wanted == 1
        assert info.value.got == 0

    def test_decode_error_is_recoverable(self):
        with pytest.raises(ElfScopeError):
            sniff_class(io.BytesIO(b""))
        with pytest.raises(ValueError):
            sniff_class(io.BytesIO(b""))

    def test_advances_cursor(self):
        stream = io.BytesIO(b"\x7fELF\x02\x01")
        sniff_class(stream)
        assert stream.tell() == 5


class TestSniffPath:
    def test_reads_file(self, write_elf):
        assert sniff_path(write_elf(bits=32)) is ElfClass.ELF32
        assert sniff_path(write_elf("b", bits=64)) is ElfClass.ELF64

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            sniff_path(tmp_path / "missing")


class TestIdentify:
    def test_big_endian(self):
        ident = identify(b"\x7fELF\x01\x02\x01\x00")
        assert ident.elf_class is ElfClass.ELF32
        assert ident.byte_order is ByteOrder.BIG

    @pytest.mark.parametrize("value", [0, 1, 3])
    def test_everything_but_two_is_little(self, value):
        assert identify(b"\x7fELF\x02" + bytes([value])).byte_order is ByteOrder.LITTLE

    def test_too_short(self):
        with pytest.raises(ElfDecodeError):
            identify(b"\x7fELF\x02")

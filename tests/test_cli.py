"""Tests for elfscope.cli"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from elfscope.cli import elfscope_cli
from elfscope.core.engine import header_report, program_headers_report


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestTextOutput:
    def test_both_reports(self, runner, ls_like):
        result = runner.invoke(elfscope_cli, [str(ls_like)])
        assert result.exit_code == 0
        assert result.stdout == header_report(ls_like) + program_headers_report(ls_like)

    def test_header_only(self, runner, armel):
        result = runner.invoke(elfscope_cli, [str(armel), "--header-only"])
        assert result.exit_code == 0
        assert result.stdout == header_report(armel)

    def test_program_headers_only(self, runner, mipsel):
        result = runner.invoke(elfscope_cli, [str(mipsel), "-l"])
        assert result.exit_code == 0
        assert result.stdout == program_headers_report(mipsel)

    def test_mutually_exclusive(self, runner, ls_like):
        result = runner.invoke(elfscope_cli, [str(ls_like), "--header-only", "--program-headers-only"])
        assert result.exit_code == 2

    def test_pretty(self, runner, ls_like):
        result = runner.invoke(elfscope_cli, [str(ls_like), "--pretty"])
        assert result.exit_code == 0
        assert "ELF Header:" in result.output
        assert "Program Headers" in result.output


class TestJsonOutput:
    def test_json_stdout(self, runner, ls_like):
        result = runner.invoke(elfscope_cli, [str(ls_like), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["header"]["decoded"]["machine"] == "AMD x86-64 architecture"
        assert data["program_headers"]["count"] == 13

    def test_json_respects_selection(self, runner, ls_like):
        result = runner.invoke(elfscope_cli, [str(ls_like), "--json", "--header-only"])
        data = json.loads(result.stdout)
        assert "header" in data
        assert "program_headers" not in data

    def test_output_file(self, runner, armel, tmp_path):
        out = tmp_path / "report.json"
        result = runner.invoke(elfscope_cli, [str(armel), "-o", str(out)])
        assert result.exit_code == 0
        assert "Located 3 program headers:" in result.output
        assert json.loads(out.read_text())["program_headers"]["entries"][0]["type_name"] == "PT_ARM_EXIDX"


class TestConfigAndErrors:
    def test_config_file(self, runner, write_elf, tmp_path):
        path = write_elf(bits=32, big_endian=True, flags=0x50001007)
        config = tmp_path / "elfscope.toml"
        config.write_text("[elfscope]\nswap_elf32_flags = true\n")

        default = runner.invoke(elfscope_cli, [str(path), "--header-only"])
        swapped = runner.invoke(elfscope_cli, [str(path), "--header-only", "--config", str(config)])
        assert "  Flags:                             7100050\n" in default.stdout
        assert "  Flags:                             50001007\n" in swapped.stdout

    def test_malformed_config(self, runner, ls_like, tmp_path):
        config = tmp_path / "bad.toml"
        config.write_text("[elfscope\nswap_elf32_flags = ")
        result = runner.invoke(elfscope_cli, [str(ls_like), "--config", str(config)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "ERROR" in result.output
        assert "Invalid configuration file" in result.output

    def test_error_reported_once(self, runner, tmp_path):
        result = runner.invoke(elfscope_cli, [str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert result.output.count("Failed to read") == 1

    def test_missing_config(self, runner, ls_like, tmp_path):
        result = runner.invoke(elfscope_cli, [str(ls_like), "--config", str(tmp_path / "nope.toml")])
        assert result.exit_code == 2

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(elfscope_cli, [str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_truncated_file(self, runner, write_elf, make_elf):
        path = write_elf(data=make_elf(phdrs=[{"p_type": 1}] * 4)[:150])
        result = runner.invoke(elfscope_cli, [str(path)])
        assert result.exit_code == 1
        assert "ERROR" in result.output

    def test_verbose(self, runner, ls_like):
        result = runner.invoke(elfscope_cli, [str(ls_like), "--verbose", "--header-only"])
        assert result.exit_code == 0
        assert "ELF Header:" in result.output

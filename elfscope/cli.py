"""
ELFScope CLI -- ELF Header Reader
==================================

Click-based command-line interface for ELFScope.  Prints the file-header
report followed by the program-header report, like a minimal
``readelf -h -l``.

Usage::

    # Both reports
    elfscope /bin/ls

    # File header only
    elfscope /bin/ls --header-only

    # Program headers only, as a colour table
    elfscope /bin/ls --program-headers-only --pretty

    # JSON document on stdout
    elfscope /bin/ls --json

    # Also save the JSON document
    elfscope /bin/ls --output report.json

References:
    - Click documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys

import click

from shared.config import ScopeConfig, tomllib
from shared.console import ScopeConsole
from shared.logger import from_config

from elfscope.core.engine import ElfSession
from elfscope.core.exceptions import ElfScopeError
from elfscope.output.console import ElfConsoleOutput
from elfscope.output.report import ElfReportGenerator


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command("elfscope")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option(
    "--header-only", "-H",
    is_flag=True,
    default=False,
    help="Only show the ELF file header.",
)
@click.option(
    "--program-headers-only", "-l",
    is_flag=True,
    default=False,
    help="Only show the program-header table.",
)
@click.option(
    "--json", "json_output",
    is_flag=True,
    default=False,
    help="Output results as JSON to stdout.",
)
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the JSON report to this file.",
)
@click.option(
    "--pretty", "-p",
    is_flag=True,
    default=False,
    help="Add a summary panel and a colour table of the program headers.",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="TOML configuration file.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose/debug output.",
)
def elfscope_cli(
    path: str,
    header_only: bool,
    program_headers_only: bool,
    json_output: bool,
    output_path: str | None,
    pretty: bool,
    config_path: str | None,
    verbose: bool,
) -> None:
    """ELFScope -- ELF header and program-header reader.

    PATH is the ELF file to inspect.

    Examples:

    \b
        python -m elfscope /usr/bin/ls
        python -m elfscope firmware.elf --program-headers-only
        python -m elfscope firmware.elf --json
    """
    if header_only and program_headers_only:
        raise click.UsageError(
            "Cannot use --header-only and --program-headers-only together."
        )

    # Status messages go to stderr so that stdout carries only the reports
    console = ScopeConsole(stderr=True)
    try:
        config = ScopeConfig.load(config_path)
    except tomllib.TOMLDecodeError as exc:
        console.error(f"Invalid configuration file {config_path or 'config.toml'}: {exc}")
        sys.exit(1)
    logger = from_config("cli", config, verbose=verbose)

    show_header = not program_headers_only
    show_program_headers = not header_only

    session = ElfSession(path, config=config, logger=logger)

    try:
        if json_output or output_path:
            report_gen = ElfReportGenerator(indent=config.elfscope.json_indent)
            report = session.to_dict(
                header=show_header,
                program_headers=show_program_headers,
            )

        if json_output:
            click.echo(report_gen.dumps(report))
        elif pretty:
            ElfConsoleOutput(console=ScopeConsole()).display(
                session,
                header=show_header,
                program_headers=show_program_headers,
                pretty=True,
            )
        else:
            if show_header:
                click.echo(session.header_report(), nl=False)
            if show_program_headers:
                click.echo(session.program_headers_report(), nl=False)

        if output_path:
            saved = report_gen.write_json(report, output_path)
            console.success(f"JSON report saved: {saved}")
    except (OSError, ElfScopeError) as exc:
        logger.debug("Failed to read %s: %s", path, exc)
        console.error(f"Failed to read {path}: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# Module entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Entry point for ``python -m elfscope``."""
    elfscope_cli()


if __name__ == "__main__":
    main()

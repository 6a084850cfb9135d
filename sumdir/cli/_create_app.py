"""Create the main Typer CLI app."""

from pathlib import Path
from typing import Annotated, Any

import typer

from sumdir.api.config.SumdirConfig import SumdirConfig
from sumdir.api.render import Grouping, OutputFormat, print_report
from sumdir.api.scan.cmd_scan import cmd_scan
from sumdir.api.scan.Report import Report
from sumdir.utils.get_package_version import get_package_version
from sumdir.utils.logger import configure_logging

from ._handle_stage_result import _handle_stage_result


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"sumdir {get_package_version()}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        name="sumdir",
        help="Summarize the contents of a directory tree",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def scan(
        target: Annotated[Path, typer.Argument(help="Directory to summarize")],
        output: Annotated[
            OutputFormat, typer.Option("--output", "-o", help="Output format", case_sensitive=False)
        ] = OutputFormat.TEXT,
        mime: Annotated[
            bool, typer.Option("--mime", "-m", help="Group by content type instead of extension")
        ] = False,
        verbose: Annotated[
            bool, typer.Option("--verbose", "-v", help="Show progress and debug logging on stderr")
        ] = False,
        version: Annotated[  # noqa: ARG001
            bool | None,
            typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit"),
        ] = None,
    ) -> None:
        """Count files by extension or content type and report the total size."""
        try:
            config = SumdirConfig.load()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None

        configure_logging("DEBUG" if verbose else config.log.level, config.log.log_file)

        grouping = Grouping.MIMETYPE if mime else Grouping.EXTENSION

        def result_printer(result_output: dict[str, Any]) -> None:
            print_report(Report.from_dict(result_output["report"]), grouping, output)

        wrapped = _handle_stage_result(cmd_scan, result_printer=result_printer, suppress_output=not verbose)
        wrapped(target, config.scan.sniff_bytes)

    return app

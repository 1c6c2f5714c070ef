from __future__ import annotations

import sys
from typing import Optional

import typer
from pydantic import ValidationError

from insight_cli.aggregator import aggregate_by_category
from insight_cli.config import Settings, get_settings
from insight_cli.report_builder import DEFAULT_REPORT_TYPE, build_report
from insight_cli.reporter import print_banner, print_info, print_summary
from insight_cli.serializer import SerializationError, serialize_report
from insight_cli.sources import resolve_source
from insight_cli.utils.logging import configure_logging, get_logger
from insight_cli.utils.system_info import collect_system_info

log = get_logger(__name__)

app = typer.Typer(
    help="Sample data analysis and reporting CLI.",
    no_args_is_help=True,
    add_completion=False,
)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as exc:
        messages = "; ".join(err["msg"] for err in exc.errors())
        typer.echo(f"Invalid configuration: {messages}", err=True)
        raise typer.Exit(code=2) from exc


def _version_callback(value: bool) -> None:
    if value:
        settings = _load_settings()
        typer.echo(f"{settings.app_name} {settings.version}")
        raise typer.Exit()


@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show the tool version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    settings = _load_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


@app.command()
def analyze(
    file: str = typer.Option(
        ...,
        "--file",
        "-f",
        help="Input file path (accepted for interface compatibility; sample data is analyzed).",
    ),
) -> None:
    """
    Analyze data from a file.
    """
    settings = get_settings()
    print_banner(settings)
    typer.echo(f"📊 Analyzing file: {file}")

    source = resolve_source(settings.analysis_source)
    log.info("Analyzing records", extra={"file": file, "source": source.name})
    summary = aggregate_by_category(source.load())
    print_summary(summary)


@app.command()
def report(
    report_type: str = typer.Option(
        DEFAULT_REPORT_TYPE,
        "--type",
        "-t",
        help="Report type; used as the report title.",
    ),
) -> None:
    """
    Generate a report.
    """
    settings = get_settings()
    print_banner(settings)
    typer.echo(f"📄 Generating {report_type} report...")

    result = build_report(report_type, settings=settings)
    try:
        payload = serialize_report(result)
    except SerializationError as exc:
        typer.echo(f"❌ Error generating report: {exc}")
        if settings.strict_exit:
            raise typer.Exit(code=1)
        return

    typer.echo("✅ Report generated successfully!")
    typer.echo(payload)


@app.command()
def info() -> None:
    """
    Show system information.
    """
    settings = get_settings()
    print_banner(settings)
    print_info(settings, collect_system_info())


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()

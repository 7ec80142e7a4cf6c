"""CLI entrypoint for report-uploader."""

import json
import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from report_uploader.config import UploadConfig, load_config
from report_uploader.errors import ReportUploaderError
from report_uploader.models import UploadResult, count_results

app = typer.Typer(
    name="report-uploader",
    help="Upload generated test reports to cloud object storage",
    no_args_is_help=True,
)
console = Console()

EXIT_CONFIG_ERROR = 1
EXIT_UPLOAD_FAILURES = 2


def _load(config: Path | None) -> UploadConfig:
    try:
        return load_config(config)
    except ReportUploaderError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(EXIT_CONFIG_ERROR) from e


def print_results(results: dict[str, UploadResult], report_dir: Path):
    """Print a table of uploaded files."""
    table = Table(title="Uploaded files", show_header=True, header_style="bold")
    table.add_column("File")
    table.add_column("Status", justify="center")
    table.add_column("URL / Error")

    for file_path, result in results.items():
        relative = os.path.relpath(file_path, os.path.abspath(report_dir))
        if result.success:
            table.add_row(escape(relative), "[green]ok[/green]", escape(result.url))
        else:
            table.add_row(escape(relative), "[red]failed[/red]", escape(result.error_summary()))

    console.print(table)


@app.command()
def upload(
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="JSON or YAML config path")
    ] = None,
    provider: Annotated[
        str | None, typer.Option(help="Storage provider: aws, azure, gcp, custom")
    ] = None,
    report_dir: Annotated[Path | None, typer.Option(help="Report directory to upload")] = None,
    no_index: Annotated[bool, typer.Option("--no-index", help="Don't write index.html")] = False,
    show_files: Annotated[bool, typer.Option(help="Print a table of every file")] = False,
):
    """Upload a report directory to cloud storage."""
    from report_uploader.api import run_upload

    upload_config = _load(config)

    overrides: dict = {}
    if provider:
        overrides["provider"] = provider
    if report_dir:
        overrides["report_dir"] = report_dir
    if no_index:
        overrides["generate_index"] = False
    if overrides:
        upload_config = UploadConfig(**{**dict(upload_config), **overrides})

    console.print(f"[bold]Target: {upload_config.provider}[/bold]")
    console.print(f"  Report directory: {upload_config.report_dir}\n")

    try:
        results = run_upload(upload_config, console)
    except ReportUploaderError as e:
        console.print(f"[red]Error uploading report: {escape(str(e))}[/red]")
        raise typer.Exit(EXIT_CONFIG_ERROR) from e

    if show_files:
        print_results(results, upload_config.report_dir)

    _, failed = count_results(results)
    if failed:
        raise typer.Exit(EXIT_UPLOAD_FAILURES)

    console.print("\n[green]Report upload completed successfully![/green]")


@app.command("show-config")
def show_config(
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="JSON or YAML config path")
    ] = None,
):
    """Show the merged configuration with secrets masked."""
    upload_config = _load(config)
    console.print_json(json.dumps(upload_config.masked_dump()))


@app.command()
def version():
    """Show version information."""
    from report_uploader import __version__

    console.print(f"report-uploader version {__version__}")


if __name__ == "__main__":
    app()

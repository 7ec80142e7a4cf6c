"""Top-level entry point: load config, upload, save metadata."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from report_uploader.config import UploadConfig, load_config
from report_uploader.errors import ReportUploaderError
from report_uploader.manager import UploadManager
from report_uploader.metadata import build_metadata, save_metadata
from report_uploader.models import UploadResult


def run_upload(config: UploadConfig, console: Console | None = None) -> dict[str, UploadResult]:
    """Upload the report described by ``config`` and save the run metadata."""
    if console is None:
        console = Console()

    results = UploadManager(config, console).upload_report()
    save_metadata(config, build_metadata(config, results), console)
    return results


def upload_report(
    config_path: Path | None = None,
    console: Console | None = None,
    use_dotenv: bool = True,
) -> dict[str, UploadResult]:
    """
    Upload a test report using configuration from env vars and an optional file.

    Args:
        config_path: Optional JSON or YAML config file
        console: Rich console for output
        use_dotenv: Load a ``.env`` file before reading the environment

    Returns:
        Mapping of local file path -> UploadResult

    Raises:
        ReportUploaderError: If configuration is invalid or the report
            directory is missing. The error is printed before re-raising.
    """
    if console is None:
        console = Console()

    try:
        config = load_config(config_path, use_dotenv=use_dotenv)
        results = run_upload(config, console)
    except ReportUploaderError as e:
        console.print(f"[red]Error uploading report: {escape(str(e))}[/red]")
        raise

    console.print("[green]Report upload completed successfully![/green]")
    return results

"""Upload the report when a test run finishes.

``ReportUploadHook`` can be called from any test runner's completion
callback. This module is also a pytest plugin; enable it with
``pytest -p report_uploader.hooks --upload-report``.
"""

from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from report_uploader.config import UploadConfig, load_config
from report_uploader.manager import UploadManager
from report_uploader.models import UploadResult


class ReportUploadHook:
    """Runs an upload at the end of a test session without ever failing it."""

    def __init__(
        self,
        config: UploadConfig | None = None,
        console: Console | None = None,
        **overrides: Any,
    ):
        if config is None:
            config = UploadConfig(**overrides)
        elif overrides:
            config = UploadConfig(**{**dict(config), **overrides})
        self.config = config
        self.console = console or Console()

    def on_end(self) -> dict[str, UploadResult] | None:
        """Upload the report; errors are printed, not raised."""
        self.console.print("[bold]Starting automatic report upload...[/bold]")
        try:
            return UploadManager(self.config, self.console).upload_report()
        except Exception as e:
            self.console.print(f"[red]Auto-upload failed: {escape(str(e))}[/red]")
            return None


def pytest_addoption(parser):
    group = parser.getgroup("report-uploader")
    group.addoption(
        "--upload-report",
        action="store_true",
        default=False,
        help="Upload the test report directory when the session finishes",
    )
    group.addoption(
        "--upload-config",
        default=None,
        help="JSON or YAML config file for the report upload",
    )


def pytest_sessionfinish(session, exitstatus):
    options = session.config.option
    if not getattr(options, "upload_report", False):
        return

    console = Console()
    config_path = options.upload_config
    try:
        config = load_config(Path(config_path) if config_path else None)
    except Exception as e:
        console.print(f"[red]Auto-upload failed: {escape(str(e))}[/red]")
        return

    ReportUploadHook(config, console).on_end()

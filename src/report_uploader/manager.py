"""Upload orchestration across storage providers."""

from datetime import datetime, timezone

from rich.console import Console
from rich.markup import escape

from report_uploader.config import UploadConfig
from report_uploader.errors import NotFoundError
from report_uploader.index_page import write_index
from report_uploader.models import UploadResult, count_results, failed_results
from report_uploader.providers import CustomUploader, create_uploader


class UploadManager:
    """Uploads a report directory to the configured provider.

    Each ``upload_report`` call is an independent run; the manager keeps no
    state between calls.
    """

    def __init__(self, config: UploadConfig, console: Console | None = None):
        self.config = config
        self.console = console or Console()

    def upload_report(self) -> dict[str, UploadResult]:
        """
        Upload every file in the report directory.

        Flow:
        1. Check the report directory exists
        2. Build the provider's uploader
        3. Upload each file, collecting one result per file
        4. Write index.html (built-in providers, when enabled)
        5. Print a summary of successes and failures

        Returns:
            Mapping of local file path -> UploadResult. Per-file failures are
            reported in the mapping, never raised.

        Raises:
            NotFoundError: If the report directory does not exist
            UnsupportedProviderError: If the provider is unknown
            ConfigError: If the provider's required settings are missing
        """
        self.console.print(f"[bold]Starting upload to {self.config.provider}...[/bold]")

        report_dir = self.config.report_dir
        if not report_dir.is_dir():
            raise NotFoundError(f"Report directory not found: {report_dir}")

        uploader = create_uploader(self.config, self.console)
        results = uploader.upload_directory(report_dir)

        if self.config.generate_index and not isinstance(uploader, CustomUploader):
            try:
                index_path = write_index(
                    results,
                    report_dir,
                    self.config.provider,
                    generated_at=datetime.now(timezone.utc),
                )
                self.console.print(f"Generated index file: {index_path}")
            except OSError as e:
                self.console.print(f"[red]Error writing index file: {escape(str(e))}[/red]")

        self.print_summary(results)
        return results

    def print_summary(self, results: dict[str, UploadResult]):
        """Print success/failure counts and a line per failed file."""
        successful, failed = count_results(results)

        self.console.print("\n[bold]Upload completed:[/bold]")
        self.console.print(f"  [green]Successful: {successful}[/green]")
        self.console.print(f"  [red]Failed: {failed}[/red]")

        if failed:
            self.console.print("\n[red]Failed uploads:[/red]")
            for file_path, result in failed_results(results).items():
                self.console.print(f"  {escape(file_path)}: {escape(result.error_summary())}")

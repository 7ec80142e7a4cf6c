"""Storage backend interface shared by all providers."""

import mimetypes
import os
from abc import ABC, abstractmethod
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from tqdm import tqdm

from report_uploader.config import UploadConfig
from report_uploader.models import UploadResult
from report_uploader.walker import iter_files

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class StorageUploader(ABC):
    """Uploads report files to one storage provider.

    Subclasses implement ``_upload``, which transfers a single file and
    returns its URL or raises. ``upload_file`` and ``upload_directory`` turn
    those exceptions into failed results so one bad file never stops a batch.
    """

    name: str = ""
    label: str = ""

    def __init__(self, config: UploadConfig, console: Console | None = None):
        self.config = config
        self.console = console or Console()

    @abstractmethod
    def _upload(self, file_path: str) -> str:
        """Transfer one file and return its URL."""

    @property
    def prefix(self) -> str | None:
        return self.config.prefix_for(self.name)

    def object_name(self, file_path: str) -> str:
        """Remote name for a local file: ``<prefix>/<basename>`` or the basename."""
        file_name = os.path.basename(file_path)
        if self.prefix:
            return f"{self.prefix.rstrip('/')}/{file_name}"
        return file_name

    @staticmethod
    def content_type(file_path: str) -> str:
        """Guess the MIME type from the file extension."""
        content_type, _ = mimetypes.guess_type(file_path)
        return content_type or DEFAULT_CONTENT_TYPE

    def upload_file(self, file_path: str) -> UploadResult:
        """
        Upload a single file.

        Args:
            file_path: Local path to an existing file

        Returns:
            UploadResult with the remote URL, or a failed result carrying
            the error message
        """
        try:
            url = self._upload(file_path)
        except Exception as e:
            self.console.print(
                f"[red]Error uploading file to {self.label}: {escape(str(e))}[/red]"
            )
            return UploadResult.from_exception(e)
        return UploadResult.ok(url)

    def upload_directory(self, dir_path: str | Path) -> dict[str, UploadResult]:
        """
        Upload every file under a directory, recursing into subdirectories.

        Files are uploaded one at a time in traversal order. If the directory
        tree cannot be read part way through, the error is reported and the
        results collected so far are returned.

        Args:
            dir_path: Local directory to upload

        Returns:
            Mapping of absolute local file path -> UploadResult
        """
        results: dict[str, UploadResult] = {}

        try:
            for file_path in tqdm(iter_files(dir_path), desc=f"Uploading to {self.label}"):
                results[file_path] = self.upload_file(file_path)
        except OSError as e:
            self.console.print(
                f"[red]Error uploading directory to {self.label}: {escape(str(e))}[/red]"
            )

        return results

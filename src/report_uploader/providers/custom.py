"""Backend that hands each file to a caller-supplied function."""

from rich.console import Console

from report_uploader.config import UploadConfig
from report_uploader.errors import ConfigError, UploadError
from report_uploader.providers.base import StorageUploader


class CustomUploader(StorageUploader):
    """Calls ``config.custom_uploader(config, file_path)`` for every file.

    Whatever the function returns is used as the file's URL; anything it
    raises is recorded as that file's failure.
    """

    name = "custom"
    label = "custom uploader"

    def __init__(self, config: UploadConfig, console: Console | None = None):
        super().__init__(config, console)

        if config.custom_uploader is None:
            raise ConfigError(
                "Custom uploader function is required when provider is set to custom"
            )
        self.upload_fn = config.custom_uploader

    def _upload(self, file_path: str) -> str:
        url = self.upload_fn(self.config, file_path)
        if not url:
            raise UploadError("Custom uploader returned no URL")
        return str(url)

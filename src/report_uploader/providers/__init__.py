"""Storage backends and provider selection."""

from rich.console import Console

from report_uploader.config import UploadConfig
from report_uploader.errors import UnsupportedProviderError
from report_uploader.providers.aws import S3Uploader
from report_uploader.providers.azure import AzureBlobUploader
from report_uploader.providers.base import StorageUploader
from report_uploader.providers.custom import CustomUploader
from report_uploader.providers.gcp import GcsUploader

UPLOADERS: dict[str, type[StorageUploader]] = {
    "aws": S3Uploader,
    "azure": AzureBlobUploader,
    "gcp": GcsUploader,
    "custom": CustomUploader,
}


def create_uploader(config: UploadConfig, console: Console | None = None) -> StorageUploader:
    """Build the storage backend selected by ``config.provider``."""
    uploader_cls = UPLOADERS.get(config.provider)
    if uploader_cls is None:
        raise UnsupportedProviderError(config.provider)
    return uploader_cls(config, console)


__all__ = [
    "UPLOADERS",
    "AzureBlobUploader",
    "CustomUploader",
    "GcsUploader",
    "S3Uploader",
    "StorageUploader",
    "create_uploader",
]

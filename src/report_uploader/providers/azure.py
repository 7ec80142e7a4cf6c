"""Azure Blob Storage backend."""

from azure.core.exceptions import ResourceExistsError
from azure.storage.blob import BlobServiceClient, ContentSettings
from rich.console import Console

from report_uploader.config import UploadConfig
from report_uploader.errors import ConfigError, UploadError
from report_uploader.providers.base import StorageUploader


class AzureBlobUploader(StorageUploader):
    """Uploads files to an Azure Blob Storage container.

    A connection string is required up front; the container is created on
    the first upload if it does not exist yet.
    """

    name = "azure"
    label = "Azure"

    def __init__(self, config: UploadConfig, console: Console | None = None):
        super().__init__(config, console)

        if not config.azure_connection_string:
            raise ConfigError("Azure connection string is required")

        try:
            self.service_client = BlobServiceClient.from_connection_string(
                config.azure_connection_string
            )
        except ValueError as e:
            raise ConfigError(f"Invalid Azure connection string: {e}") from e

        self._container_ready = False

    def _container_client(self):
        if not self.config.azure_container:
            raise UploadError("Azure container is not configured")

        container_client = self.service_client.get_container_client(self.config.azure_container)
        if not self._container_ready:
            try:
                container_client.create_container(
                    public_access="blob" if self.config.public_access else None
                )
                self.console.print(f"Created container '{self.config.azure_container}'")
            except ResourceExistsError:
                pass
            self._container_ready = True
        return container_client

    def _upload(self, file_path: str) -> str:
        container_client = self._container_client()
        blob_client = container_client.get_blob_client(self.object_name(file_path))

        with open(file_path, "rb") as f:
            blob_client.upload_blob(
                f,
                overwrite=True,
                content_settings=ContentSettings(content_type=self.content_type(file_path)),
            )
        return blob_client.url

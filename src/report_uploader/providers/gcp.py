"""Google Cloud Storage backend."""

from datetime import timedelta
from functools import cached_property

from google.cloud import storage

from report_uploader.errors import UploadError
from report_uploader.providers.base import StorageUploader

# V4 signed URLs cannot outlive 7 days
SIGNED_URL_EXPIRATION = timedelta(days=7)


class GcsUploader(StorageUploader):
    """Uploads files to a Cloud Storage bucket.

    Public uploads return the object's public URL; private uploads return a
    signed read URL valid for seven days.
    """

    name = "gcp"
    label = "GCP"

    @cached_property
    def client(self) -> storage.Client:
        if self.config.gcp_key_file_path:
            return storage.Client.from_service_account_json(
                str(self.config.gcp_key_file_path),
                project=self.config.gcp_project_id,
            )
        return storage.Client(project=self.config.gcp_project_id)

    def _upload(self, file_path: str) -> str:
        if not self.config.gcp_bucket:
            raise UploadError("GCP bucket is not configured")

        bucket = self.client.bucket(self.config.gcp_bucket)
        blob = bucket.blob(self.object_name(file_path))
        blob.upload_from_filename(file_path, content_type=self.content_type(file_path))

        if self.config.public_access:
            blob.make_public()
            return blob.public_url

        return blob.generate_signed_url(
            version="v4",
            expiration=SIGNED_URL_EXPIRATION,
            method="GET",
        )

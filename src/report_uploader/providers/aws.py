"""AWS S3 backend."""

from functools import cached_property
from urllib.parse import quote

import boto3

from report_uploader.errors import UploadError
from report_uploader.providers.base import StorageUploader


class S3Uploader(StorageUploader):
    """Uploads files to an S3 bucket.

    The boto3 client is built from this run's config on first use, so no
    process-wide SDK state is touched.
    """

    name = "aws"
    label = "S3"

    @cached_property
    def client(self):
        return boto3.client(
            "s3",
            region_name=self.config.aws_region,
            aws_access_key_id=self.config.aws_access_key_id,
            aws_secret_access_key=self.config.aws_secret_access_key,
        )

    def object_url(self, key: str) -> str:
        """Virtual-hosted style URL of an object."""
        bucket = self.config.aws_bucket
        region = self.config.aws_region
        host = f"{bucket}.s3.{region}.amazonaws.com" if region else f"{bucket}.s3.amazonaws.com"
        return f"https://{host}/{quote(key)}"

    def _upload(self, file_path: str) -> str:
        if not self.config.aws_bucket:
            raise UploadError("AWS bucket is not configured")

        key = self.object_name(file_path)
        with open(file_path, "rb") as f:
            self.client.put_object(
                Bucket=self.config.aws_bucket,
                Key=key,
                Body=f,
                ContentType=self.content_type(file_path),
                ACL="public-read" if self.config.public_access else "private",
            )
        return self.object_url(key)

"""Upload generated test reports to cloud object storage."""

from report_uploader.api import upload_report
from report_uploader.config import UploadConfig, load_config
from report_uploader.errors import (
    ConfigError,
    NotFoundError,
    ReportUploaderError,
    UnsupportedProviderError,
    UploadError,
)
from report_uploader.hooks import ReportUploadHook
from report_uploader.manager import UploadManager
from report_uploader.metadata import save_metadata
from report_uploader.models import UploadResult

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "NotFoundError",
    "ReportUploadHook",
    "ReportUploaderError",
    "UnsupportedProviderError",
    "UploadConfig",
    "UploadError",
    "UploadManager",
    "UploadResult",
    "load_config",
    "save_metadata",
    "upload_report",
]

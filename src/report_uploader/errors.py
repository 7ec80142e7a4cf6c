"""Exceptions raised by the report uploader."""


class ReportUploaderError(Exception):
    """Base class for all report uploader errors."""


class NotFoundError(ReportUploaderError, FileNotFoundError):
    """The report directory (or another required path) does not exist."""


class ConfigError(ReportUploaderError, ValueError):
    """Configuration is missing a required value or cannot be parsed."""


class UnsupportedProviderError(ConfigError):
    """The configured provider is not one of the known storage backends."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")


class UploadError(ReportUploaderError):
    """A single file could not be uploaded."""

"""Upload outcome types."""

from dataclasses import dataclass
from typing import Any

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class UploadResult:
    """Outcome of a single file transfer.

    A successful result carries the remote URL and no errors. A failed result
    has an empty URL and at least one error message.
    """

    success: bool
    url: str = ""
    errors: tuple[str, ...] = ()

    def __post_init__(self):
        if self.success and (not self.url or self.errors):
            raise ValueError("A successful upload needs a URL and no errors")
        if not self.success and (self.url or not self.errors):
            raise ValueError("A failed upload needs an empty URL and at least one error")

    @classmethod
    def ok(cls, url: str) -> "UploadResult":
        return cls(success=True, url=url)

    @classmethod
    def failed(cls, *messages: str) -> "UploadResult":
        errors = tuple(m for m in messages if m) or (UNKNOWN_ERROR,)
        return cls(success=False, url="", errors=errors)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "UploadResult":
        return cls.failed(str(exc))

    def error_summary(self) -> str:
        """Errors joined for a single log line."""
        return ", ".join(self.errors) or UNKNOWN_ERROR

    def to_dict(self, file_path: str) -> dict[str, Any]:
        """Convert to the metadata file's result entry."""
        return {
            "filePath": file_path,
            "success": self.success,
            "url": self.url,
            "errors": list(self.errors) if self.errors else None,
        }


def count_results(results: dict[str, UploadResult]) -> tuple[int, int]:
    """Return (successful, failed) counts for a result mapping."""
    successful = sum(1 for r in results.values() if r.success)
    return successful, len(results) - successful


def failed_results(results: dict[str, UploadResult]) -> dict[str, UploadResult]:
    """Entries of the mapping whose upload failed, in original order."""
    return {path: r for path, r in results.items() if not r.success}

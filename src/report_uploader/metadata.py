"""Run metadata written after an upload."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.console import Console

from report_uploader.config import UploadConfig
from report_uploader.models import UploadResult


def build_metadata(
    config: UploadConfig,
    results: dict[str, UploadResult],
    upload_date: datetime | None = None,
) -> dict[str, Any]:
    """Describe an upload run for the metadata file."""
    upload_date = upload_date or datetime.now(timezone.utc)
    return {
        "uploadDate": upload_date.isoformat(),
        "provider": config.provider,
        "reportDir": str(config.report_dir),
        "results": [result.to_dict(path) for path, result in results.items()],
    }


def save_metadata(
    config: UploadConfig,
    metadata: dict[str, Any],
    console: Console | None = None,
) -> Path | None:
    """
    Save upload metadata as pretty-printed JSON.

    Args:
        config: Upload configuration (``output_dir`` / ``metadata_file``)
        metadata: Metadata from build_metadata
        console: Rich console for output

    Returns:
        Path of the written file, or None when no output directory is set
    """
    metadata_path = config.metadata_path
    if metadata_path is None:
        return None

    metadata_path.parent.mkdir(parents=True, exist_ok=True)
    with open(metadata_path, "w", encoding="utf-8") as f:
        json.dump(metadata, f, indent=2, ensure_ascii=False)

    if console is not None:
        console.print(f"Metadata saved to {metadata_path}")
    return metadata_path

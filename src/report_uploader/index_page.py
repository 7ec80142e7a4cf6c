"""HTML index of uploaded report files."""

import html
import os
from datetime import datetime, timezone
from pathlib import Path

from report_uploader.models import UploadResult

INDEX_FILE_NAME = "index.html"


def _file_item(file_path: str, url: str, report_dir: Path) -> str:
    name = html.escape(os.path.basename(file_path))
    relative = html.escape(os.path.relpath(file_path, report_dir))
    href = html.escape(url, quote=True)
    return f"""
        <li class="file-item">
            <a href="{href}" class="file-link" target="_blank">{name}</a>
            <div class="file-path">{relative}</div>
        </li>"""


def render_index(
    results: dict[str, UploadResult],
    report_dir: Path,
    provider: str,
    generated_at: datetime | None = None,
) -> str:
    """Render an HTML page linking to every successful upload."""
    generated_at = generated_at or datetime.now(timezone.utc)
    report_dir = Path(os.path.abspath(report_dir))

    successful = [(path, r.url) for path, r in results.items() if r.success]
    items = "".join(_file_item(path, url, report_dir) for path, url in successful)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Test Report Index</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 40px; }}
        h1 {{ color: #333; }}
        .file-list {{ list-style: none; padding: 0; }}
        .file-item {{ margin: 10px 0; padding: 10px; border: 1px solid #ddd; border-radius: 4px; }}
        .file-link {{ text-decoration: none; color: #0066cc; font-weight: bold; }}
        .file-link:hover {{ text-decoration: underline; }}
        .file-path {{ color: #666; font-size: 0.9em; margin-top: 5px; }}
        .stats {{ background: #f5f5f5; padding: 15px; border-radius: 4px; margin: 20px 0; }}
    </style>
</head>
<body>
    <h1>Test Report</h1>
    <div class="stats">
        <p><strong>Total files:</strong> {len(successful)}</p>
        <p><strong>Upload date:</strong> {generated_at.isoformat()}</p>
        <p><strong>Provider:</strong> {html.escape(provider)}</p>
    </div>
    <ul class="file-list">{items}
    </ul>
</body>
</html>
"""


def write_index(
    results: dict[str, UploadResult],
    report_dir: Path,
    provider: str,
    generated_at: datetime | None = None,
) -> Path:
    """Write ``index.html`` into the report directory and return its path."""
    index_path = Path(report_dir) / INDEX_FILE_NAME
    page = render_index(results, report_dir, provider, generated_at)
    with open(index_path, "w", encoding="utf-8") as f:
        f.write(page)
    return index_path

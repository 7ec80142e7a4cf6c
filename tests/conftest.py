"""
Pytest configuration for report_uploader tests
"""

import io
from pathlib import Path

import pytest
from rich.console import Console

from report_uploader.config import ENV_VARS, UploadConfig
from report_uploader.providers.base import StorageUploader

REPORT_FILES = {
    "index.html": "<html><body>Test Report</body></html>",
    "style.css": "body { font-family: Arial; }",
    "data.json": '{"tests": []}',
    "assets/screenshot.png": "fake-png-data",
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's upload settings out of the tests."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def console():
    """Console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def report_dir(tmp_path) -> Path:
    """Sample report: three files at the top level and one in assets/."""
    root = tmp_path / "playwright-report"
    for name, content in REPORT_FILES.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def make_config(report_dir, tmp_path):
    """Build an UploadConfig pointing at the sample report."""

    def _make(**overrides) -> UploadConfig:
        values = {
            "report_dir": report_dir,
            "output_dir": tmp_path / "upload-metadata",
        }
        values.update(overrides)
        return UploadConfig(**values)

    return _make


class StubUploader(StorageUploader):
    """Uploader that records calls and fails for configured file names."""

    name = "aws"
    label = "stub"
    fail_names: dict[str, str] = {}
    calls: list[str] = []

    def _upload(self, file_path: str) -> str:
        self.calls.append(file_path)
        file_name = Path(file_path).name
        if file_name in self.fail_names:
            raise RuntimeError(self.fail_names[file_name])
        return f"https://stub.example.com/{self.object_name(file_path)}"


@pytest.fixture
def stub_uploader(monkeypatch):
    """Replace the aws backend with StubUploader; returns the class."""
    from report_uploader.providers import UPLOADERS

    cls = type("Stub", (StubUploader,), {"fail_names": {}, "calls": []})
    monkeypatch.setitem(UPLOADERS, "aws", cls)
    return cls

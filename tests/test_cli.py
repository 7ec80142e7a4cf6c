"""Tests for the report-uploader CLI."""

import json

from typer.testing import CliRunner

from report_uploader.cli import EXIT_CONFIG_ERROR, EXIT_UPLOAD_FAILURES, app

runner = CliRunner()


def write_config(tmp_path, report_dir, **values) -> str:
    config = {
        "reportDir": str(report_dir),
        "outputDir": str(tmp_path / "meta"),
        "generateIndex": False,
        **values,
    }
    path = tmp_path / "upload.json"
    path.write_text(json.dumps(config))
    return str(path)


class TestUploadCommand:
    def test_success(self, tmp_path, report_dir, stub_uploader):
        config = write_config(tmp_path, report_dir)

        result = runner.invoke(app, ["upload", "--config", config])

        assert result.exit_code == 0, result.output
        assert "Successful: 4" in result.output
        assert (tmp_path / "meta" / "report-metadata.json").exists()

    def test_failures_exit_code(self, tmp_path, report_dir, stub_uploader):
        stub_uploader.fail_names["index.html"] = "quota exceeded"
        config = write_config(tmp_path, report_dir)

        result = runner.invoke(app, ["upload", "-c", config, "--show-files"])

        assert result.exit_code == EXIT_UPLOAD_FAILURES
        assert "quota exceeded" in result.output
        assert "Uploaded files" in result.output

    def test_missing_report_dir(self, tmp_path, stub_uploader):
        config = write_config(tmp_path, tmp_path / "missing")

        result = runner.invoke(app, ["upload", "-c", config])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Report directory not found" in result.output
        assert stub_uploader.calls == []

    def test_unsupported_provider_option(self, tmp_path, report_dir):
        config = write_config(tmp_path, report_dir)

        result = runner.invoke(app, ["upload", "-c", config, "--provider", "ftp"])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Unsupported provider: ftp" in result.output

    def test_missing_config_file(self, tmp_path):
        result = runner.invoke(app, ["upload", "-c", str(tmp_path / "nope.json")])
        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "Config file not found" in result.output

    def test_report_dir_and_index_options(self, tmp_path, report_dir, stub_uploader):
        config = write_config(tmp_path, tmp_path / "elsewhere", generateIndex=True)
        (report_dir / "index.html").unlink()

        result = runner.invoke(
            app, ["upload", "-c", config, "--report-dir", str(report_dir), "--no-index"]
        )

        assert result.exit_code == 0, result.output
        assert len(stub_uploader.calls) == 3
        assert not (report_dir / "index.html").exists()


class TestShowConfig:
    def test_masks_secrets(self, tmp_path, report_dir):
        config = write_config(
            tmp_path, report_dir, provider="azure", azureConnectionString="AccountKey=abc"
        )

        result = runner.invoke(app, ["show-config", "-c", config])

        assert result.exit_code == 0, result.output
        assert "AccountKey=abc" not in result.output
        assert '"provider": "azure"' in result.output


class TestVersion:
    def test_version(self):
        from report_uploader import __version__

        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestHelp:
    def test_upload_help_lists_providers(self):
        result = runner.invoke(app, ["upload", "--help"])
        assert result.exit_code == 0
        for provider in ("aws", "azure", "gcp", "custom"):
            assert provider in result.output

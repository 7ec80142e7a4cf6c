"""Configuration loading and validation."""

import json
import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from report_uploader.errors import ConfigError

DEFAULT_METADATA_FILE = "report-metadata.json"

# Environment variable -> UploadConfig field
ENV_VARS: dict[str, str] = {
    "UPLOAD_PROVIDER": "provider",
    "REPORT_DIR": "report_dir",
    "OUTPUT_DIR": "output_dir",
    "AWS_REGION": "aws_region",
    "AWS_BUCKET": "aws_bucket",
    "AWS_ACCESS_KEY_ID": "aws_access_key_id",
    "AWS_SECRET_ACCESS_KEY": "aws_secret_access_key",
    "AWS_PREFIX": "aws_prefix",
    "AZURE_CONNECTION_STRING": "azure_connection_string",
    "AZURE_CONTAINER": "azure_container",
    "AZURE_PREFIX": "azure_prefix",
    "GCP_PROJECT_ID": "gcp_project_id",
    "GCP_BUCKET": "gcp_bucket",
    "GCP_KEY_FILE_PATH": "gcp_key_file_path",
    "GCP_PREFIX": "gcp_prefix",
    "PUBLIC_ACCESS": "public_access",
    "METADATA_FILE": "metadata_file",
    "GENERATE_INDEX": "generate_index",
    "RETENTION_DAYS": "retention_days",
}

SECRET_FIELDS = ("aws_secret_access_key", "azure_connection_string")


class UploadConfig(BaseModel):
    """Settings for one report upload run.

    Only the fields of the selected provider are read; the others are ignored.
    Config files may use either the field names or their camelCase aliases
    (``reportDir``, ``awsBucket``, ...).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    provider: str = "aws"
    report_dir: Path = Path("./playwright-report")
    output_dir: Path | None = Path("./upload-metadata")
    metadata_file: str = DEFAULT_METADATA_FILE

    # AWS S3
    aws_region: str | None = None
    aws_bucket: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_prefix: str | None = None

    # Azure Blob Storage
    azure_connection_string: str | None = None
    azure_container: str | None = None
    azure_prefix: str | None = None

    # Google Cloud Storage
    gcp_project_id: str | None = None
    gcp_bucket: str | None = None
    gcp_key_file_path: Path | None = None
    gcp_prefix: str | None = None

    # Called as custom_uploader(config, file_path) -> url
    custom_uploader: Callable[..., str] | None = Field(default=None, exclude=True)

    public_access: bool = True
    generate_index: bool = True
    retention_days: int | None = None

    @field_validator("provider", mode="before")
    @classmethod
    def normalize_provider(cls, v: Any) -> Any:
        """Strip and lower-case the provider name."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("report_dir", "output_dir", "gcp_key_file_path", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        """Expand environment variables and ~ in path."""
        if v is None or v == "":
            return None
        expanded = os.path.expandvars(os.path.expanduser(str(v)))
        return Path(expanded)

    def prefix_for(self, provider: str) -> str | None:
        """Object name prefix configured for ``provider``."""
        return getattr(self, f"{provider}_prefix", None)

    @property
    def metadata_path(self) -> Path | None:
        if self.output_dir is None:
            return None
        return self.output_dir / (self.metadata_file or DEFAULT_METADATA_FILE)

    def masked_dump(self) -> dict[str, Any]:
        """Dump the config with secret values hidden."""
        data = self.model_dump(mode="json")
        for name in SECRET_FIELDS:
            if data.get(name):
                data[name] = "****"
        data["custom_uploader"] = self.custom_uploader is not None
        return data


def _field_names_by_key() -> dict[str, str]:
    keys: dict[str, str] = {}
    for name, info in UploadConfig.model_fields.items():
        keys[name] = name
        if info.alias:
            keys[info.alias] = name
    return keys


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Read a JSON (or YAML) config file into a dict keyed by field name."""
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            if config_path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Error parsing config file {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain an object")

    keys = _field_names_by_key()
    return {keys[k]: v for k, v in data.items() if k in keys}


def config_from_env(env: Mapping[str, str]) -> dict[str, Any]:
    """Collect the config fields set through environment variables."""
    values: dict[str, Any] = {}
    for var, field_name in ENV_VARS.items():
        value = env.get(var)
        if value is None or value.strip() == "":
            continue
        values[field_name] = value.strip()
    return values


def build_config(*layers: Mapping[str, Any]) -> UploadConfig:
    """Merge config layers (later layers win) into a validated UploadConfig."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)

    try:
        return UploadConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
    use_dotenv: bool = True,
) -> UploadConfig:
    """
    Load the upload configuration.

    Precedence, highest first: environment variables, the config file,
    built-in defaults.

    Args:
        config_path: Optional JSON or YAML config file
        env: Environment to read (defaults to ``os.environ``)
        use_dotenv: Load a ``.env`` file into the environment first

    Returns:
        Validated UploadConfig

    Raises:
        ConfigError: If the file is missing or invalid, or a value fails
            validation.
    """
    if use_dotenv:
        load_dotenv()
    if env is None:
        env = os.environ

    file_config = load_config_file(Path(config_path)) if config_path else {}
    return build_config(file_config, config_from_env(env))

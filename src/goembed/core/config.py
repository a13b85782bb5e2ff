# src/goembed/core/config.py
"""
Configuration schema and loading for goembed runs.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction and are passed
explicitly to the orchestrator; there is no module-level state.
"""

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from goembed.contracts import EncodeOptions


class EmbedSettings(BaseModel):
    """Settings for a single goembed invocation.

    Example YAML:
        package: assets
        output: assets/data.go
        gzip: true
        sha1: true
    """

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}

    package: str | None = Field(
        default=None,
        description="Package name for generated files; detected when unset",
    )
    output: Path | None = Field(
        default=None,
        description="Write every input into this single file",
    )
    compress: bool = Field(
        default=False,
        validation_alias=AliasChoices("compress", "gzip"),
        description="Compress data with gzip before embedding",
    )
    sha1: bool = Field(
        default=False,
        validation_alias=AliasChoices("sha1", "hash"),
        description="Also embed SHA1 hash of data",
    )

    @field_validator("package")
    @classmethod
    def validate_package(cls, v: str | None) -> str | None:
        """Treat a blank package name as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    def to_encode_options(self) -> EncodeOptions:
        """Options the encoder needs from these settings."""
        return EncodeOptions(compress=self.compress, sha1=self.sha1)


def load_settings(config_path: Path | None = None) -> EmbedSettings:
    """Load settings from an optional YAML file with environment overrides.

    Precedence:
    1. Environment variables (GOEMBED_*) - highest priority
    2. Config file, if given
    3. Defaults from the Pydantic schema - lowest priority

    Args:
        config_path: Path to YAML settings file, or None for env/defaults only

    Returns:
        Validated EmbedSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config_path is given but doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="GOEMBED",
        settings_files=[str(config_path)] if config_path is not None else [],
        environments=False,
        load_dotenv=False,
    )

    # Dynaconf returns uppercase keys; Pydantic fields are lowercase
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config: dict[str, Any] = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return EmbedSettings(**raw_config)

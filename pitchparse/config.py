"""
Pipeline settings, read from the environment (and .env via the CLI).
"""

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from pitchparse.errors import ConfigurationError

ENV_PREFIX = "PITCHPARSE_"


class PipelineSettings(BaseModel):
    """Settings for a parsing run."""

    extractor: Literal["pymupdf", "text"] = Field(
        default="pymupdf", description="Extractor: pymupdf or text"
    )
    save_json: bool = Field(default=True, description="Write <name>.slides.json")
    output_dir: Optional[Path] = Field(
        default=None, description="Output directory (default: ./output/<name>)"
    )
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @classmethod
    def from_env(cls) -> "PipelineSettings":
        """Build settings from PITCHPARSE_* environment variables."""
        values = {}
        for field in ("extractor", "save_json", "output_dir", "log_level"):
            value = os.getenv(f"{ENV_PREFIX}{field.upper()}")
            if value:
                values[field] = value
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid {ENV_PREFIX}* setting: {e}") from e

"""Configuration loading and validation using Pydantic."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..overlay.fonts import DEFAULT_FONT_SPEC


class StampConfig(BaseModel):
    """Root configuration model.

    Every field has a default, so an empty file (or no file at all) is valid.
    """

    default_font: str = Field(
        DEFAULT_FONT_SPEC,
        min_length=1,
        description="Font spec ('path:size', size in points) used by overlays without a font key",
    )
    overlays: list[str] = Field(
        default_factory=list,
        description="Overlay descriptors applied to every image, before command-line overlays",
    )
    jpeg_quality: int = Field(90, ge=1, le=95, description="Quality used when writing JPEG output")

    @field_validator("overlays")
    @classmethod
    def validate_overlays(cls, v: list[str]) -> list[str]:
        """Reject empty descriptors."""
        for i, descriptor in enumerate(v):
            if not descriptor.strip():
                raise ValueError(f"overlay descriptor #{i + 1} is empty")
        return v


def format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into user-friendly messages.

    Args:
        error: Pydantic ValidationError instance

    Returns:
        Formatted error message string
    """
    lines = ["Configuration validation failed:"]
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err["loc"])
        error_msg = err.get("msg", "")
        if field_path:
            lines.append(f"  • {field_path}: {error_msg}")
        else:
            lines.append(f"  • {error_msg}")

    lines.append("")
    lines.append("See caption-stamp.example.yaml for a complete example configuration")
    return "\n".join(lines)


def load_config(config_path: str | None = None) -> StampConfig:
    """Load and validate configuration from a YAML file.

    Args:
        config_path: Path to configuration file. If None, uses the CONFIG_PATH
            env var; if that is unset too, returns the defaults.

    Returns:
        Validated StampConfig instance

    Raises:
        FileNotFoundError: If the config file does not exist
        ValidationError: If config validation fails (formatted error message is printed)
    """
    if config_path is None:
        config_path = os.getenv("CONFIG_PATH")
        if not config_path:
            return StampConfig()

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return validate_config(data or {})
    except ValidationError as e:
        print(format_validation_errors(e))
        raise


def validate_config(config: dict) -> StampConfig:
    """Validate configuration dictionary."""
    return StampConfig.model_validate(config)

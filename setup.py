"""Setup script for caption-stamp with data_files for the example configuration."""

from pathlib import Path

from setuptools import setup


def get_config_example_path() -> Path:
    """Get the path to the example configuration file."""
    return Path(__file__).parent / "caption-stamp.example.yaml"


# Package metadata comes from pyproject.toml; this file only adds data_files
config_example = get_config_example_path()
data_files = []
if config_example.exists():
    # Path must be relative to setup.py directory
    config_example_rel = config_example.relative_to(Path(__file__).parent)
    data_files.append(("share/caption-stamp", [str(config_example_rel)]))

setup(
    data_files=data_files,
)

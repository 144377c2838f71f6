"""
Configuration management using Pydantic for validation.

This module provides type-safe configuration loading and validation
for the location wire codec.
"""
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field
import yaml

from geo_protocol.utils.exceptions import ConfigurationError


class CodecParams(BaseModel):
    """Wire codec parameters."""
    layout: Literal["map", "array"] = Field(
        "map", description="Encoded layout: index-keyed map or positional array"
    )
    allow_trailing_bytes: bool = Field(
        False, description="Accept bytes left over after the encoded value"
    )


class GeoProtocolConfig(BaseModel):
    """Complete geo-protocol configuration."""
    codec: CodecParams = Field(default_factory=CodecParams)


def load_config(config_path: Path) -> GeoProtocolConfig:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Validated GeoProtocolConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If YAML is malformed or not a mapping
        ValidationError: If config validation fails

    Example:
        >>> config = load_config(Path("config/codec.yaml"))
        >>> print(config.codec.layout)
        map
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    # An empty file means defaults
    if config_dict is None:
        config_dict = {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Config root must be a mapping, got {type(config_dict).__name__}"
        )

    return GeoProtocolConfig(**config_dict)


def get_default_config() -> GeoProtocolConfig:
    """
    Get default configuration.

    Returns:
        Default GeoProtocolConfig
    """
    return GeoProtocolConfig(codec=CodecParams())

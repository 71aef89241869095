"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - StreamConfig: Root configuration object
    - DatasetConfig: Fixed dataset contents and integer generation
    - PipelineConfig: Limits, join separator, excluded prefix

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. reproducible)
"""

from gently_down_the_stream.config.models import (
    DatasetConfig,
    PipelineConfig,
    StreamConfig,
)
from gently_down_the_stream.config.loader import ConfigLoader, load_config

__all__ = [
    "DatasetConfig",
    "PipelineConfig",
    "StreamConfig",
    "ConfigLoader",
    "load_config",
]

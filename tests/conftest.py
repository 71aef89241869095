"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gently_down_the_stream.config.models import (
    DatasetConfig,
    PipelineConfig,
    StreamConfig,
)
from gently_down_the_stream.domain.value_objects import Datasets
from gently_down_the_stream.pipeline.collection_pipeline import CollectionPipeline


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> StreamConfig:
    """Create default stream configuration."""
    return StreamConfig()


@pytest.fixture
def dataset_config() -> DatasetConfig:
    """Create a small dataset configuration."""
    return DatasetConfig(integer_count=50, integer_min=0, integer_max=100)


@pytest.fixture
def pipeline_config() -> PipelineConfig:
    """Create default pipeline configuration."""
    return PipelineConfig()


@pytest.fixture
def pipeline() -> CollectionPipeline:
    """Create a seeded pipeline over the default datasets."""
    return CollectionPipeline(seed=42)


@pytest.fixture
def known_datasets() -> Datasets:
    """Datasets with hand-picked integers for exact assertions."""
    return Datasets(
        fruits=("Apple", "Orange", "Banana", "Pear", "Peach", "Tomato"),
        veggies=("Corn", "Potato", "Carrot", "Pea", "Tomato"),
        integer_values=(5, 17, 3, 17, 99, 42, 8, 99, 1, 64, 33, 21, 77, 12, 50, 7),
    )


@pytest.fixture
def empty_datasets() -> Datasets:
    """Datasets whose collections are present but empty."""
    return Datasets(fruits=(), veggies=(), integer_values=())


@pytest.fixture
def absent_datasets() -> Datasets:
    """Datasets whose collections are all absent."""
    return Datasets(fruits=None, veggies=None, integer_values=None)

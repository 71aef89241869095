"""
Gently Down The Stream - Functional Collection Pipelines.

A small library of filter/sort/map/limit/distinct/aggregate pipelines
over three fixed in-memory datasets (fruits, vegetables and random
integers), wrapped in input validation and custom error types.

Architecture:
    - Ports & Adapters layout (domain, adapters, pipeline)
    - Dependency Injection for testability
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Datasets value object
    - config: Configuration models and loaders
    - adapters: Dataset providers (random integer generation)
    - validation: Collection validation and error types
    - resilience: Wrapping of unexpected faults
    - pipeline: Stream helpers and the CollectionPipeline facade

Example:
    >>> from gently_down_the_stream import CollectionPipeline
    >>> pipeline = CollectionPipeline(seed=42)
    >>> pipeline.sorted_fruits_first_two()
    ['Apple', 'Banana']

"""

import logging

from gently_down_the_stream.pipeline.collection_pipeline import CollectionPipeline
from gently_down_the_stream.resilience.error_handler import OperationFailedError
from gently_down_the_stream.validation.collection_validator import (
    CollectionValidationError,
    EmptyCollectionError,
    MissingCollectionError,
)

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Gently Down The Stream.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import gently_down_the_stream
        >>> gently_down_the_stream.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("gently_down_the_stream").setLevel(level)


__all__ = [
    "CollectionPipeline",
    "CollectionValidationError",
    "EmptyCollectionError",
    "MissingCollectionError",
    "OperationFailedError",
    "configure_logging",
]

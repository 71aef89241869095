"""
Pipeline Package - Stream Helpers and the Collection Facade.

Components:
    - CollectionPipeline: Read-only operations over the fixed datasets
    - stream_ops: Generic filter/sort/distinct/take/average helpers

Design Principles:
    - All dependencies injected via constructor
    - Stateless operation (datasets frozen at construction)
"""

from gently_down_the_stream.pipeline.collection_pipeline import CollectionPipeline
from gently_down_the_stream.pipeline.stream_ops import (
    distinct,
    is_blank,
    non_null,
    safe_average,
    sorted_with_filter,
    take,
)

__all__ = [
    "CollectionPipeline",
    "distinct",
    "is_blank",
    "non_null",
    "safe_average",
    "sorted_with_filter",
    "take",
]

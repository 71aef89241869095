"""
Domain Layer - Core Value Objects.

Value Objects:
    - Datasets: The fruit, vegetable and integer collections

Design Principles:
    - Immutable (frozen Pydantic models holding tuples)
    - No infrastructure dependencies
"""

from gently_down_the_stream.domain.value_objects import (
    Datasets,
    IntegerCollection,
    StringCollection,
)

__all__ = ["Datasets", "IntegerCollection", "StringCollection"]

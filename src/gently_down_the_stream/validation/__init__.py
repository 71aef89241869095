"""
Validation Package - Collection Validation.

This package provides validation for:
    - CollectionValidator: Presence and non-emptiness checks

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
"""

from gently_down_the_stream.validation.collection_validator import (
    CollectionValidationError,
    CollectionValidator,
    EmptyCollectionError,
    MissingCollectionError,
)

__all__ = [
    "CollectionValidationError",
    "CollectionValidator",
    "EmptyCollectionError",
    "MissingCollectionError",
]

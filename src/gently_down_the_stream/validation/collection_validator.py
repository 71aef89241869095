"""
Collection Validator - Validate Collections Before Processing.

Validates collections before a pipeline runs:
    - Collection reference is present (not None)
    - Collection is non-empty, where the operation requires it

Design Notes:
    - Fail-fast principle
    - Validation errors are never wrapped by the error handler
"""

from __future__ import annotations

import logging
from typing import Collection, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CollectionValidationError(Exception):
    """Base class for collection validation failures."""

    def __init__(self, message: str, collection_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.collection_name = collection_name
        self.message = message


class MissingCollectionError(CollectionValidationError, ValueError):
    """Raised when a required collection is absent."""


class EmptyCollectionError(CollectionValidationError):
    """Raised when an operation requires a non-empty collection."""


class CollectionValidator:
    """Validates collection references and sizes."""

    def require(
        self,
        collection: Optional[Collection[T]],
        name: str,
    ) -> Collection[T]:
        """
        Ensure a collection is present. Empty collections are accepted.

        Raises:
            MissingCollectionError: If collection is None
        """
        if collection is None:
            message = f"{name} collection cannot be null"
            logger.error(f"Collection validation failed: {message}")
            raise MissingCollectionError(message, collection_name=name)
        return collection

    def validate(
        self,
        collection: Optional[Collection[T]],
        name: str,
    ) -> Collection[T]:
        """
        Ensure a collection is present and non-empty.

        Raises:
            MissingCollectionError: If collection is None
            EmptyCollectionError: If collection has no elements
        """
        present = self.require(collection, name)
        if len(present) == 0:
            message = f"{name} collection cannot be empty"
            logger.error(f"Collection validation failed: {message}")
            raise EmptyCollectionError(message, collection_name=name)

        logger.debug(f"Collection validated: {name} ({len(present)} elements)")
        return present

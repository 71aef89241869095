"""
Collaborator Protocols.

Defines the abstract interfaces the pipeline depends on: a dataset
provider, a collection validator and an error handler.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Concrete implementations live in adapters, validation and resilience
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, TypeVar, runtime_checkable

from gently_down_the_stream.domain.value_objects import Datasets

T = TypeVar("T")


@runtime_checkable
class DatasetProvider(Protocol):
    """Source of the fixed datasets."""

    def get_datasets(self) -> Datasets:
        ...


@runtime_checkable
class CollectionValidatorProtocol(Protocol):
    """Presence and non-emptiness checks on collections."""

    def require(self, collection: Any, name: str) -> Any:
        """Return collection, raising MissingCollectionError if None."""
        ...

    def validate(self, collection: Any, name: str) -> Any:
        """As require, also raising EmptyCollectionError if empty."""
        ...


@runtime_checkable
class ErrorHandlerProtocol(Protocol):
    """Runs a pipeline step, re-signaling unexpected faults."""

    def guard(
        self,
        func: Callable[[], T],
        operation_name: str = "operation",
        description: Optional[str] = None,
    ) -> T:
        ...

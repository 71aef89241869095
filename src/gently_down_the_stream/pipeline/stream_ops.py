"""
Stream Operations - Generic Collection Helpers.

Small composable steps the pipelines are built from. Every helper
returns a new list (or scalar) and never mutates its input.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Collection,
    Hashable,
    Iterable,
    List,
    Optional,
    TypeVar,
)

from gently_down_the_stream.interfaces.collaborators import (
    CollectionValidatorProtocol,
    ErrorHandlerProtocol,
)
from gently_down_the_stream.resilience.error_handler import ErrorHandler
from gently_down_the_stream.validation.collection_validator import (
    CollectionValidator,
)

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def non_null(items: Iterable[Optional[T]]) -> List[T]:
    """Drop None entries."""
    return [item for item in items if item is not None]


def is_blank(text: str) -> bool:
    """True for empty or whitespace-only strings."""
    return not text.strip()


def distinct(items: Iterable[H]) -> List[H]:
    """Deduplicate by value, keeping the first occurrence."""
    # dict preserves insertion order
    return list(dict.fromkeys(items))


def take(items: Iterable[T], n: int) -> List[T]:
    """First n items, or fewer if the input is shorter."""
    if n <= 0:
        return []
    result: List[T] = []
    for item in items:
        result.append(item)
        if len(result) >= n:
            break
    return result


def safe_average(numbers: Iterable[Optional[float]]) -> Optional[float]:
    """Arithmetic mean of the non-None values, or None if there are none."""
    values = non_null(numbers)
    if not values:
        return None
    return sum(values) / len(values)


def sorted_with_filter(
    collection: Optional[Collection[Optional[T]]],
    predicate: Callable[[T], bool],
    key: Optional[Callable[[T], Any]] = None,
    reverse: bool = False,
    name: str = "Input",
    validator: Optional[CollectionValidatorProtocol] = None,
    error_handler: Optional[ErrorHandlerProtocol] = None,
) -> List[T]:
    """
    Validate, drop nulls, filter and sort a collection.

    Args:
        collection: Source collection (must be present and non-empty)
        predicate: Keep items for which this returns True
        key: Sort key (natural ordering when None)
        reverse: Sort descending; the sort stays stable
        name: Collection name used in error messages
        validator: Collection validator
        error_handler: Wraps unexpected faults

    Returns:
        New sorted list

    Raises:
        MissingCollectionError: If collection is None
        OperationFailedError: If collection is empty (cause is
            EmptyCollectionError) or filtering or sorting fails
    """
    validator = validator or CollectionValidator()
    error_handler = error_handler or ErrorHandler()

    source = validator.require(collection, name)

    def run() -> List[T]:
        validator.validate(source, name)
        return sorted(
            (item for item in non_null(source) if predicate(item)),
            key=key,
            reverse=reverse,
        )

    return error_handler.guard(
        run,
        operation_name="sorted_with_filter",
        description="Failed to sort and filter collection",
    )

"""
Unit Tests for stream_ops helpers.

Test Aspects Covered:
    ✅ Business Logic: Filtering, sorting, distinct, take, average
    ✅ Edge Cases: Nulls, short inputs, stable reverse sort
    ✅ Error Handling: Validation and fault wrapping in sorted_with_filter
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from gently_down_the_stream.interfaces.collaborators import (
    CollectionValidatorProtocol,
    ErrorHandlerProtocol,
)
from gently_down_the_stream.pipeline.stream_ops import (
    distinct,
    is_blank,
    non_null,
    safe_average,
    sorted_with_filter,
    take,
)
from gently_down_the_stream.resilience.error_handler import (
    ErrorHandler,
    OperationFailedError,
)
from gently_down_the_stream.validation.collection_validator import (
    CollectionValidator,
    EmptyCollectionError,
    MissingCollectionError,
)


class TestSmallHelpers:
    """Test cases for non_null, is_blank, distinct and take."""

    def test_non_null_keeps_falsy_values(self) -> None:
        """
        SCENARIO: Input has None, 0 and ""
        EXPECTED: Only None is dropped
        """
        assert non_null([None, 0, "", 3, None]) == [0, "", 3]

    @pytest.mark.parametrize(
        "text,expected",
        [("", True), ("   ", True), ("\t\n", True), ("Pea", False), (" Pea ", False)],
    )
    def test_is_blank(self, text: str, expected: bool) -> None:
        assert is_blank(text) is expected

    def test_distinct_keeps_first_occurrence(self) -> None:
        """
        SCENARIO: Descending input with repeats
        EXPECTED: Repeats removed, order preserved
        """
        assert distinct([9, 9, 7, 5, 5, 5, 1]) == [9, 7, 5, 1]

    def test_take_fewer_than_available(self) -> None:
        assert take([4, 3, 2, 1], 2) == [4, 3]

    def test_take_more_than_available(self) -> None:
        assert take([4, 3], 10) == [4, 3]

    def test_take_zero(self) -> None:
        assert take([4, 3], 0) == []

    def test_take_consumes_generators_lazily(self) -> None:
        """
        SCENARIO: Infinite generator
        EXPECTED: take stops after n items
        """
        def naturals():
            n = 0
            while True:
                yield n
                n += 1

        assert take(naturals(), 3) == [0, 1, 2]


class TestSafeAverage:
    """Test cases for safe_average."""

    def test_mean_of_values(self) -> None:
        assert safe_average([1, 2, 3, 4]) == pytest.approx(2.5)

    def test_ignores_none(self) -> None:
        assert safe_average([None, 10, None, 20]) == pytest.approx(15.0)

    def test_all_none_returns_none(self) -> None:
        assert safe_average([None, None]) is None

    def test_empty_returns_none(self) -> None:
        assert safe_average([]) is None


class TestSortedWithFilter:
    """Test cases for sorted_with_filter."""

    def test_filters_and_sorts(self) -> None:
        """
        SCENARIO: Fruits, excluding those starting with "A"
        EXPECTED: Remaining fruits in ascending order
        """
        # Arrange
        fruits = ("Apple", "Orange", "Banana", None, "Pear", "Avocado")

        # Act
        result = sorted_with_filter(fruits, lambda f: not f.startswith("A"))

        # Assert
        assert result == ["Banana", "Orange", "Pear"]

    def test_reverse_sort_is_stable(self) -> None:
        """
        SCENARIO: Descending sort by length with ties
        EXPECTED: Ties keep their original relative order
        """
        # Arrange
        words = ("bb", "aa", "c", "dd")

        # Act
        result = sorted_with_filter(words, lambda w: True, key=len, reverse=True)

        # Assert
        assert result == ["bb", "aa", "dd", "c"]

    def test_missing_collection(self) -> None:
        """
        SCENARIO: Collection is None
        EXPECTED: MissingCollectionError, unwrapped
        """
        with pytest.raises(MissingCollectionError):
            sorted_with_filter(None, lambda x: True)

    def test_empty_collection(self) -> None:
        """
        SCENARIO: Collection is empty
        EXPECTED: OperationFailedError caused by EmptyCollectionError
        """
        with pytest.raises(OperationFailedError) as exc_info:
            sorted_with_filter((), lambda x: True, name="Fruits")

        assert isinstance(exc_info.value.__cause__, EmptyCollectionError)
        assert "Fruits collection cannot be empty" in str(exc_info.value)
        assert exc_info.value.operation_name == "sorted_with_filter"

    def test_uses_supplied_collaborators(self) -> None:
        """
        SCENARIO: Custom validator and error handler are passed in
        EXPECTED: Both are consulted, and the handler's result is returned
        """
        # Arrange
        validator = Mock(spec=CollectionValidator)
        validator.require.side_effect = lambda collection, name: collection
        handler = Mock(spec=ErrorHandler)
        handler.guard.side_effect = lambda func, operation_name, description: func()

        # Act
        result = sorted_with_filter(
            ("Pear", "Fig"),
            lambda f: True,
            name="Fruits",
            validator=validator,
            error_handler=handler,
        )

        # Assert
        assert result == ["Fig", "Pear"]
        validator.require.assert_called_once_with(("Pear", "Fig"), "Fruits")
        validator.validate.assert_called_once_with(("Pear", "Fig"), "Fruits")
        assert handler.guard.call_args.kwargs["operation_name"] == "sorted_with_filter"
        assert isinstance(validator, CollectionValidatorProtocol)
        assert isinstance(handler, ErrorHandlerProtocol)

    def test_predicate_fault_wrapped(self) -> None:
        """
        SCENARIO: Predicate raises on a non-string element
        EXPECTED: OperationFailedError carrying the original description
        """
        # Arrange
        mixed = ("Apple", 42)

        # Act & Assert
        with pytest.raises(OperationFailedError) as exc_info:
            sorted_with_filter(mixed, lambda f: not f.startswith("A"))

        assert "Failed to sort and filter collection" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, AttributeError)

    def test_does_not_mutate_input(self) -> None:
        """
        SCENARIO: Input is a list
        EXPECTED: Input left untouched, a new list returned
        """
        # Arrange
        source = ["Pear", "Apple"]

        # Act
        result = sorted_with_filter(source, lambda f: True)

        # Assert
        assert source == ["Pear", "Apple"]
        assert result is not source

"""
Collection Pipeline - Read-Only Queries Over the Fixed Datasets.

The CollectionPipeline exposes independent filter/sort/map/limit/distinct/
aggregate chains over three collections set once at construction.
Operations never mutate the datasets and keep no state between calls.
"""

from __future__ import annotations

import logging
from typing import Any, Collection, List, Optional

from gently_down_the_stream.adapters.dataset_provider import RandomDatasetProvider
from gently_down_the_stream.config.models import StreamConfig
from gently_down_the_stream.domain.value_objects import (
    Datasets,
    IntegerCollection,
    StringCollection,
)
from gently_down_the_stream.interfaces.collaborators import (
    CollectionValidatorProtocol,
    DatasetProvider,
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
from gently_down_the_stream.validation.collection_validator import CollectionValidator

logger = logging.getLogger(__name__)

FRUITS = "Fruits"
VEGGIES = "Veggies"
INTEGER_VALUES = "Integer values"


class CollectionPipeline:
    """Facade over the fruit, vegetable and integer collections."""

    def __init__(
        self,
        datasets: Optional[Datasets] = None,
        config: Optional[StreamConfig] = None,
        seed: Optional[int] = None,
        provider: Optional[DatasetProvider] = None,
        validator: Optional[CollectionValidatorProtocol] = None,
        error_handler: Optional[ErrorHandlerProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with all dependencies.

        Datasets are resolved in this order: explicit datasets, the given
        provider, then a RandomDatasetProvider built from config and seed.

        Args:
            datasets: Pre-built datasets
            config: Stream configuration (defaults apply when omitted)
            seed: Seed for integer generation; None means unseeded
            provider: Dataset provider
            validator: For collection validation
            error_handler: For wrapping unexpected faults
        """
        self.config = config or StreamConfig()
        self.validator = validator or CollectionValidator()
        self.error_handler = error_handler or ErrorHandler()

        if datasets is None:
            provider = provider or RandomDatasetProvider(self.config.datasets, seed=seed)
            datasets = provider.get_datasets()
        self.datasets = datasets

    @classmethod
    def from_config(
        cls,
        config: StreamConfig,
        seed: Optional[int] = None,
    ) -> "CollectionPipeline":
        """Build a pipeline whose datasets come from config."""
        return cls(config=config, seed=seed)

    @property
    def fruits(self) -> StringCollection:
        return self.datasets.fruits

    @property
    def veggies(self) -> StringCollection:
        return self.datasets.veggies

    @property
    def integer_values(self) -> IntegerCollection:
        return self.datasets.integer_values

    # =========================================================================
    # Fruits
    # =========================================================================

    def sorted_fruits(self) -> List[str]:
        """
        Sorted list of fruits.

        Raises:
            MissingCollectionError: If fruits is absent
            EmptyCollectionError: If fruits is empty
            OperationFailedError: If sorting fails
        """
        fruits = self.validator.validate(self.fruits, FRUITS)
        result = self.error_handler.guard(
            lambda: sorted(non_null(fruits)),
            operation_name="sorted_fruits",
            description="Failed to sort fruits",
        )
        self._log_result("sorted_fruits", fruits, result)
        return result

    def sorted_fruits_excluding_prefix(self) -> List[str]:
        """
        Sorted fruits that do not start with the excluded prefix ("A").

        Raises:
            MissingCollectionError: If fruits is absent
            OperationFailedError: If fruits is empty (cause is
                EmptyCollectionError) or filtering or sorting fails
        """
        prefix = self.config.pipelines.excluded_prefix
        result = sorted_with_filter(
            self.fruits,
            lambda fruit: not fruit.startswith(prefix),
            name=FRUITS,
            validator=self.validator,
            error_handler=self.error_handler,
        )
        self._log_result("sorted_fruits_excluding_prefix", self.fruits, result)
        return result

    def sorted_fruits_first_two(self) -> List[str]:
        """
        First two fruits in sorted order, fewer if not enough are available.

        Raises:
            MissingCollectionError: If fruits is absent
            OperationFailedError: If the pipeline fails
        """
        fruits = self.validator.require(self.fruits, FRUITS)
        if not fruits:
            return []

        n = self.config.pipelines.first_n
        result = self.error_handler.guard(
            lambda: take(sorted(non_null(fruits)), n),
            operation_name="sorted_fruits_first_two",
            description="Failed to get first two sorted fruits",
        )
        self._log_result("sorted_fruits_first_two", fruits, result)
        return result

    def comma_separated_fruits(self) -> str:
        """
        Sorted fruits joined with ", ", or "" if there are none.

        Raises:
            MissingCollectionError: If fruits is absent
            OperationFailedError: If the pipeline fails
        """
        fruits = self.validator.require(self.fruits, FRUITS)
        if not fruits:
            return ""

        separator = self.config.pipelines.join_separator
        result = self.error_handler.guard(
            lambda: separator.join(sorted(non_null(fruits))),
            operation_name="comma_separated_fruits",
            description="Failed to create comma-separated fruits list",
        )
        logger.debug(f"comma_separated_fruits: {len(fruits)} in -> {result!r}")
        return result

    # =========================================================================
    # Veggies
    # =========================================================================

    def reverse_sorted_veggies(self) -> List[str]:
        """
        Non-blank veggies in descending order.

        Raises:
            MissingCollectionError: If veggies is absent
            OperationFailedError: If the pipeline fails
        """
        veggies = self.validator.require(self.veggies, VEGGIES)
        if not veggies:
            return []

        result = self.error_handler.guard(
            lambda: self._reverse_sorted_non_blank(veggies),
            operation_name="reverse_sorted_veggies",
            description="Failed to sort veggies in reverse",
        )
        self._log_result("reverse_sorted_veggies", veggies, result)
        return result

    def reverse_sorted_veggies_upper(self) -> List[str]:
        """
        Non-blank veggies in descending order, upper-cased.

        str.upper applies Unicode default case mapping and does not
        depend on the process locale.

        Raises:
            MissingCollectionError: If veggies is absent
            OperationFailedError: If the pipeline fails
        """
        veggies = self.validator.require(self.veggies, VEGGIES)
        if not veggies:
            return []

        result = self.error_handler.guard(
            lambda: [v.upper() for v in self._reverse_sorted_non_blank(veggies)],
            operation_name="reverse_sorted_veggies_upper",
            description="Failed to sort and uppercase veggies",
        )
        self._log_result("reverse_sorted_veggies_upper", veggies, result)
        return result

    @staticmethod
    def _reverse_sorted_non_blank(veggies: Collection[Optional[str]]) -> List[str]:
        return sorted(
            (v for v in non_null(veggies) if not is_blank(v)),
            reverse=True,
        )

    # =========================================================================
    # Integers
    # =========================================================================

    def top_ten(self) -> List[int]:
        """
        The ten largest values in descending order (duplicates kept).

        Raises:
            MissingCollectionError: If integer values are absent
            OperationFailedError: If the pipeline fails
        """
        values = self.validator.require(self.integer_values, INTEGER_VALUES)
        if not values:
            return []

        n = self.config.pipelines.top_n
        result = self.error_handler.guard(
            lambda: take(sorted(values, reverse=True), n),
            operation_name="top_ten",
            description="Failed to retrieve top ten values",
        )
        self._log_result("top_ten", values, result)
        return result

    def top_ten_unique(self) -> List[int]:
        """
        The ten largest distinct values in descending order.

        Raises:
            MissingCollectionError: If integer values are absent
            OperationFailedError: If the pipeline fails
        """
        values = self.validator.require(self.integer_values, INTEGER_VALUES)
        if not values:
            return []

        n = self.config.pipelines.top_n
        result = self.error_handler.guard(
            lambda: take(distinct(sorted(values, reverse=True)), n),
            operation_name="top_ten_unique",
            description="Failed to retrieve top ten unique values",
        )
        self._log_result("top_ten_unique", values, result)
        return result

    def top_ten_unique_odd(self) -> List[int]:
        """
        The ten largest distinct odd values in descending order.

        Raises:
            MissingCollectionError: If integer values are absent
            OperationFailedError: If the pipeline fails
        """
        values = self.validator.require(self.integer_values, INTEGER_VALUES)
        if not values:
            return []

        n = self.config.pipelines.top_n
        result = self.error_handler.guard(
            lambda: take(
                (x for x in distinct(sorted(values, reverse=True)) if x % 2 != 0),
                n,
            ),
            operation_name="top_ten_unique_odd",
            description="Failed to retrieve top ten unique odd values",
        )
        self._log_result("top_ten_unique_odd", values, result)
        return result

    def average(self) -> float:
        """
        Arithmetic mean of the integer values.

        Raises:
            MissingCollectionError: If integer values are absent
            EmptyCollectionError: If integer values are empty
            OperationFailedError: If every value is None
        """
        values = self.validator.validate(self.integer_values, INTEGER_VALUES)

        result = safe_average(values)
        if result is None:
            message = "Average calculation failed: no valid values to average"
            logger.error(message)
            raise OperationFailedError(message, operation_name="average")

        logger.debug(f"average: {len(values)} in -> {result}")
        return float(result)

    def _log_result(self, operation: str, source: Collection[Any], result: List[Any]) -> None:
        logger.debug(f"{operation}: {len(source)} in -> {len(result)} out")

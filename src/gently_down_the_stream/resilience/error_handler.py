"""
Error Handler - Wrapping of Unexpected Pipeline Faults.

Provides:
    - OperationFailedError for faults inside a transformation chain
    - A guard that passes missing-collection errors through untouched

Design Notes:
    - No retries: every failure is a programming or usage error
    - The original exception is kept as __cause__
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple, Type, TypeVar

from gently_down_the_stream.validation.collection_validator import (
    MissingCollectionError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OperationFailedError(RuntimeError):
    """Raised when a transformation step encounters an unexpected fault."""

    def __init__(self, message: str, operation_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.operation_name = operation_name
        self.message = message


class ErrorHandler:
    """Runs pipeline steps, re-signaling unexpected faults."""

    def __init__(
        self,
        passthrough_exceptions: Tuple[Type[BaseException], ...] = (
            MissingCollectionError,
        ),
    ) -> None:
        """
        Initialize error handler.

        Args:
            passthrough_exceptions: Exception types propagated unwrapped
        """
        self.passthrough_exceptions = passthrough_exceptions

    def guard(
        self,
        func: Callable[[], T],
        operation_name: str = "operation",
        description: Optional[str] = None,
    ) -> T:
        """
        Execute function, wrapping unexpected faults.

        Args:
            func: Zero-argument function to execute
            operation_name: Name for logging and the raised error
            description: Message prefix for the raised error

        Returns:
            Result of func

        Raises:
            OperationFailedError: When func raises anything not in
                passthrough_exceptions
        """
        try:
            return func()
        except self.passthrough_exceptions:
            raise
        except Exception as e:
            prefix = description or f"{operation_name} failed"
            logger.error(f"{operation_name} failed: {e!r}")
            raise OperationFailedError(
                f"{prefix}: {e}", operation_name=operation_name
            ) from e

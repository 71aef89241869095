"""
Resilience Package - Error Handling.

This package provides:
    - ErrorHandler: Guard that wraps unexpected faults
    - OperationFailedError: Generic "operation failed" condition

Design Principles:
    - Fail fast, no retries
    - Missing-collection errors propagate unwrapped
"""

from gently_down_the_stream.resilience.error_handler import (
    ErrorHandler,
    OperationFailedError,
)

__all__ = ["ErrorHandler", "OperationFailedError"]

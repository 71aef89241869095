"""
Interfaces Layer - Abstract Protocols for Dependencies.

Protocols:
    - DatasetProvider: Data access abstraction
    - CollectionValidatorProtocol: Collection validation
    - ErrorHandlerProtocol: Fault wrapping

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
"""

from gently_down_the_stream.interfaces.collaborators import (
    CollectionValidatorProtocol,
    DatasetProvider,
    ErrorHandlerProtocol,
)

__all__ = [
    "CollectionValidatorProtocol",
    "DatasetProvider",
    "ErrorHandlerProtocol",
]

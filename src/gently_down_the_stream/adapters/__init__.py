"""
Adapters Package - Infrastructure Implementations.

Providers:
    - RandomDatasetProvider: Builds datasets from config with an optional seed

Design Principles:
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from gently_down_the_stream.adapters.dataset_provider import RandomDatasetProvider

__all__ = ["RandomDatasetProvider"]

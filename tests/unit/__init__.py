"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with mocked dependencies.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_collection_validator.py: Missing/empty collection checks
    - test_error_handler.py: Fault wrapping
    - test_stream_ops.py: Generic stream helpers
    - test_dataset_provider.py: Dataset generation
    - test_config_loader.py: Configuration loading/validation
    - test_fruit_pipelines.py / test_veggie_pipelines.py / test_integer_pipelines.py
"""

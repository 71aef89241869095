"""
Integration Tests - End-to-End Pipeline Tests.

These tests verify that configuration loading, dataset generation and
the CollectionPipeline work together correctly.

Test Files:
    - test_collection_pipeline_from_config.py: Config file to query results
"""

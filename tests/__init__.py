#!/usr/bin/env python3
"""
Test suite for the compatibility engine.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only unit tests for the engine
    python -m pytest tests/unit/compatibility -v

    # Skip tests that go through the HTTP layer
    python -m pytest tests/ -v -m "not web"

    # Using unittest
    python -m unittest discover tests -v
"""

"""Test suite for objc-property-attributes.

Test Structure:
- domain/models/: Tests for the PropertyAttributes model
- domain/services/: Tests for tokenizing, decoding and declaration rendering
- domain/repositories/: Tests for type registries, property sources and caching
- config/: Tests for configuration management
- infrastructure/: Tests for logging infrastructure

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run integration tests only
"""

__version__ = "0.1.0"

"""
Shared fixtures for unit tests.

This module provides the rollup components wired to the in-memory
data sources defined in tests/conftest.py:
- NetworkResolver
- PerformanceEnricher
- NetworkRollupService
"""

import pytest

from firefund.services.network import (
    NetworkResolver,
    NetworkRollupService,
    PerformanceEnricher,
)


@pytest.fixture
def resolver(sample_source):
    """Resolver over the sample network."""
    return NetworkResolver(sample_source)


@pytest.fixture
def enricher(sample_source):
    """Enricher over the sample network, no timeout."""
    return PerformanceEnricher(sample_source)


@pytest.fixture
def service(sample_source):
    """Rollup service over the sample network."""
    return NetworkRollupService(sample_source)

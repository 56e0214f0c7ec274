"""
Shared test fixtures for the calculation engine tests.
"""

import os
import sys

import pytest

# Make sample_data importable when pytest runs from the repository root
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from sample_data import make_regional_dataframe, make_resolver  # noqa: E402


@pytest.fixture
def sample_regional_data():
    """Regional dataset DataFrame with three regions (Sunland, Dryland, Gusty)."""
    return make_regional_dataframe()


@pytest.fixture
def resolver():
    return make_resolver()


@pytest.fixture
def sunland_profile(resolver):
    return resolver.resolve("Sunland")

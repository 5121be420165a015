"""
Models Package

This package contains Pydantic models for beacon API responses and fixture
entries.
"""

from .api_models import BeaconResponse, FinalizedRootResponse
from .fixture import FixtureEntry

__all__ = [
    'BeaconResponse',
    'FinalizedRootResponse',
    'FixtureEntry',
]

"""
API Package

This package contains the beacon API client and the fixture service built on
top of it.
"""

from .beacon_client import BeaconAPIClient
from .fixture_service import FixtureService

__all__ = [
    'BeaconAPIClient',
    'FixtureService',
]

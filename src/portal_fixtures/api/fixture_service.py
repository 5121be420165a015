"""
Fixture Service Module

This module runs the five beacon queries through the beacon API client and
derives one labelled fixture entry per query.
"""

import logging
from datetime import date
from typing import List, Optional

from ..content.consensus import ConsensusObject
from ..content.derivation import derive_content
from ..content.periods import get_start_period
from ..models.fixture import FixtureEntry
from .beacon_client import BeaconAPIClient

logger = logging.getLogger(__name__)

BOOTSTRAP_LABEL = "Light Client Bootstrap"
FINALITY_UPDATE_LABEL = "Light Client Finality Update"
OPTIMISTIC_UPDATE_LABEL = "Light Client Optimistic Update"
UPDATES_BY_RANGE_LABEL = "Light Client Updates By Range"
HISTORICAL_SUMMARIES_LABEL = "Historical Summaries With Proof"

# One update per range request
UPDATES_PER_RANGE = 1


class FixtureService:
    """Service for generating Hive beacon fixture entries."""

    def __init__(self, beacon_client: BeaconAPIClient, updated_at: Optional[date] = None):
        """
        Initialize the fixture service.

        Args:
            beacon_client: Client used for every query
            updated_at: Date stamped on each entry. Defaults to today.
        """
        self.beacon_client = beacon_client
        self.updated_at = updated_at or date.today()

    def _entry(self, label: str, obj: ConsensusObject) -> FixtureEntry:
        key, value = derive_content(obj)
        logger.info(f"Derived {label}: key {key.to_hex()}")
        return FixtureEntry(
            label=label,
            content_key=key.to_hex(),
            content_value=value.to_hex(),
            updated_at=self.updated_at,
        )

    def bootstrap_entry(self) -> FixtureEntry:
        """Bootstrap for the latest finalized block root."""
        block_root = self.beacon_client.fetch_finalized_root()
        return self._entry(BOOTSTRAP_LABEL, self.beacon_client.fetch_bootstrap(block_root))

    def finality_update_entry(self) -> FixtureEntry:
        return self._entry(FINALITY_UPDATE_LABEL, self.beacon_client.fetch_finality_update())

    def optimistic_update_entry(self) -> FixtureEntry:
        return self._entry(OPTIMISTIC_UPDATE_LABEL, self.beacon_client.fetch_optimistic_update())

    def updates_by_range_entry(self, now: Optional[int] = None) -> FixtureEntry:
        """
        Updates for the sync committee period estimated from the wall clock.

        Args:
            now: Unix time to estimate the period at. Defaults to the current time.
        """
        start_period = get_start_period(now)
        update_range = self.beacon_client.fetch_update_range(start_period, UPDATES_PER_RANGE)
        return self._entry(UPDATES_BY_RANGE_LABEL, update_range)

    def historical_summaries_entry(self) -> FixtureEntry:
        return self._entry(
            HISTORICAL_SUMMARIES_LABEL,
            self.beacon_client.fetch_beacon_state_finalized(),
        )

    def collect_entries(self, now: Optional[int] = None) -> List[FixtureEntry]:
        """
        Run all five queries in fixture order.

        Any failure propagates immediately; no entry is returned unless all of
        them were derived.
        """
        return [
            self.bootstrap_entry(),
            self.finality_update_entry(),
            self.optimistic_update_entry(),
            self.updates_by_range_entry(now),
            self.historical_summaries_entry(),
        ]

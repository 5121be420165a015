"""
Slot and Period Arithmetic

Wall-clock estimates of the current slot and sync committee period. The
estimate does not consult the node's head, so near a period boundary it can
be one period ahead of what the node has produced updates for.
"""

import time
from typing import Optional

from ..config import BEACON_GENESIS_TIME, SECONDS_PER_SLOT
from ..ssz.constants import SLOTS_PER_PERIOD


def expected_current_slot(genesis_time: int, now: int) -> int:
    """
    Slot expected at unix time `now` for a chain started at `genesis_time`.

    Raises:
        ValueError: If now is before genesis
    """
    if now < genesis_time:
        raise ValueError(f"Time {now} is before genesis {genesis_time}")
    return (now - genesis_time) // SECONDS_PER_SLOT


def expected_current_period(genesis_time: int, now: int) -> int:
    """
    Sync committee period expected at unix time `now`.

    Examples:
        >>> expected_current_period(1606824023, 1606824023 + 8192 * 12)
        1
    """
    return expected_current_slot(genesis_time, now) // SLOTS_PER_PERIOD


def get_start_period(now: Optional[int] = None) -> int:
    """Start period for the updates-by-range query on mainnet."""
    if now is None:
        now = int(time.time())
    return expected_current_period(BEACON_GENESIS_TIME, now)

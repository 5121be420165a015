"""
Consensus Objects

The parsed results of the five beacon API queries. Each variant holds exactly
what is needed to derive its content key and value.
"""

from dataclasses import dataclass
from typing import List, Union

from ..ssz.containers.beacon import BeaconState
from ..ssz.containers.light_client import (
    LightClientBootstrap,
    LightClientFinalityUpdate,
    LightClientOptimisticUpdate,
    LightClientUpdate,
)


@dataclass(frozen=True)
class Bootstrap:
    """A bootstrap together with the block root it was requested for."""
    block_root: bytes
    bootstrap: LightClientBootstrap


@dataclass(frozen=True)
class FinalityUpdate:
    update: LightClientFinalityUpdate


@dataclass(frozen=True)
class OptimisticUpdate:
    update: LightClientOptimisticUpdate


@dataclass(frozen=True)
class UpdateRange:
    """Updates served for the range starting at start_period."""
    start_period: int
    count: int
    updates: List[LightClientUpdate]


@dataclass(frozen=True)
class BeaconStateSnapshot:
    state: BeaconState


ConsensusObject = Union[Bootstrap, FinalityUpdate, OptimisticUpdate, UpdateRange, BeaconStateSnapshot]

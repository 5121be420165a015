"""
Portal Beacon Content

Content keys, fork-versioned content values and the derivation of both from
consensus layer objects.
"""

from .consensus import (
    BeaconStateSnapshot,
    Bootstrap,
    ConsensusObject,
    FinalityUpdate,
    OptimisticUpdate,
    UpdateRange,
)
from .derivation import derive_content
from .forks import CURRENT_FORK, ForkName, compute_fork_digest
from .keys import (
    BeaconContentKey,
    HistoricalSummariesWithProofKey,
    LightClientBootstrapKey,
    LightClientFinalityUpdateKey,
    LightClientOptimisticUpdateKey,
    LightClientUpdatesByRangeKey,
    decode_content_key,
)
from .periods import expected_current_period, expected_current_slot, get_start_period
from .values import (
    BeaconContentValue,
    ForkVersionedHistoricalSummariesWithProof,
    ForkVersionedLightClientBootstrap,
    ForkVersionedLightClientFinalityUpdate,
    ForkVersionedLightClientOptimisticUpdate,
    ForkVersionedLightClientUpdate,
    HistoricalSummariesWithProof,
    LightClientUpdatesByRange,
    decode_content_value,
)

__all__ = [
    # Consensus objects
    'BeaconStateSnapshot',
    'Bootstrap',
    'ConsensusObject',
    'FinalityUpdate',
    'OptimisticUpdate',
    'UpdateRange',

    # Forks
    'CURRENT_FORK',
    'ForkName',
    'compute_fork_digest',

    # Keys
    'BeaconContentKey',
    'HistoricalSummariesWithProofKey',
    'LightClientBootstrapKey',
    'LightClientFinalityUpdateKey',
    'LightClientOptimisticUpdateKey',
    'LightClientUpdatesByRangeKey',
    'decode_content_key',

    # Values
    'BeaconContentValue',
    'ForkVersionedHistoricalSummariesWithProof',
    'ForkVersionedLightClientBootstrap',
    'ForkVersionedLightClientFinalityUpdate',
    'ForkVersionedLightClientOptimisticUpdate',
    'ForkVersionedLightClientUpdate',
    'HistoricalSummariesWithProof',
    'LightClientUpdatesByRange',
    'decode_content_value',

    # Derivation
    'derive_content',
    'expected_current_period',
    'expected_current_slot',
    'get_start_period',
]

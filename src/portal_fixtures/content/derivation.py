"""
Content Derivation

Turns parsed consensus objects into the (content key, content value) pairs
served on the Portal beacon network. Derivation is pure: the same consensus
object always yields byte-identical keys and values.
"""

import logging
from typing import Tuple

from ..exceptions import InvariantViolation
from ..ssz.constants import HISTORICAL_SUMMARIES_PROOF_LENGTH
from .consensus import (
    BeaconStateSnapshot,
    Bootstrap,
    ConsensusObject,
    FinalityUpdate,
    OptimisticUpdate,
    UpdateRange,
)
from .forks import CURRENT_FORK
from .keys import (
    BeaconContentKey,
    HistoricalSummariesWithProofKey,
    LightClientBootstrapKey,
    LightClientFinalityUpdateKey,
    LightClientOptimisticUpdateKey,
    LightClientUpdatesByRangeKey,
)
from .values import (
    BeaconContentValue,
    ForkVersionedHistoricalSummariesWithProof,
    ForkVersionedLightClientBootstrap,
    ForkVersionedLightClientFinalityUpdate,
    ForkVersionedLightClientOptimisticUpdate,
    ForkVersionedLightClientUpdate,
    HistoricalSummariesWithProof,
    LightClientUpdatesByRange,
)

logger = logging.getLogger(__name__)

ContentPair = Tuple[BeaconContentKey, BeaconContentValue]


def derive_bootstrap(obj: Bootstrap) -> ContentPair:
    """Key the bootstrap by the block root it was fetched for."""
    key = LightClientBootstrapKey(block_hash=obj.block_root)
    value = ForkVersionedLightClientBootstrap(fork_name=CURRENT_FORK, bootstrap=obj.bootstrap)
    return key, value


def derive_finality_update(obj: FinalityUpdate) -> ContentPair:
    """Key the finality update by its finalized slot, not its signature slot."""
    key = LightClientFinalityUpdateKey(finalized_slot=obj.update.finalized_header.beacon.slot)
    value = ForkVersionedLightClientFinalityUpdate(fork_name=CURRENT_FORK, update=obj.update)
    return key, value


def derive_optimistic_update(obj: OptimisticUpdate) -> ContentPair:
    key = LightClientOptimisticUpdateKey(signature_slot=obj.update.signature_slot)
    value = ForkVersionedLightClientOptimisticUpdate(fork_name=CURRENT_FORK, update=obj.update)
    return key, value


def derive_update_range(obj: UpdateRange) -> ContentPair:
    key = LightClientUpdatesByRangeKey(start_period=obj.start_period, count=obj.count)
    value = LightClientUpdatesByRange(updates=[
        ForkVersionedLightClientUpdate(fork_name=CURRENT_FORK, update=update)
        for update in obj.updates
    ])
    return key, value


def derive_historical_summaries(obj: BeaconStateSnapshot) -> ContentPair:
    """
    Derive historical summaries with the proof anchoring them in the state root.

    Raises:
        InvariantViolation: If the proof is not exactly
            HISTORICAL_SUMMARIES_PROOF_LENGTH hashes long
    """
    state = obj.state
    epoch = state.epoch
    proof = state.build_historical_summaries_proof()
    if len(proof) != HISTORICAL_SUMMARIES_PROOF_LENGTH:
        raise InvariantViolation(
            f"Historical summaries proof has {len(proof)} hashes, "
            f"expected {HISTORICAL_SUMMARIES_PROOF_LENGTH}"
        )

    logger.debug(
        f"Built historical summaries proof at epoch {epoch} "
        f"over {len(state.historical_summaries)} summaries"
    )
    key = HistoricalSummariesWithProofKey(epoch=epoch)
    value = ForkVersionedHistoricalSummariesWithProof(
        fork_name=CURRENT_FORK,
        historical_summaries_with_proof=HistoricalSummariesWithProof(
            epoch=epoch,
            historical_summaries=list(state.historical_summaries),
            proof=list(proof),
        ),
    )
    return key, value


_DERIVERS = {
    Bootstrap: derive_bootstrap,
    FinalityUpdate: derive_finality_update,
    OptimisticUpdate: derive_optimistic_update,
    UpdateRange: derive_update_range,
    BeaconStateSnapshot: derive_historical_summaries,
}


def derive_content(obj: ConsensusObject) -> ContentPair:
    """
    Derive the content key and value for a consensus object.

    Args:
        obj: One of the consensus object variants

    Returns:
        Tuple of (content key, content value)

    Raises:
        TypeError: If obj is not a consensus object
        InvariantViolation: If a derived value breaks a structural invariant
    """
    derive = _DERIVERS.get(type(obj))
    if derive is None:
        raise TypeError(f"Cannot derive content from {type(obj).__name__}")
    return derive(obj)

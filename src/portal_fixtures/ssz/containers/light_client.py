"""
Light Client Data Structures

SSZ containers for the Deneb light client sync protocol. Since Capella the
light client header carries the execution payload header together with the
branch proving it against the beacon block body.
"""

from dataclasses import dataclass
from typing import List

from ..constants import (
    CURRENT_SYNC_COMMITTEE_BRANCH_LENGTH,
    EXECUTION_BRANCH_LENGTH,
    FINALITY_BRANCH_LENGTH,
    NEXT_SYNC_COMMITTEE_BRANCH_LENGTH,
)
from .base import SSZContainer
from .beacon import BeaconBlockHeader, ExecutionPayloadHeader, SyncAggregate, SyncCommittee


@dataclass(frozen=True)
class LightClientHeader(SSZContainer):
    beacon: BeaconBlockHeader
    execution: ExecutionPayloadHeader
    execution_branch: List[bytes]

    FIELDS = [
        ("beacon", "BeaconBlockHeader"),
        ("execution", "ExecutionPayloadHeader"),
        ("execution_branch", f"Vector[bytes32, {EXECUTION_BRANCH_LENGTH}]"),
    ]


@dataclass(frozen=True)
class LightClientBootstrap(SSZContainer):
    """Trusted snapshot a light client starts syncing from."""
    header: LightClientHeader
    current_sync_committee: SyncCommittee
    current_sync_committee_branch: List[bytes]

    FIELDS = [
        ("header", "LightClientHeader"),
        ("current_sync_committee", "SyncCommittee"),
        ("current_sync_committee_branch", f"Vector[bytes32, {CURRENT_SYNC_COMMITTEE_BRANCH_LENGTH}]"),
    ]


@dataclass(frozen=True)
class LightClientUpdate(SSZContainer):
    """Best update of a sync committee period, as served by updates-by-range."""
    attested_header: LightClientHeader
    next_sync_committee: SyncCommittee
    next_sync_committee_branch: List[bytes]
    finalized_header: LightClientHeader
    finality_branch: List[bytes]
    sync_aggregate: SyncAggregate
    signature_slot: int

    FIELDS = [
        ("attested_header", "LightClientHeader"),
        ("next_sync_committee", "SyncCommittee"),
        ("next_sync_committee_branch", f"Vector[bytes32, {NEXT_SYNC_COMMITTEE_BRANCH_LENGTH}]"),
        ("finalized_header", "LightClientHeader"),
        ("finality_branch", f"Vector[bytes32, {FINALITY_BRANCH_LENGTH}]"),
        ("sync_aggregate", "SyncAggregate"),
        ("signature_slot", "uint64"),
    ]


@dataclass(frozen=True)
class LightClientFinalityUpdate(SSZContainer):
    attested_header: LightClientHeader
    finalized_header: LightClientHeader
    finality_branch: List[bytes]
    sync_aggregate: SyncAggregate
    signature_slot: int

    FIELDS = [
        ("attested_header", "LightClientHeader"),
        ("finalized_header", "LightClientHeader"),
        ("finality_branch", f"Vector[bytes32, {FINALITY_BRANCH_LENGTH}]"),
        ("sync_aggregate", "SyncAggregate"),
        ("signature_slot", "uint64"),
    ]


@dataclass(frozen=True)
class LightClientOptimisticUpdate(SSZContainer):
    attested_header: LightClientHeader
    sync_aggregate: SyncAggregate
    signature_slot: int

    FIELDS = [
        ("attested_header", "LightClientHeader"),
        ("sync_aggregate", "SyncAggregate"),
        ("signature_slot", "uint64"),
    ]

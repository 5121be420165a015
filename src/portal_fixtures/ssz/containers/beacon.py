"""
Beacon Chain Data Structures

This module contains SSZ container definitions for the Deneb beacon chain
data structures needed to encode light client data and to prove the
historical summaries of a finalized BeaconState.
"""

from dataclasses import dataclass
from typing import List

from ..constants import (
    BYTES_PER_LOGS_BLOOM,
    EPOCHS_PER_ETH1_VOTING_PERIOD,
    EPOCHS_PER_HISTORICAL_VECTOR,
    EPOCHS_PER_SLASHINGS_VECTOR,
    HISTORICAL_ROOTS_LIMIT,
    HISTORICAL_SUMMARIES_FIELD_INDEX,
    JUSTIFICATION_BITS_LENGTH,
    MAX_EXTRA_DATA_BYTES,
    SLOTS_PER_EPOCH,
    SLOTS_PER_HISTORICAL_ROOT,
    SYNC_COMMITTEE_SIZE,
    VALIDATOR_REGISTRY_LIMIT,
)
from ..merkle.core import merkle_root_value
from .base import SSZContainer


@dataclass(frozen=True)
class Fork(SSZContainer):
    """Fork represents a network fork with version information."""
    previous_version: bytes
    current_version: bytes
    epoch: int

    FIELDS = [
        ("previous_version", "bytes4"),
        ("current_version", "bytes4"),
        ("epoch", "uint64"),
    ]


@dataclass(frozen=True)
class ForkData(SSZContainer):
    """ForkData is hashed to obtain the fork digest of a network."""
    current_version: bytes
    genesis_validators_root: bytes

    FIELDS = [
        ("current_version", "bytes4"),
        ("genesis_validators_root", "bytes32"),
    ]


@dataclass(frozen=True)
class Checkpoint(SSZContainer):
    epoch: int
    root: bytes

    FIELDS = [
        ("epoch", "uint64"),
        ("root", "bytes32"),
    ]


@dataclass(frozen=True)
class BeaconBlockHeader(SSZContainer):
    """BeaconBlockHeader represents the header of a beacon chain block."""
    slot: int
    proposer_index: int
    parent_root: bytes
    state_root: bytes
    body_root: bytes

    FIELDS = [
        ("slot", "uint64"),
        ("proposer_index", "uint64"),
        ("parent_root", "bytes32"),
        ("state_root", "bytes32"),
        ("body_root", "bytes32"),
    ]


@dataclass(frozen=True)
class Eth1Data(SSZContainer):
    """Eth1Data represents Ethereum 1.0 chain data in the beacon chain."""
    deposit_root: bytes
    deposit_count: int
    block_hash: bytes

    FIELDS = [
        ("deposit_root", "bytes32"),
        ("deposit_count", "uint64"),
        ("block_hash", "bytes32"),
    ]


@dataclass(frozen=True)
class Validator(SSZContainer):
    """Validator represents a beacon chain validator."""
    pubkey: bytes
    withdrawal_credentials: bytes
    effective_balance: int
    slashed: bool
    activation_eligibility_epoch: int
    activation_epoch: int
    exit_epoch: int
    withdrawable_epoch: int

    FIELDS = [
        ("pubkey", "bytes48"),
        ("withdrawal_credentials", "bytes32"),
        ("effective_balance", "uint64"),
        ("slashed", "boolean"),
        ("activation_eligibility_epoch", "uint64"),
        ("activation_epoch", "uint64"),
        ("exit_epoch", "uint64"),
        ("withdrawable_epoch", "uint64"),
    ]


@dataclass(frozen=True)
class SyncCommittee(SSZContainer):
    pubkeys: List[bytes]
    aggregate_pubkey: bytes

    FIELDS = [
        ("pubkeys", f"Vector[bytes48, {SYNC_COMMITTEE_SIZE}]"),
        ("aggregate_pubkey", "bytes48"),
    ]


@dataclass(frozen=True)
class SyncAggregate(SSZContainer):
    sync_committee_bits: bytes
    sync_committee_signature: bytes

    FIELDS = [
        ("sync_committee_bits", f"Bitvector[{SYNC_COMMITTEE_SIZE}]"),
        ("sync_committee_signature", "bytes96"),
    ]


@dataclass(frozen=True)
class ExecutionPayloadHeader(SSZContainer):
    """ExecutionPayloadHeader represents the Deneb execution payload header."""
    parent_hash: bytes
    fee_recipient: bytes
    state_root: bytes
    receipts_root: bytes
    logs_bloom: bytes
    prev_randao: bytes
    block_number: int
    gas_limit: int
    gas_used: int
    timestamp: int
    extra_data: bytes
    base_fee_per_gas: int
    block_hash: bytes
    transactions_root: bytes
    withdrawals_root: bytes
    blob_gas_used: int
    excess_blob_gas: int

    FIELDS = [
        ("parent_hash", "bytes32"),
        ("fee_recipient", "bytes20"),
        ("state_root", "bytes32"),
        ("receipts_root", "bytes32"),
        ("logs_bloom", f"bytes{BYTES_PER_LOGS_BLOOM}"),
        ("prev_randao", "bytes32"),
        ("block_number", "uint64"),
        ("gas_limit", "uint64"),
        ("gas_used", "uint64"),
        ("timestamp", "uint64"),
        ("extra_data", f"ByteList[{MAX_EXTRA_DATA_BYTES}]"),
        ("base_fee_per_gas", "uint256"),
        ("block_hash", "bytes32"),
        ("transactions_root", "bytes32"),
        ("withdrawals_root", "bytes32"),
        ("blob_gas_used", "uint64"),
        ("excess_blob_gas", "uint64"),
    ]


@dataclass(frozen=True)
class HistoricalSummary(SSZContainer):
    """Roots of one SLOTS_PER_HISTORICAL_ROOT span of block and state roots."""
    block_summary_root: bytes
    state_summary_root: bytes

    FIELDS = [
        ("block_summary_root", "bytes32"),
        ("state_summary_root", "bytes32"),
    ]


HISTORICAL_SUMMARIES_TYPE = f"List[HistoricalSummary, {HISTORICAL_ROOTS_LIMIT}]"


@dataclass(frozen=True)
class BeaconState(SSZContainer):
    """BeaconState represents the complete Deneb state of the beacon chain."""
    genesis_time: int
    genesis_validators_root: bytes
    slot: int
    fork: Fork
    latest_block_header: BeaconBlockHeader
    block_roots: List[bytes]
    state_roots: List[bytes]
    historical_roots: List[bytes]
    eth1_data: Eth1Data
    eth1_data_votes: List[Eth1Data]
    eth1_deposit_index: int
    validators: List[Validator]
    balances: List[int]
    randao_mixes: List[bytes]
    slashings: List[int]
    previous_epoch_participation: List[int]
    current_epoch_participation: List[int]
    justification_bits: bytes
    previous_justified_checkpoint: Checkpoint
    current_justified_checkpoint: Checkpoint
    finalized_checkpoint: Checkpoint
    inactivity_scores: List[int]
    current_sync_committee: SyncCommittee
    next_sync_committee: SyncCommittee
    latest_execution_payload_header: ExecutionPayloadHeader
    next_withdrawal_index: int
    next_withdrawal_validator_index: int
    historical_summaries: List[HistoricalSummary]

    FIELDS = [
        ("genesis_time", "uint64"),
        ("genesis_validators_root", "bytes32"),
        ("slot", "uint64"),
        ("fork", "Fork"),
        ("latest_block_header", "BeaconBlockHeader"),
        ("block_roots", f"Vector[bytes32, {SLOTS_PER_HISTORICAL_ROOT}]"),
        ("state_roots", f"Vector[bytes32, {SLOTS_PER_HISTORICAL_ROOT}]"),
        ("historical_roots", f"List[bytes32, {HISTORICAL_ROOTS_LIMIT}]"),
        ("eth1_data", "Eth1Data"),
        ("eth1_data_votes", f"List[Eth1Data, {EPOCHS_PER_ETH1_VOTING_PERIOD * SLOTS_PER_EPOCH}]"),
        ("eth1_deposit_index", "uint64"),
        ("validators", f"List[Validator, {VALIDATOR_REGISTRY_LIMIT}]"),
        ("balances", f"List[uint64, {VALIDATOR_REGISTRY_LIMIT}]"),
        ("randao_mixes", f"Vector[bytes32, {EPOCHS_PER_HISTORICAL_VECTOR}]"),
        ("slashings", f"Vector[uint64, {EPOCHS_PER_SLASHINGS_VECTOR}]"),
        ("previous_epoch_participation", f"List[uint8, {VALIDATOR_REGISTRY_LIMIT}]"),
        ("current_epoch_participation", f"List[uint8, {VALIDATOR_REGISTRY_LIMIT}]"),
        ("justification_bits", f"Bitvector[{JUSTIFICATION_BITS_LENGTH}]"),
        ("previous_justified_checkpoint", "Checkpoint"),
        ("current_justified_checkpoint", "Checkpoint"),
        ("finalized_checkpoint", "Checkpoint"),
        ("inactivity_scores", f"List[uint64, {VALIDATOR_REGISTRY_LIMIT}]"),
        ("current_sync_committee", "SyncCommittee"),
        ("next_sync_committee", "SyncCommittee"),
        ("latest_execution_payload_header", "ExecutionPayloadHeader"),
        ("next_withdrawal_index", "uint64"),
        ("next_withdrawal_validator_index", "uint64"),
        ("historical_summaries", HISTORICAL_SUMMARIES_TYPE),
    ]

    @property
    def epoch(self) -> int:
        return self.slot // SLOTS_PER_EPOCH

    def historical_summaries_root(self) -> bytes:
        """hash_tree_root of the historical_summaries list."""
        return merkle_root_value(self.historical_summaries, HISTORICAL_SUMMARIES_TYPE)

    def build_historical_summaries_proof(self) -> List[bytes]:
        """
        Build the branch proving historical_summaries against the state root.

        Returns:
            Sibling hashes from the historical_summaries leaf up to the root
        """
        return self.get_proof(HISTORICAL_SUMMARIES_FIELD_INDEX)

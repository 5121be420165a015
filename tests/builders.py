"""
Beacon API JSON builders shared by the test suites.

Every builder returns JSON shaped like a beacon node response, with integers
as decimal strings and byte data as 0x-prefixed hex.
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from portal_fixtures.ssz.containers import (
    SSZContainer,
    BeaconBlockHeader,
    BeaconState,
    Checkpoint,
    Eth1Data,
    ExecutionPayloadHeader,
    Fork,
    HistoricalSummary,
    SyncCommittee,
)
from portal_fixtures.ssz.constants import (
    EPOCHS_PER_HISTORICAL_VECTOR,
    EPOCHS_PER_SLASHINGS_VECTOR,
    SLOTS_PER_HISTORICAL_ROOT,
    SYNC_COMMITTEE_SIZE,
)


def hex_fill(byte: int, length: int) -> str:
    return "0x" + f"{byte:02x}" * length


def beacon_header_json(slot, proposer_index=0, parent=0x00, state=0x00, body=0x00):
    return {
        "slot": str(slot),
        "proposer_index": str(proposer_index),
        "parent_root": hex_fill(parent, 32),
        "state_root": hex_fill(state, 32),
        "body_root": hex_fill(body, 32),
    }


def execution_header_json(block_number=0, extra_data="0x"):
    return {
        "parent_hash": hex_fill(0, 32),
        "fee_recipient": hex_fill(0, 20),
        "state_root": hex_fill(0, 32),
        "receipts_root": hex_fill(0, 32),
        "logs_bloom": hex_fill(0, 256),
        "prev_randao": hex_fill(0, 32),
        "block_number": str(block_number),
        "gas_limit": "0",
        "gas_used": "0",
        "timestamp": "0",
        "extra_data": extra_data,
        "base_fee_per_gas": "0",
        "block_hash": hex_fill(0, 32),
        "transactions_root": hex_fill(0, 32),
        "withdrawals_root": hex_fill(0, 32),
        "blob_gas_used": "0",
        "excess_blob_gas": "0",
    }


def light_client_header_json(beacon, execution=None, branch=0x00):
    return {
        "beacon": beacon,
        "execution": execution or execution_header_json(),
        "execution_branch": [hex_fill(branch, 32)] * 4,
    }


def sync_committee_json(byte=0x01):
    return {
        "pubkeys": [hex_fill(byte, 48)] * SYNC_COMMITTEE_SIZE,
        "aggregate_pubkey": hex_fill(byte, 48),
    }


def sync_aggregate_json(bits=0xff, signature=0xaa):
    return {
        "sync_committee_bits": hex_fill(bits, 64),
        "sync_committee_signature": hex_fill(signature, 96),
    }


def bootstrap_json(slot=100):
    return {
        "header": light_client_header_json(beacon_header_json(slot)),
        "current_sync_committee": sync_committee_json(),
        "current_sync_committee_branch": [hex_fill(0x0c, 32)] * 5,
    }


def finality_update_json(finalized_slot=12345, attested_slot=12352, signature_slot=12353):
    """Finality update with distinct fill bytes so the encoding can be checked by eye."""
    return {
        "attested_header": light_client_header_json(
            beacon_header_json(attested_slot, 7, 0x11, 0x22, 0x33),
            execution_header_json(block_number=100, extra_data="0xabcd"),
            branch=0x44,
        ),
        "finalized_header": light_client_header_json(
            beacon_header_json(finalized_slot, 3, 0x55, 0x66, 0x77),
            branch=0x88,
        ),
        "finality_branch": [hex_fill(0x99, 32)] * 6,
        "sync_aggregate": sync_aggregate_json(),
        "signature_slot": str(signature_slot),
    }


def optimistic_update_json(attested_slot=200, signature_slot=201):
    return {
        "attested_header": light_client_header_json(beacon_header_json(attested_slot)),
        "sync_aggregate": sync_aggregate_json(),
        "signature_slot": str(signature_slot),
    }


def update_json(attested_slot=8200, finalized_slot=8192, signature_slot=8201):
    return {
        "attested_header": light_client_header_json(beacon_header_json(attested_slot)),
        "next_sync_committee": sync_committee_json(0x02),
        "next_sync_committee_branch": [hex_fill(0x0d, 32)] * 5,
        "finalized_header": light_client_header_json(beacon_header_json(finalized_slot)),
        "finality_branch": [hex_fill(0x0e, 32)] * 6,
        "sync_aggregate": sync_aggregate_json(),
        "signature_slot": str(signature_slot),
    }


def envelope(data, version="deneb"):
    return {"version": version, "data": data}


def historical_summary(index: int) -> HistoricalSummary:
    return HistoricalSummary(
        block_summary_root=bytes([index]) * 32,
        state_summary_root=bytes([index + 0x80]) * 32,
    )


def make_beacon_state(slot: int = 8_000_000, summaries: int = 3) -> BeaconState:
    """
    A small but complete Deneb state.

    The fixed-length vectors are filled with repeated references to the same
    root, which keeps the state cheap to build.
    """
    zero_root = b"\x00" * 32
    sync_committee = SyncCommittee(
        pubkeys=[b"\x01" * 48] * SYNC_COMMITTEE_SIZE,
        aggregate_pubkey=b"\x01" * 48,
    )
    checkpoint = Checkpoint(epoch=slot // 32 - 2, root=b"\x03" * 32)
    return BeaconState(
        genesis_time=1606824023,
        genesis_validators_root=bytes.fromhex(
            "4b363db94e286120d76eb905340fdd4e54bfe9f06bf33ff6cf5ad27f511bfe95"
        ),
        slot=slot,
        fork=Fork(
            previous_version=bytes.fromhex("03000000"),
            current_version=bytes.fromhex("04000000"),
            epoch=269568,
        ),
        latest_block_header=BeaconBlockHeader(
            slot=slot,
            proposer_index=5,
            parent_root=b"\x0a" * 32,
            state_root=zero_root,
            body_root=b"\x0b" * 32,
        ),
        block_roots=[b"\x04" * 32] * SLOTS_PER_HISTORICAL_ROOT,
        state_roots=[b"\x05" * 32] * SLOTS_PER_HISTORICAL_ROOT,
        historical_roots=[b"\x06" * 32, b"\x07" * 32],
        eth1_data=Eth1Data(deposit_root=b"\x08" * 32, deposit_count=10, block_hash=b"\x09" * 32),
        eth1_data_votes=[],
        eth1_deposit_index=10,
        validators=[],
        balances=[32_000_000_000, 31_000_000_000],
        randao_mixes=[b"\x0c" * 32] * EPOCHS_PER_HISTORICAL_VECTOR,
        slashings=[0] * EPOCHS_PER_SLASHINGS_VECTOR,
        previous_epoch_participation=[7, 7],
        current_epoch_participation=[3, 7],
        justification_bits=b"\x0f",
        previous_justified_checkpoint=checkpoint,
        current_justified_checkpoint=checkpoint,
        finalized_checkpoint=checkpoint,
        inactivity_scores=[0, 0],
        current_sync_committee=sync_committee,
        next_sync_committee=sync_committee,
        latest_execution_payload_header=ExecutionPayloadHeader(
            parent_hash=zero_root,
            fee_recipient=b"\x00" * 20,
            state_root=zero_root,
            receipts_root=zero_root,
            logs_bloom=b"\x00" * 256,
            prev_randao=zero_root,
            block_number=1,
            gas_limit=30_000_000,
            gas_used=0,
            timestamp=0,
            extra_data=b"",
            base_fee_per_gas=7,
            block_hash=zero_root,
            transactions_root=zero_root,
            withdrawals_root=zero_root,
            blob_gas_used=0,
            excess_blob_gas=0,
        ),
        next_withdrawal_index=0,
        next_withdrawal_validator_index=0,
        historical_summaries=[historical_summary(i) for i in range(summaries)],
    )


def container_to_json(value):
    """Render a container the way a beacon node would in its JSON responses."""
    if isinstance(value, SSZContainer):
        return {name: container_to_json(getattr(value, name)) for name, _ in value.FIELDS}
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    return [container_to_json(item) for item in value]

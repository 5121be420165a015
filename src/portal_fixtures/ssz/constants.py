"""
SSZ Constants and Limits

This module contains the constants and limits used by the SSZ (Simple Serialize)
implementation for the Deneb beacon chain and light client data structures.
All values follow the mainnet preset.

References:
- Ethereum Consensus Specification: https://github.com/ethereum/consensus-specs
- SSZ Specification: https://github.com/ethereum/consensus-specs/blob/dev/ssz/simple-serialize.md
"""

from hashlib import sha256

# ====================
# Encoding Constants
# ====================

# Size of a single merkleization chunk
BYTES_PER_CHUNK = 32

# Size of the offsets used for variable-size fields
BYTES_PER_LENGTH_OFFSET = 4

# ====================
# Time Parameters
# ====================

SLOTS_PER_EPOCH = 32

EPOCHS_PER_SYNC_COMMITTEE_PERIOD = 256

# Number of slots in one sync committee period
SLOTS_PER_PERIOD = SLOTS_PER_EPOCH * EPOCHS_PER_SYNC_COMMITTEE_PERIOD

EPOCHS_PER_ETH1_VOTING_PERIOD = 64

# ====================
# State List Lengths
# ====================

# Number of slots to maintain in historical root vectors
# This determines the size of block_roots and state_roots vectors in BeaconState
SLOTS_PER_HISTORICAL_ROOT = 8192

# Limit of the frozen historical_roots list and of historical_summaries
HISTORICAL_ROOTS_LIMIT = 2**24

# Number of epochs to maintain in historical vectors
# Used for randao_mixes vector in BeaconState
EPOCHS_PER_HISTORICAL_VECTOR = 65536

# Number of epochs to maintain slashing data
EPOCHS_PER_SLASHINGS_VECTOR = 8192

# Maximum capacity for the validator registry
VALIDATOR_REGISTRY_LIMIT = 2**40

JUSTIFICATION_BITS_LENGTH = 4

# ====================
# Sync Committee
# ====================

SYNC_COMMITTEE_SIZE = 512

# ====================
# Execution Layer Constants
# ====================

BYTES_PER_LOGS_BLOOM = 256

MAX_EXTRA_DATA_BYTES = 32

# ====================
# Light Client Branch Depths
# ====================

# floorlog2 of the generalized indices defined by the Altair/Capella light client specs
CURRENT_SYNC_COMMITTEE_BRANCH_LENGTH = 5
NEXT_SYNC_COMMITTEE_BRANCH_LENGTH = 5
FINALITY_BRANCH_LENGTH = 6
EXECUTION_BRANCH_LENGTH = 4

# ====================
# Historical Summaries Proof
# ====================

# Position of historical_summaries among the 28 Deneb BeaconState fields
HISTORICAL_SUMMARIES_FIELD_INDEX = 27

# The state has 28 fields, padded to 32 leaves, so the proof is always 5 hashes
HISTORICAL_SUMMARIES_PROOF_LENGTH = 5

# ====================
# Cryptographic Constants
# ====================

# Precomputed zero node hashes for Merkle tree padding
# Each level i contains: SHA256(ZERO_HASHES[i-1] || ZERO_HASHES[i-1])
ZERO_HASHES = [b"\0" * 32]
for _ in range(64):
    ZERO_HASHES.append(sha256(ZERO_HASHES[-1] + ZERO_HASHES[-1]).digest())

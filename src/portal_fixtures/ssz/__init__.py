"""
SSZ (Simple Serialize) Library

An implementation of the SSZ serialization standard used by the Ethereum
consensus layer, sized for the Deneb light client and beacon state types.

Modules:
- constants: SSZ constants and mainnet preset values
- types: SSZ type string parsing
- serialization: Serialization and deserialization functions
- merkle: Merkle tree operations and proofs
- containers: SSZ container definitions and utilities
- utils: Hex helpers
"""

from .constants import *
from .serialization import (
    deserialize_value,
    pack_offsets,
    serialize_value,
    unpack_offsets,
)
from .merkle import *
from .containers import *
from .utils import *

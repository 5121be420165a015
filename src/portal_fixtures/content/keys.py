"""
Beacon Content Keys

A content key addresses one piece of beacon data in the Portal network. It is
encoded as a one-byte selector followed by the SSZ encoding of the key
payload, and its content id is the sha256 of that encoding.
"""

from dataclasses import dataclass
from hashlib import sha256
from typing import Dict, Type

from ..exceptions import DecodeError
from ..ssz.containers.base import SSZContainer
from ..ssz.utils.hex_helpers import bytes_to_hex


class BeaconContentKey(SSZContainer):
    """Base class of the beacon content key variants."""

    SELECTOR: int = -1

    def encode(self) -> bytes:
        return bytes([self.SELECTOR]) + self.serialize()

    def to_hex(self) -> str:
        return bytes_to_hex(self.encode())

    def content_id(self) -> bytes:
        """Network-wide identifier derived from the encoded key."""
        return sha256(self.encode()).digest()


@dataclass(frozen=True)
class LightClientBootstrapKey(BeaconContentKey):
    block_hash: bytes

    SELECTOR = 0x10
    FIELDS = [("block_hash", "bytes32")]


@dataclass(frozen=True)
class LightClientUpdatesByRangeKey(BeaconContentKey):
    start_period: int
    count: int

    SELECTOR = 0x11
    FIELDS = [
        ("start_period", "uint64"),
        ("count", "uint64"),
    ]


@dataclass(frozen=True)
class LightClientFinalityUpdateKey(BeaconContentKey):
    finalized_slot: int

    SELECTOR = 0x12
    FIELDS = [("finalized_slot", "uint64")]


@dataclass(frozen=True)
class LightClientOptimisticUpdateKey(BeaconContentKey):
    signature_slot: int

    SELECTOR = 0x13
    FIELDS = [("signature_slot", "uint64")]


@dataclass(frozen=True)
class HistoricalSummariesWithProofKey(BeaconContentKey):
    epoch: int

    SELECTOR = 0x14
    FIELDS = [("epoch", "uint64")]


CONTENT_KEY_TYPES: Dict[int, Type[BeaconContentKey]] = {
    cls.SELECTOR: cls
    for cls in (
        LightClientBootstrapKey,
        LightClientUpdatesByRangeKey,
        LightClientFinalityUpdateKey,
        LightClientOptimisticUpdateKey,
        HistoricalSummariesWithProofKey,
    )
}


def decode_content_key(data: bytes) -> BeaconContentKey:
    """
    Decode an encoded beacon content key.

    Raises:
        DecodeError: If the selector is unknown or the payload is malformed
    """
    if not data:
        raise DecodeError("Empty content key")

    key_cls = CONTENT_KEY_TYPES.get(data[0])
    if key_cls is None:
        raise DecodeError(f"Unknown content key selector: 0x{data[0]:02x}")

    try:
        return key_cls.deserialize(data[1:])
    except ValueError as e:
        raise DecodeError(f"Invalid {key_cls.__name__}: {e}")

"""
Beacon Content Values

Content values wrap the canonical SSZ form of light client data and
historical summaries. Every value is fork-versioned: its encoding starts with
the 4-byte digest of the fork the payload belongs to, and decoding switches on
that digest to pick the payload type.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Type

from ..exceptions import DecodeError
from ..ssz.constants import HISTORICAL_SUMMARIES_PROOF_LENGTH
from ..ssz.containers.base import SSZContainer
from ..ssz.containers.beacon import HISTORICAL_SUMMARIES_TYPE, HistoricalSummary
from ..ssz.containers.light_client import (
    LightClientBootstrap,
    LightClientFinalityUpdate,
    LightClientOptimisticUpdate,
    LightClientUpdate,
)
from ..ssz.serialization import pack_offsets, unpack_offsets
from ..ssz.utils.hex_helpers import bytes_to_hex
from .forks import ForkName
from .keys import (
    BeaconContentKey,
    HistoricalSummariesWithProofKey,
    LightClientBootstrapKey,
    LightClientFinalityUpdateKey,
    LightClientOptimisticUpdateKey,
    LightClientUpdatesByRangeKey,
)

FORK_DIGEST_LENGTH = 4

# Maximum number of updates served for one updates-by-range request
MAX_REQUEST_LIGHT_CLIENT_UPDATES = 128


@dataclass(frozen=True)
class HistoricalSummariesWithProof(SSZContainer):
    """Historical summaries of a finalized state with their branch to the state root."""
    epoch: int
    historical_summaries: List[HistoricalSummary]
    proof: List[bytes]

    FIELDS = [
        ("epoch", "uint64"),
        ("historical_summaries", HISTORICAL_SUMMARIES_TYPE),
        ("proof", f"Vector[bytes32, {HISTORICAL_SUMMARIES_PROOF_LENGTH}]"),
    ]


class BeaconContentValue:
    """Base class of the beacon content value variants."""

    def encode(self) -> bytes:
        raise NotImplementedError

    @classmethod
    def decode(cls, data: bytes) -> "BeaconContentValue":
        raise NotImplementedError

    def to_hex(self) -> str:
        return bytes_to_hex(self.encode())


class ForkVersionedValue(BeaconContentValue):
    """
    A payload tagged with its fork.

    Subclasses are dataclasses with a ``fork_name`` field and one payload
    field named by ``PAYLOAD_FIELD``; ``PAYLOAD_TYPES`` maps each supported
    fork to the payload container used to decode it.
    """

    PAYLOAD_FIELD: ClassVar[str] = ""
    PAYLOAD_TYPES: ClassVar[Dict[ForkName, Type[SSZContainer]]] = {}

    @property
    def payload(self) -> Any:
        return getattr(self, self.PAYLOAD_FIELD)

    def encode(self) -> bytes:
        return self.fork_name.fork_digest + self.payload.serialize()

    @classmethod
    def decode(cls, data: bytes) -> "ForkVersionedValue":
        """
        Decode a fork-versioned value.

        Raises:
            DecodeError: If the digest is unknown, the fork is unsupported for
                this value or the payload is malformed
        """
        if len(data) < FORK_DIGEST_LENGTH:
            raise DecodeError(f"{cls.__name__} is shorter than a fork digest")

        fork_name = ForkName.from_fork_digest(data[:FORK_DIGEST_LENGTH])
        payload_cls = cls.PAYLOAD_TYPES.get(fork_name)
        if payload_cls is None:
            raise DecodeError(f"{cls.__name__} does not support fork {fork_name.value}")

        try:
            payload = payload_cls.deserialize(data[FORK_DIGEST_LENGTH:])
        except ValueError as e:
            raise DecodeError(f"Invalid {payload_cls.__name__}: {e}")
        return cls(fork_name=fork_name, **{cls.PAYLOAD_FIELD: payload})


@dataclass(frozen=True)
class ForkVersionedLightClientBootstrap(ForkVersionedValue):
    fork_name: ForkName
    bootstrap: LightClientBootstrap

    PAYLOAD_FIELD = "bootstrap"
    PAYLOAD_TYPES = {ForkName.DENEB: LightClientBootstrap}


@dataclass(frozen=True)
class ForkVersionedLightClientUpdate(ForkVersionedValue):
    fork_name: ForkName
    update: LightClientUpdate

    PAYLOAD_FIELD = "update"
    PAYLOAD_TYPES = {ForkName.DENEB: LightClientUpdate}


@dataclass(frozen=True)
class ForkVersionedLightClientFinalityUpdate(ForkVersionedValue):
    fork_name: ForkName
    update: LightClientFinalityUpdate

    PAYLOAD_FIELD = "update"
    PAYLOAD_TYPES = {ForkName.DENEB: LightClientFinalityUpdate}


@dataclass(frozen=True)
class ForkVersionedLightClientOptimisticUpdate(ForkVersionedValue):
    fork_name: ForkName
    update: LightClientOptimisticUpdate

    PAYLOAD_FIELD = "update"
    PAYLOAD_TYPES = {ForkName.DENEB: LightClientOptimisticUpdate}


@dataclass(frozen=True)
class ForkVersionedHistoricalSummariesWithProof(ForkVersionedValue):
    fork_name: ForkName
    historical_summaries_with_proof: HistoricalSummariesWithProof

    PAYLOAD_FIELD = "historical_summaries_with_proof"
    PAYLOAD_TYPES = {ForkName.DENEB: HistoricalSummariesWithProof}


@dataclass(frozen=True)
class LightClientUpdatesByRange(BeaconContentValue):
    """
    SSZ list of fork-versioned updates.

    Each item is variable-size, so the list is encoded as offsets followed by
    the items, and every item carries its own fork digest.
    """
    updates: List[ForkVersionedLightClientUpdate]

    def __post_init__(self):
        if len(self.updates) > MAX_REQUEST_LIGHT_CLIENT_UPDATES:
            raise ValueError(
                f"At most {MAX_REQUEST_LIGHT_CLIENT_UPDATES} updates per range, got {len(self.updates)}"
            )

    def encode(self) -> bytes:
        parts = [update.encode() for update in self.updates]
        return pack_offsets([None] * len(parts), parts)

    @classmethod
    def decode(cls, data: bytes) -> "LightClientUpdatesByRange":
        try:
            items = unpack_offsets(data)
            return cls(updates=[ForkVersionedLightClientUpdate.decode(item) for item in items])
        except ValueError as e:
            raise DecodeError(f"Invalid LightClientUpdatesByRange: {e}")


CONTENT_VALUE_TYPES: Dict[Type[BeaconContentKey], Type[BeaconContentValue]] = {
    LightClientBootstrapKey: ForkVersionedLightClientBootstrap,
    LightClientUpdatesByRangeKey: LightClientUpdatesByRange,
    LightClientFinalityUpdateKey: ForkVersionedLightClientFinalityUpdate,
    LightClientOptimisticUpdateKey: ForkVersionedLightClientOptimisticUpdate,
    HistoricalSummariesWithProofKey: ForkVersionedHistoricalSummariesWithProof,
}


def decode_content_value(content_key: BeaconContentKey, data: bytes) -> BeaconContentValue:
    """
    Decode the value addressed by a content key.

    Raises:
        DecodeError: If the bytes are not a valid value for the key's kind
    """
    return CONTENT_VALUE_TYPES[type(content_key)].decode(data)

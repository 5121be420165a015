"""
Fork Names and Digests

Portal beacon content values are prefixed with the 4-byte fork digest of the
fork their payload belongs to. The digest is the first four bytes of
hash_tree_root(ForkData(current_version, genesis_validators_root)).
"""

from enum import Enum
from functools import lru_cache

from ..config import GENESIS_VALIDATORS_ROOT
from ..exceptions import DecodeError
from ..ssz.containers.beacon import ForkData


class ForkName(str, Enum):
    BELLATRIX = "bellatrix"
    CAPELLA = "capella"
    DENEB = "deneb"
    ELECTRA = "electra"

    @property
    def fork_version(self) -> bytes:
        return FORK_VERSIONS[self]

    @property
    def fork_digest(self) -> bytes:
        return compute_fork_digest(self.fork_version, GENESIS_VALIDATORS_ROOT)

    @classmethod
    def from_fork_digest(cls, digest: bytes) -> "ForkName":
        """
        Resolve the fork a 4-byte digest belongs to.

        Raises:
            DecodeError: If the digest matches no known fork
        """
        for fork in cls:
            if fork.fork_digest == bytes(digest):
                return fork
        raise DecodeError(f"Unknown fork digest: 0x{bytes(digest).hex()}")


# Mainnet fork versions
FORK_VERSIONS = {
    ForkName.BELLATRIX: bytes.fromhex("02000000"),
    ForkName.CAPELLA: bytes.fromhex("03000000"),
    ForkName.DENEB: bytes.fromhex("04000000"),
    ForkName.ELECTRA: bytes.fromhex("05000000"),
}

# Every fixture this tool produces is tagged with this fork
CURRENT_FORK = ForkName.DENEB


@lru_cache(maxsize=None)
def compute_fork_digest(current_version: bytes, genesis_validators_root: bytes) -> bytes:
    """
    Compute the 4-byte fork digest of a fork version on a network.

    Examples:
        >>> compute_fork_digest(bytes.fromhex("04000000"), GENESIS_VALIDATORS_ROOT).hex()
        '6a95a1a9'
    """
    fork_data = ForkData(
        current_version=current_version,
        genesis_validators_root=genesis_validators_root,
    )
    return fork_data.merkle_root()[:4]

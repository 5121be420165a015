"""
Configuration

Network constants for Ethereum mainnet and the runtime settings of the fixture
job. Settings come from the environment (a local .env file is honoured).
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Pandaops consensus endpoint
BASE_CL_ENDPOINT = "https://nimbus-geth.mainnet.eu1.ethpandaops.io"

# Beacon chain mainnet genesis time: Tue Dec 01 2020 12:00:23 GMT+0000
BEACON_GENESIS_TIME = 1606824023

SECONDS_PER_SLOT = 12

# Mainnet genesis validators root, input to every fork digest
GENESIS_VALIDATORS_ROOT = bytes.fromhex(
    "4b363db94e286120d76eb905340fdd4e54bfe9f06bf33ff6cf5ad27f511bfe95"
)

# Fixture file consumed by the Portal Hive beacon tests
DEFAULT_FIXTURE_PATH = Path("tests/mainnet/beacon_chain/hive/test_data.yaml")

# Seconds; the finalized state is several hundred megabytes of JSON
DEFAULT_TIMEOUT = 120

CLIENT_ID_ENV = "PANDAOPS_CLIENT_ID"
CLIENT_SECRET_ENV = "PANDAOPS_CLIENT_SECRET"


class FixtureSettings(BaseModel):
    """
    Runtime settings for a fixture update run.

    Attributes:
        client_id: Cloudflare access client id for the consensus endpoint
        client_secret: Cloudflare access client secret for the consensus endpoint
        base_url: Consensus layer endpoint
        fixture_path: Existing fixture file to overwrite
        timeout: Per-request timeout in seconds
    """
    client_id: str = Field(..., description="Endpoint access client id")
    client_secret: str = Field(..., description="Endpoint access client secret")
    base_url: str = Field(default=BASE_CL_ENDPOINT, description="Consensus layer endpoint")
    fixture_path: Path = Field(default=DEFAULT_FIXTURE_PATH, description="Fixture file to overwrite")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")

    @field_validator('client_id', 'client_secret')
    @classmethod
    def validate_credential(cls, v):
        """Credentials are opaque but must not be blank."""
        if not v or not v.strip():
            raise ValueError("Credential cannot be empty")
        return v

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")


def load_settings(
    base_url: Optional[str] = None,
    fixture_path: Optional[Path] = None,
) -> FixtureSettings:
    """
    Load settings from the environment.

    Args:
        base_url: Endpoint override. If None, uses BEACON_API_URL or the default.
        fixture_path: Fixture path override. If None, uses FIXTURE_PATH or the default.

    Returns:
        Validated settings

    Raises:
        ValueError: If a required credential is not set
    """
    load_dotenv()

    client_id = os.getenv(CLIENT_ID_ENV)
    if not client_id:
        raise ValueError(f"{CLIENT_ID_ENV} not found")
    client_secret = os.getenv(CLIENT_SECRET_ENV)
    if not client_secret:
        raise ValueError(f"{CLIENT_SECRET_ENV} not found")

    return FixtureSettings(
        client_id=client_id,
        client_secret=client_secret,
        base_url=base_url or os.getenv("BEACON_API_URL", BASE_CL_ENDPOINT),
        fixture_path=fixture_path or Path(os.getenv("FIXTURE_PATH", str(DEFAULT_FIXTURE_PATH))),
    )

"""
API Models

This module defines Pydantic models for the beacon API response envelopes.
Only the envelope is validated here; the payload under ``data`` is decoded
into SSZ containers by the client.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class BeaconResponse(BaseModel):
    """
    Envelope of a beacon API response.

    Attributes:
        version: Fork name the payload belongs to, when the endpoint reports one
        data: Response payload
    """
    version: Optional[str] = Field(default=None, description="Fork of the payload")
    data: Any = Field(..., description="Response payload")

    @field_validator('version')
    @classmethod
    def normalize_version(cls, v):
        return v.lower() if v is not None else v


class FinalizedRoot(BaseModel):
    root: str = Field(..., description="Block root as 0x-prefixed hex")

    @field_validator('root')
    @classmethod
    def validate_root(cls, v):
        """Validate root is a 32-byte hex string."""
        if not v.startswith('0x') or len(v) != 66:
            raise ValueError("root must be a 32-byte hex string starting with '0x'")
        try:
            root = bytes.fromhex(v[2:])
        except ValueError:
            root = b""
        if len(root) != 32:
            raise ValueError("root must be a 32-byte hex string starting with '0x'")
        return v


class FinalizedRootResponse(BaseModel):
    """Response of /eth/v1/beacon/blocks/finalized/root."""
    data: FinalizedRoot

"""
SSZ Containers Package

This package provides SSZ container definitions and utilities for Ethereum
beacon chain and light client data structures. It includes:

- The base container class with SSZ encoding and merkleization
- Deneb beacon chain data structures (BeaconState and its members)
- Deneb light client data structures (bootstrap and updates)
- Utilities for JSON conversion
"""

from .base import SSZContainer
from .beacon import (
    BeaconBlockHeader,
    BeaconState,
    Checkpoint,
    Eth1Data,
    ExecutionPayloadHeader,
    Fork,
    ForkData,
    HistoricalSummary,
    SyncAggregate,
    SyncCommittee,
    Validator,
)
from .light_client import (
    LightClientBootstrap,
    LightClientFinalityUpdate,
    LightClientHeader,
    LightClientOptimisticUpdate,
    LightClientUpdate,
)
from .utils import json_to_class, value_from_json

__all__ = [
    # Base classes
    'SSZContainer',

    # Beacon chain containers
    'BeaconBlockHeader',
    'BeaconState',
    'Checkpoint',
    'Eth1Data',
    'ExecutionPayloadHeader',
    'Fork',
    'ForkData',
    'HistoricalSummary',
    'SyncAggregate',
    'SyncCommittee',
    'Validator',

    # Light client containers
    'LightClientBootstrap',
    'LightClientFinalityUpdate',
    'LightClientHeader',
    'LightClientOptimisticUpdate',
    'LightClientUpdate',

    # Utilities
    'json_to_class',
    'value_from_json',
]

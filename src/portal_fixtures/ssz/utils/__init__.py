"""
SSZ Utility Functions

This package provides utility functions for hex string handling and naming
conventions used throughout the SSZ library.
"""

from .hex_helpers import (
    bytes_to_hex,
    camel_to_snake,
    hex_to_bytes,
)

__all__ = [
    'bytes_to_hex',
    'camel_to_snake',
    'hex_to_bytes',
]

"""
Portal Fixtures

Generates the Portal network Hive beacon test fixtures: light client data and
historical summaries fetched from a consensus layer node, turned into Portal
content keys and fork-versioned content values.
"""

__version__ = "0.1.0"

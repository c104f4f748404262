"""Remapping and aggregation engine (no IO)."""

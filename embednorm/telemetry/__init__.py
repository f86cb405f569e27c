"""Telemetry scaffolds.

This package emits command run events for deterministic auditing.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]

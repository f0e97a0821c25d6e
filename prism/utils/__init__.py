"""
Shared utilities for PRISM.

Common functionality used across contexts:
- Logger configuration and provenance
- Timestamps for generated identifiers and log directories
"""

from prism.utils.timestamp import epoch_millis, now

__all__ = ["epoch_millis", "now"]

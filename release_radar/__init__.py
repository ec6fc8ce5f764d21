"""Top-level package for the Ethereum release radar.

This package polls GitHub release metadata and blog feeds for the Ethereum
client and tooling ecosystem and reports what was published recently.
"""

__all__ = []

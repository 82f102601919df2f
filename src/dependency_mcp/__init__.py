"""dependency-mcp: Package version lookups across public package registries."""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"

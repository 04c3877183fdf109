"""
dYdX client package.

This package contains the modular dYdX v3 client implementation:
- core: Main DydxClient facade with capability-gated modules
- modules: API modules (public, private, keys, onboarding, eth)
- utils: Utility functions and helpers
"""

from .core import DydxClient, ModuleKind

__all__ = ["DydxClient", "ModuleKind"]

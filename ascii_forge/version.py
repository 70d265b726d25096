#!/usr/bin/env python3
# ascii_forge/version.py
"""
Version and build metadata for ascii_forge.
"""

__version__ = "1.2.0"
__build__ = "2026-10-18"
__license__ = "MIT"

def version_info() -> str:
    """Return human-readable version string."""
    return f"ascii_forge v{__version__} (build {__build__})"

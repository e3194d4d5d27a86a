"""
Sheet layout detection.

Two layouts are recognised:
  1. Layout.MATRIX — dates down, groups across, free-text cells
  2. Layout.FLAT   — one named-column entry per row (default / fallback)
"""

from detection.layout import Layout, LayoutDetector

__all__ = [
    "Layout",
    "LayoutDetector",
]

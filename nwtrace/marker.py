"""
marker.py — per-cell highlight and glyph protocol

All operations are idempotent: applying one twice leaves the cell exactly
as applying it once.
"""

from __future__ import annotations

from typing import Optional

from . import default
from .geometry import Move
from .grid import CellHandle


def tier_style(tier: Optional[int]) -> str:
    """Style name for a flow tier (None = plain traceback selection)."""
    if tier is None:
        return default.SELECTED
    if tier < 0:
        raise ValueError(f"tier must be non-negative, got {tier}")
    return default.TIER_STYLES[min(tier, len(default.TIER_STYLES) - 1)]


def glyph_for(move: Move) -> str:
    if not move.is_short:
        raise ValueError(f"{move.name} has no cell glyph")
    return default.GLYPHS[move.name]


class CellMarker:
    """Applies and removes highlight styles and short arrow glyphs."""

    def mark(self, cell: CellHandle, tier: Optional[int] = None, is_terminal: bool = False) -> None:
        cell.add_style(tier_style(tier))
        if is_terminal:
            self._remove_tiers(cell)
            cell.add_style(default.TERMINAL)

    def demark(self, cell: CellHandle, tier: Optional[int] = None) -> None:
        if tier is None:
            cell.remove_style(default.SELECTED)
        else:
            self._remove_tiers(cell)
        cell.remove_style(default.TERMINAL)

    def place_short_arrow(self, cell: CellHandle, move: Move) -> None:
        name = glyph_for(move)
        if name not in cell.glyphs():
            cell.attach_glyph(name)

    def clear_arrows(self, cell: CellHandle) -> None:
        for name in cell.glyphs():
            cell.detach_glyph(name)

    @staticmethod
    def _remove_tiers(cell: CellHandle) -> None:
        for name in default.TIER_STYLES:
            cell.remove_style(name)

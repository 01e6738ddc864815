"""
overlay.py — persistent drawing surface for long-distance arrows

`OverlayCanvas` keeps the list of lines currently on the surface and
resizes the surface on every draw. Backends subclass it and override the
`_render`, `_erase` and `_resize_surface` hooks; the base class on its own
is a headless surface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class OverlayLine:
    """
    One drawn line; `(x2, y2)` carries the arrowhead.

    Lines compare by identity, two lines with equal end points are still
    different lines on the surface.
    """
    x1: float
    y1: float
    x2: float
    y2: float
    flow: bool = False
    artist: Any = field(default=None, repr=False)

    @property
    def endpoints(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


class OverlayCanvas:
    """
    Single drawing surface layered over the grid.

    Parameters
    ----------
    size_provider : callable, optional
        Returns the current (width, height) of the page/figure; queried
        before each line is drawn.
    """

    def __init__(self, size_provider: Optional[Callable[[], Tuple[float, float]]] = None):
        self._size_provider = size_provider
        self.lines: List[OverlayLine] = []
        self.width = 0.0
        self.height = 0.0

    def add_line(self, x1: float, y1: float, x2: float, y2: float, flow: bool = False) -> OverlayLine:
        if self._size_provider is not None:
            self.resize(*self._size_provider())
        line = OverlayLine(float(x1), float(y1), float(x2), float(y2), flow=flow)
        line.artist = self._render(line)
        self.lines.append(line)
        return line

    def contains(self, line: OverlayLine) -> bool:
        return any(existing is line for existing in self.lines)

    def remove_line(self, line: OverlayLine) -> None:
        for k, existing in enumerate(self.lines):
            if existing is line:
                del self.lines[k]
                self._erase(line)
                return

    def clear(self) -> None:
        if self.lines:
            logger.debug("Clearing %d overlay lines", len(self.lines))
        while self.lines:
            self._erase(self.lines.pop())

    def resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self._resize_surface(self.width, self.height)

    # hooks -----------------------------------------------------------------

    def _render(self, line: OverlayLine) -> Any:
        return None

    def _erase(self, line: OverlayLine) -> None:
        pass

    def _resize_surface(self, width: float, height: float) -> None:
        pass

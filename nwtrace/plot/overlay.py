"""
Figure-wide overlay for long-distance arrows.

A transparent axes covers the whole figure; its data coordinates are
figure pixels with y growing downwards, the same space as the cell boxes
returned by MatplotlibCell.bbox().
"""

import matplotlib.pyplot as plt
from matplotlib.patches import FancyArrowPatch

from ..overlay import OverlayCanvas, OverlayLine
from .colors import FLOW_LONG_ARROW_COLOR, TRACEBACK_LONG_ARROW_COLOR


class FigureOverlay(OverlayCanvas):
    """OverlayCanvas drawing dashed FancyArrowPatch lines on a figure."""

    def __init__(
        self,
        figure: plt.Figure,
        linewidth: float = 1.5,
        mutation_scale: float = 12.0,
    ):
        super().__init__(size_provider=lambda: (figure.bbox.width, figure.bbox.height))
        self.figure = figure
        self.linewidth = linewidth
        self.mutation_scale = mutation_scale
        self.ax = figure.add_axes([0.0, 0.0, 1.0, 1.0], zorder=10)
        self.ax.set_axis_off()
        self.ax.patch.set_alpha(0.0)
        self.ax.set_navigate(False)
        self.resize(figure.bbox.width, figure.bbox.height)

    def _resize_surface(self, width: float, height: float) -> None:
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)

    def _render(self, line: OverlayLine) -> FancyArrowPatch:
        color = FLOW_LONG_ARROW_COLOR if line.flow else TRACEBACK_LONG_ARROW_COLOR
        arrow = FancyArrowPatch(
            (line.x1, line.y1), (line.x2, line.y2),
            arrowstyle="-|>",
            linestyle="--",
            mutation_scale=self.mutation_scale,
            linewidth=self.linewidth,
            color=color,
            zorder=5,
        )
        self.ax.add_patch(arrow)
        self.figure.canvas.draw_idle()
        return arrow

    def _erase(self, line: OverlayLine) -> None:
        if line.artist is not None:
            line.artist.remove()
            line.artist = None
            self.figure.canvas.draw_idle()

"""A single line of text laid out as a widget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tilerogue.ui.geometry import SizeF
from tilerogue.ui.widget import WHITE, Renderer, Widget

FONT_SIZE = 30

# Proportions of a simple fixed-pitch font model used for layout.
_CHAR_WIDTH_RATIO = 0.5
_ASCENT_RATIO = 0.7


@dataclass(frozen=True)
class TextMetrics:
    """Measured extent of a string: its width, height and baseline offset."""

    width: float
    height: float
    offset_y: float


def measure_text(text: str, font_size: float = FONT_SIZE) -> TextMetrics:
    """Measure ``text`` with a fixed-pitch font of ``font_size`` pixels.

    Every character advances by the same width; empty text has no extent.
    """
    if not text:
        return TextMetrics(0.0, 0.0, 0.0)
    width = len(text) * font_size * _CHAR_WIDTH_RATIO
    height = font_size * _ASCENT_RATIO
    return TextMetrics(width, height, height)


class WidgetText(Widget):
    """A text label sized to the text it shows."""

    def __init__(self, widget_id: int, parent: Widget | None = None) -> None:
        super().__init__(widget_id, parent)
        self.text = ""
        self.text_size = SizeF.zero()
        self.offset_y = 0.0
        self.color = WHITE

    def set_text(self, text: str) -> None:
        """Replace the text and resize the widget to fit it."""
        self.text = str(text)
        metrics = measure_text(self.text, FONT_SIZE)
        self.text_size = SizeF(metrics.width, metrics.height)
        self.offset_y = metrics.offset_y
        self.size = SizeF(metrics.width, metrics.height)
        self.dirty = True

    def draw(self, ui: Any, renderer: Renderer) -> None:
        quad = self.computed_quad
        if quad is None:
            return
        baseline = quad.y + self.size.h + (self.offset_y - self.size.h) / 2.0
        renderer.draw_text(self.text, quad.x, baseline, FONT_SIZE, self.color)
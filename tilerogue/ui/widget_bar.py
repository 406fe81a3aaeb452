"""A progress bar: a background, a proportional foreground and a caption."""

from __future__ import annotations

from typing import Any

from tilerogue.ui.widget import AnchorKind, Color, Renderer, Widget
from tilerogue.ui.widget_panel import WidgetPanel
from tilerogue.ui.widget_text import WidgetText


class WidgetBar(Widget):
    """A horizontal bar whose filled part shows a fraction of a whole."""

    def __init__(self, widget_id: int, parent: Widget | None = None) -> None:
        super().__init__(widget_id, parent)
        self.background: WidgetPanel | None = None
        self.foreground: WidgetPanel | None = None
        self.text: WidgetText | None = None

    @classmethod
    def build(cls, ui: Any, widget_id: int, parent: Widget | None) -> WidgetBar:
        """Create the bar, register it with ``ui`` and add its parts."""
        bar = super().build(ui, widget_id, parent)
        ui.widgets.append(bar)
        bar.manually_added = True

        background = ui.create_widget(WidgetPanel, bar)
        bar.background = background
        background.fill_parent()

        foreground = ui.create_widget(WidgetPanel, bar)
        bar.foreground = foreground
        foreground.add_anchor_to_parent(AnchorKind.TOP, AnchorKind.TOP)
        foreground.add_anchor_to_parent(AnchorKind.LEFT, AnchorKind.LEFT)
        foreground.add_anchor_to_parent(AnchorKind.BOTTOM, AnchorKind.BOTTOM)

        caption = ui.create_widget(WidgetText, bar)
        bar.text = caption
        caption.add_anchor_to_parent(AnchorKind.VERTICAL_CENTER, AnchorKind.VERTICAL_CENTER)
        caption.add_anchor_to_parent(AnchorKind.HORIZONTAL_CENTER, AnchorKind.HORIZONTAL_CENTER)
        return bar

    def set_background_color(self, color: Color) -> None:
        if self.background is not None:
            self.background.color = color

    def set_bar_color(self, color: Color) -> None:
        if self.foreground is not None:
            self.foreground.color = color

    def set_bar_percentage(self, percentage: float) -> None:
        """Fill ``percentage`` (0..1) of the laid-out background width."""
        foreground = self.foreground
        if foreground is None:
            return
        width = 0.0
        if self.background is not None and self.background.computed_quad is not None:
            width = self.background.computed_quad.w * percentage
        foreground.size.w = width
        if foreground.computed_quad is not None:
            foreground.computed_quad.w = width

    def set_text(self, text: str) -> None:
        if self.text is not None:
            self.text.set_text(text)

    def draw(self, ui: Any, renderer: Renderer) -> None:
        if not self.visible:
            return
        for child in self.children:
            child.draw(ui, renderer)
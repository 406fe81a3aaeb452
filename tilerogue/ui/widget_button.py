"""A clickable button with a centred text label."""

from __future__ import annotations

from typing import Any, Callable

from tilerogue.ui.geometry import PointF, SizeF
from tilerogue.ui.widget import BLANK, WHITE, Color, Renderer, Widget
from tilerogue.ui.widget_text import WidgetText

ClickCallback = Callable[[Any, PointF], None]


class WidgetButton(Widget):
    """A button that highlights on hover and reports clicks to a callback."""

    def __init__(self, widget_id: int, parent: Widget | None = None) -> None:
        super().__init__(widget_id, parent)
        self.text: WidgetText | None = None
        self.click_callback: ClickCallback | None = None
        self.hovered = False
        self.hovered_color = Color(0.5, 0.5, 0.5, 1.0)
        self.toggled = False
        self.toggled_color = Color(0.3, 0.3, 0.3, 1.0)
        self.size = SizeF(100.0, 30.0)

    @classmethod
    def build(cls, ui: Any, widget_id: int, parent: Widget | None) -> WidgetButton:
        """Create the button, register it with ``ui`` and add its label."""
        button = super().build(ui, widget_id, parent)
        ui.widgets.append(button)
        button.manually_added = True
        label = ui.create_widget(WidgetText, button)
        button.text = label
        label.center_parent()
        label.color = WHITE
        return button

    def set_text(self, text: str) -> None:
        if self.text is not None:
            self.text.set_text(text)

    def set_on_click(self, callback: ClickCallback) -> None:
        self.click_callback = callback

    def on_mouse_position_update(self, ui: Any, pos: PointF) -> None:
        self.hovered = self.contains_point(ui, pos)

    def on_click(self, ui: Any, pos: PointF) -> None:
        if self.contains_point(ui, pos) and self.click_callback is not None:
            self.click_callback(ui, pos)

    def draw(self, ui: Any, renderer: Renderer) -> None:
        quad = self.computed_quad
        if quad is None:
            return
        if self.hovered:
            if self.hovered_color != BLANK:
                renderer.draw_rectangle(quad.x, quad.y, quad.w, quad.h, self.hovered_color)
        elif self.toggled:
            if self.toggled_color != BLANK:
                renderer.draw_rectangle(quad.x, quad.y, quad.w, quad.h, self.toggled_color)
        for child in self.children:
            child.draw(ui, renderer)
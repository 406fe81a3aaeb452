"""A rectangular panel with an optional fill colour and border."""

from __future__ import annotations

from typing import Any

from tilerogue.ui.widget import BLANK, Color, Renderer, Widget


class WidgetPanel(Widget):
    """A container drawn as a filled and/or outlined rectangle."""

    def __init__(self, widget_id: int, parent: Widget | None = None) -> None:
        super().__init__(widget_id, parent)
        self.border_color: Color | None = None
        self.border_thickness: float | None = None

    def set_border(self, color: Color, thickness: float) -> None:
        self.border_color = color
        self.border_thickness = thickness

    def draw(self, ui: Any, renderer: Renderer) -> None:
        if not self.visible:
            return
        quad = self.computed_quad
        if quad is not None:
            if self.border_color is not None:
                if self.border_thickness is not None:
                    if self.color != BLANK:
                        renderer.draw_rectangle(quad.x, quad.y, quad.w, quad.h, self.color)
                    renderer.draw_rectangle_lines(
                        quad.x, quad.y, quad.w, quad.h, self.border_thickness, self.border_color
                    )
            elif self.color != BLANK:
                renderer.draw_rectangle(quad.x, quad.y, quad.w, quad.h, self.color)
        for child in self.children:
            child.draw(ui, renderer)
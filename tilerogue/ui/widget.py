"""Anchor-based widget layout: the base widget, anchors, colours and a renderer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any

from tilerogue.ui.geometry import PointF, QuadF, SizeF


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0


BLANK = Color(0.0, 0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
RED = Color(0.9, 0.16, 0.22, 1.0)
GREEN = Color(0.0, 0.89, 0.19, 1.0)
BLUE = Color(0.0, 0.47, 0.95, 1.0)
YELLOW = Color(0.99, 0.98, 0.0, 1.0)


class AnchorKind(enum.Enum):
    TOP = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    BOTTOM = enum.auto()
    HORIZONTAL_CENTER = enum.auto()
    VERTICAL_CENTER = enum.auto()


@dataclass(frozen=True)
class Anchor:
    """Ties side ``this`` of a widget to side ``to`` of widget ``widget_id``."""

    this: AnchorKind
    to: AnchorKind
    widget_id: int


class Renderer:
    """Collects draw calls as tuples in ``commands``, in call order."""

    def __init__(self) -> None:
        self.commands: list[tuple[Any, ...]] = []

    def draw_rectangle(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        self.commands.append(("rectangle", x, y, w, h, color))

    def draw_rectangle_lines(
        self, x: float, y: float, w: float, h: float, thickness: float, color: Color
    ) -> None:
        self.commands.append(("rectangle_lines", x, y, w, h, thickness, color))

    def draw_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        self.commands.append(("circle", x, y, radius, color))

    def draw_text(self, text: str, x: float, y: float, font_size: float, color: Color) -> None:
        self.commands.append(("text", text, x, y, font_size, color))


class Widget:
    """A node in the widget tree whose rectangle is derived from its anchors.

    The ``ui`` object passed to layout methods must expose ``widgets``, a
    sequence indexed by widget id.
    """

    def __init__(self, widget_id: int, parent: Widget | None = None) -> None:
        self.id = widget_id
        self.parent = parent
        self.parent_id: int | None = parent.id if parent is not None else None
        self.children: list[Widget] = []
        self.children_ids: list[int] = []
        self.anchors: list[Anchor] = []
        self.position = PointF.zero()
        self.size = SizeF.zero()
        self.margin = QuadF.zero()
        self.computed_quad: QuadF | None = None
        self.dirty = True
        self.visible = True
        self.color = BLANK
        self.manually_added = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"

    @classmethod
    def build(cls, ui: Any, widget_id: int, parent: Widget | None) -> Widget:
        """Create a widget and register it as a child of ``parent``."""
        widget = cls(widget_id, parent)
        if parent is not None:
            parent.add_child(widget)
        return widget

    def add_child(self, child: Widget) -> None:
        self.children.append(child)
        self.children_ids.append(child.id)

    def draw(self, ui: Any, renderer: Renderer) -> None:
        """Draw the children of a visible widget."""
        if not self.visible:
            return
        for child in self.children:
            child.draw(ui, renderer)

    def left(self, ui: Any) -> float:
        return self.drawing_coords(ui).x

    def right(self, ui: Any) -> float:
        quad = self.drawing_coords(ui)
        return quad.x + quad.w

    def top(self, ui: Any) -> float:
        return self.drawing_coords(ui).y

    def bottom(self, ui: Any) -> float:
        quad = self.drawing_coords(ui)
        return quad.y + quad.h

    def contains_point(self, ui: Any, point: PointF) -> bool:
        """Whether ``point`` lies in the widget, edges included."""
        quad = self.drawing_coords(ui)
        return quad.x <= point.x <= quad.x + quad.w and quad.y <= point.y <= quad.y + quad.h

    def set_margin(self, margin: QuadF) -> None:
        """Set margins as (left, top, right, bottom) in x, y, w, h."""
        self.margin = replace(margin)
        self.dirty = True

    def set_size(self, size: SizeF) -> None:
        self.size = replace(size)
        self.dirty = True

    def set_position(self, position: PointF) -> None:
        self.position = replace(position)
        self.dirty = True

    def on_mouse_position_update(self, ui: Any, pos: PointF) -> None:
        """Ignored by default; interactive widgets override it."""

    def on_click(self, ui: Any, pos: PointF) -> None:
        """Ignored by default; interactive widgets override it."""

    def break_anchors(self) -> None:
        self.anchors.clear()
        self.dirty = True

    def add_anchor(self, this: AnchorKind, other_id: int, other_side: AnchorKind) -> None:
        self.anchors.append(Anchor(this=this, to=other_side, widget_id=other_id))
        self.dirty = True

    def center_parent(self) -> None:
        self.add_anchor_to_parent(AnchorKind.VERTICAL_CENTER, AnchorKind.VERTICAL_CENTER)
        self.add_anchor_to_parent(AnchorKind.HORIZONTAL_CENTER, AnchorKind.HORIZONTAL_CENTER)

    def add_anchor_to_parent(self, this: AnchorKind, other_side: AnchorKind) -> None:
        if self.parent_id is None:
            raise ValueError(f"widget {self.id} has no parent to anchor to")
        self.add_anchor(this, self.parent_id, other_side)

    def add_anchor_to_prev(self, this: AnchorKind, other_side: AnchorKind) -> None:
        """Anchor to the sibling created just before this widget, if any."""
        if self.parent is None:
            return
        found_self = False
        for sibling_id in reversed(self.parent.children_ids):
            if sibling_id == self.id:
                found_self = True
            elif found_self:
                self.add_anchor(this, sibling_id, other_side)
                return

    def fill_parent(self) -> None:
        self.add_anchor_to_parent(AnchorKind.LEFT, AnchorKind.LEFT)
        self.add_anchor_to_parent(AnchorKind.RIGHT, AnchorKind.RIGHT)
        self.add_anchor_to_parent(AnchorKind.TOP, AnchorKind.TOP)
        self.add_anchor_to_parent(AnchorKind.BOTTOM, AnchorKind.BOTTOM)

    def drawing_coords(self, ui: Any) -> QuadF:
        """The widget's rectangle, recomputed only when it is marked dirty."""
        if self.dirty or self.computed_quad is None:
            self.computed_quad = self.recompute_quad(ui)
            self.dirty = False
        return replace(self.computed_quad)

    def _anchor_value(self, ui: Any, anchor: Anchor) -> float:
        target = ui.widgets[anchor.widget_id]
        side = anchor.to
        if side is AnchorKind.LEFT:
            return target.left(ui)
        if side is AnchorKind.RIGHT:
            return target.right(ui)
        if side is AnchorKind.TOP:
            return target.top(ui)
        if side is AnchorKind.BOTTOM:
            return target.bottom(ui)
        if side is AnchorKind.HORIZONTAL_CENTER:
            return (target.left(ui) + target.right(ui)) / 2.0
        return (target.top(ui) + target.bottom(ui)) / 2.0

    def recompute_quad(self, ui: Any) -> QuadF:
        """Compute the rectangle from anchors, size, position and margins."""
        quad = QuadF.zero()
        size, margin, pos = self.size, self.margin, self.position
        sides: dict[AnchorKind, float] = {}
        horizontal_centered = False
        vertical_centered = False

        for anchor in self.anchors:
            value = self._anchor_value(ui, anchor)
            if anchor.this is AnchorKind.HORIZONTAL_CENTER:
                quad.x = value - size.w / 2.0
                quad.w = size.w
                horizontal_centered = True
            elif anchor.this is AnchorKind.VERTICAL_CENTER:
                quad.y = value - size.h / 2.0
                quad.h = size.h
                vertical_centered = True
            else:
                sides[anchor.this] = value

        if not horizontal_centered:
            left = sides.get(AnchorKind.LEFT)
            right = sides.get(AnchorKind.RIGHT)
            if left is not None and right is not None:
                quad.x, quad.w = left, right - left
            elif left is not None:
                quad.x, quad.w = left, size.w
            elif right is not None:
                quad.x, quad.w = right - margin.w - size.w, size.w
            else:
                quad.x, quad.w = pos.x, size.w

        if not vertical_centered:
            top = sides.get(AnchorKind.TOP)
            bottom = sides.get(AnchorKind.BOTTOM)
            if top is not None and bottom is not None:
                quad.y, quad.h = top, bottom - top
            elif top is not None:
                quad.y, quad.h = top, size.h
            elif bottom is not None:
                quad.y, quad.h = bottom - margin.h - size.h, size.h
            else:
                quad.y, quad.h = pos.y, size.h

        quad.x += margin.x
        quad.y += margin.y
        quad.w = max(quad.w - margin.w, 0.0)
        quad.h = max(quad.h - margin.h, 0.0)
        return quad
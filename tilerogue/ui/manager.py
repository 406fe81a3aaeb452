"""The user-interface manager: owns every widget and the game-facing state they show."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import replace
from typing import Any

from tilerogue.ui.builders import (
    ROOT_ID,
    ChestAction,
    Event,
    build_character_sheet,
    build_chest_view,
    build_left_panel,
    build_right_panel,
)
from tilerogue.ui.geometry import PointF, SizeF
from tilerogue.ui.widget import AnchorKind, Renderer, Widget
from tilerogue.ui.widget_bar import WidgetBar
from tilerogue.ui.widget_button import WidgetButton
from tilerogue.ui.widget_panel import WidgetPanel
from tilerogue.ui.widget_text import WidgetText


def _ratio(value: int, maximum: int) -> float:
    if maximum:
        return value / maximum
    return math.nan if value == 0 else math.inf


class Ui:
    """Holds the widget tree, indexed by id, and the queue of raised events."""

    def __init__(self) -> None:
        self.player_hp = 1
        self.player_max_hp = 1
        self.player_mp = 0
        self.player_max_mp = 0
        self.player_sp = 0
        self.player_str = 0
        self.player_dex = 0
        self.player_int = 0

        self.left_panel_id: int | None = None
        self.right_panel_id: int | None = None
        self.character_sheet_id: int | None = None
        self.chest_view_id: int | None = None
        self.hp_bar_id: int | None = None
        self.mp_bar_id: int | None = None
        self.sp_value_id: int | None = None
        self.str_area_button_id: int | None = None
        self.dex_area_button_id: int | None = None
        self.int_area_button_id: int | None = None
        self.str_value_bound_ids: list[int] = []
        self.dex_value_bound_ids: list[int] = []
        self.int_value_bound_ids: list[int] = []

        self.events: deque[Event] = deque()
        self.id_counter = 0
        self.widgets: list[Widget] = []
        self.is_focused = False

        self.widgets.append(WidgetPanel.build(self, ROOT_ID, None))

        build_left_panel(self)
        build_right_panel(self)
        build_character_sheet(self)
        build_chest_view(self)

    def _widget(self, widget_id: int | None, kind: type) -> Any:
        if widget_id is None or not 0 <= widget_id < len(self.widgets):
            return None
        widget = self.widgets[widget_id]
        return widget if isinstance(widget, kind) else None

    def update_geometry(self, resolution: SizeF) -> None:
        """Resize the root to ``resolution`` and lay out every widget."""
        self.widgets[ROOT_ID].set_size(SizeF(resolution.w, resolution.h))
        for widget in self.widgets:
            widget.drawing_coords(self)

    def update_mouse_position(self, mouse_position: PointF) -> None:
        for widget in list(self.widgets):
            widget.on_mouse_position_update(self, mouse_position)

    def handle_click(self, mouse_position: PointF) -> None:
        for widget in list(self.widgets):
            widget.on_click(self, mouse_position)

    def _update_bar(self, bar_id: int | None, value: int, maximum: int) -> None:
        bar = self._widget(bar_id, WidgetBar)
        if bar is not None:
            bar.set_text(f"{value}/{maximum}")
            bar.set_bar_percentage(_ratio(value, maximum))

    def _update_texts(self, ids: list[int], value: int) -> None:
        for widget_id in ids:
            text = self._widget(widget_id, WidgetText)
            if text is not None:
                text.set_text(str(value))

    def set_player_hp(self, hp: int, max_hp: int) -> None:
        self.player_hp = hp
        self.player_max_hp = max_hp
        self._update_bar(self.hp_bar_id, hp, max_hp)

    def set_player_mp(self, mp: int, max_mp: int) -> None:
        self.player_mp = mp
        self.player_max_mp = max_mp
        self._update_bar(self.mp_bar_id, mp, max_mp)

    def set_player_sp(self, sp: int) -> None:
        self.player_sp = sp
        if self.sp_value_id is not None:
            self._update_texts([self.sp_value_id], sp)

    def set_player_str(self, value: int) -> None:
        self.player_str = value
        self._update_texts(self.str_value_bound_ids, value)

    def set_player_dex(self, value: int) -> None:
        self.player_dex = value
        self._update_texts(self.dex_value_bound_ids, value)

    def set_player_int(self, value: int) -> None:
        self.player_int = value
        self._update_texts(self.int_value_bound_ids, value)

    def set_chest_items(self, items: list[tuple[int, str]]) -> None:
        """Show ``(item_id, name)`` pairs as buttons in the chest view.

        Buttons are added for items beyond those already shown; existing
        buttons are relabelled in order but never removed.
        """
        view = self._widget(self.chest_view_id, WidgetPanel)
        if view is None:
            return

        shown = len(view.children) - 1
        for item_id, name in items[shown:]:
            button = self.create_widget(WidgetButton, view)
            button.set_text(name)
            button.set_margin(replace(button.margin, y=10.0))
            button.add_anchor_to_prev(AnchorKind.TOP, AnchorKind.BOTTOM)
            button.add_anchor_to_prev(AnchorKind.LEFT, AnchorKind.LEFT)
            button.set_on_click(self._chest_pusher(item_id))

        for child, (_item_id, name) in zip(view.children[1:], items):
            if isinstance(child, WidgetButton):
                child.set_text(name)

    @staticmethod
    def _chest_pusher(item_id: int):
        def push(ui: Any, _pos: PointF) -> None:
            ui.events.append(ChestAction(item_id))

        return push

    def toggle_character_sheet(self) -> None:
        sheet = self.widgets[self.character_sheet_id]
        was_visible = sheet.visible
        sheet.visible = not was_visible
        self.is_focused = not was_visible

    def show_chest_view(self, items: list[tuple[int, str]]) -> None:
        self.set_chest_items(items)
        self.widgets[self.chest_view_id].visible = True
        self.is_focused = True

    def hide(self) -> None:
        self.widgets[self.character_sheet_id].visible = False
        self.widgets[self.chest_view_id].visible = False
        self.is_focused = False

    def create_widget(self, widget_class: type[Widget], parent: Widget | None) -> Any:
        """Create a widget with the next id and register it under that id."""
        self.id_counter += 1
        widget = widget_class.build(self, self.id_counter, parent)
        if not widget.manually_added:
            self.widgets.append(widget)
        if len(self.widgets) != self.id_counter + 1:
            raise RuntimeError(
                f"widget id mismatch: expected {self.id_counter}, got {len(self.widgets) - 1}"
            )
        return widget

    def draw(self, renderer: Renderer) -> None:
        self.widgets[ROOT_ID].draw(self, renderer)
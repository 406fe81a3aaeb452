"""Construction of the standard screen layout: side panels, character sheet, chest view.

Every builder works on a ``ui`` object that provides:

* ``widgets``: the widget list, indexed by id, with the root widget at ``ROOT_ID``;
* ``id_counter`` and ``create_widget(widget_class, parent)``;
* ``events``: a queue with ``append`` that receives ``UiEvent``/``ChestAction`` values;
* the player values ``player_hp``, ``player_max_hp``, ``player_mp``,
  ``player_max_mp``, ``player_sp``, ``player_str``, ``player_dex``, ``player_int``;
* the lists ``str_value_bound_ids``, ``dex_value_bound_ids``, ``int_value_bound_ids``.

The builders record the ids of the widgets they create as attributes of ``ui``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Union

from tilerogue.ui.geometry import PointF, QuadF, SizeF
from tilerogue.ui.widget import BLACK, BLUE, GREEN, WHITE, YELLOW, AnchorKind, Color, Widget
from tilerogue.ui.widget_bar import WidgetBar
from tilerogue.ui.widget_button import WidgetButton
from tilerogue.ui.widget_panel import WidgetPanel
from tilerogue.ui.widget_text import WidgetText

ROOT_ID = 0

_HP_COLOR = Color(1.0, 0.0, 0.0, 1.0)
_MP_COLOR = Color(0.0, 0.0, 1.0, 1.0)
_BAR_BACKGROUND = Color(0.0, 0.0, 0.0, 1.0)

_SIDE_PANEL_SIZE = SizeF(400.0, 0.0)
_BORDER_THICKNESS = 2.0


class UiEvent(enum.Enum):
    """A request raised by the interface for the game to act upon."""

    INC_STRENGTH = enum.auto()
    INC_DEXTERITY = enum.auto()
    INC_INTELLIGENCE = enum.auto()


@dataclass(frozen=True)
class ChestAction:
    """The player chose the chest item with id ``item_id``."""

    item_id: int


Event = Union[UiEvent, ChestAction]


def _set_margin(
    widget: Widget,
    *,
    left: float | None = None,
    top: float | None = None,
    right: float | None = None,
    bottom: float | None = None,
) -> None:
    changes = {
        field: value
        for field, value in (("x", left), ("y", top), ("w", right), ("h", bottom))
        if value is not None
    }
    widget.set_margin(replace(widget.margin, **changes))


def _event_pusher(event: Event):
    def push(ui: Any, _pos: PointF) -> None:
        ui.events.append(event)

    return push


def _text(ui: Any, parent: Widget, text: str, color: Color | None = None) -> WidgetText:
    label = ui.create_widget(WidgetText, parent)
    label.set_text(text)
    if color is not None:
        label.color = color
    return label


def _side_panel(ui: Any, side: AnchorKind) -> WidgetPanel:
    panel = ui.create_widget(WidgetPanel, ui.widgets[ROOT_ID])
    panel.set_size(_SIDE_PANEL_SIZE)
    panel.set_border(WHITE, _BORDER_THICKNESS)
    panel.add_anchor_to_parent(AnchorKind.TOP, AnchorKind.TOP)
    panel.add_anchor_to_parent(AnchorKind.BOTTOM, AnchorKind.BOTTOM)
    panel.add_anchor_to_parent(side, side)
    return panel


def _center_panel(ui: Any) -> WidgetPanel:
    """A hidden black panel spanning the gap between the two side panels."""
    panel = ui.create_widget(WidgetPanel, ui.widgets[ROOT_ID])
    panel.set_border(WHITE, _BORDER_THICKNESS)
    panel.add_anchor_to_parent(AnchorKind.TOP, AnchorKind.TOP)
    panel.add_anchor_to_parent(AnchorKind.BOTTOM, AnchorKind.BOTTOM)
    panel.add_anchor(AnchorKind.LEFT, ui.left_panel_id, AnchorKind.RIGHT)
    panel.add_anchor(AnchorKind.RIGHT, ui.right_panel_id, AnchorKind.LEFT)
    panel.color = BLACK
    panel.visible = False
    return panel


def _stat_bar(ui: Any, parent: Widget, value: int, maximum: int, color: Color) -> WidgetBar:
    bar = ui.create_widget(WidgetBar, parent)
    bar.set_size(SizeF(200.0, 20.0))
    bar.add_anchor_to_prev(AnchorKind.TOP, AnchorKind.TOP)
    bar.add_anchor_to_prev(AnchorKind.LEFT, AnchorKind.RIGHT)
    bar.set_text(f"{value}/{maximum}")
    bar.set_background_color(_BAR_BACKGROUND)
    bar.set_bar_color(color)
    if maximum > 0:
        bar.set_bar_percentage(value / maximum)
    return bar


def _label_below(ui: Any, parent: Widget, text: str, color: Color, above: Widget) -> WidgetText:
    label = _text(ui, parent, text, color)
    _set_margin(label, top=10.0)
    label.add_anchor(AnchorKind.TOP, above.id, AnchorKind.BOTTOM)
    label.add_anchor(AnchorKind.LEFT, above.id, AnchorKind.LEFT)
    return label


def _value_beside(ui: Any, parent: Widget, value: int, color: Color) -> WidgetText:
    label = ui.create_widget(WidgetText, parent)
    label.color = color
    label.add_anchor_to_prev(AnchorKind.TOP, AnchorKind.TOP)
    label.add_anchor_to_prev(AnchorKind.LEFT, AnchorKind.RIGHT)
    label.set_text(str(value))
    return label


def create_attr_button(
    ui: Any, event: Event, label: str, value: int, parent: Widget, margin_top: float
) -> tuple[WidgetButton, int]:
    """Create an attribute button showing ``label`` and ``value``.

    Clicking it queues ``event``. Returns the button and the id of the
    text widget that shows the value.
    """
    button = ui.create_widget(WidgetButton, parent)
    button.set_on_click(_event_pusher(event))
    button.set_size(SizeF(150.0, 50.0))
    button.add_anchor_to_parent(AnchorKind.TOP, AnchorKind.TOP)
    button.add_anchor_to_parent(AnchorKind.LEFT, AnchorKind.LEFT)
    _set_margin(button, top=margin_top)

    name = _text(ui, button, label)
    _set_margin(name, left=30.0)
    name.add_anchor_to_parent(AnchorKind.VERTICAL_CENTER, AnchorKind.VERTICAL_CENTER)
    name.add_anchor_to_parent(AnchorKind.LEFT, AnchorKind.LEFT)

    value_id = ui.id_counter + 1
    shown = _text(ui, button, str(value))
    _set_margin(shown, right=30.0)
    shown.add_anchor_to_prev(AnchorKind.TOP, AnchorKind.TOP)
    shown.add_anchor_to_parent(AnchorKind.RIGHT, AnchorKind.RIGHT)

    return button, value_id


def build_left_panel(ui: Any) -> WidgetPanel:
    """Build the left panel with HP and MP bars and the SP and STR values."""
    ui.left_panel_id = ui.id_counter + 1
    panel = _side_panel(ui, AnchorKind.LEFT)

    hp_label = _text(ui, panel, "HP", _HP_COLOR)
    hp_label.set_margin(QuadF(10.0, 30.0, 0.0, 0.0))
    hp_label.add_anchor_to_parent(AnchorKind.TOP, AnchorKind.TOP)
    hp_label.add_anchor_to_parent(AnchorKind.LEFT, AnchorKind.LEFT)

    ui.hp_bar_id = ui.id_counter + 1
    _stat_bar(ui, panel, ui.player_hp, ui.player_max_hp, _HP_COLOR)

    mp_label = _label_below(ui, panel, "MP", BLUE, hp_label)

    ui.mp_bar_id = ui.id_counter + 1
    _stat_bar(ui, panel, ui.player_mp, ui.player_max_mp, _MP_COLOR)

    soul_label = _label_below(ui, panel, "SP", YELLOW, mp_label)

    ui.sp_value_id = ui.id_counter + 1
    _value_beside(ui, panel, ui.player_sp, YELLOW)

    _label_below(ui, panel, "STR", GREEN, soul_label)

    ui.str_value_bound_ids.append(ui.id_counter + 1)
    _value_beside(ui, panel, ui.player_str, GREEN)

    return panel


def build_right_panel(ui: Any) -> WidgetPanel:
    """Build the empty right-hand side panel."""
    ui.right_panel_id = ui.id_counter + 1
    return _side_panel(ui, AnchorKind.RIGHT)


def build_character_sheet(ui: Any) -> WidgetPanel:
    """Build the hidden character sheet with its tabs and attribute buttons.

    The side panels must already exist.
    """
    ui.character_sheet_id = ui.id_counter + 1
    sheet = _center_panel(ui)

    tabs: list[WidgetButton] = []
    for title in ("Attrib", "Skills", "Abilit", "Equip", "Invent"):
        tab = ui.create_widget(WidgetButton, sheet)
        tab.set_text(title)
        if not tabs:
            tab.toggled = True
            tab.set_margin(QuadF(10.0, 30.0, 0.0, 0.0))
            tab.add_anchor_to_parent(AnchorKind.TOP, AnchorKind.TOP)
            tab.add_anchor_to_parent(AnchorKind.LEFT, AnchorKind.LEFT)
        else:
            tab.set_margin(QuadF(30.0, 0.0, 0.0, 0.0))
            tab.add_anchor_to_prev(AnchorKind.TOP, AnchorKind.TOP)
            tab.add_anchor_to_prev(AnchorKind.LEFT, AnchorKind.RIGHT)
        tabs.append(tab)

    attributes = ui.create_widget(WidgetPanel, sheet)
    attributes.set_border(WHITE, _BORDER_THICKNESS)
    attributes.add_anchor(AnchorKind.TOP, tabs[0].id, AnchorKind.BOTTOM)
    attributes.add_anchor_to_parent(AnchorKind.LEFT, AnchorKind.LEFT)
    attributes.add_anchor_to_parent(AnchorKind.RIGHT, AnchorKind.RIGHT)
    attributes.add_anchor_to_parent(AnchorKind.BOTTOM, AnchorKind.BOTTOM)

    dex_button, dex_value_id = create_attr_button(
        ui, UiEvent.INC_DEXTERITY, "DEX", ui.player_dex, attributes, 10.0
    )
    dex_button.center_parent()
    ui.dex_area_button_id = dex_button.id
    ui.dex_value_bound_ids.append(dex_value_id)

    str_button, str_value_id = create_attr_button(
        ui, UiEvent.INC_STRENGTH, "STR", ui.player_str, attributes, 0.0
    )
    str_button.break_anchors()
    str_button.add_anchor_to_prev(AnchorKind.TOP, AnchorKind.TOP)
    str_button.add_anchor_to_prev(AnchorKind.RIGHT, AnchorKind.LEFT)
    ui.str_area_button_id = str_button.id
    ui.str_value_bound_ids.append(str_value_id)

    int_button, int_value_id = create_attr_button(
        ui, UiEvent.INC_INTELLIGENCE, "INT", ui.player_int, attributes, 0.0
    )
    int_button.break_anchors()
    int_button.add_anchor(AnchorKind.TOP, dex_button.id, AnchorKind.TOP)
    int_button.add_anchor(AnchorKind.LEFT, dex_button.id, AnchorKind.RIGHT)
    ui.int_area_button_id = int_button.id
    ui.int_value_bound_ids.append(int_value_id)

    return sheet


def build_chest_view(ui: Any) -> WidgetPanel:
    """Build the hidden chest view with its title. The side panels must exist."""
    ui.chest_view_id = ui.id_counter + 1
    view = _center_panel(ui)

    title = _text(ui, view, "Chest")
    title.set_margin(QuadF(10.0, 30.0, 0.0, 0.0))
    title.add_anchor_to_parent(AnchorKind.TOP, AnchorKind.TOP)
    title.add_anchor_to_parent(AnchorKind.LEFT, AnchorKind.LEFT)

    return view
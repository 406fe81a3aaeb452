# tilerogue

Building blocks for a tile-based roguelike: grid positions, spell definitions
loaded from JSON, a tile grid, and an anchor-based widget layout for the
on-screen interface. Nothing here depends on a graphics library. Drawing goes
through a renderer object that you provide.

## Modules

- `tilerogue.position` provides `Position`, a frozen dataclass of
  non-negative `x`, `y`. It has:
  - `is_valid(width, height)`;
  - `distance_to(other)`, the Euclidean distance rounded down;
  - `in_range(other, distance)`;
  - neighbour lookups `north`, `east`, `south`, `west`, `north_east`,
    `south_east`, `south_west` and `north_west`. Lookups that would step below
    zero on a guarded axis return `None`;
  - `positions_around()`, which lists the neighbours that exist.

  The module also defines the `Direction` enum and the sentinel
  `POSITION_INVALID`.
- `tilerogue.spell_type` provides `SpellType`, built with
  `SpellType.from_dict`, and the enums `SpellKind` and `SpellAreaKind`.
  `parse_spell_types(text)` reads a JSON list. It returns a list indexed by
  each spell's `index`, with `None` in the unused slots.
  `load_spell_types(path)` reads a file, by default `assets/spells.json`.
  Invalid entries raise `ValueError`. A process-wide table is kept with
  `set_global_spell_types` (allowed once) and `get_spell_types`. Both raise
  `RuntimeError` when misused.
- `tilerogue.player_spell` provides:
  - `PlayerSpell`, a spell type with its remaining `charges`. It is built
    full with `PlayerSpell.from_spell_type`;
  - `SpellExecution`, which holds a spell, a caster and a target `Position`.
- `tilerogue.tile_map` provides `TileMap`, a column-major grid
  (`tiles[x][y]`) of any tile type. It is indexed by `Position` and has
  `in_bounds(pos)`.
- `tilerogue.ui.geometry` provides `PointF`, `SizeF` and `QuadF`.
- `tilerogue.ui.widget` provides:
  - `Widget`, whose rectangle is computed from `Anchor`s (`AnchorKind`),
    size, position and margins;
  - `Color`, with constants such as `WHITE`, `BLACK` and `BLANK`;
  - `Renderer`, which records draw calls as tuples in `commands`.
- `tilerogue.ui.widget_panel`, `widget_text`, `widget_button` and
  `widget_bar` provide `WidgetPanel`, `WidgetText`, `WidgetButton` and
  `WidgetBar`. `WidgetText` is sized by `measure_text`, a simple fixed-pitch
  font model.
- `tilerogue.ui.builders` builds the standard layout:
  - a left panel with HP/MP bars and SP/STR values;
  - an empty right panel;
  - a hidden character sheet with tabs and DEX/STR/INT buttons;
  - a hidden chest view.

  It also defines the events `UiEvent` and `ChestAction`.
- `tilerogue.ui.manager` provides `Ui`, which owns every widget (indexed by
  id) and a queue of events in `ui.events`.

## Installation

```
pip install .
```

## Usage

```python
from tilerogue.position import Position

p = Position(3, 4)
print(p.distance_to(Position(0, 0)))   # 5
print(p.positions_around())
```

Driving the interface:

```python
from tilerogue.ui.manager import Ui
from tilerogue.ui.geometry import PointF, SizeF
from tilerogue.ui.widget import Renderer

ui = Ui()
ui.update_geometry(SizeF(1280.0, 720.0))
ui.set_player_hp(80, 100)
ui.toggle_character_sheet()
ui.update_mouse_position(PointF(640.0, 360.0))
ui.handle_click(PointF(640.0, 360.0))

renderer = Renderer()
ui.draw(renderer)
print(renderer.commands[:3])
print(list(ui.events))
```

How the pieces behave:

- Clicking an attribute button queues a `UiEvent` (`INC_STRENGTH`,
  `INC_DEXTERITY` or `INC_INTELLIGENCE`).
- `show_chest_view([(item_id, name), ...])` lists chest items as buttons.
  Clicking one queues `ChestAction(item_id)`.
- `hide()` closes both the character sheet and the chest view.
- To draw to a real screen, subclass `Renderer` and override
  `draw_rectangle`, `draw_rectangle_lines`, `draw_circle` and `draw_text`.

## What this package does not do

The package has no game loop, window or input handling. It also has no map
generation, creatures, items or combat, and no command to run. It provides
the data model and layout pieces that such a game would use. Text is measured
with a fixed-pitch approximation, not a real font.

## Running the tests

```
pip install .[test]
pytest
```
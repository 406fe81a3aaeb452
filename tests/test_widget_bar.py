from tilerogue.ui.geometry import SizeF
from tilerogue.ui.widget import BLUE, RED, AnchorKind, Renderer
from tilerogue.ui.widget_bar import WidgetBar
from tilerogue.ui.widget_panel import WidgetPanel
from tilerogue.ui.widget_text import WidgetText


class FakeUi:
    def __init__(self):
        self.widgets = []
        self.id_counter = 0
        root = WidgetPanel.build(self, 0, None)
        root.set_size(SizeF(800.0, 600.0))
        self.widgets.append(root)

    def create_widget(self, widget_class, parent):
        self.id_counter += 1
        widget = widget_class.build(self, self.id_counter, parent)
        if not widget.manually_added:
            self.widgets.append(widget)
        if len(self.widgets) != self.id_counter + 1:
            raise RuntimeError("widget id mismatch")
        return widget

    def layout(self):
        for widget in self.widgets:
            widget.drawing_coords(self)


def make_bar():
    ui = FakeUi()
    bar = ui.create_widget(WidgetBar, ui.widgets[0])
    bar.set_size(SizeF(200.0, 20.0))
    bar.add_anchor_to_parent(AnchorKind.TOP, AnchorKind.TOP)
    bar.add_anchor_to_parent(AnchorKind.LEFT, AnchorKind.LEFT)
    return ui, bar


def test_build_creates_parts_in_order():
    ui = FakeUi()
    bar = ui.create_widget(WidgetBar, ui.widgets[0])
    assert ui.widgets[1] is bar
    assert ui.widgets[2] is bar.background
    assert ui.widgets[3] is bar.foreground
    assert ui.widgets[4] is bar.text
    assert isinstance(bar.text, WidgetText)
    assert bar.children_ids == [2, 3, 4]
    assert ui.id_counter == 4
    assert bar.size == SizeF(0.0, 0.0)


def test_background_fills_bar():
    ui, bar = make_bar()
    ui.layout()
    assert bar.background.computed_quad == bar.computed_quad


def test_percentage_before_layout_is_zero_width():
    ui, bar = make_bar()
    bar.set_bar_percentage(0.5)
    assert bar.foreground.size.w == 0.0
    assert bar.foreground.computed_quad is None


def test_percentage_after_layout_scales_foreground():
    ui, bar = make_bar()
    ui.layout()
    bar.set_bar_percentage(0.5)
    assert bar.foreground.size.w == 100.0
    assert bar.foreground.drawing_coords(ui).w == 100.0
    assert bar.foreground.left(ui) == bar.left(ui)


def test_full_percentage_matches_background():
    ui, bar = make_bar()
    ui.layout()
    bar.set_bar_percentage(1.0)
    assert bar.foreground.computed_quad.w == bar.background.computed_quad.w
    assert bar.foreground.computed_quad.h == bar.background.computed_quad.h


def test_colours_go_to_panels():
    ui, bar = make_bar()
    bar.set_background_color(BLUE)
    bar.set_bar_color(RED)
    assert bar.background.color == BLUE
    assert bar.foreground.color == RED


def test_set_text_updates_caption():
    ui, bar = make_bar()
    bar.set_text("100/100")
    assert bar.text.text == "100/100"


def test_draw_order_background_foreground_text():
    ui, bar = make_bar()
    bar.set_background_color(BLUE)
    bar.set_bar_color(RED)
    bar.set_text("1/1")
    ui.layout()
    bar.set_bar_percentage(1.0)
    renderer = Renderer()
    bar.draw(ui, renderer)
    kinds = [(cmd[0], cmd[-1]) for cmd in renderer.commands]
    assert kinds[0] == ("rectangle", BLUE)
    assert kinds[1] == ("rectangle", RED)
    assert renderer.commands[2][0] == "text"
    assert renderer.commands[2][1] == "1/1"


def test_invisible_bar_draws_nothing():
    ui, bar = make_bar()
    bar.set_background_color(BLUE)
    ui.layout()
    bar.visible = False
    renderer = Renderer()
    bar.draw(ui, renderer)
    assert renderer.commands == []
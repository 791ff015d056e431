"""Tests for the in-memory reference toolkit."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from widgetquery import Component, HasComponents, Field, Unit, InvalidValueError
from widgetquery.toolkit import (
    parse_size,
    UI,
    Panel,
    CssLayout,
    VerticalLayout,
    Button,
    Label,
    Image,
    TextField,
    TextArea,
    CheckBox,
    Slider,
    ReadOnlyError,
)


class TestParseSize:
    @pytest.mark.parametrize("spec,expected", [
        ("50px", (50.0, Unit.PIXELS)),
        ("100%", (100.0, Unit.PERCENTAGE)),
        ("1.5em", (1.5, Unit.EM)),
        (" 2 cm ", (2.0, Unit.CM)),
        ("30", (30.0, Unit.PIXELS)),
        (None, (-1.0, Unit.PIXELS)),
        ("", (-1.0, Unit.PIXELS)),
        (12, (12.0, Unit.PIXELS)),
        (-5, (-1.0, Unit.PIXELS)),
    ])
    def test_parse(self, spec, expected):
        assert parse_size(spec) == expected

    def test_number_with_unit(self):
        assert parse_size(3, Unit.INCH) == (3.0, Unit.INCH)

    def test_string_with_unit_rejected(self):
        with pytest.raises(ValueError):
            parse_size("3px", Unit.PIXELS)

    @pytest.mark.parametrize("spec", ["wide", "10 parsecs", "px"])
    def test_invalid(self, spec):
        with pytest.raises(ValueError):
            parse_size(spec)

    def test_unit_from_symbol(self):
        assert Unit.from_symbol("PX") is Unit.PIXELS
        assert Unit.from_symbol("") is Unit.PIXELS
        assert Unit.PERCENTAGE.symbol == "%"


class TestCapabilities:
    def test_leaf(self):
        b = Button()
        assert isinstance(b, Component)
        assert b.as_container() is None
        assert b.as_field() is None

    def test_container(self):
        layout = CssLayout()
        assert layout.as_container() is layout
        assert isinstance(layout, HasComponents)
        assert layout.supports_indexed_insertion()
        assert not Panel().supports_indexed_insertion()

    def test_field(self):
        t = TextField()
        assert t.as_field() is t
        assert isinstance(t, Field)
        assert t.as_container() is None


class TestComponentState:
    def test_primary_style_name(self):
        assert Button().get_primary_style_name() == "v-button"
        assert VerticalLayout().get_primary_style_name() == "v-verticallayout"

    def test_style_names(self):
        b = Button()
        b.add_style_name("a b")
        b.add_style_name("b c")
        assert b.get_style_name() == "a b c"
        b.remove_style_name("a c")
        assert b.get_style_name() == "b"

    def test_attached(self):
        label = Label()
        layout = CssLayout(label)
        assert not label.is_attached()
        ui = UI(layout)
        assert label.is_attached()
        assert ui.is_attached()
        assert label.get_root() is ui

    def test_repr(self):
        b = Button("OK")
        assert repr(b) == "Button('OK')"
        b.set_id("ok-button")
        assert repr(b) == "Button('ok-button')"
        assert repr(Image()) == "Image()"


class TestOrderedLayout:
    def test_add_and_index(self):
        a, b = Button("a"), Button("b")
        layout = CssLayout(a, b)
        assert layout.get_component(1) is b
        assert layout.get_component_index(a) == 0
        assert a.get_parent() is layout
        assert list(layout) == [a, b]

    def test_move_forward(self):
        a, b, c = Button("a"), Button("b"), Button("c")
        layout = CssLayout(a, b, c)
        layout.add_component(a, 2)
        assert list(layout.get_children()) == [b, a, c]

    def test_move_backward(self):
        a, b, c = Button("a"), Button("b"), Button("c")
        layout = CssLayout(a, b, c)
        layout.add_component(c, 0)
        assert list(layout.get_children()) == [c, a, b]

    def test_add_moves_between_parents(self):
        a = Button()
        first = CssLayout(a)
        second = CssLayout()
        second.add_component(a)
        assert not first.has_children()
        assert a.get_parent() is second

    def test_index_out_of_range(self):
        with pytest.raises(IndexError):
            CssLayout().add_component(Button(), 1)

    def test_add_to_self(self):
        layout = CssLayout()
        with pytest.raises(ValueError):
            layout.add_component(layout)

    def test_add_ancestor_rejected(self):
        inner = CssLayout()
        middle = VerticalLayout(inner)
        outer = CssLayout(middle)

        with pytest.raises(ValueError, match="inside its own content"):
            inner.add_component(outer)

        assert outer.get_parent() is None
        assert inner.get_parent() is middle
        assert inner.get_root() is outer

    def test_index_of_non_child(self):
        with pytest.raises(ValueError):
            CssLayout().get_component_index(Button())

    def test_children_snapshot(self):
        a, b = Button(), Button()
        layout = CssLayout(a, b)
        for child in layout.get_children():
            layout.remove_component(child)
        assert layout.component_count() == 0


class TestSingleContainer:
    def test_content_replaced(self):
        first, second = Label(), Label()
        panel = Panel(first)
        panel.add_component(second)
        assert panel.get_content() is second
        assert first.get_parent() is None
        assert panel.component_count() == 1

    def test_content_cannot_be_ancestor(self):
        label = Label()
        panel = Panel(label)
        layout = CssLayout(panel)

        with pytest.raises(ValueError):
            panel.set_content(layout)

        # The rejected move leaves the old content in place
        assert panel.get_content() is label
        assert layout.get_parent() is None

    def test_indexed_add_not_supported(self):
        with pytest.raises(NotImplementedError):
            Panel().add_component(Label(), 0)

    def test_remove_non_content_ignored(self):
        content = Label()
        panel = Panel(content)
        panel.remove_component(Label())
        assert panel.get_content() is content


class TestWidgets:
    def test_button_click(self):
        clicks = []
        b = Button("Go", on_click=clicks.append)
        b.click()
        assert clicks == [b]

    def test_disabled_button_ignores_click(self):
        clicks = []
        b = Button(on_click=clicks.append)
        b.set_enabled(False)
        b.click()
        assert clicks == []

    def test_label_and_image(self):
        assert Label("hi").get_value() == "hi"
        img = Image("logo.png")
        img.set_source("other.png")
        assert img.get_source() == "other.png"


class TestFields:
    def test_defaults(self):
        assert TextField().get_value() == ""
        assert TextArea(rows=3).rows == 3
        assert CheckBox().get_value() is False
        assert Slider(min_value=10, max_value=20).get_value() == 10.0

    def test_text_field_converts(self):
        t = TextField()
        t.set_value(None)
        assert t.get_value() == ""
        t.set_value(42)
        assert t.get_value() == "42"

    def test_slider_bounds(self):
        s = Slider(max_value=10)
        with pytest.raises(ValueError):
            s.set_value(11)
        with pytest.raises(ValueError):
            Slider(min_value=5, max_value=1)

    def test_read_only(self):
        t = TextField()
        t.set_read_only(True)
        with pytest.raises(ReadOnlyError):
            t.set_value("x")

    def test_listener_only_on_change(self):
        events = []
        t = TextField()
        t.add_value_change_listener(events.append)
        t.set_value("")
        assert events == []
        t.set_value("a")
        assert len(events) == 1

    def test_buffered_commit_and_discard(self):
        t = TextField(value="start")
        t.set_buffered(True)
        t.set_value("edit")
        assert t.is_modified()

        t.discard()
        assert t.get_value() == "start"
        assert not t.is_modified()

        t.set_value("edit")
        t.commit()
        t.set_value("again")
        t.discard()
        assert t.get_value() == "edit"

    def test_validate_required(self):
        t = TextField()
        t.set_required(True)
        assert not t.is_valid()
        with pytest.raises(InvalidValueError):
            t.validate()
        t.set_value("x")
        t.validate()

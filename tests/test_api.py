"""Tests for the select/select_fields/select_all/none entry points."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from widgetquery import (
    Query,
    FieldQuery,
    QueryConfig,
    NoCurrentRootError,
    InvalidArgumentError,
    select,
    select_fields,
    select_all,
    none,
    current_root,
    get_current_root,
    set_current_root,
    get_default_config,
)
from widgetquery.toolkit import UI, VerticalLayout, Button, Label, TextField, CheckBox, Slider


class Setup:
    def __init__(self):
        self.ui = UI()
        self.content = VerticalLayout()
        self.button = Button()
        self.label = Label()
        self.content.add_components(self.button, self.label)
        self.ui.set_content(self.content)
        self.all = [self.ui, self.content, self.button, self.label]
        self.fields = [TextField(), CheckBox(), Slider()]


@pytest.fixture
def s():
    return Setup()


@pytest.fixture(autouse=True)
def no_ambient_root():
    set_current_root(None)
    yield
    set_current_root(None)


class TestSelectAll:
    def test_select_all_with_root(self, s):
        assert select_all(s.ui).get() == s.all

    def test_select_all_ambient_root(self, s):
        with current_root(s.ui):
            assert select_all().get() == s.all

    def test_select_all_ui_current(self, s):
        UI.set_current(s.ui)
        try:
            assert UI.get_current() is s.ui
            assert select_all() == Query(*s.all)
        finally:
            UI.set_current(None)

    def test_select_all_without_root(self):
        with pytest.raises(NoCurrentRootError):
            select_all()

    def test_no_root_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            select_all()

    def test_explicit_root_wins(self, s):
        other = VerticalLayout(Button())
        with current_root(s.ui):
            assert select_all(other).first() is other

    def test_select_all_subtree(self, s):
        assert select_all(s.content).get() == [s.content, s.button, s.label]

    def test_select_all_ignores_configured_depth(self, s):
        config = QueryConfig(max_descendant_depth=1)
        q = select_all(s.ui, config=config)
        assert q.size() == 4
        assert q.config is config


class TestCurrentRoot:
    def test_context_manager_restores(self, s):
        outer = VerticalLayout()
        with current_root(outer):
            with current_root(s.ui):
                assert get_current_root() is s.ui
            assert get_current_root() is outer
        assert get_current_root() is None

    def test_restores_on_error(self, s):
        with pytest.raises(KeyError):
            with current_root(s.ui):
                raise KeyError("boom")
        assert get_current_root() is None


class TestSelect:
    def test_select(self, s):
        assert select(s.ui, s.content) == Query(s.ui, s.content)

    def test_select_uses_default_config(self, s):
        assert select(s.ui).config is get_default_config()

    def test_select_with_config(self, s):
        config = QueryConfig.strict()
        assert select(s.ui, config=config).config is config

    def test_select_fields(self, s):
        assert select_fields(s.fields) == FieldQuery(*s.fields)
        assert select_fields(*s.fields) == FieldQuery(*s.fields)

    def test_select_fields_rejects_non_fields(self, s):
        with pytest.raises(InvalidArgumentError):
            select_fields(s.button)

    def test_none(self):
        q = none()
        assert not q.exists()
        assert type(q) is Query

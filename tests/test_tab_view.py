import pytest

from vigilui.tab_view import TabView

REGULAR = "tab_regular.png"
HIGHLIGHTED = "tab_highlighted.png"


def _view(names=("EQUIP", "USE", "MISC")):
    view = TabView(REGULAR, HIGHLIGHTED)
    for name in names:
        view.add_tab(name, 20.0, 10.0)
    return view


def test_tabs_get_indices_and_start_unselected():
    view = _view()
    assert [tab.index for tab in view.tabs] == [0, 1, 2]
    assert [tab.label.text for tab in view.tabs] == ["EQUIP", "USE", "MISC"]
    assert all(not tab.selected for tab in view.tabs)
    assert all(tab.background.texture == REGULAR for tab in view.tabs)


def test_first_tab_position():
    view = TabView(REGULAR, HIGHLIGHTED)
    tab = view.add_tab("EQUIP", 20.0, 10.0)
    assert (tab.background.x, tab.background.y) == (11.0, 5.0)
    assert (tab.label.x, tab.label.y) == (tab.background.x, tab.background.y)


def test_following_tabs_are_spaced_by_width_plus_one():
    view = _view()
    first, second, third = view.tabs
    assert second.background.x - first.background.x == 20.0 + 1
    assert third.background.x - second.background.x == 20.0 + 1
    assert first.background.y == second.background.y == third.background.y


def test_select_tab_switches_highlight():
    view = _view()
    view.select_tab(0)
    view.select_tab(2)
    assert view.current == 2
    assert view.selected_tab() is view.tabs[2]
    assert [tab.selected for tab in view.tabs] == [False, False, True]
    assert view.tabs[2].background.texture == HIGHLIGHTED
    assert view.tabs[0].background.texture == REGULAR


def test_select_tab_out_of_range_is_ignored():
    view = _view()
    view.select_tab(1)
    view.select_tab(3)
    view.select_tab(-1)
    assert view.current == 1
    assert view.selected_tab().label.text == "USE"


def test_select_next_and_prev_wrap_around():
    view = _view()
    view.select_tab(0)
    view.select_prev()
    assert view.current == 2
    view.select_next()
    assert view.current == 0
    view.select_next()
    assert view.selected_tab().index == 1


def test_empty_view():
    view = TabView(REGULAR, HIGHLIGHTED)
    view.select_next()
    view.select_prev()
    assert view.current == 0
    with pytest.raises(IndexError):
        view.selected_tab()
from vigilui.pause_menu_dialog import DialogOption, PauseMenuDialog


def make_dialog():
    return PauseMenuDialog(600.0)


def test_initial_options():
    dialog = make_dialog()
    assert [o.text for o in dialog.options] == ["option1", "option2", "option3"]
    assert dialog.options[0].selected
    assert dialog.current == 0


def test_dialog_option_width_grows_with_text():
    assert DialogOption("Discard").width > DialogOption("Use").width


def test_update_orders_visible_options_left_to_right():
    dialog = make_dialog()
    xs = [o.x for o in dialog.options]
    assert xs == sorted(xs)
    assert len(set(xs)) == 3
    assert all(x < dialog.win_width for x in xs)


def test_update_skips_hidden_options():
    dialog = make_dialog()
    dialog.set_option(2, False, "hidden")
    before = dialog.options[2].x
    dialog.options[1].x = -1.0
    dialog.update()
    assert dialog.options[2].x == before
    assert dialog.options[1].x != -1.0


def test_select_right_and_left():
    dialog = make_dialog()
    dialog.select_right()
    assert dialog.current == 1
    assert dialog.options[1].selected and not dialog.options[0].selected
    dialog.select_left()
    assert dialog.current == 0
    assert dialog.options[0].selected and not dialog.options[1].selected


def test_select_stops_at_edges():
    dialog = make_dialog()
    dialog.select_left()
    assert dialog.current == 0
    dialog.select_right()
    dialog.select_right()
    dialog.select_right()
    assert dialog.current == 2


def test_select_right_stops_at_hidden_option():
    dialog = make_dialog()
    dialog.set_option(1, False)
    dialog.select_right()
    assert dialog.current == 0


def test_confirm_runs_handler_and_hides():
    calls = []
    dialog = make_dialog()
    dialog.set_option(1, True, "Discard", lambda: calls.append("discard"))
    dialog.show()
    dialog.select_right()
    dialog.confirm()
    assert calls == ["discard"]
    assert dialog.visible is False
    assert dialog.options[0].selected
    assert not dialog.options[1].selected


def test_reset_hides_options_and_clears_message():
    dialog = make_dialog()
    dialog.set_message("What would you like to do?")
    dialog.reset()
    assert dialog.message == ""
    assert all(not o.visible for o in dialog.options)
    assert not dialog.options[0].selected


def test_show_selects_first_visible_option():
    dialog = make_dialog()
    dialog.reset()
    dialog.set_option(1, True, "Discard")
    dialog.set_option(2, True, "Cancel")
    dialog.show()
    assert dialog.visible is True
    assert dialog.current == 1
    assert dialog.options[1].selected


def test_set_option_out_of_range_is_ignored():
    dialog = make_dialog()
    dialog.set_option(3, False, "nope")
    dialog.set_option(-1, False, "nope")
    assert [o.text for o in dialog.options] == ["option1", "option2", "option3"]
    assert all(o.visible for o in dialog.options)
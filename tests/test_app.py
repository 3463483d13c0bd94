import pytest

from lumberjack.app import (
    BLUE,
    EMERALD,
    PALETTES,
    SLATE,
    App,
    Data,
    TableColors,
    constraint_len_calculator,
    main,
)


def _items(count):
    return [Data(f"name {i}", f"street {i}\ncity {i}", f"user{i}@example.com") for i in range(count)]


def test_constraint_len_calculator():
    test_data = [
        Data(
            name="Emirhan Tala",
            address="Cambridgelaan 6XX\n3584 XX Utrecht",
            email="ada@example.com",
        ),
        Data(
            name="thistextis26characterslong",
            address="this line is 31 characters long\nbottom line is 33 characters long",
            email="john.doe.of.the.long.address@example.com",
        ),
    ]
    longest_name_len, longest_address_len, longest_email_len = constraint_len_calculator(test_data)
    assert longest_name_len == 26
    assert longest_address_len == 33
    assert longest_email_len == 40


def test_constraint_len_calculator_empty():
    assert constraint_len_calculator([]) == (0, 0, 0)


def test_data_as_tuple_order():
    data = Data("n", "a", "e@example.com")
    assert data.as_tuple() == ("n", "a", "e@example.com")


def test_table_colors_from_palette():
    colors = TableColors.from_palette(EMERALD)
    assert colors.header_bg == EMERALD.c900
    assert colors.selected_cell_style_fg == EMERALD.c600
    assert colors.footer_border_color == EMERALD.c400
    assert colors.buffer_bg == SLATE.c950
    assert colors.alt_row_color == SLATE.c900


def test_new_app_defaults():
    app = App()
    assert app.selected_row == 0
    assert app.selected_column is None
    assert app.color_index == 0
    assert app.colors == TableColors.from_palette(BLUE)
    assert app.scroll_content_length == 0


def test_next_row_wraps_and_moves_scroll():
    app = App(_items(3))
    app.next_row()
    assert (app.selected_row, app.scroll_position) == (1, 4)
    app.next_row()
    assert (app.selected_row, app.scroll_position) == (2, 8)
    app.next_row()
    assert (app.selected_row, app.scroll_position) == (0, 0)


def test_previous_row_wraps_to_last():
    app = App(_items(3))
    app.previous_row()
    assert app.selected_row == 2
    assert app.scroll_position == 8
    app.previous_row()
    assert app.selected_row == 1


def test_scroll_length_tracks_items():
    assert App(_items(5)).scroll_content_length == 16


def test_column_selection_bounds():
    app = App(_items(1))
    app.previous_column()
    assert app.selected_column == 2
    app.next_column()
    assert app.selected_column == 2
    app.previous_column()
    app.previous_column()
    app.previous_column()
    assert app.selected_column == 0
    fresh = App(_items(1))
    fresh.next_column()
    assert fresh.selected_column == 0


def test_color_cycle_round_trip():
    app = App()
    for _ in range(len(PALETTES)):
        app.next_color()
    assert app.color_index == 0
    app.previous_color()
    assert app.color_index == len(PALETTES) - 1
    app.set_colors()
    assert app.colors == TableColors.from_palette(PALETTES[-1])


@pytest.mark.parametrize("key", ["q", "esc"])
def test_handle_key_quits(key):
    assert App().handle_key(key, False) is False


def test_handle_key_navigation():
    app = App(_items(3))
    assert app.handle_key("j", False) is True
    assert app.selected_row == 1
    app.handle_key("up", False)
    assert app.selected_row == 0
    app.handle_key("right", False)
    assert app.selected_column == 0
    app.handle_key("right", True)
    assert app.color_index == 1
    app.handle_key("left", True)
    assert app.color_index == 0
    app.handle_key("h", False)
    assert app.selected_column == 0


def test_handle_unknown_key_keeps_running():
    app = App(_items(2))
    assert app.handle_key("x", False) is True
    assert app.selected_row == 0
    assert app.color_index == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])
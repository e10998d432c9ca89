from gtproton.color import Color
from gtproton.world_menu import WorldMenu


def test_simple_lines_in_order():
    menu = (
        WorldMenu()
        .set_default("START")
        .add_filter()
        .add_heading("Top Worlds")
        .set_max_rows(5)
        .setup_simple_menu()
    )
    assert str(menu) == (
        "default|START\nadd_filter\nadd_heading|Top Worlds\n"
        "set_max_rows|5\nsetup_simple_menu\n"
    )


def test_adders_return_menu():
    menu = WorldMenu()
    assert menu.add_filter() is menu


def test_add_floater_uses_packed_color():
    color = Color(red=10, green=20, blue=30, alpha=40)
    text = str(WorldMenu().add_floater("START", 5, 0.5, color))
    assert text == f"add_floater|START|5|0.5|{color.to_uint()}\n"


def test_add_floater_integral_scale_has_no_fraction():
    color = Color()
    text = str(WorldMenu().add_floater("W", 1, 1.0, color))
    assert text == f"add_floater|W|1|1|{color.to_uint()}\n"


def test_add_button():
    color = Color(red=1, green=2, blue=3)
    text = str(WorldMenu().add_button("Go", "go_btn", 2, color))
    assert text == f"add_button|Go|go_btn|2|{color.to_uint()}\n"


def test_empty_menu():
    assert str(WorldMenu()) == ""
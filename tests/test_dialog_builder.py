import pytest

from gtproton.dialog_builder import DialogBuilder, Direction, SizeType


def test_chaining_builds_text_in_order():
    dialog = DialogBuilder().set_default_color("o").add_textbox("hi")
    assert str(dialog) == "\nset_default_color|`o\nadd_textbox|hi|"


def test_adders_return_builder():
    dialog = DialogBuilder()
    assert dialog.add_spacer() is dialog
    assert dialog.end_dialog("a", "b", "c") is dialog


def test_spacer_sizes():
    assert str(DialogBuilder().add_spacer()) == "\nadd_spacer|small|"
    assert str(DialogBuilder().add_spacer(SizeType.BIG)) == "\nadd_spacer|big|"


def test_text_scaling_string():
    text = str(DialogBuilder().text_scaling_string("wordwrap"))
    assert text == "\ntext_scaling_string|wordwrap"


def test_end_dialog():
    text = str(DialogBuilder().end_dialog("login", "Cancel", "OK"))
    assert text == "\nend_dialog|login|Cancel|OK|"


def test_text_inputs():
    dialog = DialogBuilder().add_text_input("name", "Name:", "", 18)
    assert str(dialog) == "\nadd_text_input|name|Name:||18|"
    dialog.clear()
    dialog.add_text_input_password("pass", "Password:", "", 18)
    assert str(dialog) == "\nadd_text_input_password|pass|Password:||18|"


def test_label_with_icon_defaults():
    text = str(DialogBuilder().add_label_with_icon("Hello", 18))
    assert text == "\nadd_label_with_icon|small|Hello|left|18|"


@pytest.mark.parametrize(
    ("direction", "name"),
    [
        (Direction.LEFT, "left"),
        (Direction.RIGHT, "right"),
        (Direction.STATIC_BLUE_FRAME, "staticBlueFrame"),
        (Direction.NONE, ""),
    ],
)
def test_label_with_icon_directions(direction, name):
    text = str(DialogBuilder().add_label_with_icon("L", 2, direction, SizeType.BIG))
    assert text == f"\nadd_label_with_icon|big|L|{name}|2|"


def test_clear_empties_result():
    dialog = DialogBuilder().add_textbox("x")
    dialog.clear()
    assert str(dialog) == ""


def test_default_color_must_be_single_character():
    with pytest.raises(ValueError):
        DialogBuilder().set_default_color("ab")
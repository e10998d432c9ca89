import pytest

from gtproton.text_scanner import TextScanner
from gtproton.vectors import Recti, Vec2i


def test_parse_and_get():
    scanner = TextScanner("requestedName|bob\ntankIDName|alice\n")
    assert scanner.get("tankIDName") == "alice"
    assert scanner.get("requestedName") == "bob"
    assert scanner.get("missing") == ""


def test_get_index_out_of_range_gives_empty():
    scanner = TextScanner("a|b|c")
    assert scanner.get("a", index=2) == "c"
    assert scanner.get("a", index=5) == ""
    assert scanner.get("a", index=-1) == ""


def test_get_with_key_index():
    scanner = TextScanner("x|key|val")
    assert scanner.get("key", index=1, key_index=1) == "val"


def test_carriage_returns_are_dropped():
    scanner = TextScanner("a|b\r\nc|d\r\n")
    assert scanner.get("a") == "b"
    assert scanner.get("c") == "d"


def test_tokenize():
    assert TextScanner.tokenize("a|b||c") == ["a", "b", "", "c"]
    assert TextScanner.tokenize("") == []
    assert TextScanner.tokenize("k=v", "=") == ["k", "v"]


def test_tokenize_empty_delimiter_raises():
    with pytest.raises(ValueError):
        TextScanner.tokenize("abc", "")


def test_get_int_and_float():
    scanner = TextScanner("port|17091\nx|2.5\nlead|12abc")
    assert scanner.get_int("port") == 17091
    assert scanner.get_float("x") == 2.5
    assert scanner.get_int("lead") == 12


def test_get_int_missing_raises():
    with pytest.raises(ValueError):
        TextScanner("a|b").get_int("missing")


def test_get_int_out_of_range_raises():
    with pytest.raises(ValueError):
        TextScanner("big|99999999999").get_int("big")


def test_try_get():
    scanner = TextScanner("name|growtopian")
    assert scanner.try_get("name") == "growtopian"
    assert scanner.try_get("other") is None


def test_add_chains_and_raw():
    scanner = TextScanner()
    result = scanner.add("a", "1").add("b", 2)
    assert result is scanner
    assert scanner.raw() == "a|1\nb|2"
    assert len(scanner) == 2


def test_add_float_uses_fixed_notation():
    scanner = TextScanner().add("f", 1.5)
    assert scanner.get("f") == "1.500000"
    assert scanner.get_float("f") == 1.5


def test_add_vector_and_rect():
    scanner = TextScanner().add("pos", Vec2i(3, 4)).add("r", Recti(1, 2, 30, 40))
    assert scanner.get("pos") == "3"
    assert scanner.get_int("pos", 2) == 4
    assert scanner.get_int("r", 4) == 40


def test_add_with_custom_token():
    scanner = TextScanner().add("k", "v", token="=")
    assert scanner.get("k", token="=") == "v"
    assert scanner.get("k") == ""


def test_construct_from_pairs():
    scanner = TextScanner([("a", "1"), ("b", 7)])
    assert scanner.get("a") == "1"
    assert scanner.get_int("b") == 7


def test_set_replaces_first_match():
    scanner = TextScanner("a|1|extra\nb|2")
    scanner.set("a", "z")
    assert scanner.get("a") == "z"
    assert scanner.get("a", 2) == ""
    scanner.set("b", 9)
    assert scanner.get_int("b") == 9


def test_set_missing_key_changes_nothing():
    scanner = TextScanner("a|1")
    scanner.set("missing", "x")
    assert scanner.lines == ["a|1"]


def test_contains_and_len():
    scanner = TextScanner("a|1\nempty|")
    assert "a" in scanner
    assert "empty" not in scanner
    assert "nope" not in scanner
    assert len(scanner) == 2


def test_numbered_lines():
    scanner = TextScanner("a|1\nb|2")
    numbered = scanner.numbered_lines()
    assert numbered[0] == "[0]: a|1"
    assert len(numbered) == len(scanner)


def test_raw_round_trip():
    text = "action|log\nmsg|hello world"
    assert TextScanner(text).raw() == text
    assert str(TextScanner(text)) == text


def test_raw_has_no_newline_before_trailing_empty_line():
    scanner = TextScanner("a|1\n")
    assert scanner.lines == ["a|1", ""]
    assert scanner.raw() == "a|1"


def test_empty_scanner():
    scanner = TextScanner("")
    assert len(scanner) == 0
    assert scanner.get("x") == ""
    assert scanner.raw() == ""
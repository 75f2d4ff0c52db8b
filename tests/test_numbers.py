import pytest

from reloadtext.numbers import add_space, replace_numbers


def test_hex_example():
    assert replace_numbers("1E (hex) files were added") == "30 files were added"


def test_bin_example():
    assert replace_numbers("It has been 10 (bin) years") == "It has been 2 years"


@pytest.mark.parametrize("number", [0, 1, 5, 255, 1024, 2**40 + 3])
def test_binary_round_trip(number):
    assert replace_numbers(f"{number:b} (bin)") == str(number)


@pytest.mark.parametrize("number", [0, 15, 255, 4096, 2**63 - 1])
def test_hex_round_trip(number):
    assert replace_numbers(f"{number:X} (hex)") == str(number)


def test_invalid_binary_keeps_word_and_drops_tag():
    result = replace_numbers("zz (bin)")
    assert result.strip() == "zz"
    assert "bin" not in result


@pytest.mark.parametrize("text", ["0x1F (hex)", "1_0 (bin)", "8000000000000000 (hex)"])
def test_unparseable_numbers_are_left(text):
    word = text.split()[0]
    result = replace_numbers(text)
    assert result.startswith(word)
    assert "(" not in result


def test_repeated_tags_apply_in_turn():
    assert replace_numbers("1 (bin) (bin)") == "1"


def test_add_space_around_parentheses():
    assert add_space("a(b)c") == "a (b) c"


def test_add_space_is_idempotent():
    spaced = add_space("x(y)z(w)")
    assert add_space(spaced) == spaced
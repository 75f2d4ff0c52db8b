import pytest

from reloadtext.transform import process_case_tags


def test_up_applies_to_last_word():
    assert process_case_tags("hello world (up)") == "hello WORLD"


def test_cap_with_count():
    assert process_case_tags("one two three (cap, 2)") == "one Two Three"


def test_low_with_count_lowers_words():
    assert process_case_tags("Hello WORLD (low, 2)") == "Hello WORLD".lower()


def test_count_larger_than_word_count_applies_to_all():
    assert process_case_tags("ab cd (up, 10)") == "ab cd".upper()


def test_spaces_inside_tag_are_accepted():
    assert process_case_tags("word ( up , 1 )") == "word".upper()


def test_tag_without_preceding_word_is_dropped():
    assert process_case_tags("(up) hello") == "hello"


def test_text_without_tags_is_only_stripped():
    text = "  plain text  "
    assert process_case_tags(text) == text.strip()


@pytest.mark.parametrize("text", ["a (up) b (low)", "x (cap) y (up, 2) z (low)"])
def test_no_tags_remain(text):
    result = process_case_tags(text)
    assert "(" not in result and ")" not in result


def test_zero_count_leaves_words_unchanged():
    assert process_case_tags("Mixed Case (up, 0)") == "Mixed Case"
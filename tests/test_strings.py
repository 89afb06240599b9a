import pytest

from raycub.strings import (
    bounded_concat,
    bounded_copy,
    compare,
    find_char,
    find_within,
    for_each_indexed,
    map_indexed,
    rfind_char,
    split,
    substr,
    trim,
)


def test_split_drops_empty_pieces():
    assert split("a,,b,", ",") == ["a", "b"]


def test_split_only_separators():
    assert split(",,,", ",") == []


@pytest.mark.parametrize("text", ["", "abc", "\n\nx\ny\n", "1\n\n0\n"])
def test_split_join_invariant(text):
    pieces = split(text, "\n")
    assert "".join(pieces) == text.replace("\n", "")
    assert all(pieces)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_trim_both_ends():
    assert trim("  \thi there \n", " \t\n") == "hi there"


def test_trim_all_removed():
    assert trim("   ", " ") == ""


def test_trim_empty_set_keeps_text():
    assert trim("  x ", "") == "  x "


def test_substr_basic():
    assert substr("hello", 1, 3) == "ell"


def test_substr_past_end():
    assert substr("hello", 5, 2) == ""


def test_substr_length_clamped():
    assert substr("hello", 3, 100) == "lo"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


@pytest.mark.parametrize("text,c", [("abcabc", "b"), ("xyz", "z"), ("a", "a")])
def test_find_char_invariant(text, c):
    index = find_char(text, c)
    assert text[index] == c
    assert c not in text[:index]


def test_find_char_missing():
    assert find_char("abc", "q") is None


def test_find_char_nul_gives_length():
    assert find_char("abcd", "\0") == len("abcd")


@pytest.mark.parametrize("text,c", [("abcabc", "b"), ("xyzx", "x")])
def test_rfind_char_invariant(text, c):
    index = rfind_char(text, c)
    assert text[index] == c
    assert c not in text[index + 1:]


def test_rfind_char_missing():
    assert rfind_char("abc", "q") is None


def test_rfind_char_nul_gives_length():
    assert rfind_char("abc", "\0") == len("abc")


def test_compare_equal():
    assert compare("abc", "abc", 3) == 0


def test_compare_sign():
    assert compare("abd", "abc", 3) > 0
    assert compare("abc", "abd", 3) < 0


def test_compare_limited_prefix():
    assert compare("abd", "abc", 2) == 0


def test_compare_zero_length():
    assert compare("x", "y", 0) == 0


def test_compare_shorter_is_less():
    assert compare("ab", "abc", 5) < 0
    assert compare("abc", "ab", 5) > 0


def test_compare_prefix_key():
    assert compare("NO ./a.xpm", "NO", 2) == 0


def test_find_within_invariant():
    haystack = "hello world"
    needle = "world"
    index = find_within(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle


def test_find_within_length_too_short():
    assert find_within("hello world", "world", 10) is None


def test_find_within_empty_needle():
    assert find_within("abc", "", 3) == 0
    assert find_within("abc", "", 0) == 0


def test_find_within_missing():
    assert find_within("abc", "zz", 3) is None


def test_bounded_copy_truncates():
    assert bounded_copy("hello", 3) == ("he", len("hello"))


def test_bounded_copy_zero_size():
    assert bounded_copy("hello", 0) == ("", len("hello"))


def test_bounded_copy_fits():
    assert bounded_copy("hi", 10) == ("hi", len("hi"))


def test_bounded_concat_fits():
    assert bounded_concat("ab", "cd", 10) == ("abcd", len("abcd"))


def test_bounded_concat_truncates():
    text, total = bounded_concat("ab", "cdef", 4)
    assert text == "abc"
    assert total == len("abcdef")


def test_bounded_concat_no_room():
    assert bounded_concat("abc", "de", 1) == ("abc", len("de") + 1)


def test_map_indexed():
    result = map_indexed("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_map_indexed_identity():
    assert map_indexed("keep", lambda i, ch: ch) == "keep"


def test_for_each_indexed_replaces_in_place():
    chars = list("abc")
    seen = []

    def visit(index, ch):
        seen.append((index, ch))
        return ch.upper() if index == 1 else None

    for_each_indexed(chars, visit)
    assert chars == ["a", "B", "c"]
    assert seen == [(0, "a"), (1, "b"), (2, "c")]
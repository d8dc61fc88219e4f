import pytest

from higher_lower.strings import itoa, split, strnstr, strtrim, substr


def test_split_skips_repeated_separators():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_text():
    assert split("", ",") == []


def test_split_never_yields_empty_words():
    words = split(",,a,,b,c,,", ",")
    assert all(words)
    assert ",".join(words) == "a,b,c"


def test_split_without_separator_keeps_whole_text():
    assert split("single", ",") == ["single"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_keeps_inner_characters():
    assert strtrim(" a b ", " ") == "a b"


def test_strtrim_empty_set_is_identity():
    assert strtrim("abc", "") == "abc"


def test_strtrim_everything():
    assert strtrim("xyxy", "xy") == ""


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_length_capped_by_text():
    assert substr("hello", 2, 100) == "hello"[2:]


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == substr("", 0, 5)


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [1, -1, 9, -10, 2147483647, 1000])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_strnstr_found_within_limit():
    haystack = "lorem ipsum dolor"
    assert strnstr(haystack, "ipsum", 11) == haystack.index("ipsum")


def test_strnstr_match_must_end_within_limit():
    assert strnstr("lorem ipsum dolor", "ipsum", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == "abc".find("")


def test_strnstr_missing():
    assert strnstr("abc", "z", 3) is None


def test_strnstr_negative_length_raises():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)
import pytest

from minitalk.strings import (
    memchr,
    memcmp,
    split,
    strchr,
    strcmp,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

SPLIT_SAMPLE = "nonna10nonnavedrainonnonnasononnaquantinonnaanninonna"


def test_split_simple_words():
    assert split("hello world", " ") == ["hello", "world"]


def test_split_skips_repeated_and_edge_separators():
    assert split("  one   two three  ", " ") == ["one", "two", "three"]


def test_split_without_separator_returns_whole_text():
    assert split("word", ",") == ["word"]


def test_split_only_separators_and_empty():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_sample_invariants():
    words = split(SPLIT_SAMPLE, "n")
    assert all(words)
    assert all("n" not in word for word in words)
    assert "".join(words) == SPLIT_SAMPLE.replace("n", "")
    assert words[0] == "o"


def test_split_accepts_integer_code():
    assert split("a-b-c", ord("-")) == ["a", "b", "c"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a, b", ", ")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything_removed():
    assert strtrim("abcabc", "abc") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  text  ", "") == "  text  "


def test_substr_inside():
    assert substr("hello", 1, 3) == "ell"


def test_substr_past_end_is_clipped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_beyond_text():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 50, 2) == ""


def test_substr_negative_start_rejected():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_source_example():
    assert strnstr("lorem ipsum dolor sit amet", "lorem", 15) == 0


def test_strnstr_match_must_fit_in_length():
    haystack = "lorem ipsum dolor sit amet"
    end = haystack.index("ipsum") + len("ipsum")
    assert strnstr(haystack, "ipsum", end - 1) is None
    assert strnstr(haystack, "ipsum", end) == haystack.index("ipsum")


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None
    assert strnstr("abc", "a", 0) is None


def test_strncmp_zero_length_is_equal():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_equal_prefix():
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_difference_value():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("a", "abc", 2) == -ord("b")
    assert strncmp("abc", "a", 2) > 0


def test_strncmp_negative_length_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strcmp_source_example_sign():
    assert strcmp("Non", "Noon") < 0
    assert strcmp("Noon", "Non") > 0


def test_strcmp_equal_and_prefix():
    assert strcmp("same", "same") == 0
    assert strcmp("abc", "ab") == ord("c")


def test_strcmp_antisymmetric():
    pairs = [("apple", "apricot"), ("x", ""), ("Zeta", "zeta")]
    for left, right in pairs:
        assert strcmp(left, right) == -strcmp(right, left)


def test_memcmp_source_example():
    s1 = b"mamma mia bella ciao !"
    s2 = b"mammya mia bella ciao !"
    assert memcmp(s1, s2, 8) == ord("a") - ord("y")
    assert memcmp(s1, s2, 4) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\x00\xff", b"\x00\x01", 2) == 0xFF - 0x01


def test_memcmp_length_beyond_buffer_rejected():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memchr_finds_first_byte():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_limited_by_n():
    data = b"hello world"
    assert memchr(data, ord("w"), data.index(b"w")) is None


def test_memchr_uses_low_byte():
    assert memchr(b"xAy", 0x100 + ord("A"), 3) == 1


def test_memchr_n_beyond_buffer_rejected():
    with pytest.raises(ValueError):
        memchr(b"abc", ord("a"), 4)


def test_strchr_first_occurrence():
    text = "banana"
    assert strchr(text, "n") == text.index("n")
    assert strchr(text, ord("a")) == text.index("a")


def test_strchr_nul_finds_end_and_missing():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", "z") is None


def test_strrchr_last_occurrence():
    text = "banana"
    assert strrchr(text, "n") == text.rindex("n")
    assert strrchr(text, "\0") == len(text)
    assert strrchr(text, "q") is None


def test_strchr_rejects_multi_character():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_text_stops_at_nul():
    assert strchr("ab\0cd", "c") is None
    assert strcmp("ab\0x", "ab\0y") == 0
    assert split("a b\0c d", " ") == ["a", "b"]
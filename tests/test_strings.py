import pytest

from ftkit.strings import (
    strchr,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    striteri,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s,c", [("hello", "l"), ("hello", "h"), ("abcabc", "c")])
def test_strchr_finds_first_occurrence(s, c):
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_missing_returns_none():
    assert strchr("hello", "z") is None


def test_strchr_terminator_is_end():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "a"), ("x", "x")])
def test_strrchr_finds_last_occurrence(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1 :]


def test_strrchr_missing_and_terminator():
    assert strrchr("hello", "q") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strnstr_empty_needle_is_zero():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_finds_within_length():
    hay = "Foo Bar Baz"
    assert strnstr(hay, "Bar", len(hay)) == hay.index("Bar")


def test_strnstr_match_must_fit_within_length():
    hay = "Foo Bar Baz"
    start = hay.index("Bar")
    assert strnstr(hay, "Bar", start + 2) is None
    assert strnstr(hay, "Bar", start + 3) == start


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_equal_and_zero_length():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_sign_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)


def test_strncmp_difference_of_codes():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string_ends_with_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    copied, total = strlcpy(src, 4)
    assert copied == src[:3]
    assert total == len(src)


def test_strlcpy_fits_and_zero_size():
    assert strlcpy("hi", 10) == ("hi", len("hi"))
    assert strlcpy("hi", 0) == ("", len("hi"))


def test_strlcat_with_room():
    dst, src = "ab", "cd"
    assert strlcat(dst, src, 10) == (dst + src, len(dst) + len(src))


def test_strlcat_truncates():
    dst, src = "ab", "cdef"
    result, total = strlcat(dst, src, 5)
    assert len(result) == 4
    assert result.startswith(dst)
    assert total == len(dst) + len(src)


def test_strlcat_size_not_exceeding_dst():
    dst, src = "abc", "de"
    assert strlcat(dst, src, 1) == (dst, 1 + len(src))
    assert strlcat(dst, src, len(dst)) == (dst, len(dst) + len(src))


def test_substr_basic_and_bounds():
    s = "hello world"
    assert substr(s, 6, 5) == "world"
    assert substr(s, 6, 100) == s[6:]
    assert substr(s, len(s) + 1, 3) == ""
    assert substr(s, len(s), 3) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_keeps_inner_and_empty_set():
    assert strtrim("  a b  ", " ") == "a b"
    assert strtrim("  a  ", "") == "  a  "


def test_strmapi_uses_index_and_char():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"
    assert len(strmapi("hello", lambda i, ch: ch)) == len("hello")


def test_striteri_modifies_in_place():
    chars = list("abc")
    returned = striteri(chars, lambda i, ch: ch.upper() if i == 1 else None)
    assert returned is chars
    assert chars == ["a", "B", "c"]


def test_striteri_sees_every_index():
    seen = []
    striteri(list("xyz"), lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))


def test_striteri_rejects_str():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, ch: None)
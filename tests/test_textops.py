import pytest

from sigtalk.textops import (
    split,
    strchr,
    strjoin,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("text", ["find the letter L\n", "abcdefgf", "", "xyz"])
@pytest.mark.parametrize("c", ["f", "L", "z", "q"])
def test_strchr_matches_first_occurrence(text, c):
    result = strchr(text, c)
    if c in text:
        assert result == text.index(c)
        assert text[result] == c
        assert c not in text[:result]
    else:
        assert result is None


@pytest.mark.parametrize("text", ["find the letter L\n", "abcdefgf", "", "xyz"])
@pytest.mark.parametrize("c", ["f", "L", "z", "q"])
def test_strrchr_matches_last_occurrence(text, c):
    result = strrchr(text, c)
    if c in text:
        assert text[result] == c
        assert c not in text[result + 1:]
    else:
        assert result is None


def test_strchr_and_strrchr_find_terminator():
    text = "find the letter L\n"
    assert strchr(text, "\0") == len(text)
    assert strchr(text, 0) == len(text)
    assert strrchr(text, 0) == len(text)


def test_strchr_accepts_integer_codes():
    assert strchr("abcdefgf", ord("f")) == strchr("abcdefgf", "f")
    assert strchr("abcdefgf", ord("f") + 256) == strchr("abcdefgf", "f")


def test_strchr_rejects_multi_character_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_strings():
    assert strncmp("abcdefg", "abcdefg", 10) == 0


def test_strncmp_limit_hides_difference():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0
    assert strncmp("abcY", "abcX", 4) > 0


def test_strncmp_shorter_string_is_smaller():
    assert strncmp("abc", "abcd", 10) == -ord("d")
    assert strncmp("abcd", "abc", 10) == ord("d")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strnstr_finds_within_window():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", len(big)) == big.index("Bar")
    assert strnstr(big, "Bar", big.index("Bar") + 2) is None
    assert strnstr(big, "Bar", big.index("Bar") + 3) == big.index("Bar")


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


def test_strlcpy_truncates_and_reports_source_length():
    src = "abcdef"
    copied, total = strlcpy(src, 4)
    assert copied == src[:3]
    assert total == len(src)


def test_strlcpy_zero_size_and_large_buffer():
    assert strlcpy("abcdef", 0) == ("", 6)
    assert strlcpy("abcdef", 100) == ("abcdef", 6)


def test_strlcat_full_buffer_reports_src_plus_size():
    dst, src = "ghj", "abcdef"
    result, total = strlcat(dst, src, 4)
    assert result == dst
    assert total == len(dst) + len(src)
    result, total = strlcat(dst, src, 2)
    assert result == dst
    assert total == len(src) + 2


def test_strlcat_appends_within_room():
    result, total = strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == 6
    assert strlcat("ab", "cdef", 50) == ("abcdef", 6)


def test_strlcat_size_zero():
    assert strlcat("", "abc", 0) == ("", 3)


@pytest.mark.parametrize("start", [0, 2, 5, 6, 100])
@pytest.mark.parametrize("length", [0, 1, 3, 100])
def test_substr_is_bounded_slice(start, length):
    text = "hello!"
    result = substr(text, start, length)
    assert len(result) <= length
    if start >= len(text):
        assert result == ""
    else:
        assert text.startswith(result, start)
        assert len(result) == min(length, len(text) - start)


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    result = strjoin("prefix", "suffix")
    assert result.startswith("prefix")
    assert result.endswith("suffix")
    assert len(result) == len("prefix") + len("suffix")


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_removes_set_from_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"
    assert strtrim("  a b  ", " ") == "a b"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  abc ", "") == "  abc "


def test_strtrim_invariant():
    text, chars = "..--keep.-this--..", ".-"
    result = strtrim(text, chars)
    assert result in text
    assert result[0] not in chars
    assert result[-1] not in chars


def test_split_drops_empty_words():
    assert split("  hello   world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


@pytest.mark.parametrize("text", ["a,b,,c", ",lead", "trail,", "none"])
def test_split_round_trip(text):
    words = split(text, ",")
    assert all(word and "," not in word for word in words)
    assert "".join(words) == text.replace(",", "")


def test_split_accepts_integer_separator():
    assert split("a b", ord(" ")) == split("a b", " ")


def test_strmapi_passes_index_and_char():
    seen = []

    def record(index, ch):
        seen.append((index, ch))
        return ch.upper() if index % 2 == 0 else ch

    result = strmapi("abcd", record)
    assert seen == list(enumerate("abcd"))
    assert result == "AbCd"


def test_striteri_modifies_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i == 1 else None)
    assert chars == ["a", "B", "c", "d"]


def test_striteri_visits_every_index():
    chars = list("xyz")
    visited = []
    striteri(chars, lambda i, ch: visited.append(i))
    assert visited == [0, 1, 2]
    assert chars == list("xyz")
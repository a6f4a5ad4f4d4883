import pytest
from hypothesis import given, strategies as st

from libft.cstring import atoi
from libft.ctype import toupper
from libft.text import itoa, split, striteri, strjoin, strmapi, strtrim, substr


def test_substr_examples():
    assert substr("hello, world", 7, 5) == "world"
    assert substr("hello, world", 0, 5) == "hello"
    assert substr("hello, world", 20, 5) == ""


def test_substr_clamps_length():
    assert substr("hello", 3, 100) == "lo"


def test_substr_stops_at_nul():
    assert substr("abc\0def", 1, 10) == "bc"


def test_substr_negative_start_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


@given(st.text(alphabet=st.characters(blacklist_characters="\0")), st.integers(0, 50), st.integers(0, 50))
def test_substr_length_bound(s, start, length):
    result = substr(s, start, length)
    assert len(result) <= length
    assert result in s


def test_strjoin_example():
    assert strjoin("hello, ", "world!") == "hello, world!"


def test_strjoin_bytes():
    assert strjoin(b"ab", bytearray(b"cd")) == b"abcd"


def test_strjoin_mixed_types_rejected():
    with pytest.raises(TypeError):
        strjoin("ab", b"cd")


@given(st.text(alphabet="abc"), st.text(alphabet="xyz"))
def test_strjoin_parts_recoverable(a, b):
    joined = strjoin(a, b)
    assert substr(joined, 0, len(a)) == a
    assert substr(joined, len(a), len(b)) == b


def test_strtrim_example():
    assert strtrim("         hello world    ", " ") == "hello world"


def test_strtrim_all_trimmed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


@given(st.text(alphabet="ab "), st.text(alphabet="ab ", min_size=1))
def test_strtrim_edges_not_in_set(s, charset):
    result = strtrim(s, charset)
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset
        assert result in s


def test_split_example():
    assert split("been living here since 2005!", " ") == [
        "been",
        "living",
        "here",
        "since",
        "2005!",
    ]


def test_split_collapses_separators():
    assert split(",,a,,b,", ",") == ["a", "b"]
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_bytes_with_int_separator():
    assert split(b"a b", ord(" ")) == [b"a", b"b"]


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


@given(st.text(alphabet="ab,"))
def test_split_words_invariant(s):
    words = split(s, ",")
    assert all(word and "," not in word for word in words)
    assert "".join(words) == s.replace(",", "")


def test_strmapi_toupper():
    assert strmapi("hello", lambda i, c: toupper(c)) == "HELLO"


def test_strmapi_receives_indices():
    seen = []
    strmapi("abc", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2]


def test_strmapi_bad_result():
    with pytest.raises(ValueError):
        strmapi("ab", lambda i, c: c * 2)


def test_striteri_matches_strmapi():
    chars = list("hello")
    striteri(chars, lambda i, c: toupper(c))
    assert "".join(chars) == strmapi("hello", lambda i, c: toupper(c))


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    striteri(chars, lambda i, c: toupper(c))
    assert chars[3:] == ["c", "d"]
    assert chars[:2] == [toupper("a"), toupper("b")]


def test_striteri_bytearray():
    buf = bytearray(b"abc")
    striteri(buf, lambda i, c: toupper(c))
    assert buf == bytearray(b"ABC")


def test_itoa_example():
    assert itoa(-12345) == "-12345"
    assert itoa(0) == "0"


@given(st.integers(-(2**31), 2**31 - 1))
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
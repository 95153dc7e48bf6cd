import pytest

from pipex.textutils import atoi, itoa, split_words, strncmp, strnstr, strtrim, substr


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648, 1000000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_atoi_skips_whitespace_and_trailing_junk():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17xyz") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("-") == 0
    assert atoi("") == 0


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_split_words_drops_empty_pieces():
    assert split_words("  ls   -l  ", " ") == ["ls", "-l"]


def test_split_words_path_like():
    assert split_words("/usr/bin::/bin:", ":") == ["/usr/bin", "/bin"]


@pytest.mark.parametrize("text", ["", "   ", "a", "grep -v foo", " wc  -l "])
def test_split_words_invariants(text):
    words = split_words(text, " ")
    assert all(words)
    assert all(" " not in w for w in words)
    assert " ".join(words) == " ".join(text.split())


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("a b", "ab")


def test_strtrim_removes_set_from_both_ends():
    assert strtrim("xxhelloyx", "xy") == "hello"


@pytest.mark.parametrize("text", ["", "aaa", "abcba", "  mid  ", "cab"])
def test_strtrim_invariants(text):
    result = strtrim(text, "ab")
    assert result in text
    assert not result or (result[0] not in "ab" and result[-1] not in "ab")


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  a  ", "") == "  a  "


def test_substr_basic():
    assert substr("here_doc", 0, 4) == "here"
    assert substr("here_doc", 5, 100) == "doc"


def test_substr_start_past_end():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


@pytest.mark.parametrize("start,length", [(0, 0), (1, 2), (2, 50), (0, 6)])
def test_substr_length_bound(start, length):
    text = "pipex!"
    result = substr(text, start, length)
    assert len(result) <= length
    assert text.startswith(result, start) or result == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_path_prefix():
    assert strnstr("PATH=/usr/bin:/bin", "PATH=", 5) == 0
    assert strnstr("HOME=/root", "PATH=", 5) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_respects_length():
    assert strnstr("abcdef", "def", 5) is None
    assert strnstr("abcdef", "def", 6) == 3


def test_strnstr_not_present():
    assert strnstr("abc", "zz", 3) is None


def test_strncmp_equal_and_prefix():
    assert strncmp("here_doc", "here_doc", 9) == 0
    assert strncmp("here_docs", "here_doc", 8) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0


def test_strncmp_zero_length_and_missing():
    assert strncmp("a", "b", 0) == 0
    assert strncmp(None, "b", 5) == 0
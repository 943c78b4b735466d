import pytest

from ftlib.transform import atoi, itoa, split, striteri, strmapi, strtrim


class TestStrtrim:
    def test_trims_both_ends(self):
        assert strtrim("  \t hi there \n", " \n\t") == "hi there"

    def test_inner_characters_kept(self):
        assert strtrim("xxaxbxx", "x") == "axb"

    def test_empty_charset_leaves_string(self):
        assert strtrim("  abc  ", "") == "  abc  "

    def test_everything_trimmed(self):
        assert strtrim("  \t \t \n   \n\n\n\t", " \n\t") == ""

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            strtrim(None, " ")


class TestSplit:
    def test_basic(self):
        assert split("  hello  world ", " ") == ["hello", "world"]

    def test_empty_string(self):
        assert split("", ",") == []

    def test_only_separators(self):
        assert split(",,,", ",") == []

    def test_no_separator_present(self):
        assert split("abc", ",") == ["abc"]

    def test_nul_separator_keeps_whole_string(self):
        assert split("a b", "\0") == ["a b"]
        assert split("", "\0") == []

    @pytest.mark.parametrize("text", ["a,b,,c", ",x,", "one", ",,lead,trail,,"])
    def test_pieces_rejoin_without_separator(self, text):
        pieces = split(text, ",")
        assert all(piece and "," not in piece for piece in pieces)
        assert "".join(pieces) == text.replace(",", "")

    def test_bad_separator(self):
        with pytest.raises(ValueError):
            split("abc", "ab")


class TestStrmapi:
    def test_maps_characters(self):
        assert strmapi("abc", lambda i, c: c.upper()) == "ABC"

    def test_receives_indices(self):
        seen = []

        def record(i, c):
            seen.append(i)
            return c

        assert strmapi("hello", record) == "hello"
        assert seen == list(range(len("hello")))

    def test_empty(self):
        assert strmapi("", lambda i, c: c * 2) == ""

    def test_none_func(self):
        with pytest.raises(TypeError):
            strmapi("abc", None)


class TestStriteri:
    def test_modifies_in_place(self):
        buf = list("abc")
        assert striteri(buf, lambda i, c: c.upper()) is None
        assert buf == list("ABC")

    def test_uses_index(self):
        buf = [10, 20, 30]
        striteri(buf, lambda i, v: v + i)
        assert buf == [10, 21, 32]

    def test_none_func(self):
        with pytest.raises(TypeError):
            striteri(["a"], None)


class TestAtoi:
    @pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
    def test_round_trip_with_itoa(self, n):
        assert atoi(itoa(n)) == n

    def test_leading_whitespace_and_sign(self):
        assert atoi(" \f\n\r\t\v-42") == -42
        assert atoi("+7abc") == 7

    def test_no_digits(self):
        assert atoi("abc") == 0
        assert atoi("+-5") == 0

    def test_positive_overflow(self):
        assert atoi("99999999999999999999") == -1

    def test_negative_overflow(self):
        assert atoi("-99999999999999999999") == 0

    def test_long_limit_is_not_overflow(self):
        assert atoi("9223372036854775807") == atoi("-1")

    def test_wraps_like_int(self):
        assert atoi("2147483648") == -2147483648

    def test_non_string(self):
        with pytest.raises(TypeError):
            atoi(5)


class TestItoa:
    def test_zero(self):
        assert itoa(0) == "0"

    def test_int_min(self):
        assert itoa(-2147483648) == "-2147483648"

    @pytest.mark.parametrize("n", [5, -5, 123456, -987654321])
    def test_round_trip_with_int(self, n):
        assert int(itoa(n)) == n

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            itoa(True)
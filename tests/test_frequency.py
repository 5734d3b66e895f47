import pytest

from huffcode.errors import FrequencyFormatError
from huffcode.frequency import count_frequencies, parse_frequency_table


class TestCountFrequencies:
    def test_characters(self) -> None:
        assert count_frequencies("abracadabra") == [("a", 5), ("b", 2), ("r", 2), ("c", 1), ("d", 1)]

    def test_characters_skip_whitespace(self) -> None:
        assert count_frequencies("a b\na\t") == [("a", 2), ("b", 1)]

    def test_tokens(self) -> None:
        text = "to be or not\nto be"
        assert count_frequencies(text, tokens=True) == [("to", 2), ("be", 2), ("or", 1), ("not", 1)]

    def test_utf8(self) -> None:
        assert count_frequencies("こんにちはこ") == [("こ", 2), ("ん", 1), ("に", 1), ("ち", 1), ("は", 1)]

    def test_empty(self) -> None:
        assert count_frequencies("") == []
        assert count_frequencies("   \n", tokens=True) == []


class TestParseFrequencyTable:
    def test_pairs(self) -> None:
        lines = ["A 5", "B 9", "C 12"]
        assert parse_frequency_table(lines) == [("A", 5), ("B", 9), ("C", 12)]

    def test_blank_lines_and_comments(self) -> None:
        lines = ["# symbol count", "", "the 10", "   ", "of\t6"]
        assert parse_frequency_table(lines) == [("the", 10), ("of", 6)]

    @pytest.mark.parametrize("line", ["A", "A 5 6", "A five", "A -5", "A 2.5", "A ²"])
    def test_malformed(self, line: str) -> None:
        with pytest.raises(FrequencyFormatError) as e:
            parse_frequency_table(["B 1", line])
        assert e.value.line_number == 2

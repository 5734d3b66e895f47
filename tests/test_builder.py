import pytest

from huffcode import CodeTableBuilder, EmptyInputError


class TestCodeTableBuilder:
    def test_build(self) -> None:
        table = CodeTableBuilder().build([("A", 5), ("B", 9), ("C", 12), ("D", 13), ("E", 16), ("F", 45)])
        assert table == {"F": "0", "C": "100", "D": "101", "A": "1100", "B": "1101", "E": "111"}

    def test_build_tree(self) -> None:
        tree = CodeTableBuilder().build_tree({"a": 1, "b": 1, "c": 2})
        assert tree.leaf_count == 3
        assert tree.root.frequency == 4

    def test_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        CodeTableBuilder(is_logging=True).build([("a", 1), ("b", 2)])
        assert "The code table has been generated successfully" in capsys.readouterr().out

    def test_no_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        CodeTableBuilder(is_logging=False).build([("a", 1), ("b", 2)])
        assert capsys.readouterr().out == ""

    def test_code_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        builder = CodeTableBuilder(is_logging=True)
        tree = builder.build_tree([("a", 1), ("b", 2), ("c", 4)])
        assert builder.code_table(tree) == {"a": "00", "b": "01", "c": "1"}
        assert "The code table has been generated successfully" in capsys.readouterr().out

    def test_empty(self) -> None:
        with pytest.raises(EmptyInputError):
            CodeTableBuilder().build([])

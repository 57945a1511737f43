"""
Tests for the demonstration program (python -m pymatrix).
"""

from pymatrix.demo import build_parser, main


class TestDemo:

    def test_default_output(self, capsys):
        assert main([]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 10
        assert all(line == "3, " * 10 for line in lines)

    def test_custom_shape_and_values(self, capsys):
        assert main(["--rows", "2", "--cols", "3", "--left", "0.25", "--right", "0.5"]) == 0
        assert capsys.readouterr().out == "0.75, 0.75, 0.75, \n0.75, 0.75, 0.75, \n"

    def test_empty_matrix_prints_nothing(self, capsys):
        assert main(["--rows", "0"]) == 0
        assert capsys.readouterr().out == ""

    def test_invalid_shape_reports_error(self, capsys):
        assert main(["--rows", "-1"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ERROR: rows: must be non-negative" in captured.err

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert (args.rows, args.cols, args.left, args.right) == (10, 10, 1.0, 2.0)

"""Integration tests: end-to-end CLI runs."""

import os
import tempfile

import openpyxl
import pytest

from maze_generator import main


@pytest.mark.slow
class TestEndToEnd:
    def test_text_to_stdout(self, capsys):
        main(["--width", "11", "--height", "9", "--seed", "7"])
        captured = capsys.readouterr()
        lines = captured.out.splitlines()
        assert len(lines) == 9 + 1
        assert lines[0].startswith("  r0 r1")
        assert "seed=7" in captured.err
        assert "perfect yes" in captured.err

    def test_seed_is_reproducible(self, capsys):
        main(["--width", "15", "--height", "11", "--seed", "123"])
        first = capsys.readouterr().out
        main(["--width", "15", "--height", "11", "--seed", "123"])
        second = capsys.readouterr().out
        assert first == second

    def test_quiet(self, capsys):
        main(["--width", "5", "--height", "5", "--seed", "1", "--quiet"])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Carved 9 rooms, 8 passages" in captured.err

    def test_all_outputs(self, capsys):
        with tempfile.TemporaryDirectory() as tmp:
            svg = os.path.join(tmp, "maze.svg")
            pdf = os.path.join(tmp, "maze.pdf")
            xlsx = os.path.join(tmp, "maze.xlsx")
            main(["--width", "21", "--height", "15", "--seed", "3", "--quiet",
                  "--svg", svg, "--pdf", pdf, "--xlsx", xlsx, "--title", "LABYRINTH"])
            assert os.path.getsize(svg) > 0
            with open(pdf, "rb") as f:
                assert f.read(5) == b"%PDF-"
            wb = openpyxl.load_workbook(xlsx)
            assert wb["Info"].cell(row=3, column=2).value == 15
            err = capsys.readouterr().err
            assert f"Output: {svg}" in err
            assert f"Output: {pdf}" in err
            assert f"Output: {xlsx}" in err

    def test_unknown_strategy_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--strategy", "prim", "--seed", "1"])
        assert exc.value.code == 1
        assert "Unknown carving strategy" in capsys.readouterr().err

    def test_homemade_strategy_is_fatal(self):
        with pytest.raises(NotImplementedError):
            main(["--strategy", "homemade", "--width", "5", "--height", "5"])

    def test_non_positive_size_rejected(self):
        with pytest.raises(SystemExit) as exc:
            main(["--width", "0"])
        assert exc.value.code == 2

"""Tests for the cyclewitness command line."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cyclewitness.cli import EXIT_BAD_INPUT, EXIT_CYCLIC, EXIT_OK, main


class TestDemo:
    def test_runs_all_samples(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["demo"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.startswith("--- BFS Cycle Detection (Kahn's Algorithm) ---\n")
        assert "--- Test Case 1: Cyclic Graph ---" in out
        assert "--- Test Case 2: Acyclic Graph ---" in out
        assert "--- Test Case 3: A different Cyclic Graph ---" in out
        assert "Vertices in a cycle: 1 -> 3 -> 1" in out
        assert "Result (BFS): Graph is ACYCLIC." in out
        assert "Vertices in a cycle: 0 -> 1 -> 2 -> 0" in out


class TestCheck:
    def test_cyclic_file(
        self, cyclic_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["check", str(cyclic_file)]) == EXIT_CYCLIC
        out = capsys.readouterr().out
        assert "Graph Adjacency Matrix:" in out
        assert out.rstrip().endswith("Vertices in a cycle: 1 -> 3 -> 1")

    def test_acyclic_quiet(
        self, acyclic_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["check", "--quiet", str(acyclic_file)]) == EXIT_OK
        out = capsys.readouterr().out
        assert out == "Result (BFS): Graph is ACYCLIC.\n"

    def test_empty_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        p = tmp_path / "empty.txt"
        p.write_text("", encoding="utf-8")
        assert main(["check", "--quiet", str(p)]) == EXIT_OK
        assert capsys.readouterr().out == "Graph is empty.\n"

    def test_malformed(
        self, jagged_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["check", str(jagged_file)]) == EXIT_BAD_INPUT
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: Row 1" in captured.err

    def test_invalid_utf8(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        p = tmp_path / "binary.txt"
        p.write_bytes(b"0 1\n\xff\xfe 0\n")
        assert main(["check", str(p)]) == EXIT_BAD_INPUT
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error:" in captured.err
        assert "not valid UTF-8" in captured.err

    def test_rejection_not_logged_as_warning(
        self, jagged_file: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            assert main(["check", str(jagged_file)]) == EXIT_BAD_INPUT
        assert caplog.records == []

    def test_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["check", str(tmp_path / "nope.txt")]) == EXIT_BAD_INPUT
        assert "error:" in capsys.readouterr().err


class TestNoCommand:
    def test_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == EXIT_OK
        assert "usage: cyclewitness" in capsys.readouterr().out

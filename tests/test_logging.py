"""Tests for flake_tools.common.logging."""

from __future__ import annotations

import pytest

from flake_tools.common.logging import (
    log_block,
    log_error,
    log_info,
    log_success,
    log_warning,
)


def test_levels_write_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    log_info("test info")
    log_warning("test warning")
    log_error("test error")
    log_success("test success")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[INFO] test info" in captured.err
    assert "[WARN] test warning" in captured.err
    assert "[ERROR] test error" in captured.err
    assert "[OK] test success" in captured.err


def test_no_color_when_not_a_tty(capsys: pytest.CaptureFixture[str]) -> None:
    log_info("plain")
    assert "\033[" not in capsys.readouterr().err


def test_log_block_indents_lines(capsys: pytest.CaptureFixture[str]) -> None:
    log_block("git diff", "a.txt\nb.txt\n")
    err = capsys.readouterr().err
    assert "[INFO] git diff:" in err
    assert "    a.txt" in err
    assert "    b.txt" in err


def test_log_block_empty(capsys: pytest.CaptureFixture[str]) -> None:
    log_block("git diff", "")
    assert "git diff: (empty)" in capsys.readouterr().err

"""
toolkit のテスト。

狙い：
- 共通部品のうち、壊れると出力先やエラー表示がおかしくなるところを押さえる
  （logger の出力先とレベル、名前の表示変換、stdout のエンコーディング）
"""

from __future__ import annotations

import io
import os
import sys

import pytest

import toolkit


def test_setup_logger_writes_to_stderr_only(capsys: pytest.CaptureFixture[str]) -> None:
    logger = toolkit.setup_logger("test-stderr", True)
    logger.info("hello")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[INFO] hello\n"


def test_setup_logger_is_quiet_unless_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    logger = toolkit.setup_logger("test-quiet", False)
    logger.info("hidden")
    logger.warning("shown")

    assert capsys.readouterr().err == "[WARNING] shown\n"


def test_setup_logger_does_not_stack_handlers() -> None:
    toolkit.setup_logger("test-handlers", False)
    logger = toolkit.setup_logger("test-handlers", True)
    assert len(logger.handlers) == 1


def test_lossy_text_keeps_valid_names() -> None:
    assert toolkit.lossy_text("file1.txt") == "file1.txt"
    assert toolkit.lossy_text("日本語.md") == "日本語.md"


@pytest.mark.skipif(os.name != "posix", reason="surrogateescape で名前を持つのは POSIX")
def test_lossy_text_replaces_undecodable_bytes() -> None:
    name = os.fsdecode(b"bad\xff.txt")
    assert toolkit.lossy_text(name) == "bad�.txt"


def test_utf8_stdout_switches_non_utf8_stream(monkeypatch: pytest.MonkeyPatch) -> None:
    # テスト意図：latin-1 の stdout でも、日本語を UTF-8 のバイト列として書ける
    buf = io.BytesIO()
    stream = io.TextIOWrapper(buf, encoding="latin-1", newline="\n")
    monkeypatch.setattr(sys, "stdout", stream)

    out = toolkit.utf8_stdout()
    out.write("日本\n")
    out.flush()

    assert out is stream
    assert buf.getvalue() == "日本\n".encode("utf-8")


def test_utf8_stdout_leaves_non_wrapper_streams_alone(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = io.StringIO()
    monkeypatch.setattr(sys, "stdout", fake)
    assert toolkit.utf8_stdout() is fake

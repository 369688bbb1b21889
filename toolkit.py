"""
toolkit: 小ツール共通の「I/Oまわり」部品集

狙い：
- treer 本体は「引数の数チェック / パス検証 / 列挙 / 出力」だけに集中させる
- logger構成と、stdout/stderr に出す文字列まわりの処理はここに寄せる
"""

from __future__ import annotations

import codecs
import io
import logging
import os
import sys
from typing import TextIO


def setup_logger(name: str, verbose: bool) -> logging.Logger:
    """
    ログをstderrに出すためのloggerを構成する。

    - stdoutはエントリ名の出力専用にしたい
    - なので進捗/警告/失敗はstderrへ寄せる
    - 何度呼んでもハンドラは1つだけ（作り直す）
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger


def lossy_text(name: str) -> str:
    """
    OSから来た名前を表示用の文字列にする。

    UTF-8として読めないバイトは surrogateescape で文字列に紛れ込んでいるので、
    いったんバイト列に戻してから U+FFFD に置き換えて読み直す。
    """
    return os.fsencode(name).decode("utf-8", errors="replace")


def utf8_stdout() -> TextIO:
    """
    UTF-8 で書き出す stdout を返す。

    ロケール次第で stdout が latin-1 などになっていると、日本語のファイル名で
    UnicodeEncodeError になる。TextIOWrapper なら UTF-8 に付け替えてから使う。
    """
    stream = sys.stdout
    if isinstance(stream, io.TextIOWrapper) and codecs.lookup(stream.encoding).name != "utf-8":
        stream.reconfigure(encoding="utf-8")
    return stream

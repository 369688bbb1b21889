"""
パッケージ設定のテスト。

狙い：
- インストールされるのはライブラリとして import するモジュールだけ
  （treer_main.py は `python treer_main.py` 用の入口なので入れない）
"""

from __future__ import annotations

import re
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_py_modules_excludes_script_wrapper() -> None:
    text = PYPROJECT.read_text(encoding="utf-8")
    m = re.search(r"^py-modules\s*=\s*\[(?P<items>[^\]]*)\]", text, re.MULTILINE)
    assert m is not None

    modules = re.findall(r'"([^"]+)"', m.group("items"))
    assert modules == ["treer", "toolkit"]


def test_console_script_points_at_cli() -> None:
    text = PYPROJECT.read_text(encoding="utf-8")
    assert 'treer = "treer:cli"' in text

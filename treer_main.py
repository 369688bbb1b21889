"""
エントリーポイント（薄いラッパー） - treer

狙い：
- 実装本体(treer.py)とCLI実行の入口を分離する
- import しただけで列挙が走らない（テスト/再利用がしやすい）
"""

from __future__ import annotations

import sys


if __name__ == "__main__":
    from treer import main

    raise SystemExit(main(sys.argv))

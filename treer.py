"""
treer: 指定したディレクトリ直下のエントリ名を1行ずつ出力する小ツール

やること：
- 引数はパス1つだけ（数が違えば invalid arguments）
- そのパスが「存在する / 見られる / ディレクトリ」であることを確かめる
- 直下のエントリを全部読み切ってから、名前だけを stdout に出す

やらないこと：
- 再帰、フィルタ、ソート、整形（名前をそのまま出すだけ）

失敗は AppError にまとめて main まで投げ上げ、stderr に1行出して終了コードを返す。
"""

from __future__ import annotations

import logging
import os
import stat
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import TextIO

import toolkit

LOGGER_NAME = "treer"


# -------------------------
# エラー（閉じた分類）
# -------------------------


class ErrorKind(Enum):
    INVALID_ARGS = auto()
    PATH_NOT_FOUND = auto()
    NOT_A_DIRECTORY = auto()
    PERMISSION_DENIED = auto()
    IO = auto()


# 入力の誤りは 2、実行時の失敗は 1
_EXIT_CODES = {
    ErrorKind.INVALID_ARGS: 2,
    ErrorKind.PATH_NOT_FOUND: 2,
    ErrorKind.NOT_A_DIRECTORY: 2,
    ErrorKind.PERMISSION_DENIED: 1,
    ErrorKind.IO: 1,
}


class AppError(Exception):
    """
    treer が返しうる失敗を1種類の例外で表す。

    kind で分類し、表示に必要なもの（path / OSのメッセージ）だけを持たせる。
    生成は下の名前付きコンストラクタ経由にする。
    """

    def __init__(self, kind: ErrorKind, path: str | None = None, detail: str | None = None) -> None:
        self.kind = kind
        self.path = path
        self.detail = detail
        super().__init__(self.message())

    @classmethod
    def invalid_args(cls) -> AppError:
        return cls(ErrorKind.INVALID_ARGS)

    @classmethod
    def path_not_found(cls, path: str) -> AppError:
        return cls(ErrorKind.PATH_NOT_FOUND, path=path)

    @classmethod
    def not_a_directory(cls, path: str) -> AppError:
        return cls(ErrorKind.NOT_A_DIRECTORY, path=path)

    @classmethod
    def permission_denied(cls, path: str) -> AppError:
        return cls(ErrorKind.PERMISSION_DENIED, path=path)

    @classmethod
    def io(cls, exc: OSError) -> AppError:
        detail = exc.strerror or str(exc)
        if isinstance(exc.filename, (str, bytes)):
            detail = f"{detail}: {toolkit.lossy_text(os.fsdecode(exc.filename))}"
        return cls(ErrorKind.IO, detail=detail)

    def message(self) -> str:
        if self.kind is ErrorKind.INVALID_ARGS:
            return "invalid arguments"
        if self.kind is ErrorKind.IO:
            return f"I/O error: {self.detail}"
        label = {
            ErrorKind.PATH_NOT_FOUND: "path not found",
            ErrorKind.NOT_A_DIRECTORY: "not a directory",
            ErrorKind.PERMISSION_DENIED: "permission denied",
        }[self.kind]
        if self.path is None:
            return label
        return f"{label}: {toolkit.lossy_text(self.path)}"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self.kind]


# -------------------------
# データモデル（DTO）
# -------------------------


@dataclass(frozen=True)
class DirEntry:
    """ディレクトリ直下の1エントリ。名前以外（サイズ・種別など）は持たない。"""

    name: str

    @property
    def display_name(self) -> str:
        return toolkit.lossy_text(self.name)


# -------------------------
# パイプライン各段
# -------------------------


def parse_args(argv: list[str]) -> str:
    """
    argv（先頭はプログラム名）からパスを1つだけ取り出す。

    要素数がちょうど2のときだけ argv[1] をそのまま返す。
    フラグは解釈しないし、省略時にカレントディレクトリを補うこともしない。
    """
    if len(argv) != 2:
        raise AppError.invalid_args()
    return argv[1]


def validate_path(path: str) -> None:
    """
    path が「見られるディレクトリ」かをメタデータだけで確かめる。

    ここで確認しても、列挙するまでに消える可能性はある（そこは read_directory 側で拾う）。
    """
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        # 途中の要素が通常ファイル（file.txt/x）も「たどり着けない」扱い
        raise AppError.path_not_found(path) from exc
    except PermissionError as exc:
        raise AppError.permission_denied(path) from exc
    except OSError as exc:
        raise AppError.io(exc) from exc

    if not stat.S_ISDIR(st.st_mode):
        raise AppError.not_a_directory(path)


def read_directory(path: str) -> list[DirEntry]:
    """
    path 直下のエントリを全部読み切って返す。

    - 順番は OS が返した順のまま（ソートしない）
    - 隠しファイル・シンボリックリンク・サブディレクトリも区別せず全部含める
    - 途中で1件でも読めなければ、それまでの分は捨てて IO エラーにする
    """
    try:
        it = os.scandir(path)
    except PermissionError as exc:
        raise AppError.permission_denied(path) from exc
    except FileNotFoundError as exc:
        raise AppError.path_not_found(path) from exc
    except NotADirectoryError as exc:
        raise AppError.not_a_directory(path) from exc
    except OSError as exc:
        raise AppError.io(exc) from exc

    entries: list[DirEntry] = []
    with it:
        try:
            for entry in it:
                entries.append(DirEntry(name=entry.name))
        except OSError as exc:
            raise AppError.io(exc) from exc
    return entries


# -------------------------
# 実行フロー組み立て
# -------------------------


def run(argv: list[str], out: TextIO | None = None, logger: logging.Logger | None = None) -> None:
    """
    parse → validate → read → print を順に実行する。

    失敗は AppError のまま呼び出し元へ投げる（ここでは表示しない）。
    """
    if out is None:
        out = toolkit.utf8_stdout()
    if logger is None:
        logger = logging.getLogger(LOGGER_NAME)

    path = parse_args(argv)
    logger.info("parse ok: path=%s", toolkit.lossy_text(path))

    validate_path(path)
    logger.info("validate ok")

    entries = read_directory(path)
    logger.info("read done: count=%d", len(entries))

    for entry in entries:
        out.write(entry.display_name + "\n")


def main(argv: list[str] | None = None) -> int:
    """
    実行入口（テストからも呼べる形）。

    - logger（stderr、WARNING 以上）→ run
    - AppError は stderr に1行だけ出して、種類に応じた終了コードを返す
    """
    if argv is None:
        argv = sys.argv

    logger = toolkit.setup_logger(LOGGER_NAME, False)

    try:
        run(argv, logger=logger)
    except AppError as err:
        print(err, file=sys.stderr)
        return err.exit_code
    return 0


def cli() -> None:
    raise SystemExit(main())

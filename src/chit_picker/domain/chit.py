from __future__ import annotations

import re
from dataclasses import dataclass

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class Chit:
    """チット（抽選対象の1項目）。

    現状の契約:
    - id: ストア内で単調増加する代理キー（再利用しない、永続化しない）
    - text: 表示テキスト（追加時はトリム済み・非空。編集時はそのまま）
    """

    id: int
    text: str


def parse_chits(raw_text: str) -> list[str]:
    """入力テキストを改行で分割し、前後空白を除去して空行を捨てる。

    - 順序は入力のまま保持する。
    - 重複はそのまま残す。
    """
    if not raw_text:
        return []
    fragments = (part.strip() for part in _LINE_BREAK.split(raw_text))
    return [f for f in fragments if f]


def index_by_id(chits: list[Chit]) -> dict[int, int]:
    """チット ID -> 表示 index の辞書を返す。"""
    return {c.id: i for i, c in enumerate(chits)}

"""
アプリケーション層のポート: 永続ストア

目的:
- チット一覧の保存先（ファイル、メモリ等）を ChitStore から切り離す。
- 値は文字列のリストのみ。スキーマのバージョン管理・移行は行わない。
"""

from __future__ import annotations

from typing import Protocol


class ChitStorage(Protocol):
    """キー/値スロット型の永続ストア。

    契約:
    - get: 値が無い、または読み取れない場合は None を返す（例外にしない）。
    - set: 既存の値を上書きする。失敗時は ChitStorageError を送出する。
    """

    def get(self, key: str) -> list[str] | None:
        """キーに保存された文字列リストを返す。"""

    def set(self, key: str, values: list[str]) -> None:
        """キーに文字列リストを保存する。"""

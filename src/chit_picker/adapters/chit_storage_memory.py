"""メモリ上の永続ストアアダプタ。

- 保存先パスが未設定のとき、およびテストで使う。
- プロセス終了で内容は失われる。
"""

from __future__ import annotations

from src.chit_picker.app.ports.chit_storage import ChitStorage


class InMemoryChitStorage(ChitStorage):
    """dict 実装の ChitStorage。"""

    def __init__(self, initial: dict[str, list[str]] | None = None) -> None:
        self._slots: dict[str, list[str]] = {k: list(v) for k, v in (initial or {}).items()}

    def get(self, key: str) -> list[str] | None:
        value = self._slots.get(key)
        return list(value) if value is not None else None

    def set(self, key: str, values: list[str]) -> None:
        self._slots[key] = list(values)

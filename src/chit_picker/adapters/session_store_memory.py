"""dict ベースの SessionStore（テスト・非 UI 実行用）。"""

from __future__ import annotations

from typing import Any

from src.chit_picker.app.ports.session_store import SessionStore


class DictSessionStore(SessionStore):
    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        self._data[key] = value

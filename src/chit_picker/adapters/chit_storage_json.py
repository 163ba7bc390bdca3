"""JSON ファイルによる永続ストアアダプタ。

目的:
- アプリ層ポート `ChitStorage` の実装を提供する。
- 1 ファイルに `{キー: [文字列, ...]}` の JSON オブジェクトとして保存する。

方針:
- 読み込み失敗（ファイル無し・壊れた JSON・型不一致）は「データ無し」として扱う。
- 書き込み失敗は ChitStorageError として呼び出し側へ伝える。
"""

from __future__ import annotations

import logging
import pathlib

import orjson

from src.chit_picker.app.ports.chit_storage import ChitStorage
from src.chit_picker.domain import ChitStorageError

logger = logging.getLogger(__name__)


class JsonFileChitStorage(ChitStorage):
    """JSON ファイル実装の ChitStorage。"""

    def __init__(self, path: str | pathlib.Path) -> None:
        self.path = pathlib.Path(path)

    def _read_all(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = orjson.loads(self.path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            logger.warning("Could not read %s, treating as empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Unexpected top-level JSON in %s, treating as empty", self.path)
            return {}
        return data

    def get(self, key: str) -> list[str] | None:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            logger.warning("Value under %r in %s is not a string list, ignoring", key, self.path)
            return None
        return list(value)

    def set(self, key: str, values: list[str]) -> None:
        data = self._read_all()
        data[key] = list(values)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))
        except OSError as e:
            raise ChitStorageError(f"Could not write {self.path}: {e}") from e
        logger.debug("Saved %d chit(s) to %s", len(values), self.path)

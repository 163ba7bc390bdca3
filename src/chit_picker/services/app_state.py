from __future__ import annotations

import logging

from src.chit_picker.adapters.chit_storage_json import JsonFileChitStorage
from src.chit_picker.adapters.chit_storage_memory import InMemoryChitStorage
from src.chit_picker.app.ports.chit_storage import ChitStorage
from src.chit_picker.app.ports.session_store import SessionStore
from src.chit_picker.app.state import Settings, ViewState
from src.chit_picker.services.chit_store import ChitStore
from src.chit_picker.services.draw_timer import DrawTimer

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> ChitStorage:
    """設定に応じた永続ストアを返す。保存先が空ならメモリ上のみ。"""
    if settings.storage_path.strip():
        return JsonFileChitStorage(settings.storage_path)
    logger.info("No storage path configured, chits will not survive a restart")
    return InMemoryChitStorage()


def initialize_state(
    store: SessionStore,
    settings: Settings,
    storage: ChitStorage | None = None,
) -> None:
    """アプリ起動時に必要なセッション状態を初期化する。

    既に存在するキーは上書きせず、未定義のときのみ初期値を設定する。
    チット一覧はこのとき一度だけ永続ストアから読み込む。
    """
    if store.get("settings") is None:
        store.set("settings", settings)
    if store.get("chits") is None:
        chits = ChitStore(storage if storage is not None else build_storage(settings))
        chits.load()
        store.set("chits", chits)
    if store.get("view") is None:
        store.set("view", ViewState(read_aloud=settings.read_aloud))
    if store.get("draw_timer") is None:
        store.set("draw_timer", DrawTimer(delay=settings.draw_delay_seconds))
    # 読み上げ音声キャッシュ
    if store.get("audio_cache") is None:
        store.set("audio_cache", {})


def get_settings(store: SessionStore) -> Settings:
    return store.get("settings") or Settings()


def get_chits(store: SessionStore) -> ChitStore:
    return store.get("chits")


def get_view(store: SessionStore) -> ViewState:
    return store.get("view")


def get_draw_timer(store: SessionStore) -> DrawTimer:
    return store.get("draw_timer")

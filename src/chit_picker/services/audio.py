from __future__ import annotations

import logging
from functools import lru_cache
from io import BytesIO

from gtts import gTTS, gTTSError

from src.chit_picker.app.ports.session_store import SessionStore
from src.chit_picker.services.app_state import get_settings, get_view

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def synthesize_text(text: str, lang: str = "en") -> bytes | None:
    """テキストから音声(mp3)のバイト列を生成して返す。

    - gTTS のネットワーク障害などが起きた場合は None を返す。
    - lru_cache でテキストごとの結果をメモリキャッシュ。
    """
    if not text.strip():
        return None
    try:
        tts = gTTS(text=text, lang=lang)
        bio = BytesIO()
        tts.write_to_fp(bio)
        return bio.getvalue()
    except (gTTSError, ValueError, OSError) as e:
        logger.warning("Speech synthesis failed: %s", e)
        return None


def get_pick_audio_bytes(store: SessionStore) -> bytes | None:
    """直近の抽選結果の読み上げ音声を返す（読み上げ無効・結果無しなら None）。"""
    view = get_view(store)
    text = view.picked_item
    if not view.read_aloud or not text:
        return None
    cache: dict[str, bytes] = store.get("audio_cache", {})
    if text in cache:
        return cache[text]
    audio_bytes = synthesize_text(text, get_settings(store).speech_lang)
    if audio_bytes:
        cache[text] = audio_bytes
        # 変更を永続化
        store.set("audio_cache", cache)
    return audio_bytes

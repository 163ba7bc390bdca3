from __future__ import annotations

import streamlit as st

from src.chit_picker.adapters.session_store_streamlit import StSessionStore
from src.chit_picker.services.audio import get_pick_audio_bytes
from src.chit_picker.services.app_state import get_view


def render_pick_audio(store: StSessionStore) -> None:
    """抽選結果の読み上げ音声を自動再生する（読み上げ有効時のみ）。"""
    if not get_view(store).read_aloud:
        return
    audio_bytes = get_pick_audio_bytes(store)
    if audio_bytes:
        st.audio(audio_bytes, format="audio/mp3", autoplay=True)
    else:
        st.warning("Could not generate speech for this pick (check your network connection).")

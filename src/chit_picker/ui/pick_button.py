from __future__ import annotations

import time

import streamlit as st

from src.chit_picker.adapters.session_store_streamlit import StSessionStore
from src.chit_picker.services import picking
from src.chit_picker.services.app_state import get_draw_timer


def render_pick_button(store: StSessionStore) -> None:
    """抽選ボタンを描画する。

    仕様:
    - プールが空、または抽選中は押せない。
    - 抽選中は「Loading...」を表示し、残り時間だけ待ってから抽選を完了させる。
    - 待機中は 1 実行内で完結させる（他のボタンは再描画まで反応しない）。
    """
    timer = get_draw_timer(store)
    label = "Loading..." if timer.busy else "Pick Chit"
    if st.button(
        label,
        key="pick",
        type="primary",
        use_container_width=True,
        disabled=not picking.can_request_draw(store),
    ):
        picking.request_draw(store)
        st.rerun()

    if timer.busy:
        with st.spinner("Shuffling..."):
            time.sleep(timer.remaining(time.time()))
        picking.complete_pending_draw(store)
        st.rerun()

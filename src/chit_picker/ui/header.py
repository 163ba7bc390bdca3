from __future__ import annotations

import streamlit as st

from src.chit_picker.adapters.session_store_streamlit import StSessionStore
from src.chit_picker.services import picking


def render_header(store: StSessionStore, title: str) -> None:
    """タイトルと操作ボタン（追加 / 全削除）を描画する。"""
    c1, c2, c3 = st.columns([8, 1, 1])
    with c1:
        st.title(title)
    with c2:
        if st.button("➕", help="Add items", use_container_width=True):
            picking.open_add_popup(store)
            st.rerun()
    with c3:
        if st.button("🗑️", help="Clear all chits", use_container_width=True):
            picking.request_clear(store)
            st.rerun()

from __future__ import annotations

import streamlit as st

from src.chit_picker.adapters.session_store_streamlit import StSessionStore
from src.chit_picker.services import picking
from src.chit_picker.services.app_state import get_chits, get_view


def render_chit_list(store: StSessionStore) -> None:
    """チット一覧を描画する。

    - 行のボタンを押すと編集を開始する。
    - チェックした行は「Delete selected」でまとめて削除する。
    - 既に引かれたチットは打ち消し線で表示する。
    """
    chits = get_chits(store)
    view = get_view(store)
    if not chits.items:
        st.info("No chits yet. Tap ➕ to add some.")
        return

    for index, chit in enumerate(chits.chits):
        c1, c2 = st.columns([1, 11])
        with c1:
            selected = st.checkbox(
                "select",
                value=index in view.delete_selection,
                key=f"sel-{chit.id}",
                label_visibility="collapsed",
            )
            picking.toggle_delete_selection(store, index, selected)
        with c2:
            label = chit.text if chits.is_remaining(index) else f"~~{chit.text}~~"
            if st.button(label or " ", key=f"row-{chit.id}", use_container_width=True):
                picking.begin_edit(store, index)
                st.rerun()

    if st.button("Delete selected", disabled=not view.delete_selection):
        picking.delete_selected(store)
        st.rerun()

from __future__ import annotations

import streamlit as st

from src.chit_picker.adapters.session_store_streamlit import StSessionStore
from src.chit_picker.services import picking
from src.chit_picker.services.app_state import get_chits, get_view


def render_add_popup(store: StSessionStore) -> None:
    """追加ポップアップ（1 行 1 チット）を描画する。"""
    if not get_view(store).show_add_popup:
        return
    with st.container(border=True):
        st.subheader("Add Items")
        with st.form("add-form", clear_on_submit=True):
            text = st.text_area("One chit per line", height=120)
            c1, c2 = st.columns(2)
            cancelled = c1.form_submit_button("Cancel", use_container_width=True)
            submitted = c2.form_submit_button("Add", type="primary", use_container_width=True)
        if cancelled:
            picking.cancel_add(store)
            st.rerun()
        if submitted:
            picking.submit_add(store, text)
            st.rerun()


def render_edit_popup(store: StSessionStore) -> None:
    """編集ポップアップを描画する。入力はトリムせずそのまま保存する。"""
    session = get_chits(store).edit_session
    if session is None:
        return
    with st.container(border=True):
        st.subheader("Edit Item")
        with st.form(f"edit-form-{session.chit_id}"):
            text = st.text_area("Text", value=session.draft, height=120)
            c1, c2 = st.columns(2)
            cancelled = c1.form_submit_button("Cancel", use_container_width=True)
            saved = c2.form_submit_button("Save", type="primary", use_container_width=True)
        if cancelled:
            picking.cancel_edit(store)
            st.rerun()
        if saved:
            picking.confirm_edit(store, text)
            st.rerun()


def render_result_popup(store: StSessionStore) -> bool:
    """抽選結果のオーバーレイを描画する。表示したら True。"""
    view = get_view(store)
    if not view.show_result_popup:
        return False
    with st.container(border=True):
        st.caption("Your Random Pick")
        st.header(view.picked_item or "")
        if st.button("Close", use_container_width=True):
            picking.dismiss_result(store)
            st.rerun()
    return True


def render_clear_confirmation(store: StSessionStore) -> None:
    """全削除の確認ダイアログを描画する。"""
    if not get_view(store).confirm_clear:
        return
    with st.container(border=True):
        st.subheader("Clear All Chits")
        st.write("Are you sure you want to clear all chits?")
        c1, c2 = st.columns(2)
        if c1.button("Cancel", key="clear-cancel", use_container_width=True):
            picking.cancel_clear(store)
            st.rerun()
        if c2.button("Clear", key="clear-confirm", type="primary", use_container_width=True):
            picking.confirm_clear(store)
            st.rerun()

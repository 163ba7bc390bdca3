import logging

import streamlit as st

from src.chit_picker.adapters.session_store_streamlit import StSessionStore
from src.chit_picker.services import app_state, picking
from src.chit_picker.services.config_loader import (
    get_app_title,
    load_config_from_env,
    load_default_settings,
)
from src.chit_picker.ui.audio_player import render_pick_audio
from src.chit_picker.ui.chit_list import render_chit_list
from src.chit_picker.ui.header import render_header
from src.chit_picker.ui.pick_button import render_pick_button
from src.chit_picker.ui.popups import (
    render_add_popup,
    render_clear_confirmation,
    render_edit_popup,
    render_result_popup,
)
from src.chit_picker.ui.sidebar import render_sidebar


def main():
    # Streamlit の仕様上 set_page_config は最初に 1 度だけ呼ぶ必要がある
    st.set_page_config(page_title="Chit Picker", layout="centered")

    store = StSessionStore()
    if store.get("settings") is None:
        # 初回のみ環境変数の設定ファイルを読む
        load_config_from_env()
    settings = load_default_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    app_state.initialize_state(store, settings)

    # ヘッダー（タイトルは実行時設定を反映）
    render_header(store, get_app_title(app_state.get_settings(store).title))
    render_sidebar(store)

    notice = picking.take_notice(store)
    if notice:
        st.warning(notice)

    # ポップアップ（開いているものだけ描画される）
    render_clear_confirmation(store)
    render_add_popup(store)
    render_edit_popup(store)
    if render_result_popup(store):
        render_pick_audio(store)

    st.divider()
    render_chit_list(store)

    st.divider()
    render_pick_button(store)

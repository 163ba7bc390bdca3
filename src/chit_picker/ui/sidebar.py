from __future__ import annotations

import streamlit as st

from src.chit_picker.adapters.session_store_streamlit import StSessionStore
from src.chit_picker.services import chit_io, picking
from src.chit_picker.services.app_state import get_chits, get_view
from src.chit_picker.services.config_loader import set_runtime_toml_bytes


def render_sidebar(store: StSessionStore) -> None:
    """サイドバーの設定 UI を描画する。

    - 読み上げ切替は常に反映する。
    - ファイル取り込みは追加と同じ規則（トリム・空行除去）で一覧の末尾に入る。
    - ページリンクは利用可能な場合のみ表示する。
    """
    with st.sidebar:
        chits = get_chits(store)
        st.subheader("Round")
        st.metric("Remaining", f"{len(chits.remaining)}/{len(chits.items)}")

        st.subheader("Settings")
        new_read_aloud = st.toggle("Read the pick aloud", value=get_view(store).read_aloud)
        picking.on_read_aloud_toggle(store, new_read_aloud)

        st.subheader("Import")
        up = st.file_uploader("Chits file (.txt / .csv)", type=["txt", "csv"])
        if st.button("Import", disabled=up is None):
            try:
                raw = chit_io.read_uploaded_chits(up.name, up.getvalue())
            except ValueError as e:
                st.error(f"Import failed: {e}")
            else:
                added = picking.import_chits(store, raw)
                st.success(f"Imported {len(added)} chit(s).")

        cfg = st.file_uploader("Config (config.toml)", type=["toml"])
        if cfg is not None and st.button("Apply config"):
            if set_runtime_toml_bytes(cfg.getvalue()):
                st.success("Config applied. Title changes take effect now; other settings on next session.")
            else:
                st.error("Could not read the config file.")

        # ページ移動リンク（Streamlit が対応している場合はサイドバーに表示）
        if hasattr(st.sidebar, "page_link"):
            st.divider()
            st.page_link("pages/chit_list.py", label="Chit list")

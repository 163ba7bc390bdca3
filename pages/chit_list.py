"""
チット一覧ページ
- 各チットと今回のラウンドでの状態（remaining / drawn）を表で表示します。
- CSV でダウンロードできます。
"""

import streamlit as st

from src.chit_picker.adapters.session_store_streamlit import StSessionStore
from src.chit_picker.services import chit_io
from src.chit_picker.services.app_state import get_chits

# ページ設定
st.set_page_config(page_title="Chit list", layout="wide")
st.title("Chit list")

store = StSessionStore()
if store.get("chits") is None:
    st.info("Open the main page first to load your chits.")
    st.stop()

chits = get_chits(store)
df = chit_io.chits_frame(chits)
if df.empty:
    st.info("No chits yet.")
    st.stop()

st.caption(f"{len(chits.remaining)} of {len(chits.items)} chit(s) left in this round.")
st.dataframe(df, hide_index=True, use_container_width=True)
st.download_button(
    "Download CSV",
    data=chit_io.chits_csv_bytes(chits),
    file_name="chits.csv",
    mime="text/csv",
)

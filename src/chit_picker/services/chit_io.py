"""
チットの取り込み/書き出しサービス（Streamlit 非依存）
- アップロードされた .txt / .csv からのテキスト抽出
- 一覧表示・CSV ダウンロード用の DataFrame 生成

取り込んだ行は ChitStore.add_items に渡すため、トリム・空行除去は追加時と同じになる。
"""

from __future__ import annotations

import io
import os

import pandas as pd

from src.chit_picker.services.chit_store import ChitStore

SUPPORTED_EXTENSIONS = (".txt", ".csv")

COL_NO = "No."
COL_CHIT = "Chit"
COL_STATUS = "Status"
STATUS_REMAINING = "remaining"
STATUS_DRAWN = "drawn"


def read_uploaded_chits(filename: str, data: bytes) -> str:
    """アップロードファイルの内容を改行区切りのテキストにして返す。

    契約:
    - .txt: 1 行 1 チット。UTF-8（BOM 付き可）を想定。
    - .csv: 先頭列のみを使う。ヘッダ行は持たない前提で全行を読む。欠損セルはスキップ。
    - それ以外の拡張子は ValueError。
    """
    ext = os.path.splitext(filename)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: {filename} (use .txt or .csv)")
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ValueError(f"{filename} is not UTF-8 text") from e
    if ext == ".txt":
        return text
    if not text.strip():
        return ""
    try:
        df = pd.read_csv(
            io.StringIO(text), header=None, sep=",", engine="python", dtype=str, skip_blank_lines=True
        )
    except pd.errors.ParserError as e:
        raise ValueError(f"Could not parse {filename}: {e}") from e
    first = df.iloc[:, 0]
    return "\n".join(str(v) for v in first if not pd.isna(v))


def chits_frame(chits: ChitStore) -> pd.DataFrame:
    """一覧を表示順の DataFrame（No. / Chit / Status）にして返す。"""
    items = chits.items
    rows = [
        {
            COL_NO: i + 1,
            COL_CHIT: text,
            COL_STATUS: STATUS_REMAINING if chits.is_remaining(i) else STATUS_DRAWN,
        }
        for i, text in enumerate(items)
    ]
    return pd.DataFrame(rows, columns=[COL_NO, COL_CHIT, COL_STATUS])


def chits_csv_bytes(chits: ChitStore) -> bytes:
    """ダウンロード用 CSV（UTF-8）を返す。"""
    return chits_frame(chits).to_csv(index=False).encode("utf-8")

"""ドメイン例外。

契約:
- すべて `ChitPickerError` を基底とする。
- UI はこれらを捕捉し、表示状態を変えずに何もしない（no-op）扱いにする。
"""

from __future__ import annotations


class ChitPickerError(Exception):
    """チットピッカーの基底例外。"""


class ChitIndexError(ChitPickerError, IndexError):
    """範囲外、または既に存在しないチットを指す index/ID。"""


class EmptyPoolError(ChitPickerError):
    """残りプールが空の状態で抽選しようとした。"""


class ChitStorageError(ChitPickerError):
    """永続ストアへの書き込みに失敗した。"""

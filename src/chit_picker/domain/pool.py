from __future__ import annotations

import random

from src.chit_picker.domain.chit import Chit

# 残りプールはチット ID のリスト（重複テキストは別 ID なので多重集合になる）
Pool = list[int]


def init_pool(chits: list[Chit]) -> Pool:
    """一覧と同じ内容（順序も同じ）のプールを作る。"""
    return [c.id for c in chits]


def choose_from_pool(pool: Pool, rng: random.Random | None = None) -> int | None:
    """プールから一様ランダムに1件選んで返す。空なら None。"""
    if not pool:
        return None
    return (rng or random).choice(pool)


def remove_from_pool(pool: Pool, chit_id: int) -> None:
    """プールから指定 ID をちょうど1件取り除く（無ければ何もしない）。"""
    if chit_id in pool:
        pool.remove(chit_id)


def remove_indices(chits: list[Chit], indices: set[int]) -> list[Chit]:
    """削除前の index 集合に該当しないチットだけを残した新しい一覧を返す。

    範囲外の index は無視する。
    """
    return [c for i, c in enumerate(chits) if i not in indices]

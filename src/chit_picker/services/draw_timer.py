"""抽選演出の遅延タイマー。

目的:
- 「シャッフル中」の遅延を、時刻の注入で検証可能な形で表現する。
- 遅延中は busy フラグを立て、2 回目の抽選要求はキューに積まず拒否する。

注意:
- time.sleep はしない。呼び出し側が再描画のたびに poll(now) で完了を確認する。
- 開始した遅延は取り消せない（必ず完了する）。
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

Clock = Callable[[], float]

# 既定の時計（epoch 秒）
system_clock: Clock = time.time


@dataclass
class DrawTimer:
    """保留中の抽選1件分のタイマー。

    現状の契約:
    - delay は遅延秒。
    - due_at は完了予定時刻（epoch 秒）。保留中でなければ None。
    """

    delay: float
    due_at: float | None = None

    @property
    def busy(self) -> bool:
        return self.due_at is not None

    def start(self, now: float) -> bool:
        """遅延を開始する。既に保留中なら何もせず False。"""
        if self.busy:
            return False
        self.due_at = now + max(0.0, float(self.delay))
        return True

    def remaining(self, now: float) -> float:
        """完了までの残り秒（保留中でなければ 0）。"""
        if self.due_at is None:
            return 0.0
        return max(0.0, self.due_at - now)

    def poll(self, now: float) -> bool:
        """完了時刻を過ぎていれば True を返し、保留状態を解除する（1 回だけ）。"""
        if self.due_at is None or now < self.due_at:
            return False
        self.due_at = None
        return True

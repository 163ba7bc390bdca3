"""チット一覧と残りプールを管理するストア（Streamlit 非依存）。

目的:
- チット一覧（ItemList）と、非復元抽選のための残りプール（RemainingPool）を一箇所で保持する。
- 一覧を変更する操作のたびに永続ストアへ書き戻す。

方針:
- 一覧を作り直す操作（load/edit/delete/clear）ではプールを一覧と同一にリセットする。
  抽選履歴は部分的に修正せず破棄する。
- 追加はプールの末尾にも同じチットを追加する（それまでの抽選履歴は保持）。
- 抽選（draw）はプールのみを変更し、永続化しない。再起動後は一覧全体がプールに戻る。
- 内部では代理キー（Chit.id）で管理し、UI との境界で表示 index と相互変換する。
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass

from src.chit_picker.app.ports.chit_storage import ChitStorage
from src.chit_picker.domain import (
    CHITS_KEY,
    Chit,
    ChitIndexError,
    EmptyPoolError,
    Pool,
    choose_from_pool,
    index_by_id,
    init_pool,
    parse_chits,
    remove_from_pool,
    remove_indices,
)

logger = logging.getLogger(__name__)


@dataclass
class EditSession:
    """編集中のチット。

    - chit_id: 編集対象の代理キー（確定時に現在の index へ解決する）
    - index: 編集開始時点の表示 index（表示用）
    - draft: 入力中のテキスト
    """

    chit_id: int
    index: int
    draft: str


class ChitStore:
    """チット一覧・残りプール・編集セッションの保持者。"""

    def __init__(
        self,
        storage: ChitStorage,
        key: str = CHITS_KEY,
        rng: random.Random | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._rng = rng
        self._chits: list[Chit] = []
        self._pool: Pool = []
        self._next_id = 0
        self.last_drawn: str | None = None
        self.edit_session: EditSession | None = None

    # ---- 参照 ----

    @property
    def chits(self) -> list[Chit]:
        return list(self._chits)

    @property
    def items(self) -> list[str]:
        """一覧のテキスト（表示順）。"""
        return [c.text for c in self._chits]

    @property
    def remaining(self) -> list[str]:
        """残りプールのテキスト（一覧の表示順に並べる）。"""
        in_pool = set(self._pool)
        return [c.text for c in self._chits if c.id in in_pool]

    @property
    def drawn(self) -> list[str]:
        """今回のラウンドで既に引かれたチットのテキスト（表示順）。"""
        in_pool = set(self._pool)
        return [c.text for c in self._chits if c.id not in in_pool]

    @property
    def can_draw(self) -> bool:
        return bool(self._pool)

    def is_remaining(self, index: int) -> bool:
        """表示 index のチットがまだ残りプールにあるか。"""
        return self._chit_at(index).id in self._pool

    def index_of(self, chit_id: int) -> int | None:
        """代理キーから現在の表示 index を返す。存在しなければ None。"""
        return index_by_id(self._chits).get(chit_id)

    def _chit_at(self, index: int) -> Chit:
        if not 0 <= index < len(self._chits):
            raise ChitIndexError(f"index {index} out of range for {len(self._chits)} chit(s)")
        return self._chits[index]

    # ---- 一覧の置き換え ----

    def _new_chits(self, texts: Iterable[str]) -> list[Chit]:
        out: list[Chit] = []
        for text in texts:
            out.append(Chit(id=self._next_id, text=text))
            self._next_id += 1
        return out

    def _replace_all(self, chits: list[Chit]) -> None:
        """一覧を丸ごと置き換え、プールを一覧と同一にリセットする。"""
        self._chits = chits
        self._pool = init_pool(chits)

    def load(self) -> list[str]:
        """永続ストアから一覧を読み込む。無ければ空。

        一覧とプールは読み込んだ内容で同一になる。
        """
        saved = self._storage.get(self._key) or []
        self._replace_all(self._new_chits(saved))
        self.edit_session = None
        logger.info("Loaded %d chit(s)", len(saved))
        return self.items

    def persist(self) -> None:
        """一覧（プールではない）を永続ストアへ上書き保存する。"""
        self._storage.set(self._key, self.items)

    # ---- 変更操作 ----

    def add_items(self, raw_text: str) -> list[str]:
        """改行区切りのテキストからチットを追加する。

        - 各行の前後空白を除去し、空行は捨てる。
        - 追加分は一覧とプールの末尾に同じ順序で入る。
        - 0 件でも保存は行う。
        """
        texts = parse_chits(raw_text)
        added = self._new_chits(texts)
        self._chits.extend(added)
        self._pool.extend(c.id for c in added)
        logger.debug("Added %d chit(s)", len(added))
        self.persist()
        return texts

    def edit_item(self, index: int, new_text: str) -> None:
        """表示 index のチットを new_text に置き換える。

        - new_text はトリムも空チェックもしない（追加時との非対称は現状仕様）。
        - プールは一覧と同一にリセットし、編集セッションは閉じる。

        Raises:
            ChitIndexError: index が [0, len) の外。
        """
        target = self._chit_at(index)
        chits = list(self._chits)
        chits[index] = Chit(id=target.id, text=new_text)
        self._replace_all(chits)
        self.edit_session = None
        logger.debug("Edited chit at index %d", index)
        self.persist()

    def delete_items(self, indices: Iterable[int]) -> None:
        """削除前の表示 index 群に該当するチットをまとめて削除する。

        範囲外の index は黙って無視する。プールは削除後の一覧にリセットする。
        """
        targets = set(indices)
        before = len(self._chits)
        self._replace_all(remove_indices(self._chits, targets))
        self.edit_session = None
        logger.debug("Deleted %d chit(s)", before - len(self._chits))
        self.persist()

    def clear_all(self) -> None:
        """一覧とプールを空にする。"""
        self._replace_all([])
        self.edit_session = None
        logger.debug("Cleared all chits")
        self.persist()

    def draw(self) -> str:
        """残りプールから一様ランダムに1件引いて返す。

        - 引いたチットはプールから1件だけ取り除く（同じテキストの別チットは残る）。
        - 永続化はしない。

        Raises:
            EmptyPoolError: プールが空。
        """
        chit_id = choose_from_pool(self._pool, self._rng)
        if chit_id is None:
            raise EmptyPoolError("no chits left to draw")
        remove_from_pool(self._pool, chit_id)
        picked = self._chits[index_by_id(self._chits)[chit_id]].text
        self.last_drawn = picked
        logger.info("Drew a chit, %d left in pool", len(self._pool))
        return picked

    # ---- 編集セッション ----

    def begin_edit(self, index: int) -> EditSession:
        """表示 index のチットの編集を開始する。"""
        target = self._chit_at(index)
        self.edit_session = EditSession(chit_id=target.id, index=index, draft=target.text)
        return self.edit_session

    def update_draft(self, text: str) -> None:
        if self.edit_session is not None:
            self.edit_session.draft = text

    def cancel_edit(self) -> None:
        self.edit_session = None

    def commit_edit(self) -> None:
        """編集セッションを確定する。

        対象チットが既に削除されていれば ChitIndexError を送出し、セッションは閉じる。
        セッションが無ければ何もしない。
        """
        session = self.edit_session
        if session is None:
            return
        index = self.index_of(session.chit_id)
        if index is None:
            self.edit_session = None
            raise ChitIndexError(f"chit {session.chit_id} no longer exists")
        self.edit_item(index, session.draft)

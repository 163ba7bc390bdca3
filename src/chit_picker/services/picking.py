from __future__ import annotations

import logging

from src.chit_picker.app.ports.session_store import SessionStore
from src.chit_picker.domain import ChitIndexError, ChitStorageError, EmptyPoolError, parse_chits
from src.chit_picker.services.app_state import get_chits, get_draw_timer, get_view
from src.chit_picker.services.draw_timer import Clock, system_clock

# UI コンポーネントからのイベント（追加、編集、削除、全削除、抽選）を受け取り、
# 一時状態（ViewState）の更新と ChitStore の操作を一箇所に集約する。
# 本モジュールは UI フレームワークに依存しない。状態アクセスは SessionStore 経由で行う。
# 失敗はすべて no-op に落とし、表示状態は変えない（保存失敗のみ notice で知らせる）。

logger = logging.getLogger(__name__)

SAVE_FAILED_NOTICE = "Changes could not be saved and will be lost when the app restarts."


def _note_save_failure(store: SessionStore, err: ChitStorageError) -> None:
    logger.error("Persisting chits failed: %s", err)
    get_view(store).notice = SAVE_FAILED_NOTICE


def take_notice(store: SessionStore) -> str | None:
    """表示待ちの警告を取り出す（取り出すと消える）。"""
    view = get_view(store)
    notice, view.notice = view.notice, None
    return notice


# ---- 追加 ----


def open_add_popup(store: SessionStore) -> None:
    get_view(store).show_add_popup = True


def cancel_add(store: SessionStore) -> None:
    view = get_view(store)
    view.show_add_popup = False
    view.add_draft = ""


def import_chits(store: SessionStore, raw_text: str) -> list[str]:
    """改行区切りのテキストを一覧の末尾に追加する。追加されたテキストを返す。"""
    try:
        return get_chits(store).add_items(raw_text)
    except ChitStorageError as e:
        _note_save_failure(store, e)
        # 保存に失敗しても追加自体は反映済み
        return parse_chits(raw_text)


def submit_add(store: SessionStore, raw_text: str) -> list[str]:
    """追加ポップアップの入力を確定してポップアップを閉じる。"""
    added = import_chits(store, raw_text)
    cancel_add(store)
    return added


# ---- 編集 ----


def begin_edit(store: SessionStore, index: int) -> None:
    """行タップで編集を開始する。範囲外なら何もしない。"""
    try:
        get_chits(store).begin_edit(index)
    except ChitIndexError:
        logger.debug("Ignoring edit request for stale index %d", index)


def cancel_edit(store: SessionStore) -> None:
    get_chits(store).cancel_edit()


def confirm_edit(store: SessionStore, text: str) -> bool:
    """編集を確定する。

    対象が既に無い（古い index）場合は編集を無視してダイアログを閉じ、False を返す。
    """
    chits = get_chits(store)
    chits.update_draft(text)
    try:
        chits.commit_edit()
    except ChitIndexError:
        logger.debug("Edit target vanished, discarding edit")
        return False
    except ChitStorageError as e:
        _note_save_failure(store, e)
    return True


# ---- 削除 ----


def toggle_delete_selection(store: SessionStore, index: int, selected: bool) -> None:
    view = get_view(store)
    if selected:
        view.delete_selection.add(index)
    else:
        view.delete_selection.discard(index)


def delete_selected(store: SessionStore) -> None:
    """選択中の行をまとめて削除し、選択を解除する。"""
    view = get_view(store)
    if not view.delete_selection:
        return
    try:
        get_chits(store).delete_items(view.delete_selection)
    except ChitStorageError as e:
        _note_save_failure(store, e)
    view.delete_selection = set()


# ---- 全削除 ----


def request_clear(store: SessionStore) -> None:
    get_view(store).confirm_clear = True


def cancel_clear(store: SessionStore) -> None:
    get_view(store).confirm_clear = False


def confirm_clear(store: SessionStore) -> None:
    view = get_view(store)
    view.confirm_clear = False
    view.delete_selection = set()
    try:
        get_chits(store).clear_all()
    except ChitStorageError as e:
        _note_save_failure(store, e)


# ---- 抽選 ----


def can_request_draw(store: SessionStore) -> bool:
    """抽選ボタンを有効にできるか（プール非空かつ抽選中でない）。"""
    return get_chits(store).can_draw and not get_draw_timer(store).busy


def request_draw(store: SessionStore, clock: Clock = system_clock) -> bool:
    """抽選を予約する。抽選中またはプールが空なら拒否して False。"""
    if not can_request_draw(store):
        return False
    return get_draw_timer(store).start(clock())


def complete_pending_draw(store: SessionStore, clock: Clock = system_clock) -> str | None:
    """予約済みの抽選が完了時刻に達していれば実行し、結果を返す。

    - 未到来・未予約なら None。
    - 遅延中にプールが空になっていた場合（全削除等）は何もせず None。
    """
    if not get_draw_timer(store).poll(clock()):
        return None
    view = get_view(store)
    try:
        picked = get_chits(store).draw()
    except EmptyPoolError:
        logger.info("Pool emptied while draw was pending, nothing drawn")
        return None
    view.picked_item = picked
    view.show_result_popup = True
    return picked


def dismiss_result(store: SessionStore) -> None:
    get_view(store).show_result_popup = False


def on_read_aloud_toggle(store: SessionStore, enabled: bool) -> None:
    get_view(store).read_aloud = bool(enabled)

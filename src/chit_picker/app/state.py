"""アプリケーションの状態モデル定義。

目的:
- UI とドメインの境界で用いる明示的な状態構造を提供する。
- 永続状態（チット一覧）は ChitStore が持ち、本モジュールは画面単位の一時状態のみを扱う。

使い方:
- サービス層がセッションから ViewState を取り出し、ユーザー操作に応じて更新する。
- UI は ViewState を読んでポップアップやボタンの有効/無効を描画する。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.chit_picker.domain import DEFAULT_STORAGE_PATH, DEFAULT_TITLE, DRAW_DELAY_SECONDS


@dataclass
class Settings:
    """画面構成や動作に関する設定。

    現状の契約:
    - title は画面見出し。
    - draw_delay_seconds は抽選結果表示までの遅延秒（0 以上）。
    - storage_path は保存先 JSON ファイル。空文字ならメモリ上のみ。
    - read_aloud/speech_lang は抽選結果の読み上げ設定。
    - log_level は logging のレベル名。
    """

    title: str = DEFAULT_TITLE
    draw_delay_seconds: float = DRAW_DELAY_SECONDS
    storage_path: str = DEFAULT_STORAGE_PATH
    read_aloud: bool = False
    speech_lang: str = "en"
    log_level: str = "INFO"


@dataclass
class ViewState:
    """1 画面分の一時状態（永続化しない）。

    現状の契約:
    - show_add_popup/add_draft は追加ポップアップの開閉と入力中テキスト。
    - show_result_popup/picked_item は抽選結果オーバーレイ。
    - confirm_clear は全削除の確認ダイアログ。
    - delete_selection は削除対象として選択中の表示 index。
    - read_aloud は抽選結果の読み上げ可否。
    - notice はユーザーへ表示する直近の警告（表示後に消費）。
    """

    show_add_popup: bool = False
    add_draft: str = ""
    show_result_popup: bool = False
    picked_item: str | None = None
    confirm_clear: bool = False
    delete_selection: set[int] = field(default_factory=set)
    read_aloud: bool = False
    notice: str | None = None

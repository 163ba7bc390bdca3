"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# 永続ストア上のチット一覧のキー（アプリの存続期間中は固定）
CHITS_KEY: str = "chitsKey"

# 抽選結果を表示するまでの演出用の遅延秒
DRAW_DELAY_SECONDS: float = 2.0

# 既定の保存先（JSON ファイル）
DEFAULT_STORAGE_PATH: str = ".chit_picker/chits.json"

# 既定のアプリタイトル
DEFAULT_TITLE: str = "Chitty Picky Bang-Bang!"

"""ドメイン層（純粋ロジック/データモデル）。

提供物:
"""

from src.chit_picker.domain.chit import Chit, index_by_id, parse_chits
from src.chit_picker.domain.constants import (
    CHITS_KEY,
    DEFAULT_STORAGE_PATH,
    DEFAULT_TITLE,
    DRAW_DELAY_SECONDS,
)
from src.chit_picker.domain.errors import (
    ChitIndexError,
    ChitPickerError,
    ChitStorageError,
    EmptyPoolError,
)
from src.chit_picker.domain.pool import (
    Pool,
    choose_from_pool,
    init_pool,
    remove_from_pool,
    remove_indices,
)

__all__ = [
    # chit
    "Chit",
    "parse_chits",
    "index_by_id",
    # pool
    "Pool",
    "init_pool",
    "choose_from_pool",
    "remove_from_pool",
    "remove_indices",
    # errors
    "ChitPickerError",
    "ChitIndexError",
    "EmptyPoolError",
    "ChitStorageError",
    # constants
    "CHITS_KEY",
    "DRAW_DELAY_SECONDS",
    "DEFAULT_STORAGE_PATH",
    "DEFAULT_TITLE",
]

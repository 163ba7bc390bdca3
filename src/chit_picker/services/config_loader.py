from __future__ import annotations

import logging
import os
import pathlib
import tomllib
from typing import Any

from src.chit_picker.app.state import Settings

logger = logging.getLogger(__name__)

# 起動時に読み込む TOML のパスを指定する環境変数
CONFIG_ENV_VAR = "CHIT_PICKER_CONFIG"


class _RuntimeStore:
    config: dict[str, Any] | None = None


_RUNTIME_STORE = _RuntimeStore()


def set_runtime_config(cfg: dict[str, Any] | None) -> None:
    """実行時（環境変数/アップロード）で与えられた設定を保持する。None で解除。"""
    _RUNTIME_STORE.config = cfg if isinstance(cfg, dict) else None


def set_runtime_toml_bytes(data: bytes) -> bool:
    """アップロードされた TOML バイト列から実行時設定を反映する。

    読めなかった場合は設定を解除して False を返す。
    """
    try:
        cfg = tomllib.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable config: %s", e)
        set_runtime_config(None)
        return False
    set_runtime_config(cfg)
    return True


def load_config_from_env() -> bool:
    """環境変数 CHIT_PICKER_CONFIG が指す TOML を読み込む。

    未設定または読めない場合は False（コード既定値で動作する）。
    """
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return False
    try:
        data = pathlib.Path(path).read_bytes()
    except OSError as e:
        logger.warning("Could not read config %s: %s", path, e)
        return False
    return set_runtime_toml_bytes(data)


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。ランタイム設定が無ければ空辞書。"""
    if isinstance(_RUNTIME_STORE.config, dict):
        return _RUNTIME_STORE.config
    return {}


def get_app_title(default: str = Settings.title) -> str:
    cfg = _get_config()
    title = cfg.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def load_default_settings_values() -> dict[str, str | float | bool]:
    result: dict[str, str | float | bool] = {}
    settings = _get_config().get("settings")
    if not isinstance(settings, dict):
        return result
    # 不正な型の場合は各呼び出し側でコード既定値へフォールバックする。
    delay = settings.get("draw_delay_seconds")
    if isinstance(delay, (int, float)) and not isinstance(delay, bool) and delay >= 0:
        result["draw_delay_seconds"] = float(delay)
    if isinstance(settings.get("storage_path"), str):
        result["storage_path"] = settings["storage_path"]
    if isinstance(settings.get("read_aloud"), bool):
        result["read_aloud"] = settings["read_aloud"]
    if isinstance(settings.get("speech_lang"), str) and settings["speech_lang"].strip():
        result["speech_lang"] = settings["speech_lang"].strip()
    if isinstance(settings.get("log_level"), str) and settings["log_level"].strip():
        result["log_level"] = settings["log_level"].strip().upper()
    return result


def load_default_settings() -> Settings:
    values = load_default_settings_values()
    return Settings(
        title=get_app_title(),
        draw_delay_seconds=float(values.get("draw_delay_seconds", Settings.draw_delay_seconds)),
        storage_path=str(values.get("storage_path", Settings.storage_path)),
        read_aloud=bool(values.get("read_aloud", Settings.read_aloud)),
        speech_lang=str(values.get("speech_lang", Settings.speech_lang)),
        log_level=str(values.get("log_level", Settings.log_level)),
    )

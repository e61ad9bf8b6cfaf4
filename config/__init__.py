"""
Config Package - Chứa các constants và cấu hình của ứng dụng

Bao gồm:
- app_settings: Typed settings dataclass
- paths: Đường dẫn app data, log, settings
"""

from config.app_settings import (
    AppSettings,
    DEFAULT_WORDS_PER_PAGE,
    DEFAULT_DEBOUNCE_MS,
)

__all__ = [
    "AppSettings",
    "DEFAULT_WORDS_PER_PAGE",
    "DEFAULT_DEBOUNCE_MS",
]

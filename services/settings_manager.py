"""
Settings Manager - Quan ly load/save settings cua ung dung.

File: ~/.wordstat-desktop/settings.json

API:
    settings = load_app_settings()  # -> AppSettings
    save_app_settings(settings)
    update_app_setting(ignore_comments=False)
    update_words_per_page("275")     # validate input tu UI/CLI
    add_recent_file(path)

Moi update khong hop le bi tu choi o day; gia tri hop le truoc do
van duoc giu nguyen, khong co exception nao lot vao computation path.
"""

import json
import threading
from pathlib import Path
from typing import Any, Optional

from config.app_settings import AppSettings, MAX_RECENT_FILES
from config.paths import SETTINGS_FILE
from core.logging_config import log_warning

# Thread-safe lock de tranh race condition khi save settings
_settings_lock = threading.Lock()


def _load_app_settings_unlocked() -> AppSettings:
    """
    Load settings tu file KHONG co lock.

    Chi duoc goi tu ben trong code da acquire _settings_lock,
    hoac tu load_app_settings() (read-only, khong can lock).
    """
    try:
        if SETTINGS_FILE.exists():
            saved = json.loads(SETTINGS_FILE.read_text(encoding="utf-8"))
            if isinstance(saved, dict):
                return AppSettings.from_dict(saved)
    except (OSError, json.JSONDecodeError) as e:
        log_warning(f"[Settings] Cannot read {SETTINGS_FILE}, using defaults: {e}")
    return AppSettings()


def _save_app_settings_unlocked(settings: AppSettings) -> bool:
    """
    Save AppSettings ra file KHONG co lock.

    Merge voi existing data de bao toan extra keys.

    Returns:
        True neu save thanh cong
    """
    try:
        existing_data: dict[str, Any] = {}
        try:
            if SETTINGS_FILE.exists():
                loaded = json.loads(SETTINGS_FILE.read_text(encoding="utf-8"))
                if isinstance(loaded, dict):
                    existing_data = loaded
        except (OSError, json.JSONDecodeError):
            pass

        updated = {**existing_data, **settings.to_dict()}
        SETTINGS_FILE.parent.mkdir(parents=True, exist_ok=True)
        SETTINGS_FILE.write_text(json.dumps(updated, indent=2), encoding="utf-8")
        return True
    except OSError as e:
        log_warning(f"[Settings] Cannot save {SETTINGS_FILE}: {e}")
        return False


def load_app_settings() -> AppSettings:
    """
    Load settings tu file va tra ve AppSettings typed instance.

    Neu file khong ton tai hoac loi, tra ve defaults.
    """
    return _load_app_settings_unlocked()


def save_app_settings(settings: AppSettings) -> bool:
    """Save AppSettings ra file (thread-safe)."""
    with _settings_lock:
        return _save_app_settings_unlocked(settings)


def update_app_setting(**kwargs: Any) -> bool:
    """
    Update mot hoac nhieu settings fields cung luc (thread-safe, atomic).

    Args:
        **kwargs: Field names va values can update (vd: words_per_page=250)

    Returns:
        True neu save thanh cong. False neu co value khong hop le
        (khong field nao duoc ghi) hoac save loi.

    Raises:
        TypeError: Neu key khong phai la AppSettings field
    """
    valid_fields = set(AppSettings.__dataclass_fields__)
    for key in kwargs:
        if key not in valid_fields:
            raise TypeError(
                f"'{key}' is not a valid AppSettings field. "
                f"Valid fields: {sorted(valid_fields)}"
            )

    for key, value in kwargs.items():
        if not AppSettings.is_valid_value(key, value):
            log_warning(f"[Settings] Rejected {key}={value!r}, keeping previous value")
            return False

    with _settings_lock:
        settings = _load_app_settings_unlocked()
        for key, value in kwargs.items():
            setattr(settings, key, value)
        return _save_app_settings_unlocked(settings)


def parse_words_per_page(raw: Any) -> Optional[int]:
    """
    Parse input words-per-page tu UI/CLI.

    Chap nhan int duong hoac string chi gom chu so (vd: " 275 ").

    Returns:
        Int > 0, hoac None neu input khong hop le
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    if isinstance(raw, str):
        text = raw.strip()
        if not text.isdecimal():
            return None
        value = int(text)
        return value if value > 0 else None
    return None


def update_words_per_page(raw: Any) -> bool:
    """
    Validate va luu words_per_page.

    Returns:
        True neu gia tri moi duoc luu; False neu bi tu choi (gia tri
        cu van con hieu luc)
    """
    value = parse_words_per_page(raw)
    if value is None:
        log_warning(f"[Settings] Invalid words per page {raw!r}, keeping previous value")
        return False
    return update_app_setting(words_per_page=value)


def add_recent_file(path: Path) -> bool:
    """Them file vao dau danh sach recent files (toi da MAX_RECENT_FILES)."""
    entry = str(path)
    with _settings_lock:
        settings = _load_app_settings_unlocked()
        recent = [p for p in settings.recent_files if p != entry]
        settings.recent_files = [entry, *recent][:MAX_RECENT_FILES]
        return _save_app_settings_unlocked(settings)

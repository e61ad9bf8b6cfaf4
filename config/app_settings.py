"""
AppSettings - Typed settings dataclass cho Wordstat Desktop.

Thay the Dict[str, Any] bang dataclass co type hints, validation va default values.
Tat ca settings duoc truy cap qua typed fields thay vi string keys.

Modules:
- AppSettings: Dataclass chua toan bo application settings
- from_dict(): Tao AppSettings tu dict (doc tu settings.json)
- to_dict(): Chuyen doi AppSettings thanh dict de luu xuong file
- to_stats_config(): Snapshot bat bien cho text statistics engine

Su dung:
    settings = load_app_settings()
    config = settings.to_stats_config()
"""

import typing
from dataclasses import dataclass, field
from typing import Any

from core.text_stats import StatsConfig


# === Default values cho settings ===
DEFAULT_WORDS_PER_PAGE = 300
DEFAULT_DEBOUNCE_MS = 500
_DEFAULT_COUNTABLE_EXTENSIONS = ".md\n.markdown\n.txt"

MAX_RECENT_FILES = 10


@dataclass
class AppSettings:
    """
    Typed settings cho Wordstat Desktop.

    Moi field tuong ung voi mot key trong settings.json.
    Default values duoc su dung khi settings.json chua co key tuong ung.
    """

    # --- Content Filter Settings ---
    # Bo hau to 's, 'd, 'll, 've, 're, 'm truoc khi dem
    ignore_contractions: bool = False
    # Bo cac vung %%...%%
    ignore_comments: bool = True
    # Bo frontmatter block o dau document
    ignore_frontmatter: bool = True

    # --- Page Estimation ---
    words_per_page: int = DEFAULT_WORDS_PER_PAGE

    # --- Recompute Settings ---
    # Quiet window (ms) cho debounce khi document dang duoc sua
    debounce_ms: int = DEFAULT_DEBOUNCE_MS

    # --- Document Settings ---
    # Extensions duoc coi la plain-text/markdown (separated by newline)
    countable_extensions: str = field(default=_DEFAULT_COUNTABLE_EXTENSIONS)
    # Cac file mo gan day (moi nhat dau tien)
    recent_files: list[str] = field(default_factory=list)

    @classmethod
    def is_valid_value(cls, key: str, value: Any) -> bool:
        """
        Kiem tra value co hop le cho field `key` khong.

        Type phai khop voi field declaration (bool khong duoc chap nhan
        thay cho int), words_per_page > 0, debounce_ms >= 0.

        Returns:
            False neu key khong phai field hoac value khong hop le
        """
        field_def = cls.__dataclass_fields__.get(key)
        if field_def is None:
            return False

        expected_type: Any = field_def.type

        # Type annotation co the la string (forward ref)
        if isinstance(expected_type, str):
            type_map = {"str": str, "bool": bool, "int": int, "list[str]": list}
            expected_type = type_map.get(expected_type, str)

        # Strict type check: reject bool when expecting int
        # (isinstance(True, int) == True in Python)
        if expected_type is int and isinstance(value, bool):
            return False

        origin = typing.get_origin(expected_type)
        check_type = origin if origin is not None else expected_type
        if not isinstance(value, check_type):
            return False

        if key == "words_per_page":
            return value > 0
        if key == "debounce_ms":
            return value >= 0
        if key == "recent_files":
            return all(isinstance(p, str) for p in value)
        return True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppSettings":
        """
        Tao AppSettings tu dict, chi lay cac keys trung voi field names.

        Value sai type hoac ngoai mien hop le bi bo qua va dung default
        thay the, khong raise loi.

        Args:
            data: Dict settings (thuong tu settings.json)

        Returns:
            AppSettings instance voi values tu dict, fallback ve defaults
        """
        filtered = {
            key: value
            for key, value in data.items()
            if cls.is_valid_value(key, value)
        }
        return cls(**filtered)

    def to_dict(self) -> dict[str, Any]:
        """
        Chuyen doi AppSettings thanh dict de luu xuong file.

        Returns:
            Dict voi toan bo settings
        """
        return {
            "ignore_contractions": self.ignore_contractions,
            "ignore_comments": self.ignore_comments,
            "ignore_frontmatter": self.ignore_frontmatter,
            "words_per_page": self.words_per_page,
            "debounce_ms": self.debounce_ms,
            "countable_extensions": self.countable_extensions,
            "recent_files": list(self.recent_files),
        }

    def to_stats_config(self) -> StatsConfig:
        """Tao StatsConfig bat bien tu settings hien tai."""
        return StatsConfig(
            ignore_contractions=self.ignore_contractions,
            ignore_comments=self.ignore_comments,
            ignore_frontmatter=self.ignore_frontmatter,
            words_per_page=self.words_per_page,
        )

    def get_countable_extensions(self) -> frozenset[str]:
        """
        Parse countable_extensions string thanh set cac suffix (lowercase).

        Loai bo dong trong va comments (bat dau bang #). Tu dong them "."
        neu user nhap "md" thay vi ".md".
        """
        result = set()
        for line in self.countable_extensions.splitlines():
            ext = line.strip().lower()
            if not ext or ext.startswith("#"):
                continue
            result.add(ext if ext.startswith(".") else f".{ext}")
        return frozenset(result)

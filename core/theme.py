"""
Dark Mode Theme - Core Design System

Centralized theme configuration cho Wordstat Desktop.
Style: Dark Mode + Minimalism
"""


class ThemeColors:
    """Dark Mode Theme Colors"""

    # Primary - Blue 500
    PRIMARY = "#3B82F6"

    # Backgrounds
    BG_PAGE = "#0F172A"  # Slate 900 - Main background
    BG_SURFACE = "#1E293B"  # Slate 800 - Cards, panels

    # Text - High Contrast on Dark
    TEXT_PRIMARY = "#F1F5F9"  # Slate 100 - Main text
    TEXT_SECONDARY = "#94A3B8"  # Slate 400 - Muted text
    TEXT_MUTED = "#64748B"  # Slate 500 - Very muted

    # Borders
    BORDER = "#334155"  # Slate 700

    # Status
    ERROR = "#EF4444"  # Red 500


class ThemeFonts:
    """Font constants"""

    FAMILY_MONO = "'JetBrains Mono', 'Consolas', monospace"
    SIZE_CAPTION = 11
    SIZE_BODY = 13
    SIZE_METRIC = 20


def app_stylesheet() -> str:
    """Global stylesheet cho QApplication."""
    return (
        f"QMainWindow, QWidget {{ background-color: {ThemeColors.BG_PAGE}; "
        f"color: {ThemeColors.TEXT_PRIMARY}; font-size: {ThemeFonts.SIZE_BODY}px; }}"
        f"QStatusBar {{ background-color: {ThemeColors.BG_SURFACE}; "
        f"border-top: 1px solid {ThemeColors.BORDER}; }}"
    )

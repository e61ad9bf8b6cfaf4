# Wordstat Desktop - Reusable UI components

from components.stats_panel_qt import StatsPanelQt
from components.stats_settings_qt import StatsSettingsPanelQt

__all__ = [
    "StatsPanelQt",
    "StatsSettingsPanelQt",
]

"""Cau hinh pytest-qt cho UI tests.

Chay Qt o che do offscreen va tro settings.json sang thu muc tam
de UI tests khong dung toi settings that cua user.
"""

import os
from unittest.mock import patch

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _no_qt_exception_capture(request):
    """Tat Qt exception capture cho tat ca UI tests.

    PySide6 co the fire signals trong event loop thong qua
    deferred connections hoac timer callbacks tu widgets da bi
    destroy boi test truoc.
    """
    if hasattr(request, "node"):
        request.node.add_marker(pytest.mark.qt_no_exception_capture)


@pytest.fixture(autouse=True)
def settings_file(tmp_path):
    """Patch SETTINGS_FILE sang file tam cho moi UI test."""
    path = tmp_path / "settings.json"
    with patch("services.settings_manager.SETTINGS_FILE", path):
        yield path

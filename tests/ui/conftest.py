"""Fixtures for the widget and engine-session tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from PyQt6.QtWidgets import QApplication

from draughtie.ui.i18n import set_language


@pytest.fixture(autouse=True)
def _english_strings() -> Iterator[None]:
    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _close_windows(qapp: QApplication) -> Iterator[None]:
    yield
    for widget in list(qapp.topLevelWidgets()):
        widget.close()
    qapp.processEvents()

from __future__ import annotations

import pytest

from bs_widgets.view import View


@pytest.fixture
def view() -> View:
    return View()

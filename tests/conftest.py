from unittest.mock import MagicMock

import pytest

from workday_apply.config import Settings


@pytest.fixture
def driver():
    return MagicMock(name="driver")


@pytest.fixture
def element():
    elem = MagicMock(name="element")
    elem.is_displayed.return_value = True
    return elem


@pytest.fixture
def settings():
    return Settings(email="tester@example.com", password="Secret123!")

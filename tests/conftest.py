from __future__ import annotations

import pytest

from requests_mock import Mocker

from driver import AppDriver, TemperatureSequence


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def driver():
    with AppDriver() as app_driver:
        app_driver.start()
        yield app_driver


@pytest.fixture
def temperatures() -> TemperatureSequence:
    return TemperatureSequence()

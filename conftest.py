import logging
from collections.abc import Generator

import pytest

from lazysupply import settings

logging.basicConfig(level=logging.INFO)


@pytest.fixture(autouse=True)
def clean_config() -> Generator[None, None, None]:
    settings.CONFIG.clear()
    yield
    settings.CONFIG.clear()

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line('markers', 'slow: hammers a cell from many threads')

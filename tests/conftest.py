from __future__ import annotations

import logging


def pytest_configure() -> None:
    logging.getLogger("resolved").setLevel(logging.ERROR)  # set log levels very high for tests

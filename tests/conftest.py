# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging

import pytest

from npm_semver import get_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield

    logger = get_logger()
    logger.setLevel(logging.NOTSET)
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture(autouse=True)
def clean_settings_environment(monkeypatch):
    for name in ('NPM_SEMVER_DEBUG_MODE', 'NPM_SEMVER_NO_COLORS'):
        monkeypatch.delenv(name, raising=False)

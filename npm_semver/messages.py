# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0


from npm_semver import get_logger


def debug(message: str, *args, **kwargs) -> None:
    """Log in level 10 (DEBUG)"""
    logger = get_logger()
    logger.debug(message, *args, **kwargs)

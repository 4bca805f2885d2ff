# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0


class SemverError(ValueError):
    """Base class for all parsing and evaluation errors"""


class InvalidVersion(SemverError):
    pass


class InvalidComparator(SemverError):
    pass


class InvalidRange(SemverError):
    pass


class InvalidOperator(SemverError):
    def __init__(self, operator: str) -> None:
        super().__init__('Invalid operator: "{}"'.format(operator))
        self.operator = operator


class InvalidReleaseType(SemverError):
    def __init__(self, release: str) -> None:
        super().__init__('invalid increment argument: {}'.format(release))
        self.release = release

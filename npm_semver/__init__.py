# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import logging as lib_logging

LOGGING_NAMESPACE = __package__


def get_logger() -> lib_logging.Logger:
    """
    Get logger of the semver tools.

    Use this instead of `logging.getLogger(__package__)`, submodules log into the same namespace
    """
    return lib_logging.getLogger(LOGGING_NAMESPACE)


from npm_semver.__version__ import __version__  # noqa: E402
from npm_semver.comparator import Comparator  # noqa: E402
from npm_semver.constants import SEMVER_SPEC_VERSION  # noqa: E402
from npm_semver.environment import SemverSettings  # noqa: E402
from npm_semver.errors import (  # noqa: E402
    InvalidComparator,
    InvalidOperator,
    InvalidRange,
    InvalidReleaseType,
    InvalidVersion,
    SemverError,
)
from npm_semver.functions import (  # noqa: E402
    cmp,
    compare,
    compare_build,
    compare_identifiers,
    diff,
    eq,
    gt,
    gte,
    gtr,
    inc,
    intersects,
    lt,
    lte,
    ltr,
    major,
    max_satisfying,
    min_satisfying,
    min_version,
    minor,
    neq,
    outside,
    parse,
    patch,
    prerelease,
    rcompare,
    rcompare_identifiers,
    rsort,
    satisfies,
    sort,
    to_comparators,
    valid,
    valid_range,
)
from npm_semver.logging import setup_logging  # noqa: E402
from npm_semver.range import Range  # noqa: E402
from npm_semver.version import Version  # noqa: E402

__all__ = [
    'Comparator',
    'InvalidComparator',
    'InvalidOperator',
    'InvalidRange',
    'InvalidReleaseType',
    'InvalidVersion',
    'Range',
    'SEMVER_SPEC_VERSION',
    'SemverError',
    'SemverSettings',
    'Version',
    '__version__',
    'cmp',
    'compare',
    'compare_build',
    'compare_identifiers',
    'diff',
    'eq',
    'get_logger',
    'gt',
    'gte',
    'gtr',
    'inc',
    'intersects',
    'lt',
    'lte',
    'ltr',
    'major',
    'max_satisfying',
    'min_satisfying',
    'min_version',
    'minor',
    'neq',
    'outside',
    'parse',
    'patch',
    'prerelease',
    'rcompare',
    'rcompare_identifiers',
    'rsort',
    'satisfies',
    'setup_logging',
    'sort',
    'to_comparators',
    'valid',
    'valid_range',
]

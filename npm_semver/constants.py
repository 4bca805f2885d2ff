# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0

# semver.org version implemented, not the package version
SEMVER_SPEC_VERSION = '2.0.0'

# longer inputs are rejected before any regex runs
MAX_LENGTH = 256

# largest integer a double represents exactly, bigger parts are rejected
MAX_SAFE_INTEGER = 2**53 - 1

OP_EQ = ''
OP_LT = '<'
OP_LTE = '<='
OP_GT = '>'
OP_GTE = '>='

RELEASE_TYPES = (
    'major',
    'premajor',
    'minor',
    'preminor',
    'patch',
    'prepatch',
    'prerelease',
    'pre',
)

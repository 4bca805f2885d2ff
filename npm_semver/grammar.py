# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""
Regular expression grammar of versions, comparators and range tokens.

Patterns are composed from small fragments. Every fragment that captures
something takes a prefix for its group names, so the same fragment can be
used twice in one pattern (both sides of a hyphen range).

All compiled patterns are matched against the whole string.
"""

import re
import typing as t

from .constants import MAX_LENGTH

# A single `0`, or a non-zero digit followed by zero or more digits.
NUMERIC_IDENTIFIER = r'0|[1-9]\d*'

# Zero or more digits, followed by a letter or hyphen, and then zero or
# more letters, digits, or hyphens.
NON_NUMERIC_IDENTIFIER = r'\d*[a-zA-Z-][a-zA-Z0-9-]*'

PRERELEASE_IDENTIFIER = r'(?:{}|{})'.format(NUMERIC_IDENTIFIER, NON_NUMERIC_IDENTIFIER)

# Any combination of digits, letters, or hyphens.
BUILD_IDENTIFIER = r'[0-9A-Za-z-]+'

# `1.2` or `1.x` or `*`
XRANGE_IDENTIFIER = r'{}|x|X|\*'.format(NUMERIC_IDENTIFIER)

# A simple gt/lt/eq operator, possibly empty
GTLT = r'(?P<operator>(?:<|>)?=?)'

LONE_TILDE = r'(?:~>?)'
LONE_CARET = r'(?:\^)'

# `>=*`, `<*`, `*`
STAR = r'(<|>)?=?\s*\*'


def main_version(prefix: str = '') -> str:
    """Three dot-separated numeric identifiers"""
    return r'(?P<{p}major>{n})\.(?P<{p}minor>{n})\.(?P<{p}patch>{n})'.format(
        p=prefix, n=NUMERIC_IDENTIFIER
    )


def prerelease(prefix: str = '') -> str:
    """Hyphen, followed by one or more dot-separated pre-release identifiers"""
    return r'(?:-(?P<{p}prerelease>{i}(?:\.{i})*))'.format(p=prefix, i=PRERELEASE_IDENTIFIER)


def build(prefix: str = '') -> str:
    """Plus sign, followed by one or more period-separated build identifiers"""
    return r'(?:\+(?P<{p}build>{i}(?:\.{i})*))'.format(p=prefix, i=BUILD_IDENTIFIER)


def full_plain(prefix: str = '') -> str:
    """A main version, followed optionally by a pre-release version and build metadata"""
    return r'v?' + main_version(prefix) + prerelease(prefix) + '?' + build(prefix) + '?'


def xrange_plain(prefix: str = '') -> str:
    """
    Something like `2.*` or `1.2.x`.

    Only the major part is required, `x.x` is a valid x-range meaning "any version".
    """
    return (
        r'[v=\s]*(?P<{p}major>{x})'
        r'(?:\.(?P<{p}minor>{x})'
        r'(?:\.(?P<{p}patch>{x})'
        r'(?:{pre})?{build}?'
        r')?)?'
    ).format(p=prefix, x=XRANGE_IDENTIFIER, pre=prerelease(prefix), build=build(prefix))


FULL = full_plain()
COMPARATOR = r'{gtlt}\s*(?P<version>{full})|'.format(gtlt=GTLT, full=full_plain())
XRANGE = r'{gtlt}\s*{xrange}'.format(gtlt=GTLT, xrange=xrange_plain())
TILDE = LONE_TILDE + xrange_plain()
CARET = LONE_CARET + xrange_plain()
HYPHEN_RANGE = r'\s*(?P<from_text>{f})\s+-\s+(?P<to_text>{t})\s*'.format(
    f=xrange_plain('from_'), t=xrange_plain('to_')
)

COMPILED_FULL_RE = re.compile(FULL, re.ASCII)
COMPILED_COMPARATOR_RE = re.compile(COMPARATOR, re.ASCII)
COMPILED_XRANGE_RE = re.compile(XRANGE, re.ASCII)
COMPILED_TILDE_RE = re.compile(TILDE, re.ASCII)
COMPILED_CARET_RE = re.compile(CARET, re.ASCII)
COMPILED_HYPHEN_RANGE_RE = re.compile(HYPHEN_RANGE, re.ASCII)
COMPILED_STAR_RE = re.compile(STAR, re.ASCII)
COMPILED_OR_RE = re.compile(r'\s*\|\|\s*')
COMPILED_NUMERIC_RE = re.compile(r'[0-9]+', re.ASCII)


def is_x(identifier: t.Optional[str]) -> bool:
    """Missing, `x`, `X` and `*` all mean "any value" in a partial version"""
    return not identifier or identifier.lower() == 'x' or identifier == '*'


def is_numeric(identifier: t.Union[str, int]) -> bool:
    return bool(COMPILED_NUMERIC_RE.fullmatch(str(identifier)))


def match_version(text: str) -> t.Optional[re.Match]:
    if len(text) > MAX_LENGTH:
        return None

    return COMPILED_FULL_RE.fullmatch(text)


def match_comparator(text: str) -> t.Optional[re.Match]:
    return COMPILED_COMPARATOR_RE.fullmatch(text)


def match_xrange(text: str) -> t.Optional[re.Match]:
    return COMPILED_XRANGE_RE.fullmatch(text)


def match_tilde(text: str) -> t.Optional[re.Match]:
    return COMPILED_TILDE_RE.fullmatch(text)


def match_caret(text: str) -> t.Optional[re.Match]:
    return COMPILED_CARET_RE.fullmatch(text)


def match_hyphen_range(text: str) -> t.Optional[re.Match]:
    return COMPILED_HYPHEN_RANGE_RE.fullmatch(text)

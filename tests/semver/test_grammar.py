# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import pytest

from npm_semver.grammar import (
    is_numeric,
    is_x,
    match_caret,
    match_comparator,
    match_hyphen_range,
    match_tilde,
    match_version,
    match_xrange,
)


@pytest.mark.parametrize(
    ('text', 'groups'),
    [
        ('1.2.3', ('1', '2', '3', None, None)),
        ('v1.2.3', ('1', '2', '3', None, None)),
        ('1.2.3-beta.4', ('1', '2', '3', 'beta.4', None)),
        ('1.2.3+build.7', ('1', '2', '3', None, 'build.7')),
        ('1.2.3-beta.4+build.7', ('1', '2', '3', 'beta.4', 'build.7')),
        ('0.0.0-0', ('0', '0', '0', '0', None)),
        ('1.2.3-4-foo', ('1', '2', '3', '4-foo', None)),
        ('10.20.30-rc.1+001', ('10', '20', '30', 'rc.1', '001')),
    ],
)
def test_match_version(text, groups):
    match = match_version(text)
    assert match is not None
    assert match.group('major', 'minor', 'patch', 'prerelease', 'build') == groups


@pytest.mark.parametrize(
    'text',
    [
        '',
        '1',
        '1.2',
        '1.2.3.4',
        '01.2.3',
        '1.02.3',
        '1.2.03',
        '1.2.3-01',
        '1.2.3-',
        '1.2.3+',
        '1.2.3-beta..1',
        '1.2.3\n',
        ' 1.2.3',
        '=1.2.3',
        'vv1.2.3',
        '1.2.3-bé',
        '1.2.3-' + 'a' * 256,
    ],
)
def test_match_version_invalid(text):
    assert match_version(text) is None


def test_match_comparator():
    match = match_comparator('>=1.2.3-beta')
    assert match.group('operator') == '>='
    assert match.group('version') == '1.2.3-beta'

    assert match_comparator('< 1.2.3').group('operator', 'version') == ('<', '1.2.3')
    assert match_comparator('1.2.3').group('operator') == ''
    assert match_comparator('').group('version') is None

    assert match_comparator('>=1.2') is None
    assert match_comparator('~1.2.3') is None
    assert match_comparator('!=1.2.3') is None


@pytest.mark.parametrize(
    ('text', 'groups'),
    [
        ('1', ('', '1', None, None)),
        ('1.x', ('', '1', 'x', None)),
        ('>1.2', ('>', '1', '2', None)),
        ('<=1.2.X', ('<=', '1', '2', 'X')),
        ('=*', ('=', '*', None, None)),
        ('>= 1.2.3', ('>=', '1', '2', '3')),
    ],
)
def test_match_xrange(text, groups):
    assert match_xrange(text).group('operator', 'major', 'minor', 'patch') == groups


def test_match_tilde_and_caret():
    assert match_tilde('~1.2').group('major', 'minor', 'patch') == ('1', '2', None)
    assert match_tilde('~>1.2.3-beta').group('prerelease') == 'beta'
    assert match_tilde('~') is None
    assert match_tilde('^1.2.3') is None

    assert match_caret('^0.x').group('major', 'minor') == ('0', 'x')
    assert match_caret('^1.2.3-rc.1+build').group('prerelease', 'build') == ('rc.1', 'build')
    assert match_caret('^') is None
    assert match_caret('~1.2.3') is None


def test_match_hyphen_range():
    match = match_hyphen_range('1.2 - 2.3.4-beta')
    assert match.group('from_text', 'from_major', 'from_minor', 'from_patch') == (
        '1.2',
        '1',
        '2',
        None,
    )
    assert match.group('to_text', 'to_patch', 'to_prerelease') == ('2.3.4-beta', '4', 'beta')

    assert match_hyphen_range('1.2.3-2.3.4') is None
    assert match_hyphen_range('1.2.3 - ') is None


@pytest.mark.parametrize(
    ('identifier', 'expected'),
    [
        (None, True),
        ('', True),
        ('x', True),
        ('X', True),
        ('*', True),
        ('0', False),
        ('12', False),
    ],
)
def test_is_x(identifier, expected):
    assert is_x(identifier) is expected


def test_is_numeric():
    assert is_numeric('10')
    assert is_numeric(10)
    assert not is_numeric('1a')
    assert not is_numeric('')

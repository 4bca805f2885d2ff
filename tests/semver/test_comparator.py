# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import pytest

from npm_semver.comparator import Comparator
from npm_semver.errors import InvalidComparator
from npm_semver.version import Version


@pytest.mark.parametrize(
    ('text', 'operator', 'value'),
    [
        ('>=1.2.3', '>=', '>=1.2.3'),
        ('>1.2.3-beta', '>', '>1.2.3-beta'),
        ('<=1.2.3+build', '<=', '<=1.2.3'),
        ('< 1.2.3', '<', '<1.2.3'),
        ('=1.2.3', '', '1.2.3'),
        ('1.2.3', '', '1.2.3'),
        ('v1.2.3', '', '1.2.3'),
    ],
)
def test_parse_comparator(text, operator, value):
    comp = Comparator(text)

    assert comp.operator == operator
    assert comp.value == value
    assert str(comp) == value
    assert not comp.is_any


def test_any_comparator():
    comp = Comparator('')

    assert comp.is_any
    assert comp.semver is None
    assert comp.value == ''
    assert repr(comp) == "Comparator('')"
    assert comp.test('1.2.3')
    assert comp.test('0.0.0-0')


@pytest.mark.parametrize(
    'text',
    ['>=1.2', '~1.2.3', '^1.2.3', 'foo', '>=1.2.3 <2.0.0', '>=01.2.3', '!1.2.3', '*'],
)
def test_invalid_comparator(text):
    with pytest.raises(InvalidComparator, match='Invalid comparator'):
        Comparator(text)


def test_invalid_comparator_type():
    with pytest.raises(TypeError):
        Comparator(None)  # type: ignore


def test_overflow_is_invalid_comparator():
    with pytest.raises(InvalidComparator) as e:
        Comparator('>=9007199254740992.0.0')

    assert 'Invalid major version' in str(e.value)


@pytest.mark.parametrize(
    ('comp', 'version', 'expected'),
    [
        ('>1.2.3', '1.2.4', True),
        ('>1.2.3', '1.2.3', False),
        ('>=1.2.3', '1.2.3', True),
        ('<=1.2.3', '1.2.3', True),
        ('<1.2.3', '1.2.3', False),
        ('<1.2.3', '1.2.3-beta', True),
        ('1.2.3', '1.2.3+build', True),
        ('1.2.3', 'v1.2.3', True),
        ('1.2.3', '1.2.4', False),
        ('>=1.2.3-beta.2', '1.2.3-beta.10', True),
    ],
)
def test_comparator_test(comp, version, expected):
    assert Comparator(comp).test(version) is expected
    assert Comparator(comp).test(Version(version)) is expected


INTERSECTIONS = [
    ('>1.0.0', '>2.0.0', True),
    ('<1.0.0', '<=0.5.0', True),
    ('>=1.0.0', '<=1.0.0', True),
    ('>1.0.0', '<1.0.0', False),
    ('>=1.0.0', '<1.0.0', False),
    ('>1.0.0', '<=1.0.0', False),
    ('>1.0.0', '<2.0.0', True),
    ('<1.0.0', '>2.0.0', False),
    ('1.0.0', '>=1.0.0', True),
    ('1.0.0', '<1.0.0', False),
    ('1.0.0', '1.0.0', True),
    ('1.0.0', '2.0.0', False),
    ('', '>1.0.0', True),
    ('', '', True),
    ('1.2.3-beta', '', True),
    ('<1.0.0-alpha', '', True),
    ('1.2.3-beta', '>=1.0.0', False),
    ('1.2.3-beta', '>=1.2.3-alpha', True),
]


@pytest.mark.parametrize(('left', 'right', 'expected'), INTERSECTIONS)
def test_intersects(left, right, expected):
    assert Comparator(left).intersects(Comparator(right)) is expected


@pytest.mark.parametrize(('left', 'right', 'expected'), INTERSECTIONS)
def test_intersects_is_symmetric(left, right, expected):
    assert Comparator(right).intersects(Comparator(left)) is expected


def test_intersects_with_prerelease():
    assert Comparator('1.2.3-beta').intersects(Comparator('>=1.0.0'), include_prerelease=True)


def test_intersects_requires_comparator():
    with pytest.raises(TypeError):
        Comparator('>1.0.0').intersects('>2.0.0')  # type: ignore

# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""
Ranges are a disjunction of comparator sets: ``>=1.2.7 <1.3.0 || >=1.4.0``.

Before a clause is split into comparators, the shorthand forms are rewritten
into plain comparators:

- hyphen ranges, ``1.2 - 2.3.4`` -> ``>=1.2.0 <=2.3.4``
- carets, ``^0.2.3`` -> ``>=0.2.3 <0.3.0``
- tildes, ``~1.2`` -> ``>=1.2.0 <1.3.0``
- x-ranges, ``1.x`` -> ``>=1.0.0 <2.0.0``, ``>1.2`` -> ``>=1.3.0``
- stars, ``*`` -> any version
"""

import re
import typing as t

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .comparator import Comparator
from .constants import OP_GT, OP_GTE, OP_LT, OP_LTE
from .errors import InvalidComparator, InvalidRange
from .grammar import (
    COMPILED_OR_RE,
    COMPILED_STAR_RE,
    is_x,
    match_caret,
    match_hyphen_range,
    match_tilde,
    match_xrange,
)
from .version import Version, as_version

Clause = t.Tuple[Comparator, ...]


def _bound(major: t.Any, minor: t.Any, patch: t.Any, prerelease: t.Optional[str] = None) -> str:
    res = '{}.{}.{}'.format(major, minor, patch)
    if prerelease:
        res += '-' + prerelease

    return res


def replace_caret(comp: str) -> str:
    """
    ^*, ^x -> any
    ^2, ^2.x, ^2.x.x -> >=2.0.0 <3.0.0
    ^2.0, ^2.0.x -> >=2.0.0 <3.0.0
    ^1.2, ^1.2.x -> >=1.2.0 <2.0.0
    ^1.2.3 -> >=1.2.3 <2.0.0
    ^0.2.3 -> >=0.2.3 <0.3.0
    ^0.0.3 -> >=0.0.3 <0.0.4
    """
    match = match_caret(comp)
    if not match:
        return comp

    major, minor, patch, prerelease = match.group('major', 'minor', 'patch', 'prerelease')

    if is_x(major):
        return ''

    if is_x(minor):
        return '>={} <{}'.format(_bound(major, 0, 0), _bound(int(major) + 1, 0, 0))

    if is_x(patch):
        if major == '0':
            return '>={} <{}'.format(_bound(major, minor, 0), _bound(major, int(minor) + 1, 0))
        return '>={} <{}'.format(_bound(major, minor, 0), _bound(int(major) + 1, 0, 0))

    lower = _bound(major, minor, patch, prerelease)
    if major == '0':
        if minor == '0':
            return '>={} <{}'.format(lower, _bound(major, minor, int(patch) + 1))
        return '>={} <{}'.format(lower, _bound(major, int(minor) + 1, 0))

    return '>={} <{}'.format(lower, _bound(int(major) + 1, 0, 0))


def replace_carets(comp: str) -> str:
    return ' '.join(replace_caret(c) for c in comp.split())


def replace_tilde(comp: str) -> str:
    """
    ~*, ~>* -> any
    ~2, ~2.x, ~2.x.x, ~>2, ~>2.x ~>2.x.x -> >=2.0.0 <3.0.0
    ~2.0, ~2.0.x, ~>2.0, ~>2.0.x -> >=2.0.0 <2.1.0
    ~1.2.3, ~>1.2.3 -> >=1.2.3 <1.3.0
    """
    match = match_tilde(comp)
    if not match:
        return comp

    major, minor, patch, prerelease = match.group('major', 'minor', 'patch', 'prerelease')

    if is_x(major):
        return ''

    if is_x(minor):
        return '>={} <{}'.format(_bound(major, 0, 0), _bound(int(major) + 1, 0, 0))

    upper = _bound(major, int(minor) + 1, 0)
    if is_x(patch):
        return '>={} <{}'.format(_bound(major, minor, 0), upper)

    return '>={} <{}'.format(_bound(major, minor, patch, prerelease), upper)


def replace_tildes(comp: str) -> str:
    return ' '.join(replace_tilde(c) for c in comp.split())


def replace_xrange(comp: str) -> str:
    comp = comp.strip()
    match = match_xrange(comp)
    if not match:
        return comp

    operator, major, minor, patch = match.group('operator', 'major', 'minor', 'patch')

    x_major = is_x(major)
    x_minor = x_major or is_x(minor)
    x_patch = x_minor or is_x(patch)
    any_x = x_patch

    if operator == '=' and any_x:
        operator = ''

    if x_major:
        if operator in (OP_GT, OP_LT):
            # nothing is allowed
            return '<0.0.0'
        # nothing is forbidden
        return '*'

    if operator and any_x:
        # patch is an x, since there is any x at all
        minor = 0 if x_minor else int(minor)
        patch = 0
        major = int(major)

        if operator == OP_GT:
            # >1 -> >=2.0.0, >1.2 -> >=1.3.0
            operator = OP_GTE
            if x_minor:
                major += 1
                minor = 0
            else:
                minor += 1
        elif operator == OP_LTE:
            # <=0.7.x is actually <0.8.0, since any 0.7.x should pass
            operator = OP_LT
            if x_minor:
                major += 1
            else:
                minor += 1

        return operator + _bound(major, minor, patch)

    if x_minor:
        return '>={} <{}'.format(_bound(major, 0, 0), _bound(int(major) + 1, 0, 0))

    if x_patch:
        return '>={} <{}'.format(_bound(major, minor, 0), _bound(major, int(minor) + 1, 0))

    return comp


def replace_xranges(comp: str) -> str:
    return ' '.join(replace_xrange(c) for c in re.split(r'\s+', comp))


def replace_stars(comp: str) -> str:
    """``*`` is AND-ed with everything else and means any version, so it is simply removed"""
    return COMPILED_STAR_RE.sub('', comp.strip(), count=1)


def replace_hyphen_range(clause: str) -> str:
    """
    1.2 - 3.4.5 -> >=1.2.0 <=3.4.5
    1.2.3 - 3.4 -> >=1.2.3 <3.5.0, any 3.4.x will do
    1.2 - 3.4 -> >=1.2.0 <3.5.0
    """
    match = match_hyphen_range(clause)
    if not match:
        return clause

    from_text, from_major, from_minor, from_patch = match.group(
        'from_text', 'from_major', 'from_minor', 'from_patch'
    )
    to_text, to_major, to_minor, to_patch, to_prerelease = match.group(
        'to_text', 'to_major', 'to_minor', 'to_patch', 'to_prerelease'
    )

    if is_x(from_major):
        lower = ''
    elif is_x(from_minor):
        lower = '>=' + _bound(from_major, 0, 0)
    elif is_x(from_patch):
        lower = '>=' + _bound(from_major, from_minor, 0)
    else:
        lower = '>=' + from_text

    if is_x(to_major):
        upper = ''
    elif is_x(to_minor):
        upper = '<' + _bound(int(to_major) + 1, 0, 0)
    elif is_x(to_patch):
        upper = '<' + _bound(to_major, int(to_minor) + 1, 0)
    elif to_prerelease:
        upper = '<=' + _bound(to_major, to_minor, to_patch, to_prerelease)
    else:
        upper = '<=' + to_text

    return '{} {}'.format(lower, upper).strip()


def parse_comparator(comp: str) -> str:
    """Rewrite one token made of carets, tildes, x-ranges and stars into plain comparators"""
    comp = replace_carets(comp)
    comp = replace_tildes(comp)
    comp = replace_xranges(comp)
    comp = replace_stars(comp)
    return comp


def matches_clause(
    comparators: Clause, version: Version, include_prerelease: bool = False
) -> bool:
    if not all(comparator.test(version) for comparator in comparators):
        return False

    if version.prerelease and not include_prerelease:
        # ^1.2.3-pr.1 desugars to >=1.2.3-pr.1 <2.0.0, that should allow 1.2.3-pr.2
        # to pass, but 1.2.4-alpha.notready should NOT be allowed, even though
        # it's within the range set by the comparators.
        release = (version.major, version.minor, version.patch)
        for comparator in comparators:
            allowed = comparator.semver
            if allowed is None or not allowed.prerelease:
                continue

            if (allowed.major, allowed.minor, allowed.patch) == release:
                return True

        # version has a -pre, but it's not one of the ones we like
        return False

    return True


def is_satisfiable(comparators: Clause, include_prerelease: bool = False) -> bool:
    """
    Check whether some version can satisfy all comparators of a clause.

    Comparators are popped one by one and each must intersect all the remaining
    ones. Only pairs are checked, so a clause that is pairwise but not jointly
    satisfiable is accepted.
    """
    remaining = list(comparators)
    if not remaining:
        return True

    current = remaining.pop()
    while remaining:
        if not all(current.intersects(other, include_prerelease) for other in remaining):
            return False
        current = remaining.pop()

    return True


class Range:
    """
    A set of comparator clauses, satisfied when any clause is satisfied.

    ``raw`` keeps the string as given, ``range`` is the canonical form with
    every shorthand rewritten.
    """

    def __init__(self, range_: str, include_prerelease: bool = False) -> None:
        if not isinstance(range_, str):
            raise TypeError('Invalid SemVer Range: {!r}'.format(range_))

        self.raw: str = range_
        self.include_prerelease = include_prerelease

        try:
            clauses = [self._parse_clause(part.strip()) for part in COMPILED_OR_RE.split(range_)]
        except InvalidComparator as e:
            raise InvalidRange('Invalid SemVer Range: {}. {}'.format(range_, e)) from e

        # throw out any that are not relevant for whatever reason
        self.set: t.Tuple[Clause, ...] = tuple(clause for clause in clauses if clause)
        if not self.set:
            raise InvalidRange('Invalid SemVer Range: {}'.format(range_))

        self.range: str = self._format()

    def _parse_clause(self, clause: str) -> Clause:
        clause = replace_hyphen_range(clause.strip())

        # normalize spaces
        clause = ' '.join(clause.split())

        rewritten = ' '.join(parse_comparator(comp) for comp in clause.split(' '))

        return tuple(
            Comparator(comp, self.include_prerelease) for comp in re.split(r'\s+', rewritten)
        )

    def _format(self) -> str:
        return '||'.join(
            ' '.join(str(comp) for comp in clause).strip() for clause in self.set
        ).strip()

    def __str__(self) -> str:
        return self.range

    def __repr__(self) -> str:
        return "Range('{}')".format(self.range)

    def test(self, version: t.Union[str, Version]) -> bool:
        version = as_version(version)
        return any(matches_clause(clause, version, self.include_prerelease) for clause in self.set)

    def intersects(self, other: 'Range') -> bool:
        if not isinstance(other, Range):
            raise TypeError('a Range is required')

        for mine in self.set:
            if not is_satisfiable(mine, self.include_prerelease):
                continue

            for theirs in other.set:
                if not is_satisfiable(theirs, self.include_prerelease):
                    continue

                if all(
                    my_comp.intersects(their_comp, self.include_prerelease)
                    for my_comp in mine
                    for their_comp in theirs
                ):
                    return True

        return False

    @staticmethod
    def _validate(value: t.Any) -> 'Range':
        if not isinstance(value, (str, Range, Comparator)):
            raise InvalidRange('Invalid SemVer Range: {!r}'.format(value))

        return as_range(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: t.Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(),
        )


def as_range(
    value: t.Union[str, Range, Comparator], include_prerelease: bool = False
) -> Range:
    """
    Coerce a string or a Comparator into a Range.

    A Range parsed with the same prerelease option passes through untouched,
    otherwise it is parsed again from its raw string.
    """
    if isinstance(value, Range):
        if value.include_prerelease == include_prerelease:
            return value
        return Range(value.raw, include_prerelease)

    if isinstance(value, Comparator):
        return Range(value.value, include_prerelease)

    return Range(value, include_prerelease)



# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""
Module level helpers working on strings or parsed values.

Helpers meant for "is this valid?" checks (``parse``, ``valid``, ``satisfies``,
``valid_range``, ``max_satisfying``, ``min_satisfying``) never raise on
malformed input and return ``None`` or ``False`` instead. Everything else
raises the typed errors from :mod:`npm_semver.errors`.
"""

import typing as t
from functools import cmp_to_key

from .comparator import Comparator
from .constants import MAX_LENGTH, OP_EQ, OP_GT, OP_GTE, OP_LT, OP_LTE
from .errors import InvalidOperator, InvalidReleaseType, SemverError
from .messages import debug
from .range import Range, as_range
from .version import (  # noqa: F401
    Identifier,
    Version,
    as_version,
    compare_identifiers,
    rcompare_identifiers,
)

VersionLike = t.Union[str, Version]
RangeLike = t.Union[str, Range, Comparator]
V = t.TypeVar('V', str, Version)


def parse(version: t.Any) -> t.Optional[Version]:
    if isinstance(version, Version):
        return version

    if not isinstance(version, str) or len(version) > MAX_LENGTH:
        return None

    try:
        return Version(version)
    except SemverError as e:
        debug('Cannot parse version "%s": %s', version, e)
        return None


def valid(version: t.Any) -> t.Optional[str]:
    parsed = parse(version)
    return parsed.version if parsed else None


def major(version: VersionLike) -> int:
    return as_version(version).major


def minor(version: VersionLike) -> int:
    return as_version(version).minor


def patch(version: VersionLike) -> int:
    return as_version(version).patch


def prerelease(version: t.Any) -> t.Optional[t.Tuple[Identifier, ...]]:
    parsed = parse(version)
    return parsed.prerelease if parsed and parsed.prerelease else None


def inc(version: VersionLike, release: str, identifier: t.Optional[str] = None) -> t.Optional[str]:
    """
    Return the version incremented by the release type, or None if the version is not valid.

    An unknown release type raises InvalidReleaseType.
    """
    try:
        parsed = as_version(version)
    except SemverError as e:
        debug('Cannot increment version "%s": %s', version, e)
        return None

    try:
        return parsed.inc(release, identifier).version
    except InvalidReleaseType:
        raise
    except SemverError as e:
        debug('Cannot increment version "%s": %s', version, e)
        return None


def diff(version1: VersionLike, version2: VersionLike) -> t.Optional[str]:
    """
    Name the most significant part that differs between two versions.

    Returns ``major``, ``minor``, ``patch`` or ``prerelease``, prefixed with
    ``pre`` when either version is a prerelease, or None when they are equal.
    """
    v1 = as_version(version1)
    v2 = as_version(version2)

    if v1.compare(v2) == 0:
        return None

    prefix = ''
    default = None
    if v1.prerelease or v2.prerelease:
        prefix = 'pre'
        default = 'prerelease'

    for key in ('major', 'minor', 'patch'):
        if getattr(v1, key) != getattr(v2, key):
            return prefix + key

    return default


def compare(v1: VersionLike, v2: VersionLike) -> int:
    return as_version(v1).compare(as_version(v2))


def rcompare(v1: VersionLike, v2: VersionLike) -> int:
    return compare(v2, v1)


def compare_build(v1: VersionLike, v2: VersionLike) -> int:
    """Like compare, but versions equal in precedence are ordered by build metadata"""
    a = as_version(v1)
    b = as_version(v2)
    return a.compare(b) or a.compare_build(b)


_sort_key = cmp_to_key(compare_build)


def sort(versions: t.Iterable[V]) -> t.List[V]:
    return sorted(versions, key=_sort_key)


def rsort(versions: t.Iterable[V]) -> t.List[V]:
    return sorted(versions, key=_sort_key, reverse=True)


def gt(v1: VersionLike, v2: VersionLike) -> bool:
    return compare(v1, v2) > 0


def lt(v1: VersionLike, v2: VersionLike) -> bool:
    return compare(v1, v2) < 0


def eq(v1: VersionLike, v2: VersionLike) -> bool:
    return compare(v1, v2) == 0


def neq(v1: VersionLike, v2: VersionLike) -> bool:
    return compare(v1, v2) != 0


def gte(v1: VersionLike, v2: VersionLike) -> bool:
    return compare(v1, v2) >= 0


def lte(v1: VersionLike, v2: VersionLike) -> bool:
    return compare(v1, v2) <= 0


def cmp(v1: VersionLike, operator: str, v2: VersionLike) -> bool:
    """
    Compare two versions with an operator.

    ``===`` and ``!==`` compare strings as given, or the canonical form of
    parsed versions, so ``cmp("v1.2.3", "===", "1.2.3")`` is False.
    """
    if operator in ('===', '!=='):
        a = v1.version if isinstance(v1, Version) else v1
        b = v2.version if isinstance(v2, Version) else v2
        return (a == b) == (operator == '===')

    if operator in (OP_EQ, '=', '=='):
        return eq(v1, v2)

    if operator == '!=':
        return neq(v1, v2)

    if operator == OP_GT:
        return gt(v1, v2)

    if operator == OP_GTE:
        return gte(v1, v2)

    if operator == OP_LT:
        return lt(v1, v2)

    if operator == OP_LTE:
        return lte(v1, v2)

    raise InvalidOperator(operator)


def satisfies(version: t.Any, range_: t.Any, include_prerelease: bool = False) -> bool:
    if not isinstance(version, (str, Version)) or not isinstance(range_, (str, Range, Comparator)):
        debug('Cannot check %r against %r', version, range_)
        return False

    try:
        return as_range(range_, include_prerelease).test(version)
    except SemverError as e:
        debug('"%s" does not satisfy "%s": %s', version, range_, e)
        return False


def valid_range(range_: t.Any, include_prerelease: bool = False) -> t.Optional[str]:
    """
    Return the canonical form of a range, or None if it is not valid.

    A range matching any version is returned as ``*`` rather than an empty string.
    """
    if not isinstance(range_, (str, Range, Comparator)):
        return None

    try:
        return as_range(range_, include_prerelease).range or '*'
    except SemverError as e:
        debug('Invalid range "%s": %s', range_, e)
        return None


def to_comparators(range_: RangeLike, include_prerelease: bool = False) -> t.List[t.List[str]]:
    return [
        ' '.join(comp.value for comp in clause).strip().split(' ')
        for clause in as_range(range_, include_prerelease).set
    ]


def _best_satisfying(
    versions: t.Iterable[V],
    range_: RangeLike,
    include_prerelease: bool,
    better: t.Callable[[int], bool],
) -> t.Optional[V]:
    if not isinstance(range_, (str, Range, Comparator)):
        debug('Invalid range %r', range_)
        return None

    try:
        range_obj = as_range(range_, include_prerelease)
    except SemverError as e:
        debug('Invalid range "%s": %s', range_, e)
        return None

    best: t.Optional[V] = None
    best_semver: t.Optional[Version] = None
    for version in versions:
        if not isinstance(version, (str, Version)):
            debug('Skipping version %r', version)
            continue

        try:
            if not range_obj.test(version):
                continue
        except SemverError as e:
            debug('Skipping version "%s": %s', version, e)
            continue

        semver = as_version(version)
        if best_semver is None or better(best_semver.compare(semver)):
            best = version
            best_semver = semver

    return best


def max_satisfying(
    versions: t.Iterable[V], range_: RangeLike, include_prerelease: bool = False
) -> t.Optional[V]:
    """Return the highest version in the list that satisfies the range, or None"""
    return _best_satisfying(versions, range_, include_prerelease, lambda res: res < 0)


def min_satisfying(
    versions: t.Iterable[V], range_: RangeLike, include_prerelease: bool = False
) -> t.Optional[V]:
    """Return the lowest version in the list that satisfies the range, or None"""
    return _best_satisfying(versions, range_, include_prerelease, lambda res: res > 0)


def min_version(range_: RangeLike, include_prerelease: bool = False) -> t.Optional[Version]:
    """Return the lowest version that can possibly match the range, or None"""
    range_obj = as_range(range_, include_prerelease)

    for candidate in ('0.0.0', '0.0.0-0'):
        minver = Version(candidate)
        if range_obj.test(minver):
            return minver

    lowest: t.Optional[Version] = None
    for clause in range_obj.set:
        clause_min: t.Optional[Version] = None

        for comparator in clause:
            if comparator.semver is None:
                continue

            compver = comparator.semver
            if comparator.operator == OP_GT:
                if compver.prerelease:
                    compver = Version.from_parts(
                        compver.major, compver.minor, compver.patch, compver.prerelease + (0,)
                    )
                else:
                    compver = Version.from_parts(compver.major, compver.minor, compver.patch + 1)
            elif comparator.operator not in (OP_EQ, OP_GTE):
                # upper bounds don't raise the minimum
                continue

            if clause_min is None or compver > clause_min:
                clause_min = compver

        if clause_min is not None and (lowest is None or clause_min < lowest):
            lowest = clause_min

    if lowest is not None and range_obj.test(lowest):
        return lowest

    return None


def outside(
    version: VersionLike, range_: RangeLike, hilo: str, include_prerelease: bool = False
) -> bool:
    """
    Check whether the version is beyond every version the range can match.

    ``hilo`` is ``>`` to check above the range and ``<`` to check below it.
    """
    semver = as_version(version)
    range_obj = as_range(range_, include_prerelease)

    if hilo == OP_GT:
        beyond, not_beyond, behind = gt, lte, lt
        comp, ecomp = OP_GT, OP_GTE
    elif hilo == OP_LT:
        beyond, not_beyond, behind = lt, gte, gt
        comp, ecomp = OP_LT, OP_LTE
    else:
        raise InvalidOperator(hilo)

    # if it satisfies the range it is not outside
    if range_obj.test(semver):
        return False

    # from now on, variable terms are as if we're in "gtr" mode,
    # everything is flipped for "ltr"
    for clause in range_obj.set:
        high: t.Optional[Comparator] = None
        low: t.Optional[Comparator] = None

        for comparator in clause:
            if comparator.semver is None:
                comparator = Comparator('>=0.0.0')

            high = high or comparator
            low = low or comparator
            if beyond(comparator.semver, high.semver):  # type: ignore
                high = comparator
            elif behind(comparator.semver, low.semver):  # type: ignore
                low = comparator

        if high is None or low is None:
            return True

        # if the edge version comparator has an operator then our version isn't outside it
        if high.operator in (comp, ecomp):
            return False

        # if the lowest version comparator has an operator and our version
        # is less than it then it isn't higher than the range
        if low.operator in (OP_EQ, comp) and not_beyond(semver, low.semver):  # type: ignore
            return False
        elif low.operator == ecomp and behind(semver, low.semver):  # type: ignore
            return False

    return True


def gtr(version: VersionLike, range_: RangeLike, include_prerelease: bool = False) -> bool:
    """Return True if the version is greater than all the versions possible in the range"""
    return outside(version, range_, OP_GT, include_prerelease)


def ltr(version: VersionLike, range_: RangeLike, include_prerelease: bool = False) -> bool:
    """Return True if the version is less than all the versions possible in the range"""
    return outside(version, range_, OP_LT, include_prerelease)


def intersects(range1: RangeLike, range2: RangeLike, include_prerelease: bool = False) -> bool:
    """Return True if any of the ranges comparators intersect"""
    return as_range(range1, include_prerelease).intersects(as_range(range2, include_prerelease))

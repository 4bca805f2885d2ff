# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import typing as t

from .constants import OP_EQ, OP_GT, OP_GTE, OP_LT, OP_LTE
from .errors import InvalidComparator, InvalidVersion
from .grammar import match_comparator
from .version import Version, as_version

# operator -> predicate on the result of `version.compare(comparator.semver)`
_OPERATOR_TESTS: t.Dict[str, t.Callable[[int], bool]] = {
    OP_EQ: lambda res: res == 0,
    OP_GT: lambda res: res > 0,
    OP_GTE: lambda res: res >= 0,
    OP_LT: lambda res: res < 0,
    OP_LTE: lambda res: res <= 0,
}


class Comparator:
    """
    A single constraint, like ``>=1.2.3``.

    The empty string parses into the ANY comparator, which has no version
    (``semver is None``) and matches everything.
    """

    def __init__(self, comp: str, include_prerelease: bool = False) -> None:
        if not isinstance(comp, str):
            raise TypeError('Invalid comparator: {!r}'.format(comp))

        self.include_prerelease = include_prerelease

        match = match_comparator(comp)
        if not match:
            raise InvalidComparator('Invalid comparator: {}'.format(comp))

        operator = match.group('operator') or OP_EQ
        if operator == '=':
            operator = OP_EQ
        self.operator: str = operator

        self.semver: t.Optional[Version] = None
        if match.group('version'):
            try:
                self.semver = Version(match.group('version'))
            except InvalidVersion as e:
                raise InvalidComparator('Invalid comparator: {}. {}'.format(comp, e)) from e

        self.value: str = '' if self.semver is None else self.operator + self.semver.version

    @property
    def is_any(self) -> bool:
        return self.semver is None

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "Comparator('{}')".format(self.value)

    def test(self, version: t.Union[str, Version]) -> bool:
        if self.semver is None:
            return True

        version = as_version(version)
        return _OPERATOR_TESTS[self.operator](version.compare(self.semver))

    def intersects(self, comp: 'Comparator', include_prerelease: bool = False) -> bool:
        """Check, without enumerating versions, whether some version satisfies both comparators"""
        if not isinstance(comp, Comparator):
            raise TypeError('a Comparator is required')

        # ANY meets everything, whichever side it is on
        if self.semver is None or comp.semver is None:
            return True

        from .range import Range

        if self.operator == OP_EQ:
            return Range(comp.value, include_prerelease).test(self.semver)

        if comp.operator == OP_EQ:
            return Range(self.value, include_prerelease).test(comp.semver)

        increasing = (OP_GT, OP_GTE)
        decreasing = (OP_LT, OP_LTE)
        inclusive = (OP_GTE, OP_LTE)

        same_direction_increasing = self.operator in increasing and comp.operator in increasing
        same_direction_decreasing = self.operator in decreasing and comp.operator in decreasing
        same_semver = self.semver.version == comp.semver.version
        different_directions_inclusive = self.operator in inclusive and comp.operator in inclusive
        opposite_directions_less_than = (
            self.semver.compare(comp.semver) < 0
            and self.operator in increasing
            and comp.operator in decreasing
        )
        opposite_directions_greater_than = (
            self.semver.compare(comp.semver) > 0
            and self.operator in decreasing
            and comp.operator in increasing
        )

        return (
            same_direction_increasing
            or same_direction_decreasing
            or (same_semver and different_directions_inclusive)
            or opposite_directions_less_than
            or opposite_directions_greater_than
        )

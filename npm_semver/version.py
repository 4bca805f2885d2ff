# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import typing as t

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .constants import MAX_LENGTH, MAX_SAFE_INTEGER, RELEASE_TYPES
from .errors import InvalidReleaseType, InvalidVersion
from .grammar import is_numeric, match_version

Identifier = t.Union[int, str]


def compare_identifiers(a: Identifier, b: Identifier) -> int:
    """
    Compare two prerelease or build identifiers.

    Numeric identifiers compare numerically and always have lower precedence
    than alphanumeric ones, which compare lexically.
    """
    a_numeric = is_numeric(a)
    b_numeric = is_numeric(b)

    if a_numeric and b_numeric:
        a, b = int(a), int(b)
    elif a_numeric:
        return -1
    elif b_numeric:
        return 1
    else:
        a, b = str(a), str(b)

    if a == b:
        return 0

    return -1 if a < b else 1  # type: ignore


def rcompare_identifiers(a: Identifier, b: Identifier) -> int:
    return compare_identifiers(b, a)


def _compare_sequences(left: t.Sequence[Identifier], right: t.Sequence[Identifier]) -> int:
    for i in range(max(len(left), len(right))):
        if i >= len(left):
            return -1

        if i >= len(right):
            return 1

        res = compare_identifiers(left[i], right[i])
        if res:
            return res

    return 0


def _parse_prerelease_identifier(identifier: str) -> Identifier:
    if is_numeric(identifier):
        number = int(identifier)
        if number < MAX_SAFE_INTEGER:
            return number

    return identifier


class Version:
    """
    A semantic version, like ``1.2.3-beta.4+build.7``

    Instances are immutable. Ordering follows SemVer 2.0.0 precedence, so two
    versions that differ only in build metadata compare equal.
    """

    def __init__(self, version: t.Union[str, 'Version']) -> None:
        if isinstance(version, Version):
            version = version.raw
        elif not isinstance(version, str):
            raise TypeError('Invalid Version: {!r}'.format(version))

        if len(version) > MAX_LENGTH:
            raise InvalidVersion('version is longer than {} characters'.format(MAX_LENGTH))

        match = match_version(version.strip())
        if not match:
            raise InvalidVersion('Invalid Version: {}'.format(version))

        self.raw: str = version

        self.major: int = int(match.group('major'))
        self.minor: int = int(match.group('minor'))
        self.patch: int = int(match.group('patch'))

        for name in ('major', 'minor', 'patch'):
            if getattr(self, name) > MAX_SAFE_INTEGER:
                raise InvalidVersion('Invalid {} version'.format(name))

        prerelease = match.group('prerelease')
        self.prerelease: t.Tuple[Identifier, ...] = (
            tuple(_parse_prerelease_identifier(i) for i in prerelease.split('.'))
            if prerelease
            else ()
        )

        build = match.group('build')
        self.build: t.Tuple[str, ...] = tuple(build.split('.')) if build else ()

        self.version: str = self._format()

    @classmethod
    def from_parts(
        cls,
        major: int,
        minor: int,
        patch: int,
        prerelease: t.Sequence[Identifier] = (),
        build: t.Sequence[str] = (),
    ) -> 'Version':
        text = '{}.{}.{}'.format(major, minor, patch)
        if prerelease:
            text += '-' + '.'.join(str(i) for i in prerelease)
        if build:
            text += '+' + '.'.join(build)

        return cls(text)

    def _format(self) -> str:
        version = '{}.{}.{}'.format(self.major, self.minor, self.patch)
        if self.prerelease:
            version += '-' + '.'.join(str(i) for i in self.prerelease)

        return version

    def __str__(self) -> str:
        return self.version

    def __repr__(self) -> str:
        return "Version('{}')".format(self.version)

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def compare_main(self, other: t.Union[str, 'Version']) -> int:
        other = as_version(other)
        for mine, theirs in (
            (self.major, other.major),
            (self.minor, other.minor),
            (self.patch, other.patch),
        ):
            if mine != theirs:
                return -1 if mine < theirs else 1

        return 0

    def compare_pre(self, other: t.Union[str, 'Version']) -> int:
        other = as_version(other)

        # NOT having a prerelease is > having one
        if self.prerelease and not other.prerelease:
            return -1
        elif not self.prerelease and other.prerelease:
            return 1

        return _compare_sequences(self.prerelease, other.prerelease)

    def compare(self, other: t.Union[str, 'Version']) -> int:
        other = as_version(other)
        return self.compare_main(other) or self.compare_pre(other)

    def compare_build(self, other: t.Union[str, 'Version']) -> int:
        """Compare build metadata only. Not part of SemVer precedence."""
        other = as_version(other)
        return _compare_sequences(self.build, other.build)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def _next_pre(self, identifier: t.Optional[str] = None) -> 'Version':
        prerelease: t.List[Identifier] = list(self.prerelease)

        if not prerelease:
            prerelease = [0]
        else:
            # bump the right-most numeric identifier, or start a new one
            for i in reversed(range(len(prerelease))):
                if isinstance(prerelease[i], int):
                    prerelease[i] += 1  # type: ignore
                    break
            else:
                prerelease.append(0)

        if identifier:
            # 1.2.0-beta.1 bumps to 1.2.0-beta.2,
            # 1.2.0-beta.fooblz or 1.2.0-beta bumps to 1.2.0-beta.0
            if prerelease[0] != identifier or len(prerelease) < 2 or not is_numeric(prerelease[1]):
                prerelease = [identifier, 0]

        return Version.from_parts(self.major, self.minor, self.patch, prerelease)

    def inc(self, release: str, identifier: t.Optional[str] = None) -> 'Version':
        """
        Return the next version for the given release type.

        The receiver is left untouched. Build metadata is not carried over.

        :param release: one of ``major``, ``premajor``, ``minor``, ``preminor``,
            ``patch``, ``prepatch``, ``prerelease`` or ``pre``
        :param identifier: prerelease identifier, ``beta`` turns ``1.2.3`` into
            ``1.2.4-beta.0`` for ``prerelease``
        """
        if release not in RELEASE_TYPES:
            raise InvalidReleaseType(release)

        if release == 'premajor':
            return Version.from_parts(self.major + 1, 0, 0)._next_pre(identifier)

        if release == 'preminor':
            return Version.from_parts(self.major, self.minor + 1, 0)._next_pre(identifier)

        if release == 'prepatch':
            # drop any prereleases that might already exist
            return Version.from_parts(self.major, self.minor, self.patch + 1)._next_pre(identifier)

        if release == 'prerelease':
            # acts as prepatch for a release version
            base = self.inc('patch') if not self.prerelease else self
            return base._next_pre(identifier)

        if release == 'major':
            # 1.0.0-5 bumps to 1.0.0, 1.1.0 bumps to 2.0.0
            if self.minor != 0 or self.patch != 0 or not self.prerelease:
                return Version.from_parts(self.major + 1, 0, 0)
            return Version.from_parts(self.major, 0, 0)

        if release == 'minor':
            # 1.2.0-5 bumps to 1.2.0, 1.2.1 bumps to 1.3.0
            if self.patch != 0 or not self.prerelease:
                return Version.from_parts(self.major, self.minor + 1, 0)
            return Version.from_parts(self.major, self.minor, 0)

        if release == 'patch':
            # 1.2.0-5 patches to 1.2.0, 1.2.0 patches to 1.2.1
            if not self.prerelease:
                return Version.from_parts(self.major, self.minor, self.patch + 1)
            return Version.from_parts(self.major, self.minor, self.patch)

        # pre: 1.0.0 becomes 1.0.0-0, which is the wrong direction
        return self._next_pre(identifier)

    @staticmethod
    def _validate(value: t.Any) -> 'Version':
        if not isinstance(value, (str, Version)):
            raise InvalidVersion('Invalid Version: {!r}'.format(value))

        return as_version(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: t.Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(),
        )


def as_version(value: t.Union[str, Version]) -> Version:
    """
    Coerce a string into a Version, instances pass through untouched.

    Raises InvalidVersion for malformed strings and TypeError for anything
    that is neither a string nor a Version.
    """
    if isinstance(value, Version):
        return value

    return Version(value)

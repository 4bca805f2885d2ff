# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
import typing as t

import pytest
from pydantic import BaseModel, ValidationError

from npm_semver import Range, Version


class Dependency(BaseModel):
    version: Version
    requirement: Range
    pinned: t.Optional[Version] = None


def test_validate_strings():
    dependency = Dependency(version='v1.2.3+build', requirement='^1.2')

    assert dependency.version == Version('1.2.3')
    assert dependency.version.build == ('build',)
    assert dependency.requirement.range == '>=1.2.0 <2.0.0'
    assert dependency.requirement.test(dependency.version)
    assert dependency.pinned is None


def test_validate_instances():
    version = Version('2.0.0')
    requirement = Range('2.x')
    dependency = Dependency(version=version, requirement=requirement)

    assert dependency.version is version
    assert dependency.requirement is requirement


def test_serialize():
    dependency = Dependency(version='1.2.3-beta+build', requirement='~1.2', pinned='1.2.3')

    assert dependency.model_dump(mode='json') == {
        'version': '1.2.3-beta',
        'requirement': '>=1.2.0 <1.3.0',
        'pinned': '1.2.3',
    }
    again = Dependency.model_validate_json(dependency.model_dump_json())
    assert again.model_dump(mode='json') == dependency.model_dump(mode='json')


@pytest.mark.parametrize(
    ('version', 'requirement'),
    [
        ('1.2', '*'),
        (123, '*'),
        ('1.2.3', 'blerg'),
        ('1.2.3', None),
    ],
)
def test_invalid_values(version, requirement):
    with pytest.raises(ValidationError):
        Dependency(version=version, requirement=requirement)

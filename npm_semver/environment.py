# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""
Settings read from environment variables.
"""

import typing as t

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo, ValidatorFunctionWrapHandler
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


def _env_to_bool(value: str) -> bool:
    """Returns True if environment variable is set to 1, t, y, yes, true, or False otherwise"""

    return value.lower() in {'1', 't', 'true', 'y', 'yes'}


class SemverSettings(BaseSettings):
    """
    Settings of the semver tools.

    Only logging is configurable from the environment. Matching behaviour,
    like accepting prereleases, is always passed explicitly by the caller.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_prefix='NPM_SEMVER_',
    )

    # by default log-level is info(20)
    DEBUG_MODE: bool = Field(False, description='Enable debug mode.')  # log-level: debug(10)

    NO_COLORS: bool = Field(False, description='Disable colored output.')  # with colorama or not

    @field_validator('*', mode='wrap')
    @classmethod
    def fallback_to_default(
        cls, v: t.Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> t.Any:
        field = cls.model_fields[info.field_name]

        try:
            if v is None:
                return field.default

            if field.annotation is bool and isinstance(v, str):
                return _env_to_bool(v)

            return handler(v)
        except Exception:  # all exceptions will fall back to default
            return field.default

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: t.Type[BaseSettings],  # noqa: ARG003
        init_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> t.Tuple[PydanticBaseSettingsSource, ...]:
        # we only want to use the env_settings
        return (env_settings,)

# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._errors import ValidationError as _BindValidationError
from .ownership import Ownership

__all__ = ("BinderSettings", "settings")


class BinderSettings(BaseSettings, frozen=True):
    """Binder defaults with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    LAZYASSIGN_DEFAULT_OWNERSHIP: Ownership = Field(
        default=Ownership.STRONG,
        description="Ownership used when a bind call passes ownership=None",
    )

    LAZYASSIGN_TRACE_WRITES: bool = Field(
        default=False,
        description="Log every write and suppressed write at DEBUG level",
    )

    @field_validator("LAZYASSIGN_DEFAULT_OWNERSHIP", mode="before")
    @classmethod
    def _coerce_ownership(cls, value: Any) -> Ownership:
        try:
            return Ownership.coerce(value)
        except _BindValidationError as e:
            raise ValueError(e.message) from e


# Create a singleton instance
settings = BinderSettings()

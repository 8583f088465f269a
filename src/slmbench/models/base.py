# Copyright (c) Syntropy Systems
"""Shared Pydantic model helpers for slmbench."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, JsonValue
from typing_extensions import TypeAlias

JSONValue: TypeAlias = JsonValue


class BenchBaseModel(BaseModel):
    """Base model with shared config for slmbench schemas."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )


class FrozenModel(BaseModel):
    """Base model for records that never change after creation."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

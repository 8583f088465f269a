# Copyright (c) Syntropy Systems
"""Pydantic models for the Ollama HTTP API payloads slmbench uses."""

from __future__ import annotations

from typing import Union

from pydantic import Field

from .base import BenchBaseModel


class GenerateRequest(BenchBaseModel):
    """Body of a non-streaming ``POST /api/generate`` request."""

    model: str
    prompt: str
    system: str | None = None
    options: dict[str, Union[int, float]] = Field(default_factory=dict)
    stream: bool = False


class GenerateResponse(BenchBaseModel):
    """Completed ``/api/generate`` response (streaming disabled)."""

    model: str | None = None
    created_at: str | None = None
    response: str
    done: bool = True
    total_duration: int | None = None
    eval_count: int | None = None


class ErrorResponse(BenchBaseModel):
    """Error body returned by the server."""

    error: str


class VersionResponse(BenchBaseModel):
    """Response from ``GET /api/version``."""

    version: str


class ModelInfo(BenchBaseModel):
    """One installed model from ``GET /api/tags``."""

    name: str
    model: str | None = None
    size: int | None = None
    modified_at: str | None = None


class TagsResponse(BenchBaseModel):
    """Response from ``GET /api/tags``."""

    models: list[ModelInfo] = Field(default_factory=list)

# Copyright (c) Syntropy Systems
"""Pydantic models for test results and their metrics."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import Field

from .base import FrozenModel


class ResponseMetrics(FrozenModel):
    """Basic metrics for one model response."""

    response_time: timedelta = Field(alias="responseTime")
    char_count: int = Field(alias="charCount", ge=0)
    word_count: int = Field(alias="wordCount", ge=0)


class TestResult(FrozenModel):
    """One executed (prompt, config) pair with its response and metrics."""

    __test__ = False  # not a pytest test class

    config: str
    prompt: str
    response: str
    metrics: ResponseMetrics
    timestamp: datetime

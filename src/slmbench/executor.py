# Copyright (c) Syntropy Systems
"""Sequential test execution with timing."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from slmbench.catalog import PROMPTS, config_options
from slmbench.client import CompletionError
from slmbench.models.result import ResponseMetrics, TestResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from slmbench.catalog import ConfigKey, PromptKey
    from slmbench.client import CompletionBackend
    from slmbench.selector import TestMatrix

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You're a friendly and helpful assistant providing concise and accurate answers."
)


@dataclass(frozen=True)
class PairFailure:
    """A (prompt, config) pair whose completion call failed."""

    prompt: PromptKey
    config: ConfigKey
    error: str


def compute_metrics(text: str, elapsed: timedelta) -> ResponseMetrics:
    """Measure a response: raw length and whitespace-delimited word count."""
    return ResponseMetrics(
        response_time=elapsed,
        char_count=len(text),
        word_count=len(text.split()),
    )


def run_test(
    backend: CompletionBackend,
    model: str,
    prompt_key: PromptKey,
    config_key: ConfigKey,
    *,
    system: str = SYSTEM_PROMPT,
) -> TestResult:
    """Run one prompt under one config and time the completion call.

    Raises:
        CompletionError: The backend call failed

    """
    prompt = PROMPTS[prompt_key]
    options = config_options(config_key)

    start = time.perf_counter()
    response = backend.generate(model, prompt, options, system)
    elapsed = time.perf_counter() - start
    finished_at = datetime.now(timezone.utc)

    return TestResult(
        config=config_key,
        prompt=prompt_key,
        response=response,
        metrics=compute_metrics(response, timedelta(seconds=elapsed)),
        timestamp=finished_at,
    )


def run_matrix(  # noqa: PLR0913
    backend: CompletionBackend,
    matrix: TestMatrix,
    model: str,
    *,
    system: str = SYSTEM_PROMPT,
    on_start: Callable[[PromptKey, ConfigKey], None] | None = None,
    on_result: Callable[[TestResult], None] | None = None,
    on_error: Callable[[PairFailure], None] | None = None,
) -> list[TestResult]:
    """Run every pair of the matrix, prompts outer and configs inner.

    Calls are made one at a time. A failed pair is reported through
    ``on_error`` and skipped; the remaining pairs still run.
    """
    results: list[TestResult] = []

    for prompt_key in matrix.prompts:
        for config_key in matrix.configs:
            if on_start is not None:
                on_start(prompt_key, config_key)

            try:
                result = run_test(backend, model, prompt_key, config_key, system=system)
            except CompletionError as e:
                logger.warning(
                    "Error testing prompt %s with config %s: %s",
                    prompt_key,
                    config_key,
                    e,
                )
                if on_error is not None:
                    on_error(PairFailure(prompt=prompt_key, config=config_key, error=str(e)))
                continue

            logger.debug(
                "Completed %s/%s in %.3fs",
                prompt_key,
                config_key,
                result.metrics.response_time.total_seconds(),
            )
            if on_result is not None:
                on_result(result)
            results.append(result)

    return results

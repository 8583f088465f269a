# Copyright (c) Syntropy Systems
"""Resolve user filters into a concrete prompt x config test matrix."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from slmbench.catalog import (
    CONFIGS,
    PATTERNS,
    PROMPTS,
    all_configs,
    all_prompts,
)

if TYPE_CHECKING:
    from collections.abc import Collection

    from slmbench.catalog import ConfigKey, PatternKey, PromptKey

DEFAULT_RANDOM_PROMPTS = 5
DEFAULT_RANDOM_CONFIGS = 5


class SelectionError(ValueError):
    """Filters could not be resolved into a test matrix."""


class InvalidKeyError(SelectionError):
    """A filter named a key that is not in its catalog."""

    def __init__(self, field: str, key: str, valid_keys: Collection[str]) -> None:
        self.field = field
        self.key = key
        self.valid_keys = sorted(valid_keys)
        super().__init__(f"invalid {field} key: {key}")


class InvalidRangeError(SelectionError):
    """An index range does not fit its catalog."""


@dataclass(frozen=True)
class TestMatrix:
    """Ordered prompt keys crossed with ordered config keys."""

    __test__ = False  # not a pytest test class

    prompts: tuple[PromptKey, ...]
    configs: tuple[ConfigKey, ...]

    def __len__(self) -> int:
        return len(self.prompts) * len(self.configs)

    def pairs(self) -> list[tuple[PromptKey, ConfigKey]]:
        """Return (prompt, config) pairs, prompt-major."""
        return [(p, c) for p in self.prompts for c in self.configs]


def _parse_keys(
    text: Optional[str],
    catalog: Collection[str],
    field: str,
) -> list[str]:
    if text is None or not text.strip():
        return []

    result: list[str] = []
    for item in text.split(","):
        key = item.strip()
        if key not in catalog:
            raise InvalidKeyError(field, key, catalog)
        result.append(key)
    return result


def parse_prompts(text: Optional[str]) -> list[PromptKey]:
    """Parse a comma-separated prompt filter into validated keys."""
    return _parse_keys(text, PROMPTS, "prompt")


def parse_configs(text: Optional[str]) -> list[ConfigKey]:
    """Parse a comma-separated config filter into validated keys."""
    return _parse_keys(text, CONFIGS, "config")


def parse_patterns(text: Optional[str]) -> list[PatternKey]:
    """Parse a comma-separated pattern filter into validated keys."""
    return _parse_keys(text, PATTERNS, "pattern")


def expand_patterns(patterns: list[PatternKey]) -> list[PromptKey]:
    """Concatenate the prompts of each pattern, keeping duplicates."""
    prompts: list[PromptKey] = []
    for pattern in patterns:
        prompts.extend(PATTERNS[pattern])
    return prompts


def custom_matrix(
    prompts: list[PromptKey],
    configs: list[ConfigKey],
) -> TestMatrix:
    """Build a matrix, defaulting each empty axis to its full catalog."""
    return TestMatrix(
        prompts=tuple(prompts) if prompts else tuple(all_prompts()),
        configs=tuple(configs) if configs else tuple(all_configs()),
    )


def random_matrix(
    prompt_count: int = DEFAULT_RANDOM_PROMPTS,
    config_count: int = DEFAULT_RANDOM_CONFIGS,
    rng: random.Random | None = None,
) -> TestMatrix:
    """Pick distinct prompts and configs uniformly at random.

    Counts larger than a catalog are clamped to the catalog size.
    """
    if prompt_count < 0 or config_count < 0:
        msg = "Random test counts must not be negative"
        raise SelectionError(msg)

    rng = rng or random.Random()  # noqa: S311
    prompts = all_prompts()
    configs = all_configs()
    rng.shuffle(prompts)
    rng.shuffle(configs)

    return TestMatrix(
        prompts=tuple(prompts[:prompt_count]),
        configs=tuple(configs[:config_count]),
    )


def parse_range(text: str) -> tuple[int, Optional[int]]:
    """Parse ``START:END`` into a half-open index pair.

    Either side may be omitted: ``:3`` and ``2:`` are accepted, with the
    open end returned as ``None`` and filled in by :func:`range_matrix`.
    """
    start_text, sep, end_text = text.partition(":")
    if not sep:
        msg = f"invalid range '{text}': expected START:END"
        raise InvalidRangeError(msg)
    try:
        start = int(start_text) if start_text.strip() else 0
        end = int(end_text) if end_text.strip() else None
    except ValueError as e:
        msg = f"invalid range '{text}': bounds must be integers"
        raise InvalidRangeError(msg) from e
    return start, end


def _slice(
    keys: list[str],
    bounds: tuple[int, Optional[int]],
    field: str,
) -> tuple[str, ...]:
    start, end = bounds
    if end is None:
        end = len(keys)
    if not 0 <= start < end <= len(keys):
        msg = (
            f"invalid {field} range {start}:{end} "
            f"(catalog has {len(keys)} {field}s)"
        )
        raise InvalidRangeError(msg)
    return tuple(keys[start:end])


def range_matrix(
    prompt_range: tuple[int, Optional[int]] | None = None,
    config_range: tuple[int, Optional[int]] | None = None,
) -> TestMatrix:
    """Slice the catalogs by index; a missing range selects everything."""
    return TestMatrix(
        prompts=_slice(all_prompts(), prompt_range or (0, None), "prompt"),
        configs=_slice(all_configs(), config_range or (0, None), "config"),
    )


def resolve_matrix(  # noqa: PLR0913
    prompts: Optional[str] = None,
    configs: Optional[str] = None,
    patterns: Optional[str] = None,
    *,
    prompt_range: Optional[str] = None,
    config_range: Optional[str] = None,
    random_prompts: int = DEFAULT_RANDOM_PROMPTS,
    random_configs: int = DEFAULT_RANDOM_CONFIGS,
    rng: random.Random | None = None,
) -> TestMatrix:
    """Resolve filter strings into a test matrix.

    All filters are validated before anything is selected. Precedence:

    1. explicit prompts
    2. patterns, concatenated in the order given
    3. index ranges over the catalogs
    4. a random matrix

    For 1 and 2 the config axis is the explicit config list, or every
    config when none was given. A prompt range without a config range
    also takes the explicit config list.

    Raises:
        InvalidKeyError: a filter names an unknown key
        InvalidRangeError: a range is malformed or out of bounds

    """
    selected_configs = parse_configs(configs)
    selected_prompts = parse_prompts(prompts)
    selected_patterns = parse_patterns(patterns)
    parsed_prompt_range = parse_range(prompt_range) if prompt_range else None
    parsed_config_range = parse_range(config_range) if config_range else None

    if selected_prompts:
        return custom_matrix(selected_prompts, selected_configs)
    if selected_patterns:
        return custom_matrix(expand_patterns(selected_patterns), selected_configs)
    if parsed_prompt_range or parsed_config_range:
        matrix = range_matrix(parsed_prompt_range, parsed_config_range)
        if selected_configs and parsed_config_range is None:
            return TestMatrix(prompts=matrix.prompts, configs=tuple(selected_configs))
        return matrix
    # Explicit configs do not apply to the random fallback
    return random_matrix(random_prompts, random_configs, rng)

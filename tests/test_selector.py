# Copyright (c) Syntropy Systems
"""Tests for filter parsing and matrix resolution."""

from __future__ import annotations

import random

import pytest

from slmbench.catalog import CONFIGS, PATTERNS, PROMPTS, all_configs, all_prompts
from slmbench.selector import (
    InvalidKeyError,
    InvalidRangeError,
    TestMatrix,
    parse_configs,
    parse_patterns,
    parse_prompts,
    parse_range,
    random_matrix,
    range_matrix,
    resolve_matrix,
)


class TestParseKeys:
    """Tests for the comma-separated key parsers."""

    def test_preserves_order_and_trims(self) -> None:
        """Test that keys keep input order and lose surrounding whitespace."""
        assert parse_prompts(" proverb ,idiom,  cot") == ["proverb", "idiom", "cot"]

    def test_keeps_duplicates(self) -> None:
        """Test that repeated keys are not collapsed."""
        assert parse_configs("Analytical,Analytical") == ["Analytical", "Analytical"]

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_means_no_filter(self, text: str | None) -> None:
        """Test that absent, empty and blank filters all resolve to no keys."""
        assert parse_prompts(text) == []
        assert parse_configs(text) == []
        assert parse_patterns(text) == []

    def test_unknown_prompt(self) -> None:
        """Test that an unknown prompt names the field and token."""
        with pytest.raises(InvalidKeyError, match="invalid prompt key: nope") as exc_info:
            _ = parse_prompts("idiom, nope ,proverb")

        assert exc_info.value.field == "prompt"
        assert exc_info.value.key == "nope"
        assert exc_info.value.valid_keys == sorted(PROMPTS)

    def test_unknown_config(self) -> None:
        """Test that config keys are case sensitive."""
        with pytest.raises(InvalidKeyError, match="invalid config key: analytical"):
            _ = parse_configs("analytical")

    def test_unknown_pattern(self) -> None:
        """Test that an unknown pattern is rejected."""
        with pytest.raises(InvalidKeyError) as exc_info:
            _ = parse_patterns("language,poetry")

        assert exc_info.value.field == "pattern"
        assert exc_info.value.valid_keys == sorted(PATTERNS)

    def test_empty_token_inside_list(self) -> None:
        """Test that a stray comma is an invalid key, not a skipped one."""
        with pytest.raises(InvalidKeyError):
            _ = parse_prompts("idiom,,proverb")


class TestResolveMatrix:
    """Tests for resolve_matrix precedence."""

    def test_explicit_prompts_with_all_configs(self) -> None:
        """Test explicit prompts default the config axis to every config."""
        matrix = resolve_matrix(prompts="idiom,proverb")

        assert matrix.prompts == ("idiom", "proverb")
        assert matrix.configs == tuple(all_configs())

    def test_explicit_prompts_and_configs(self) -> None:
        """Test both axes given explicitly."""
        matrix = resolve_matrix(prompts="cot", configs="Ultra-Precise,Creative-High")

        assert matrix.prompts == ("cot",)
        assert matrix.configs == ("Ultra-Precise", "Creative-High")
        assert len(matrix) == 2

    def test_prompts_win_over_patterns(self) -> None:
        """Test explicit prompts take precedence over patterns."""
        matrix = resolve_matrix(prompts="cot", patterns="language")

        assert matrix.prompts == ("cot",)

    def test_invalid_pattern_fails_even_with_prompts(self) -> None:
        """Test every filter is validated before selection."""
        with pytest.raises(InvalidKeyError):
            _ = resolve_matrix(prompts="cot", patterns="bogus")

    def test_patterns_concatenate_without_dedup(self) -> None:
        """Test overlapping patterns keep duplicate prompts."""
        matrix = resolve_matrix(patterns="language,technical")

        assert len(matrix.prompts) == len(PATTERNS["language"]) + len(PATTERNS["technical"])
        assert matrix.prompts == PATTERNS["language"] + PATTERNS["technical"]

    def test_overlapping_patterns_repeat_prompts(self) -> None:
        """Test a prompt shared by two patterns appears twice."""
        matrix = resolve_matrix(patterns="math,science", configs="Analytical")

        assert matrix.prompts.count("causation") == 2
        assert matrix.configs == ("Analytical",)

    def test_empty_filters_match_absent_filters(self) -> None:
        """Test empty strings fall through to the random test like None does."""
        empty = resolve_matrix("", "", "", rng=random.Random(7))
        absent = resolve_matrix(rng=random.Random(7))

        assert empty == absent

    def test_random_default_size(self) -> None:
        """Test the random fallback picks 5 distinct prompts and configs."""
        for seed in range(20):
            matrix = resolve_matrix(rng=random.Random(seed))

            assert len(matrix.prompts) == 5
            assert len(set(matrix.prompts)) == 5
            assert set(matrix.prompts) <= set(PROMPTS)
            assert len(matrix.configs) == 5
            assert len(set(matrix.configs)) == 5
            assert set(matrix.configs) <= set(CONFIGS)

    def test_random_ignores_explicit_configs(self) -> None:
        """Test configs alone do not narrow the random fallback."""
        matrix = resolve_matrix(configs="Analytical", rng=random.Random(1))

        assert len(matrix.configs) == 5

    def test_prompt_range_uses_explicit_configs(self) -> None:
        """Test a prompt range keeps an explicit config list."""
        matrix = resolve_matrix(prompt_range="0:2", configs="Analytical")

        assert matrix.prompts == tuple(all_prompts()[:2])
        assert matrix.configs == ("Analytical",)

    def test_patterns_win_over_ranges(self) -> None:
        """Test patterns take precedence over index ranges."""
        matrix = resolve_matrix(patterns="multilang", prompt_range="0:10")

        assert matrix.prompts == PATTERNS["multilang"]


class TestRandomMatrix:
    """Tests for random_matrix."""

    def test_seeded_is_reproducible(self) -> None:
        """Test the same seed gives the same matrix."""
        assert random_matrix(rng=random.Random(42)) == random_matrix(rng=random.Random(42))

    def test_counts_clamp_to_catalog(self) -> None:
        """Test asking for more configs than exist returns them all."""
        matrix = random_matrix(3, 50, rng=random.Random(0))

        assert len(matrix.prompts) == 3
        assert sorted(matrix.configs) == sorted(CONFIGS)

    def test_negative_count(self) -> None:
        """Test negative counts are rejected."""
        with pytest.raises(ValueError, match="must not be negative"):
            _ = random_matrix(-1, 5)


class TestRanges:
    """Tests for index range selection."""

    def test_parse_range(self) -> None:
        """Test START:END parsing with open ends."""
        assert parse_range("2:6") == (2, 6)
        assert parse_range(":3") == (0, 3)
        assert parse_range("4:") == (4, None)
        assert parse_range(":") == (0, None)

    @pytest.mark.parametrize("text", ["3", "a:b", "1-4"])
    def test_parse_range_invalid(self, text: str) -> None:
        """Test malformed ranges are rejected."""
        with pytest.raises(InvalidRangeError):
            _ = parse_range(text)

    def test_range_matrix_slices_catalogs(self) -> None:
        """Test slicing follows catalog order."""
        matrix = range_matrix((1, 4), (0, 2))

        assert matrix.prompts == tuple(all_prompts()[1:4])
        assert matrix.configs == tuple(all_configs()[0:2])

    def test_range_matrix_defaults_to_all(self) -> None:
        """Test a missing range selects the whole catalog."""
        matrix = range_matrix(None, (0, 1))

        assert len(matrix.prompts) == len(PROMPTS)

    @pytest.mark.parametrize("bounds", [(3, 3), (5, 2), (0, 999), (0, -1), (-1, None)])
    def test_range_matrix_out_of_bounds(self, bounds: tuple[int, int | None]) -> None:
        """Test empty, inverted, oversized and negative ranges are rejected."""
        with pytest.raises(InvalidRangeError):
            _ = range_matrix(bounds, None)

    def test_negative_end_is_not_open(self) -> None:
        """Test an explicit -1 end is out of bounds rather than "to the end"."""
        with pytest.raises(InvalidRangeError, match="invalid prompt range 0:-1"):
            _ = resolve_matrix(prompt_range="0:-1")


class TestTestMatrix:
    """Tests for the TestMatrix value."""

    def test_pairs_are_prompt_major(self) -> None:
        """Test pairs iterate configs inside prompts."""
        matrix = TestMatrix(prompts=("a", "b"), configs=("x", "y"))

        assert matrix.pairs() == [("a", "x"), ("a", "y"), ("b", "x"), ("b", "y")]
        assert len(matrix) == 4

# Copyright (c) Syntropy Systems
"""Pattern catalog: named thematic groups of prompt keys."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .prompts import PromptKey

PatternKey: TypeAlias = str

PATTERNS: Mapping[PatternKey, tuple[PromptKey, ...]] = MappingProxyType({
    "language": (
        "idiom", "proverb", "metaphor",
        "grammar", "synonym", "context",
    ),
    "math": (
        "math_simple", "math_logic", "probability",
        "logic", "causation", "comparison",
    ),
    "technical": (
        "code_concept", "algorithm", "tech_explain",
        "technology",
    ),
    "science": (
        "physics", "chemistry", "biology",
        "causation",
    ),
    "practical": ("finance", "health", "technology"),
    "precision": (
        "math_simple", "logic", "code_concept",
        "tech_explain", "grammar",
    ),
    "creative": (
        "metaphor", "context", "causation",
        "physics", "biology",
    ),
    "multilang": ("translation", "multilingual"),
    "advanced-math": (
        "math_complex", "math_proof", "math_optimal",
        "math_logic", "probability",
    ),
    "humanities": (
        "history_cause", "history_compare",
        "ethical_dilemma", "moral_philosophy",
        "music_theory", "art_analysis",
    ),
    "game-theory": (
        "game_strategy", "game_theory",
        "logic", "probability",
    ),
})

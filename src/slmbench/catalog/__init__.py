# Copyright (c) Syntropy Systems
"""Static prompt, config and pattern catalogs."""

from .configs import CONFIGS, ConfigKey, OptionValue, all_configs, config_options
from .patterns import PATTERNS, PatternKey
from .prompts import PROMPTS, PromptKey, all_prompts

__all__ = [
    "CONFIGS",
    "PATTERNS",
    "PROMPTS",
    "ConfigKey",
    "OptionValue",
    "PatternKey",
    "PromptKey",
    "all_configs",
    "all_prompts",
    "config_options",
]

# Copyright (c) Syntropy Systems
"""Config catalog: named sampling-parameter sets.

Option names are the wire names accepted in the ``options`` object of an
Ollama ``/api/generate`` request.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Union

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

ConfigKey: TypeAlias = str
OptionValue: TypeAlias = Union[int, float]

TEMPERATURE = "temperature"
TOP_P = "top_p"
TOP_K = "top_k"
REPEAT_PENALTY = "repeat_penalty"
PRESENCE_PENALTY = "presence_penalty"
NUM_PREDICT = "num_predict"
MIROSTAT = "mirostat"
MIROSTAT_TAU = "mirostat_tau"
MIROSTAT_ETA = "mirostat_eta"

CONFIGS: Mapping[ConfigKey, Mapping[str, OptionValue]] = MappingProxyType({
    "Creative-High": MappingProxyType({
        TEMPERATURE: 0.9,
        TOP_P: 0.9,
        TOP_K: 60,
        REPEAT_PENALTY: 1.05,
        PRESENCE_PENALTY: 0.4,
    }),
    "Ultra-Precise": MappingProxyType({
        TEMPERATURE: 0.2,
        TOP_P: 0.4,
        TOP_K: 30,
        REPEAT_PENALTY: 1.2,
        PRESENCE_PENALTY: 0.3,
        NUM_PREDICT: 1024,
    }),
    "Mirostat-Balanced": MappingProxyType({
        MIROSTAT: 1,
        MIROSTAT_TAU: 5.0,
        MIROSTAT_ETA: 0.3,
        TEMPERATURE: 0.4,
        REPEAT_PENALTY: 1.1,
        PRESENCE_PENALTY: 0.3,
    }),
    "Mirostat2-Dynamic": MappingProxyType({
        MIROSTAT: 2,
        MIROSTAT_TAU: 5.0,
        MIROSTAT_ETA: 0.2,
        TEMPERATURE: 0.6,
        REPEAT_PENALTY: 1.15,
        PRESENCE_PENALTY: 0.25,
    }),
    "Analytical": MappingProxyType({
        MIROSTAT: 1,
        MIROSTAT_TAU: 3.5,
        MIROSTAT_ETA: 0.12,
        TEMPERATURE: 0.4,
        REPEAT_PENALTY: 1.15,
        PRESENCE_PENALTY: 0.2,
    }),
})


def all_configs() -> list[ConfigKey]:
    """Return every config key in catalog order."""
    return list(CONFIGS)


def config_options(key: ConfigKey) -> dict[str, OptionValue]:
    """Return a mutable copy of a config's options, ready to send."""
    return dict(CONFIGS[key])

"""
slmbench - Small language model benchmarking.

Send fixed prompts under named sampling configs, time the answers, export the results.
"""

from slmbench.executor import run_matrix, run_test
from slmbench.selector import TestMatrix, resolve_matrix

__version__ = "0.1.0"
__all__ = ["TestMatrix", "__version__", "resolve_matrix", "run_matrix", "run_test"]

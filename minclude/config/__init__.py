"""Configuration schema and loading for minclude."""

from .loader import load_reduce_config
from .schema import ReduceConfig

__all__ = [
    "ReduceConfig",
    "load_reduce_config",
]

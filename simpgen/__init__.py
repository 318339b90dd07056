"""SimpGen - Traditional to simplified character table generator.

Derive an OpenCC character table from curated reviews and analogy rules.
"""

from .core import ChainMode, Config, Mapping, load_config
from .processing import run_pipeline

__version__ = "0.3.0"
__all__ = ["ChainMode", "Config", "Mapping", "load_config", "run_pipeline"]

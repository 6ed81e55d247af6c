"""Utility modules for primality_test."""

from primality_test.utils.config import EngineConfig, load_config, save_config
from primality_test.utils.logging import setup_logger

__all__ = [
    "EngineConfig",
    "load_config",
    "save_config",
    "setup_logger",
]

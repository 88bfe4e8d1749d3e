"""
Utility Module
Console I/O, Logger and Configuration
"""

from .logger import setup_logger
from .config import load_config

__all__ = ['setup_logger', 'load_config']

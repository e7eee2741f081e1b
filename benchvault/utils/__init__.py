# benchvault/utils/__init__.py
"""
Utility modules for benchmark ingestion
"""

from .units import to_mbps
from .logging_config import setup_logging, get_logger

__all__ = [
    'to_mbps',
    'setup_logging',
    'get_logger'
]

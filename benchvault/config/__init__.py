# benchvault/config/__init__.py
"""
Configuration package for benchmark ingestion
"""

from .settings import (
    ConfigManager,
    ParsingConfig,
    ResolverConfig,
    StorageConfig,
    LoggingSettings,
    create_default_config,
    get_config,
    initialize_config
)

__all__ = [
    'ConfigManager',
    'ParsingConfig',
    'ResolverConfig',
    'StorageConfig',
    'LoggingSettings',
    'create_default_config',
    'get_config',
    'initialize_config'
]

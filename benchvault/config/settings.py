# benchvault/config/settings.py
"""
Configuration management for benchmark ingestion.
"""

import yaml
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass, field, asdict
import logging


DEFAULT_NETWORK_MARKERS = ['iperf3 Network Speed Tests', 'Network Speed Tests']


@dataclass
class ParsingConfig:
    """Text report parsing configuration"""
    network_section_markers: List[str] = field(default_factory=lambda: list(DEFAULT_NETWORK_MARKERS))

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not self.network_section_markers:
            raise ValueError("At least one network section marker is required")


@dataclass(frozen=True)
class ResolverConfig:
    """Placeholder literals used for attributes that cannot be resolved"""
    unknown_value: str = 'Unknown'
    score_default: str = '0'
    unnamed_server: str = 'Unnamed Server'

    def __post_init__(self):
        for name, value in asdict(self).items():
            if not str(value).strip():
                raise ValueError(f"Resolver placeholder '{name}' must not be empty")


@dataclass
class StorageConfig:
    """Benchmark store configuration"""
    database_path: str = 'data/benchmarks.db'


@dataclass
class LoggingSettings:
    """Logging behavior configuration"""
    level: str = 'INFO'
    enable_debug: bool = False
    log_to_file: bool = False
    log_dir: str = 'logs'


class ConfigManager:
    """Configuration manager for parsing, resolution, storage and logging"""

    def __init__(self, config_file: str = None):
        self.logger = logging.getLogger('config_manager')

        # Determine config file path
        if config_file:
            self.config_file = Path(config_file)
        else:
            self.config_file = self._find_config_file()

        self.parsing = ParsingConfig()
        self.resolver = ResolverConfig()
        self.storage = StorageConfig()
        self.logging = LoggingSettings()

        if self.config_file is not None:
            self._load_config()
        else:
            self.logger.warning("No configuration file found, using defaults")

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in standard locations"""
        possible_locations = [
            Path('config/benchvault.yml'),
            Path.home() / '.config' / 'benchvault' / 'benchvault.yml'
        ]

        for location in possible_locations:
            if location.exists():
                self.logger.info(f"Found config file at {location}")
                return location

        return None

    def _load_config(self):
        """Load configuration from file"""
        try:
            with open(self.config_file, 'r') as f:
                config_data = yaml.safe_load(f) or {}

            self.parsing = ParsingConfig(**config_data.get('parsing', {}))
            self.resolver = ResolverConfig(**config_data.get('resolver', {}))
            self.storage = StorageConfig(**config_data.get('storage', {}))
            self.logging = LoggingSettings(**config_data.get('logging', {}))

            self.logger.info(f"Loaded configuration from {self.config_file}")

        except Exception as e:
            self.logger.error(f"Failed to load configuration: {e}")
            raise


def create_default_config(config_path) -> Path:
    """Write a configuration file holding every default value"""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config = {
        'parsing': asdict(ParsingConfig()),
        'resolver': asdict(ResolverConfig()),
        'storage': asdict(StorageConfig()),
        'logging': asdict(LoggingSettings())
    }

    with open(config_path, 'w') as f:
        yaml.dump(default_config, f, default_flow_style=False, indent=2)

    logging.getLogger('config_manager').info(f"Created default configuration at {config_path}")
    return config_path


# Global configuration instance
config_manager = None


def get_config() -> ConfigManager:
    """Get global configuration manager instance"""
    global config_manager
    if config_manager is None:
        config_manager = ConfigManager()
    return config_manager


def initialize_config(config_file: str = None) -> ConfigManager:
    """Initialize configuration manager with specific config file"""
    global config_manager
    config_manager = ConfigManager(config_file)
    return config_manager

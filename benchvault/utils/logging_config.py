# benchvault/utils/logging_config.py
"""
Centralized logging configuration for benchmark ingestion.
"""

import logging
import logging.handlers
from pathlib import Path


class LoggingConfig:
    """Manages logging configuration for the entire application"""

    @staticmethod
    def setup_logging(log_level='INFO', enable_debug=False, log_to_file=False, log_dir='logs'):
        """
        Set up logging for the application

        Args:
            log_level: Default log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
            enable_debug: Enable debug logging for troubleshooting
            log_to_file: Whether to log to files
            log_dir: Directory receiving the log files
        """
        level = logging.DEBUG if enable_debug else getattr(logging, log_level.upper())

        # Configure root logger
        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Clear existing handlers
        root_logger.handlers.clear()

        # Create formatters
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        # Console handler goes to stderr so JSON output stays clean
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(simple_formatter)
        root_logger.addHandler(console_handler)

        if log_to_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)

            # Main application log file (rotating)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path / 'benchvault.log', maxBytes=10 * 1024 * 1024, backupCount=5
            )
            file_handler.setLevel(logging.DEBUG if enable_debug else logging.INFO)
            file_handler.setFormatter(detailed_formatter)
            root_logger.addHandler(file_handler)

            # Error log file (errors only)
            error_handler = logging.handlers.RotatingFileHandler(
                log_path / 'errors.log', maxBytes=5 * 1024 * 1024, backupCount=3
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(detailed_formatter)
            root_logger.addHandler(error_handler)

        # Configure specific loggers
        LoggingConfig._configure_component_loggers(enable_debug)

    @staticmethod
    def _configure_component_loggers(enable_debug):
        """Configure logging levels for specific components"""

        # Parsers report every missing field at DEBUG, too chatty otherwise
        logging.getLogger('parser').setLevel(logging.DEBUG if enable_debug else logging.INFO)
        logging.getLogger('parser_registry').setLevel(logging.DEBUG if enable_debug else logging.WARNING)

        logging.getLogger('config_manager').setLevel(logging.INFO)
        logging.getLogger('processor').setLevel(logging.DEBUG if enable_debug else logging.INFO)
        logging.getLogger('benchmark_store').setLevel(logging.DEBUG if enable_debug else logging.INFO)

    @staticmethod
    def get_logger(name):
        """Get a logger for a specific component"""
        return logging.getLogger(name)


# Convenience functions
def setup_logging(log_level='INFO', enable_debug=False, log_to_file=False, log_dir='logs'):
    """Convenience function to set up logging"""
    LoggingConfig.setup_logging(log_level, enable_debug, log_to_file, log_dir)


def get_logger(name):
    """Convenience function to get a logger"""
    return LoggingConfig.get_logger(name)

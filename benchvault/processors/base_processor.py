# benchvault/processors/base_processor.py
"""
Base processor class that all specific processors inherit from.
Provides the common result container and logging setup.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any
import logging
from datetime import datetime


class ProcessingResult:
    """Container for processing results with metadata"""

    def __init__(self, success: bool, data: Any = None, error: str = None, metadata: Dict = None):
        self.success = success
        self.data = data
        self.error = error
        self.metadata = metadata or {}
        self.timestamp = datetime.now().isoformat()

    def to_dict(self) -> Dict:
        """Convert result to dictionary for serialization"""
        return {
            'success': self.success,
            'data': self.data,
            'error': self.error,
            'metadata': self.metadata,
            'timestamp': self.timestamp
        }


class BaseProcessor(ABC):
    """
    Abstract base class for all data processors.
    """

    def __init__(self, name: str, config: Dict[str, Any]):
        self.name = name
        self.config = config
        self.logger = logging.getLogger(f'processor.{name}')

    @abstractmethod
    def validate_config(self) -> bool:
        """Validate processor configuration. Must be implemented by subclasses."""
        pass

    @abstractmethod
    def process(self, data: Any) -> ProcessingResult:
        """
        Process one submission.

        Args:
            data: Submission to process

        Returns:
            ProcessingResult: Contains processed data or error information
        """
        pass

# benchvault/parsers/base.py
"""
Base class for benchmark report parsers.
Provides the interface for section-specific text extraction.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any
import logging


class BaseReportParser(ABC):
    """
    Base class for section-specific report parsing.

    Each parser implementation handles one section of a benchmark report
    (system information, disk table, network table, Geekbench scores) and
    returns the ExtractedFields attributes it could recognize.
    """

    def __init__(self):
        self.logger = logging.getLogger(f'parser.{self.get_section_name()}')

    @abstractmethod
    def get_section_name(self) -> str:
        """Return the name of the report section this parser handles."""
        pass

    @abstractmethod
    def can_process(self, text: str) -> bool:
        """
        Cheap check whether the report text contains this parser's section.

        Args:
            text: Full report text

        Returns:
            True if parse() is worth running
        """
        pass

    @abstractmethod
    def parse(self, text: str) -> Dict[str, Any]:
        """
        Extract attributes from the report text.

        Args:
            text: Full report text

        Returns:
            Mapping of ExtractedFields attribute names to values. Attributes
            that were not found are left out, never defaulted. Must not raise
            for malformed input.
        """
        pass

# benchvault/parsers/registry.py
"""
Parser registry for benchmark report parsers.
Runs every parser that recognizes the report and merges their results.
"""

from typing import Optional, List, Sequence
import logging

from .base import BaseReportParser
from .fields import FieldParser
from .disk import DiskParser
from .network import NetworkParser
from .geekbench import GeekbenchParser
from ..models import ExtractedFields


class ParserRegistry:
    """
    Registry for report section parsers.

    Parsers return disjoint sets of ExtractedFields attributes, so their
    partial results are merged without conflicts.
    """

    def __init__(self, network_markers: Optional[Sequence[str]] = None):
        """
        Initialize registry with available parsers.

        Args:
            network_markers: Title markers opening the network table section
        """
        self.logger = logging.getLogger('parser_registry')
        self.parsers: List[BaseReportParser] = [
            FieldParser(),
            DiskParser(),
            NetworkParser(network_markers),
            GeekbenchParser(),
        ]
        self.logger.debug(f"Initialized parser registry with {len(self.parsers)} parsers")

    def extract(self, text: str) -> ExtractedFields:
        """
        Run all applicable parsers over a text report.

        Args:
            text: Full report text

        Returns:
            ExtractedFields holding whatever could be recognized
        """
        text = text.replace('\r\n', '\n').replace('\r', '\n')
        merged = {}

        for parser in self.parsers:
            if not parser.can_process(text):
                self.logger.debug(f"Skipping {parser.get_section_name()} parser, section not present")
                continue
            merged.update(parser.parse(text))

        extracted = ExtractedFields(**merged)
        self.logger.debug(f"Extracted attributes: {', '.join(extracted.found_attributes()) or 'none'}")
        return extracted

    def list_parsers(self) -> List[str]:
        """
        Get list of registered parser names.

        Returns:
            List of parser class names
        """
        return [parser.__class__.__name__ for parser in self.parsers]

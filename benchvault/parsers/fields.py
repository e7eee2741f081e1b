# benchvault/parsers/fields.py
"""
Labeled-line field parser.
Pulls "Label : value" facts about the OS, CPU and memory from the system
information block of a report.
"""

import re
from typing import Optional, Dict, Any, List, Tuple

from .base import BaseReportParser


# Candidate labels per attribute, tried in order; first match wins
FIELD_LABELS: List[Tuple[str, Tuple[str, ...]]] = [
    ('provider', (r'ISP',)),
    ('location', (r'Location',)),
    ('distro', (r'Distro',)),
    ('cpu_model', (r'Processor', r'(?:CPU\s+)?Model')),
    ('cpu_cores', (r'CPU\s+cores', r'Cores')),
    ('cpu_speed', (r'Speed',)),
    ('ram_total', (r'RAM',)),
    ('swap_total', (r'Swap',)),
    ('disk_total', (r'Disk',)),
]


def label_pattern(label: str) -> re.Pattern:
    """Compile the regex matching a whole "Label : value" line"""
    return re.compile(rf'^[ \t]*{label}[ \t]*:[ \t]*(.*?)[ \t]*$', re.MULTILINE)


class FieldParser(BaseReportParser):
    """
    Parser for the labeled system information lines.

    Extracts:
    - ISP and location of the host
    - Distribution
    - CPU model, cores and clock speed
    - RAM, swap and disk totals
    """

    def __init__(self):
        super().__init__()
        self.patterns = [
            (attribute, [label_pattern(label) for label in labels])
            for attribute, labels in FIELD_LABELS
        ]

    def get_section_name(self) -> str:
        return 'fields'

    def can_process(self, text: str) -> bool:
        return ':' in text

    def parse(self, text: str) -> Dict[str, Any]:
        parsed = {}

        for attribute, patterns in self.patterns:
            value = self._first_match(text, patterns)
            if value:
                parsed[attribute] = value
            else:
                self.logger.debug(f"No line found for {attribute}")

        # Cores line often carries the clock, e.g. "4 @ 2445.404 MHz"
        if 'cpu_speed' not in parsed and '@' in parsed.get('cpu_cores', ''):
            speed = parsed['cpu_cores'].split('@', 1)[1].strip()
            if speed:
                parsed['cpu_speed'] = speed

        return parsed

    def _first_match(self, text: str, patterns: List[re.Pattern]) -> Optional[str]:
        # An empty "Label :" line does not hide a later filled one
        for pattern in patterns:
            for match in pattern.finditer(text):
                if match.group(1):
                    return match.group(1)
        return None

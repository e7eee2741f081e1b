# benchvault/parsers/disk.py
"""
fio disk speed table parser.
"""

import re
from typing import Optional, Dict, Any, List

from .base import BaseReportParser
from ..models import DiskResult


SPEED = r'([\d.]+[ \t]*[KMG]B/s)'
IOPS = r'\([ \t]*([\d.]+[ \t]*[kKmM]?)[ \t]*\)'

TOTAL_RE = re.compile(
    rf'^[ \t]*Total[ \t]*\|[ \t]*{SPEED}[ \t]*{IOPS}(?:[ \t]*\|[ \t]*{SPEED}[ \t]*{IOPS})?',
    re.MULTILINE
)

# Block sizes covered by the first and second "Total" line. The rows carry no
# block size of their own, so columns are assigned by position.
LINE_BLOCKS = (('4k', '64k'), ('512k', '1m'))


class DiskParser(BaseReportParser):
    """
    Parser for the fio "Total" rows of the disk speed section.

    The first Total row holds the 4k and 64k columns, the second one the 512k
    and 1m columns. A report with a single one-column row is read as 4k only,
    even if the test actually ran another block size.
    """

    def get_section_name(self) -> str:
        return 'disk'

    def can_process(self, text: str) -> bool:
        return 'Total' in text

    def parse(self, text: str) -> Dict[str, Any]:
        results = self.parse_results(text)
        if not results:
            self.logger.debug("No disk Total rows found")
            return {}

        parsed = {'disk_results': results}
        sequential = self.representative_result(results)
        if sequential:
            parsed['derived_write_speed'] = sequential.speed
            parsed['derived_write_iops'] = sequential.iops
        return parsed

    def parse_results(self, text: str) -> List[DiskResult]:
        results = []
        for match, blocks in zip(TOTAL_RE.finditer(text), LINE_BLOCKS):
            speed, iops, second_speed, second_iops = match.groups()
            results.append(DiskResult(block=blocks[0], speed=speed.strip(), iops=iops.strip()))
            if second_speed:
                results.append(DiskResult(block=blocks[1], speed=second_speed.strip(), iops=second_iops.strip()))
        return results

    @staticmethod
    def representative_result(results: List[DiskResult]) -> Optional[DiskResult]:
        """Prefer the 1m (sequential) entry, else the last one"""
        for result in results:
            if result.block == '1m':
                return result
        return results[-1] if results else None

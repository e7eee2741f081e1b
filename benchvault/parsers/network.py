# benchvault/parsers/network.py
"""
iperf3 network speed table parser.
Single forward pass over the report lines with an explicit scan state.
"""

from enum import Enum
from typing import Optional, Dict, Any, List, Sequence

from .base import BaseReportParser
from ..config.settings import DEFAULT_NETWORK_MARKERS
from ..models import NetworkNode
from ..utils.units import to_mbps


COLUMN_DELIMITER = '|'
MIN_CELLS = 4


class ScanState(Enum):
    OUTSIDE = 'outside'
    INSIDE = 'inside'


class NetworkParser(BaseReportParser):
    """
    Parser for the iperf3 "Network Speed Tests" tables.

    A title line enters the section. Inside it, every delimited row that is
    neither the header nor a "---" separator becomes a node. The section ends
    on the first blank line after it produced a node; blank lines before the
    first row belong to the preamble. Another title line (the IPv6 table)
    enters a new section whose nodes are appended.

    Rows are counted per section rather than across the whole report, unlike
    the upstream web parser. A blank line right under the IPv6 title therefore
    stays in the preamble even when the IPv4 table already produced nodes.
    """

    def __init__(self, section_markers: Optional[Sequence[str]] = None):
        super().__init__()
        self.section_markers = tuple(section_markers or DEFAULT_NETWORK_MARKERS)

    def get_section_name(self) -> str:
        return 'network'

    def can_process(self, text: str) -> bool:
        return any(marker in text for marker in self.section_markers)

    def parse(self, text: str) -> Dict[str, Any]:
        nodes = self.parse_nodes(text.splitlines())
        if not nodes:
            self.logger.debug("No network rows found")
            return {}
        return {'network_nodes': nodes}

    def parse_nodes(self, lines: List[str]) -> List[NetworkNode]:
        nodes = []
        state = ScanState.OUTSIDE
        section_rows = 0

        for line in lines:
            if self._is_title(line):
                state = ScanState.INSIDE
                section_rows = 0
                continue

            if state is ScanState.OUTSIDE:
                continue

            if not line.strip():
                if section_rows > 0:
                    state = ScanState.OUTSIDE
                continue

            if self._is_data_row(line):
                node = self._parse_row(line)
                if node:
                    nodes.append(node)
                    section_rows += 1

        return nodes

    def _is_title(self, line: str) -> bool:
        return any(marker in line for marker in self.section_markers)

    def _is_data_row(self, line: str) -> bool:
        if COLUMN_DELIMITER not in line:
            return False
        if 'provider' in line.lower():
            return False
        return '---' not in line

    def _parse_row(self, line: str) -> Optional[NetworkNode]:
        cells = [cell.strip() for cell in line.split(COLUMN_DELIMITER)]
        if len(cells) < MIN_CELLS:
            self.logger.debug(f"Skipping short network row: {line.strip()}")
            return None

        provider, location, send, recv = cells[:4]
        return NetworkNode(
            provider=provider,
            location=location,
            send=send,
            recv=recv,
            send_mbps=to_mbps(send),
            recv_mbps=to_mbps(recv),
            ping=cells[4] if len(cells) > 4 else ''
        )

# benchvault/parsers/__init__.py
"""
Benchmark report parsers package.

Each parser extracts one section of a YABS text report:
- FieldParser: labeled "Label : value" system information lines
- DiskParser: fio "Total" rows
- NetworkParser: iperf3 speed tables
- GeekbenchParser: single-core and multi-core scores

Usage:
    from benchvault.parsers import ParserRegistry

    extracted = ParserRegistry().extract(report_text)
"""

from .base import BaseReportParser
from .fields import FieldParser
from .disk import DiskParser
from .network import NetworkParser, ScanState
from .geekbench import GeekbenchParser
from .registry import ParserRegistry

__all__ = [
    'BaseReportParser',
    'FieldParser',
    'DiskParser',
    'NetworkParser',
    'ScanState',
    'GeekbenchParser',
    'ParserRegistry',
]

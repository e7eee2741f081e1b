# benchvault/parsers/geekbench.py
"""
Geekbench score parser.
"""

import re
from typing import Dict, Any

from .base import BaseReportParser


SINGLE_CORE_RE = re.compile(r'Single Core[ \t]*[:|][ \t]*(\d+)')
MULTI_CORE_RE = re.compile(r'Multi Core[ \t]*[:|][ \t]*(\d+)')


class GeekbenchParser(BaseReportParser):
    """Extracts the single-core and multi-core integer scores"""

    def get_section_name(self) -> str:
        return 'geekbench'

    def can_process(self, text: str) -> bool:
        return 'Core' in text

    def parse(self, text: str) -> Dict[str, Any]:
        parsed = {}

        single = SINGLE_CORE_RE.search(text)
        if single:
            parsed['geekbench_single'] = single.group(1)

        multi = MULTI_CORE_RE.search(text)
        if multi:
            parsed['geekbench_multi'] = multi.group(1)

        return parsed

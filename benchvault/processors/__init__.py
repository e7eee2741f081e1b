# benchvault/processors/__init__.py
"""
Processors package for benchmark ingestion.
Contains the payload reader, the record resolver and the ingest entry point.
"""

from .base_processor import BaseProcessor, ProcessingResult
from .resolver import RecordResolver, ResolutionRule, RESOLUTION_RULES, resolve
from .ingest_processor import (
    IngestProcessor,
    ReportIngestor,
    UnrecognizedReportError,
    ingest_report
)

__all__ = [
    'BaseProcessor',
    'ProcessingResult',
    'RecordResolver',
    'ResolutionRule',
    'RESOLUTION_RULES',
    'resolve',
    'IngestProcessor',
    'ReportIngestor',
    'UnrecognizedReportError',
    'ingest_report'
]

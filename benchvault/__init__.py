# benchvault/__init__.py
"""
Server Benchmark Vault: ingestion and normalization of YABS benchmark reports.
"""

from .models import (
    BenchmarkRecord,
    DiskResult,
    ExtractedFields,
    NetworkNode,
    OverrideSet,
    ResolvedRecord
)
from .processors import ReportIngestor, UnrecognizedReportError, ingest_report

__all__ = [
    'BenchmarkRecord',
    'DiskResult',
    'ExtractedFields',
    'NetworkNode',
    'OverrideSet',
    'ResolvedRecord',
    'ReportIngestor',
    'UnrecognizedReportError',
    'ingest_report'
]

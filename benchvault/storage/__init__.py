# benchvault/storage/__init__.py
"""
Storage for finalized benchmark records
"""

from .benchmark_store import BenchmarkStore

__all__ = ['BenchmarkStore']

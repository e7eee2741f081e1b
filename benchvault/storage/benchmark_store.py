# benchvault/storage/benchmark_store.py
"""
SQLite store for finalized benchmark records.
"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import Optional, Dict, Any, List, Union

from ..models import BenchmarkRecord, ResolvedRecord


SCHEMA = """
CREATE TABLE IF NOT EXISTS benchmarks (
    id TEXT PRIMARY KEY,
    server_name TEXT NOT NULL,
    timestamp TEXT NOT NULL,
    provider TEXT NOT NULL,
    location TEXT NOT NULL,
    distro TEXT NOT NULL,
    cpu_model TEXT NOT NULL,
    cpu_cores TEXT NOT NULL,
    ram_total TEXT NOT NULL,
    write_speed TEXT NOT NULL,
    geekbench_single TEXT NOT NULL,
    geekbench_multi TEXT NOT NULL,
    raw_data TEXT NOT NULL
)
"""

COLUMNS = (
    'id', 'server_name', 'timestamp', 'provider', 'location', 'distro',
    'cpu_model', 'cpu_cores', 'ram_total', 'write_speed',
    'geekbench_single', 'geekbench_multi', 'raw_data'
)

SUMMARY_COLUMNS = ('id', 'server_name', 'timestamp', 'provider', 'location', 'cpu_model')


class BenchmarkStore:
    """
    Persists benchmark records and returns them unchanged by id.
    Records are insert-only; the raw_data tree is stored as JSON.
    """

    def __init__(self, database_path: Union[str, Path] = ':memory:'):
        self.logger = logging.getLogger('benchmark_store')
        self.database_path = str(database_path)

        if self.database_path != ':memory:':
            Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)

        self.connection = sqlite3.connect(self.database_path)
        self.connection.row_factory = sqlite3.Row
        with self.connection:
            self.connection.execute(SCHEMA)
        self.logger.debug(f"Opened benchmark store at {self.database_path}")

    def save(self, record: Union[ResolvedRecord, BenchmarkRecord]) -> BenchmarkRecord:
        """
        Persist a record, assigning id and timestamp when it has none.

        Args:
            record: Resolved or finalized record

        Returns:
            The stored BenchmarkRecord
        """
        if not isinstance(record, BenchmarkRecord):
            record = record.finalize()

        row = record.to_dict()
        row['raw_data'] = json.dumps(row['raw_data'], default=str)

        placeholders = ', '.join('?' for _ in COLUMNS)
        with self.connection:
            self.connection.execute(
                f"INSERT INTO benchmarks ({', '.join(COLUMNS)}) VALUES ({placeholders})",
                [row[column] for column in COLUMNS]
            )

        self.logger.info(f"Saved benchmark {record.id} ({record.server_name})")
        return record

    def get(self, record_id: str) -> Optional[BenchmarkRecord]:
        """Fetch a record by id, or None if it does not exist"""
        row = self.connection.execute(
            "SELECT * FROM benchmarks WHERE id = ?", (record_id,)
        ).fetchone()
        if row is None:
            self.logger.debug(f"Benchmark {record_id} not found")
            return None
        return self._from_row(row)

    def list_benchmarks(self) -> List[Dict[str, Any]]:
        """Summary rows for every stored record, newest first"""
        rows = self.connection.execute(
            f"SELECT {', '.join(SUMMARY_COLUMNS)} FROM benchmarks ORDER BY timestamp DESC"
        ).fetchall()
        return [dict(row) for row in rows]

    def close(self):
        self.connection.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    @staticmethod
    def _from_row(row: sqlite3.Row) -> BenchmarkRecord:
        data = dict(row)
        data['raw_data'] = json.loads(data['raw_data']) if data['raw_data'] else {}
        return BenchmarkRecord.from_dict(data)

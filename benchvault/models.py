# benchvault/models.py
"""
Data model for benchmark ingestion.
Partial extraction results, caller overrides and the canonical benchmark record.
"""

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Dict, Any, List, Optional


logger = logging.getLogger('models')

BLOCK_SIZES = ('4k', '64k', '512k', '1m')


@dataclass(frozen=True)
class DiskResult:
    """One fio block-size measurement"""
    block: str
    speed: str
    iops: str

    def to_dict(self) -> Dict[str, str]:
        return {'block': self.block, 'speed': self.speed, 'iops': self.iops}


@dataclass(frozen=True)
class NetworkNode:
    """One iperf3 peer with its measured rates and latency"""
    provider: str
    location: str
    send: str
    recv: str
    send_mbps: float
    recv_mbps: float
    ping: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'provider': self.provider,
            'location': self.location,
            'send': self.send,
            'recv': self.recv,
            'send_mbps': self.send_mbps,
            'recv_mbps': self.recv_mbps,
            'ping': self.ping
        }


@dataclass
class ExtractedFields:
    """
    Partial record produced by the parsers or read from a structured payload.
    Every attribute is optional; None means the value was not found.
    """
    server_name: Optional[str] = None
    provider: Optional[str] = None
    location: Optional[str] = None
    distro: Optional[str] = None
    cpu_model: Optional[str] = None
    cpu_cores: Optional[str] = None
    cpu_speed: Optional[str] = None
    ram_total: Optional[str] = None
    swap_total: Optional[str] = None
    disk_total: Optional[str] = None
    disk_results: List[DiskResult] = field(default_factory=list)
    derived_write_speed: Optional[str] = None
    derived_write_iops: Optional[str] = None
    network_nodes: List[NetworkNode] = field(default_factory=list)
    geekbench_single: Optional[str] = None
    geekbench_multi: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the nested report tree.

        The same shape is accepted back as a structured payload, so a stored
        raw_data tree can be re-ingested.
        """
        return {
            'server_name': self.server_name,
            'os': {
                'provider': self.provider,
                'location': self.location,
                'distro': self.distro
            },
            'cpu': {
                'model': self.cpu_model,
                'cores': self.cpu_cores,
                'speed': self.cpu_speed
            },
            'mem': {
                'ram_total': self.ram_total,
                'swap_total': self.swap_total,
                'disk_total': self.disk_total
            },
            'disk': {
                'results': [result.to_dict() for result in self.disk_results],
                'write_speed': self.derived_write_speed,
                'iops': self.derived_write_iops
            },
            'network': [node.to_dict() for node in self.network_nodes],
            'geekbench': {
                'single_core': self.geekbench_single,
                'multi_core': self.geekbench_multi
            }
        }

    def found_attributes(self) -> List[str]:
        """Names of the attributes that hold a value"""
        return [f.name for f in fields(self) if getattr(self, f.name)]


@dataclass(frozen=True)
class OverrideSet:
    """Caller-supplied values that take precedence over extracted ones"""
    server_name: Optional[str] = None
    provider: Optional[str] = None
    location: Optional[str] = None
    distro: Optional[str] = None
    cpu_model: Optional[str] = None
    cpu_cores: Optional[str] = None
    ram_total: Optional[str] = None
    write_speed: Optional[str] = None
    geekbench_single: Optional[str] = None
    geekbench_multi: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'OverrideSet':
        """Build an override set from a mapping, ignoring unknown keys"""
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            logger.warning(f"Ignoring overrides of type {type(data).__name__}, expected a mapping")
            return cls()

        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown override '{key}'")
                continue
            values[key] = None if value is None else str(value)
        return cls(**values)


@dataclass(frozen=True)
class ResolvedRecord:
    """Canonical record before identity assignment"""
    server_name: str
    provider: str
    location: str
    distro: str
    cpu_model: str
    cpu_cores: str
    ram_total: str
    write_speed: str
    geekbench_single: str
    geekbench_multi: str
    raw_data: Dict[str, Any]

    def finalize(self, record_id: Optional[str] = None, timestamp: Optional[str] = None) -> 'BenchmarkRecord':
        """
        Assign identity fields and return the persisted form of the record.

        Args:
            record_id: Identifier to use, a random UUID hex string if omitted
            timestamp: ISO-8601 creation instant, the current UTC time if omitted

        Returns:
            BenchmarkRecord carrying the same values
        """
        values = {f.name: getattr(self, f.name) for f in fields(ResolvedRecord)}
        return BenchmarkRecord(
            id=record_id or uuid.uuid4().hex,
            timestamp=timestamp or datetime.now(timezone.utc).isoformat(),
            **values
        )


@dataclass(frozen=True)
class BenchmarkRecord(ResolvedRecord):
    """Finalized benchmark record handed to storage"""
    id: str
    timestamp: str

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BenchmarkRecord':
        return cls(**{f.name: data[f.name] for f in fields(cls)})

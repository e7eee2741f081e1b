# benchvault/processors/payload.py
"""
Structured payload reader.
Decodes JSON submissions and reads the nested report tree into ExtractedFields.
"""

import json
import logging
from collections.abc import Mapping
from typing import Optional, Dict, Any, List

from ..models import BLOCK_SIZES, DiskResult, ExtractedFields, NetworkNode
from ..parsers.disk import DiskParser
from ..utils.units import to_mbps


logger = logging.getLogger('processor.payload')


def decode_payload(raw: Any) -> Optional[Dict[str, Any]]:
    """
    Interpret a submission as a structured payload.

    Args:
        raw: Mapping, or text that may hold a JSON object

    Returns:
        The payload as a dict, or None if the submission is not structured
    """
    if isinstance(raw, Mapping):
        return dict(raw)
    if not isinstance(raw, str):
        return None

    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError:
        return None

    if not isinstance(decoded, dict):
        logger.debug(f"JSON submission is a {type(decoded).__name__}, not an object")
        return None
    return decoded


def fields_from_payload(payload: Dict[str, Any]) -> ExtractedFields:
    """
    Read the nested report tree produced by ExtractedFields.to_dict().

    Sections that are missing or have the wrong type are treated as absent.
    """
    os_info = _section(payload, 'os')
    cpu = _section(payload, 'cpu')
    mem = _section(payload, 'mem')
    disk = _section(payload, 'disk')
    geekbench = _section(payload, 'geekbench')

    disk_results = _disk_results(disk.get('results'))
    write_speed = _text(disk.get('write_speed'))
    write_iops = _text(disk.get('iops'))
    if write_speed is None and disk_results:
        sequential = DiskParser.representative_result(disk_results)
        write_speed = sequential.speed
        write_iops = sequential.iops

    cpu_cores = _text(cpu.get('cores'))
    cpu_speed = _text(cpu.get('speed'))
    if cpu_speed is None and cpu_cores and '@' in cpu_cores:
        cpu_speed = cpu_cores.split('@', 1)[1].strip() or None

    return ExtractedFields(
        server_name=_text(payload.get('server_name')),
        provider=_text(os_info.get('provider')),
        location=_text(os_info.get('location')),
        distro=_text(os_info.get('distro')),
        cpu_model=_text(cpu.get('model')),
        cpu_cores=cpu_cores,
        cpu_speed=cpu_speed,
        ram_total=_text(mem.get('ram_total')),
        swap_total=_text(mem.get('swap_total')),
        disk_total=_text(mem.get('disk_total')),
        disk_results=disk_results,
        derived_write_speed=write_speed,
        derived_write_iops=write_iops,
        network_nodes=_network_nodes(payload.get('network')),
        geekbench_single=_text(geekbench.get('single_core')),
        geekbench_multi=_text(geekbench.get('multi_core'))
    )


def _section(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, Mapping) else {}


def _text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (Mapping, list)):
        return None
    text = str(value).strip()
    return text or None


def _disk_results(items: Any) -> List[DiskResult]:
    """Keep one well-formed entry per block size, in block size order"""
    if not isinstance(items, list):
        return []

    by_block = {}
    for item in items:
        if not isinstance(item, Mapping):
            continue
        block = _text(item.get('block'))
        speed = _text(item.get('speed'))
        if block not in BLOCK_SIZES or speed is None or block in by_block:
            continue
        by_block[block] = DiskResult(block=block, speed=speed, iops=_text(item.get('iops')) or '')

    return [by_block[block] for block in BLOCK_SIZES if block in by_block]


def _network_nodes(items: Any) -> List[NetworkNode]:
    if not isinstance(items, list):
        return []

    nodes = []
    for item in items:
        if not isinstance(item, Mapping):
            continue
        send = _text(item.get('send')) or ''
        recv = _text(item.get('recv')) or ''
        nodes.append(NetworkNode(
            provider=_text(item.get('provider')) or '',
            location=_text(item.get('location')) or '',
            send=send,
            recv=recv,
            send_mbps=_rate(item.get('send_mbps'), send),
            recv_mbps=_rate(item.get('recv_mbps'), recv),
            ping=_text(item.get('ping')) or ''
        ))
    return nodes


def _rate(value: Any, label: str) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return to_mbps(label)

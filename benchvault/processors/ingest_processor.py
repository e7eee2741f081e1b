# benchvault/processors/ingest_processor.py
"""
Ingest Processor
Top-level entry point turning a pasted benchmark report, or a structured
payload, into a canonical benchmark record.
"""

import logging
from collections.abc import Mapping
from typing import Optional, Dict, Any, Sequence, Union

from .base_processor import BaseProcessor, ProcessingResult
from .payload import decode_payload, fields_from_payload
from .resolver import RecordResolver
from ..config.settings import ConfigManager, ResolverConfig
from ..models import OverrideSet, ResolvedRecord
from ..parsers.registry import ParserRegistry


PARSE_ERROR = "could not parse benchmark report"

Overrides = Union[OverrideSet, Mapping, None]


class UnrecognizedReportError(ValueError):
    """Raised when a submission is neither a structured payload nor report text"""

    def __init__(self, detail: str = None):
        message = PARSE_ERROR if not detail else f"{PARSE_ERROR}: {detail}"
        super().__init__(message)


class ReportIngestor:
    """
    Runs one submission through payload decoding or text extraction, then
    through the record resolver. Holds no per-call state.
    """

    def __init__(
        self,
        network_markers: Optional[Sequence[str]] = None,
        resolver_config: Optional[ResolverConfig] = None
    ):
        self.registry = ParserRegistry(network_markers)
        self.resolver = RecordResolver(resolver_config)
        self.logger = logging.getLogger('processor.ingest')

    @classmethod
    def from_config(cls, config: ConfigManager) -> 'ReportIngestor':
        return cls(config.parsing.network_section_markers, config.resolver)

    def ingest(self, raw: Any, overrides: Overrides = None) -> ResolvedRecord:
        """
        Ingest one submission.

        Args:
            raw: Mapping payload, JSON text or YABS report text
            overrides: Caller corrections, as an OverrideSet or a mapping

        Returns:
            ResolvedRecord; identity is assigned by the caller

        Raises:
            UnrecognizedReportError: Submission is empty or of an unusable type
        """
        if raw is None:
            raise UnrecognizedReportError("no input")
        if isinstance(raw, bytes):
            raw = raw.decode('utf-8', errors='replace')
        if isinstance(raw, str) and not raw.strip():
            raise UnrecognizedReportError("input is empty")
        if not isinstance(raw, (str, Mapping)):
            raise UnrecognizedReportError(f"unsupported input type {type(raw).__name__}")

        if not isinstance(overrides, OverrideSet):
            overrides = OverrideSet.from_dict(overrides)

        payload = decode_payload(raw)
        if payload is not None:
            self.logger.info("Ingesting structured payload")
            extracted = fields_from_payload(payload)
            return self.resolver.resolve(extracted, overrides, raw_data=payload)

        self.logger.info("Ingesting report text")
        extracted = self.registry.extract(raw)
        if not extracted.found_attributes():
            self.logger.warning("Nothing recognizable in report text, record will hold defaults only")
        return self.resolver.resolve(extracted, overrides)


def ingest_report(
    raw: Any,
    overrides: Overrides = None,
    config: Union[ConfigManager, ResolverConfig, None] = None
) -> ResolvedRecord:
    """
    Ingest one submission.

    Args:
        raw: Mapping payload, JSON text or YABS report text
        overrides: Caller corrections, as an OverrideSet or a mapping
        config: Loaded ConfigManager, or just the placeholder settings;
            built-in defaults apply when omitted

    Returns:
        ResolvedRecord without identity
    """
    if isinstance(config, ConfigManager):
        ingestor = ReportIngestor.from_config(config)
    else:
        ingestor = ReportIngestor(resolver_config=config)
    return ingestor.ingest(raw, overrides)


class IngestProcessor(BaseProcessor):
    """
    Processor wrapper around ReportIngestor.

    Accepts either a bare submission or {'data': ..., 'overrides': {...}} and
    reports the finalized record through a ProcessingResult.
    """

    def __init__(self, name: str = 'ingest', config: Dict[str, Any] = None):
        """
        Initialize ingest processor

        Args:
            name: Processor name
            config: Optional 'network_section_markers' and 'resolver' settings
        """
        super().__init__(name, config or {})
        resolver_config = self.config.get('resolver')
        if isinstance(resolver_config, Mapping):
            resolver_config = ResolverConfig(**resolver_config)
        self.ingestor = ReportIngestor(self.config.get('network_section_markers'), resolver_config)

    def validate_config(self) -> bool:
        markers = self.config.get('network_section_markers')
        if markers is not None and (not isinstance(markers, (list, tuple)) or not markers):
            self.logger.error("network_section_markers must be a non-empty list")
            return False
        return True

    def process(self, data: Any) -> ProcessingResult:
        raw, overrides = self._split_submission(data)
        try:
            record = self.ingestor.ingest(raw, overrides).finalize()
        except UnrecognizedReportError as e:
            self.logger.error(str(e))
            return ProcessingResult(success=False, error=str(e))

        return ProcessingResult(
            success=True,
            data=record.to_dict(),
            metadata={'record_id': record.id, 'server_name': record.server_name}
        )

    def _split_submission(self, data: Any):
        if isinstance(data, Mapping) and 'data' in data:
            return data['data'], data.get('overrides')
        return data, None

# benchvault/processors/resolver.py
"""
Record resolver.
Merges extracted values with caller overrides and placeholder defaults into
the canonical benchmark record.
"""

import copy
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple

from ..config.settings import ResolverConfig
from ..models import ExtractedFields, OverrideSet, ResolvedRecord


TEXT = 'text'
SCORE = 'score'


@dataclass(frozen=True)
class ResolutionRule:
    """
    Precedence rule for one record attribute: override > extracted > default.
    The kind (TEXT or SCORE) picks which placeholder is the default.
    """
    attribute: str
    source: str
    kind: str


RESOLUTION_RULES: Tuple[ResolutionRule, ...] = (
    ResolutionRule('provider', 'provider', TEXT),
    ResolutionRule('location', 'location', TEXT),
    ResolutionRule('distro', 'distro', TEXT),
    ResolutionRule('cpu_model', 'cpu_model', TEXT),
    ResolutionRule('cpu_cores', 'cpu_cores', TEXT),
    ResolutionRule('ram_total', 'ram_total', TEXT),
    ResolutionRule('write_speed', 'derived_write_speed', TEXT),
    ResolutionRule('geekbench_single', 'geekbench_single', SCORE),
    ResolutionRule('geekbench_multi', 'geekbench_multi', SCORE),
)

# Extracted attributes tried, in order, when no server name was given
SERVER_NAME_SOURCES = ('server_name', 'provider', 'location')


def present(value: Any) -> Optional[str]:
    """Return the value as a stripped string, or None if it is empty"""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class RecordResolver:
    """
    Resolves ExtractedFields and an OverrideSet into a ResolvedRecord.

    Resolution depends only on its arguments and the placeholder
    configuration, so resolving the same pair twice gives equal records.
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        self.config = config or ResolverConfig()
        self.logger = logging.getLogger('processor.resolver')

    def resolve(
        self,
        extracted: ExtractedFields,
        overrides: Optional[OverrideSet] = None,
        raw_data: Optional[Dict[str, Any]] = None
    ) -> ResolvedRecord:
        """
        Build the canonical record.

        Args:
            extracted: Values found in the report
            overrides: Caller corrections, applied first
            raw_data: Original structured payload; the extracted tree is
                attached when omitted

        Returns:
            ResolvedRecord with every scalar attribute set
        """
        overrides = overrides or OverrideSet()

        values = {
            rule.attribute: self.resolve_attribute(rule, extracted, overrides)
            for rule in RESOLUTION_RULES
        }
        values['server_name'] = self.resolve_server_name(extracted, overrides)

        if raw_data is None:
            raw_data = extracted.to_dict()

        return ResolvedRecord(raw_data=copy.deepcopy(raw_data), **values)

    def resolve_attribute(self, rule: ResolutionRule, extracted: ExtractedFields, overrides: OverrideSet) -> str:
        override = present(getattr(overrides, rule.attribute))
        if override is not None:
            return override

        value = present(getattr(extracted, rule.source))
        if value is not None:
            return value

        self.logger.debug(f"{rule.attribute} unresolved, using default")
        return self.default_for(rule.kind)

    def resolve_server_name(self, extracted: ExtractedFields, overrides: OverrideSet) -> str:
        """
        Server name precedence: override, explicit name, provider, location,
        first word of the CPU model, placeholder.
        """
        override = present(overrides.server_name)
        if override is not None:
            return override

        for source in SERVER_NAME_SOURCES:
            value = present(getattr(extracted, source))
            if value is not None:
                return value

        cpu_model = present(extracted.cpu_model)
        if cpu_model is not None:
            return cpu_model.split()[0]

        return str(self.config.unnamed_server)

    def default_for(self, kind: str) -> str:
        if kind == SCORE:
            return str(self.config.score_default)
        return str(self.config.unknown_value)


def resolve(
    extracted: ExtractedFields,
    overrides: Optional[OverrideSet] = None,
    raw_data: Optional[Dict[str, Any]] = None,
    config: Optional[ResolverConfig] = None
) -> ResolvedRecord:
    """Convenience function resolving with the given placeholder configuration"""
    return RecordResolver(config).resolve(extracted, overrides, raw_data)

"""
End-to-end tests for report ingestion.
"""

import json

import pytest
import yaml

from benchvault.config.settings import ConfigManager, ResolverConfig
from benchvault.models import ExtractedFields, OverrideSet
from benchvault.processors.ingest_processor import (
    IngestProcessor,
    ReportIngestor,
    UnrecognizedReportError,
    ingest_report
)
from benchvault.processors.payload import decode_payload, fields_from_payload


class TestTextIngestion:
    """Text reports go through the parsers and the resolver"""

    def test_sample_report(self, sample_report):
        record = ingest_report(sample_report)

        assert record.cpu_model == 'AMD EPYC 7763 64-Core Processor'
        assert record.geekbench_single == '1852'
        assert record.geekbench_multi == '6241'
        assert len(record.raw_data['network']) == 2
        assert record.raw_data['disk']['results'] == [
            {'block': '4k', 'speed': '278.94 MB/s', 'iops': '69.7k'}
        ]
        assert record.write_speed == '278.94 MB/s'
        assert record.raw_data['disk']['write_speed'] == '278.94 MB/s'

    def test_sample_report_scalars(self, sample_report):
        record = ingest_report(sample_report)

        assert record.server_name == 'The Constant Company, LLC'
        assert record.provider == 'The Constant Company, LLC'
        assert record.location == 'Piscataway, New Jersey (NJ)'
        assert record.distro == 'Ubuntu 22.04.4 LTS'
        assert record.cpu_cores == '4 @ 2445.404 MHz'
        assert record.ram_total == '15.6 GiB'
        assert record.raw_data['cpu']['speed'] == '2445.404 MHz'

    def test_network_nodes_keep_order(self, sample_report):
        nodes = ingest_report(sample_report).raw_data['network']

        assert [n['provider'] for n in nodes] == ['Clouvider', 'Vultr']
        assert nodes[1]['send_mbps'] == pytest.approx(9410)
        assert nodes[1]['recv_mbps'] == pytest.approx(924)

    def test_overrides_win(self, sample_report):
        record = ingest_report(sample_report, {'server_name': 'nj-vc2', 'geekbench_single': '1900'})

        assert record.server_name == 'nj-vc2'
        assert record.geekbench_single == '1900'
        assert record.raw_data['geekbench']['single_core'] == '1852'

    def test_unrecognizable_text_gives_defaults(self):
        record = ingest_report("this is not a benchmark")

        assert record.server_name == 'Unnamed Server'
        assert record.cpu_model == 'Unknown'
        assert record.geekbench_multi == '0'

    def test_json_array_is_read_as_text(self):
        record = ingest_report('[1, 2, 3]')

        assert record.provider == 'Unknown'
        assert record.raw_data['network'] == []

    def test_ingestion_is_repeatable(self, sample_report):
        overrides = OverrideSet(location='Newark')

        assert ingest_report(sample_report, overrides) == ingest_report(sample_report, overrides)

    def test_bytes_input(self, sample_report):
        record = ingest_report(sample_report.encode('utf-8'))

        assert record.geekbench_single == '1852'


class TestStructuredIngestion:
    """Structured payloads skip the text parsers"""

    @pytest.fixture
    def payload(self):
        return {
            'server_name': 'lon-edge',
            'os': {'provider': 'Clouvider', 'location': 'London, UK', 'distro': 'Debian 12'},
            'cpu': {'model': 'AMD Ryzen 9 5950X', 'cores': 4},
            'mem': {'ram_total': '8 GiB'},
            'disk': {'results': [
                {'block': '512k', 'speed': '2.1 GB/s', 'iops': '4.1k'},
                {'block': '4k', 'speed': '300 MB/s', 'iops': '75k'},
            ]},
            'network': [{'provider': 'Vultr', 'location': 'NY', 'send': '900 Mbits/sec', 'recv': '1.2 Gbits/sec'}],
            'geekbench': {'single_core': 2100, 'multi_core': '9000'},
            'extra': {'kept': True}
        }

    def test_mapping_payload(self, payload):
        record = ingest_report(payload)

        assert record.server_name == 'lon-edge'
        assert record.provider == 'Clouvider'
        assert record.cpu_cores == '4'
        assert record.geekbench_single == '2100'
        assert record.write_speed == '2.1 GB/s'
        assert record.raw_data == payload

    def test_json_text_payload(self, payload):
        record = ingest_report(json.dumps(payload))

        assert record.cpu_model == 'AMD Ryzen 9 5950X'
        assert record.raw_data['extra'] == {'kept': True}

    def test_stored_tree_can_be_reingested(self, sample_report):
        first = ingest_report(sample_report)
        second = ingest_report(json.dumps(first.raw_data))

        assert second.cpu_model == first.cpu_model
        assert second.write_speed == first.write_speed
        assert second.server_name == first.server_name

    def test_wrongly_typed_sections_are_ignored(self):
        record = ingest_report({'os': 'Ubuntu', 'cpu': ['x'], 'disk': {'results': 'none'}, 'network': {}})

        assert record.distro == 'Unknown'
        assert record.write_speed == 'Unknown'


class TestPayloadReader:
    """Tests for payload decoding helpers"""

    def test_decode_payload(self):
        assert decode_payload('{"a": 1}') == {'a': 1}
        assert decode_payload('not json') is None
        assert decode_payload('"text"') is None
        assert decode_payload(42) is None

    def test_disk_results_are_ordered_and_unique(self):
        extracted = fields_from_payload({'disk': {'results': [
            {'block': '1m', 'speed': '5 GB/s', 'iops': '5k'},
            {'block': '4k', 'speed': '200 MB/s', 'iops': '50k'},
            {'block': '4k', 'speed': '1 MB/s', 'iops': '1'},
            {'block': '2m', 'speed': '9 GB/s', 'iops': '1k'},
        ]}})

        assert [r.block for r in extracted.disk_results] == ['4k', '1m']
        assert extracted.disk_results[0].speed == '200 MB/s'
        assert extracted.derived_write_speed == '5 GB/s'

    def test_network_rates_from_labels(self):
        extracted = fields_from_payload({'network': [
            {'provider': 'A', 'location': 'B', 'send': '1 Gbits/sec', 'recv': 'busy', 'recv_mbps': 12.5}
        ]})
        node = extracted.network_nodes[0]

        assert node.send_mbps == pytest.approx(1000)
        assert node.recv_mbps == 12.5

    def test_speed_from_cores(self):
        extracted = fields_from_payload({'cpu': {'cores': '2 @ 3000.000 MHz'}})

        assert extracted.cpu_speed == '3000.000 MHz'

    def test_round_trip_of_extracted_tree(self, sample_report):
        from benchvault.parsers.registry import ParserRegistry

        extracted = ParserRegistry().extract(sample_report)

        assert fields_from_payload(extracted.to_dict()) == extracted


class TestRejection:
    """Only unusable input raises"""

    @pytest.mark.parametrize("raw", [None, '', '   \n\t', 42, ['report']])
    def test_unusable_input(self, raw):
        with pytest.raises(UnrecognizedReportError, match='could not parse'):
            ingest_report(raw)

    def test_error_is_a_value_error(self):
        assert issubclass(UnrecognizedReportError, ValueError)


class TestReportIngestor:
    """Configured ingestor"""

    def test_custom_markers_and_placeholders(self):
        ingestor = ReportIngestor(['Speedtest'], ResolverConfig(unknown_value='?'))
        record = ingestor.ingest("Speedtest\nA | B | 1 Gbits/sec | 2 Gbits/sec | 3 ms\n")

        assert len(record.raw_data['network']) == 1
        assert record.provider == '?'


class TestIngestReport:
    """Module-level entry point"""

    def test_defaults(self):
        record = ingest_report("nothing useful")

        assert record.provider == 'Unknown'
        assert record.server_name == 'Unnamed Server'

    def test_loaded_configuration(self, tmp_path):
        config_file = tmp_path / 'benchvault.yml'
        config_file.write_text(yaml.dump({
            'parsing': {'network_section_markers': ['Speedtest']},
            'resolver': {'unknown_value': 'n/a', 'unnamed_server': 'anon'}
        }))
        config = ConfigManager(str(config_file))

        record = ingest_report("Speedtest\nA | B | 1 Gbits/sec | 2 Gbits/sec | 3 ms\n", config=config)

        assert len(record.raw_data['network']) == 1
        assert record.provider == 'n/a'
        assert record.server_name == 'anon'

    def test_resolver_settings_only(self):
        record = ingest_report("nothing useful", {'distro': 'Alpine'}, config=ResolverConfig(score_default='-'))

        assert record.distro == 'Alpine'
        assert record.geekbench_multi == '-'

    def test_configuration_is_not_retained(self):
        ingest_report("nothing useful", config=ResolverConfig(unknown_value='n/a'))

        assert ingest_report("nothing useful").provider == 'Unknown'


class TestIngestProcessor:
    """Processor wrapper reporting through ProcessingResult"""

    @pytest.fixture
    def processor(self):
        return IngestProcessor()

    def test_validate_config(self, processor):
        assert processor.validate_config() is True
        assert IngestProcessor(config={'network_section_markers': []}).validate_config() is False

    def test_process_data_with_overrides(self, processor, sample_report):
        result = processor.process({'data': sample_report, 'overrides': {'provider': 'Vultr'}})

        assert result.success is True
        assert result.data['provider'] == 'Vultr'
        assert result.data['id'] == result.metadata['record_id']
        assert result.data['timestamp']

    def test_process_bare_payload(self, processor):
        result = processor.process({'os': {'provider': 'OVH'}})

        assert result.success is True
        assert result.data['server_name'] == 'OVH'

    def test_process_rejection(self, processor):
        result = processor.process({'data': '  '})

        assert result.success is False
        assert 'could not parse' in result.error
        assert result.to_dict()['data'] is None

    def test_process_ignores_non_mapping_overrides(self, processor, sample_report):
        result = processor.process({'data': sample_report, 'overrides': ['provider=x']})

        assert result.success is True
        assert result.data['provider'] == 'The Constant Company, LLC'

    def test_resolver_settings_from_mapping(self):
        processor = IngestProcessor(config={'resolver': {'score_default': 'n/a'}})
        result = processor.process('nothing useful')

        assert result.data['geekbench_single'] == 'n/a'

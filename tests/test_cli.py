"""
Tests for the command line front end.
"""

import json

import pytest

from benchvault import cli


@pytest.fixture
def report_file(tmp_path, sample_report):
    path = tmp_path / 'yabs.txt'
    path.write_text(sample_report, encoding='utf-8')
    return path


@pytest.fixture
def run(tmp_path, monkeypatch, restore_logging):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('HOME', str(tmp_path))

    def _run(*argv):
        return cli.main(['--db', str(tmp_path / 'vault.db'), *argv])
    return _run


class TestParseOverrides:

    def test_pairs(self):
        assert cli.parse_overrides(['server_name=edge=1', 'provider=']) == {'server_name': 'edge=1', 'provider': ''}

    def test_missing_separator(self):
        with pytest.raises(ValueError):
            cli.parse_overrides(['server_name'])


class TestCommands:

    def test_ingest_prints_record(self, run, report_file, capsys):
        assert run('ingest', str(report_file), '--set', 'server_name=nj-1') == 0

        record = json.loads(capsys.readouterr().out)
        assert record['server_name'] == 'nj-1'
        assert record['cpu_model'] == 'AMD EPYC 7763 64-Core Processor'

    def test_save_list_and_show(self, run, report_file, capsys):
        run('ingest', str(report_file), '--save')
        saved = json.loads(capsys.readouterr().out)

        assert run('list') == 0
        summaries = json.loads(capsys.readouterr().out)
        assert [s['id'] for s in summaries] == [saved['id']]

        assert run('show', saved['id']) == 0
        assert json.loads(capsys.readouterr().out) == saved

    def test_show_unknown(self, run, capsys):
        assert run('show', 'nope') == 1
        assert 'not found' in capsys.readouterr().err

    def test_empty_report_is_rejected(self, run, tmp_path, capsys):
        empty = tmp_path / 'empty.txt'
        empty.write_text('   \n')

        assert run('ingest', str(empty)) == 1
        assert 'could not parse benchmark report' in capsys.readouterr().err

    def test_stdin(self, run, monkeypatch, capsys):
        import io
        monkeypatch.setattr('sys.stdin', io.StringIO('{"os": {"provider": "OVH"}}'))

        assert run('ingest', '-') == 0
        assert json.loads(capsys.readouterr().out)['server_name'] == 'OVH'

    def test_db_after_subcommand(self, run, report_file, tmp_path, capsys):
        db_path = tmp_path / 'after.db'

        assert cli.main(['ingest', str(report_file), '--save', '--db', str(db_path)]) == 0
        saved = json.loads(capsys.readouterr().out)

        assert cli.main(['list', '--db', str(db_path)]) == 0
        assert [s['id'] for s in json.loads(capsys.readouterr().out)] == [saved['id']]
        assert db_path.exists()
        assert not (tmp_path / 'data' / 'benchmarks.db').exists()

    def test_top_level_db_kept_when_subcommand_omits_it(self, run, report_file, tmp_path, capsys):
        run('ingest', str(report_file), '--save')
        saved = json.loads(capsys.readouterr().out)

        assert cli.main(['--db', str(tmp_path / 'vault.db'), 'show', saved['id']]) == 0
        assert json.loads(capsys.readouterr().out)['id'] == saved['id']

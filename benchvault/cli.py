# benchvault/cli.py
"""
Command line front end for the benchmark vault.
Ingests YABS reports and browses the stored records.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

from .config.settings import initialize_config
from .processors.ingest_processor import ReportIngestor, UnrecognizedReportError
from .storage.benchmark_store import BenchmarkStore
from .utils.logging_config import setup_logging, get_logger


def parse_overrides(items: List[str]) -> Dict[str, str]:
    """Turn repeated key=value arguments into an override mapping"""
    overrides = {}
    for item in items or []:
        key, sep, value = item.partition('=')
        if not sep or not key.strip():
            raise ValueError(f"invalid override '{item}', expected key=value")
        overrides[key.strip()] = value
    return overrides


def read_report(source: str) -> str:
    if source == '-':
        return sys.stdin.read()
    return Path(source).read_text(encoding='utf-8', errors='replace')


def run_ingest(args, config, logger) -> int:
    ingestor = ReportIngestor.from_config(config)
    resolved = ingestor.ingest(read_report(args.report), parse_overrides(args.overrides))

    if args.save:
        with BenchmarkStore(args.db or config.storage.database_path) as store:
            record = store.save(resolved)
        logger.info(f"Stored benchmark {record.id}")
    else:
        record = resolved.finalize()

    print(json.dumps(record.to_dict(), indent=2))
    return 0


def run_list(args, config, logger) -> int:
    with BenchmarkStore(args.db or config.storage.database_path) as store:
        print(json.dumps(store.list_benchmarks(), indent=2))
    return 0


def run_show(args, config, logger) -> int:
    with BenchmarkStore(args.db or config.storage.database_path) as store:
        record = store.get(args.record_id)
    if record is None:
        print(f"error: benchmark {args.record_id} not found", file=sys.stderr)
        return 1
    print(json.dumps(record.to_dict(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, prog='benchvault')
    parser.add_argument('--config', help='Path to benchvault.yml')
    parser.add_argument('--db', help='SQLite database path (overrides configuration)')
    parser.add_argument('-d', '--debug', action='store_true', help='Show debug info')

    # Also accepted after the subcommand; SUPPRESS keeps a top-level --db intact
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--db', default=argparse.SUPPRESS, help='SQLite database path (overrides configuration)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    ingest = subparsers.add_parser('ingest', parents=[common], help='Parse a YABS report or JSON payload')
    ingest.add_argument('report', metavar='FILE', help="Report file, or '-' for stdin")
    ingest.add_argument(
        '--set', dest='overrides', action='append', metavar='KEY=VALUE',
        help='Override a record field, e.g. --set server_name=edge-1'
    )
    ingest.add_argument('--save', action='store_true', help='Store the record')
    ingest.set_defaults(handler=run_ingest)

    listing = subparsers.add_parser('list', parents=[common], help='List stored benchmarks')
    listing.set_defaults(handler=run_list)

    show = subparsers.add_parser('show', parents=[common], help='Show one stored benchmark')
    show.add_argument('record_id', metavar='ID')
    show.set_defaults(handler=run_show)

    return parser


def main(argv: List[str] = None) -> int:
    args = build_parser().parse_args(argv)

    config = initialize_config(args.config)
    setup_logging(
        config.logging.level,
        enable_debug=args.debug or config.logging.enable_debug,
        log_to_file=config.logging.log_to_file,
        log_dir=config.logging.log_dir
    )
    logger = get_logger('benchvault')

    try:
        return args.handler(args, config, logger)
    except BrokenPipeError:
        return 0
    except (UnrecognizedReportError, ValueError, OSError) as e:
        if args.debug:
            raise
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())

#!/usr/bin/env python3

import argparse
import logging
import sys
from typing import List, Optional

from .errors import OurAirportsError
from .models.serialization import to_json
from .sources import Dataset, DatasetSource, LocalFileSource, OurAirportsSource

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def build_source(args) -> DatasetSource:
    if args.data_dir:
        return LocalFileSource(args.data_dir)
    return OurAirportsSource(timeout=args.timeout, base_url=args.base_url)


def dump(args) -> int:
    """Print one dataset, or one of its records, as JSON."""
    dataset = Dataset.from_name(args.dataset)
    try:
        table = build_source(args).load(dataset)
    except OurAirportsError as e:
        logger.error(str(e))
        return 1

    if args.id is not None:
        record = table.get(args.id)
        if record is None:
            logger.error(f"No {dataset.value} record with id {args.id}")
            return 2
        print(to_json(record, pretty=args.pretty))
    else:
        print(to_json(table, pretty=args.pretty))
    return 0


def serve(args) -> int:
    """Run the HTTP API."""
    # Imported here so that dump does not need the web stack
    from .web.main import run
    run(host=args.host, port=args.port)
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='ourairports-api', description='OurAirports data tool')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    subparsers = parser.add_subparsers(dest='command', required=True)

    dump_parser = subparsers.add_parser('dump', help='Print a dataset as JSON')
    dump_parser.add_argument('dataset', help='Dataset to load',
                             choices=[dataset.value for dataset in Dataset])
    dump_parser.add_argument('--id', help='Only print the record with this id', type=int)
    dump_parser.add_argument('--pretty', help='Indent the JSON output', action='store_true')
    dump_parser.add_argument('--data-dir', help='Read the CSV files from this directory instead of downloading')
    dump_parser.add_argument('--base-url', help='Base URL of the CSV files', default=OurAirportsSource.BASE_URL)
    dump_parser.add_argument('--timeout', help='Download timeout in seconds', type=float,
                             default=OurAirportsSource.DEFAULT_TIMEOUT)
    dump_parser.set_defaults(func=dump)

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP API')
    serve_parser.add_argument('--host', help='Interface to bind', default='127.0.0.1')
    serve_parser.add_argument('--port', help='Port to listen on', type=int, default=8080)
    serve_parser.set_defaults(func=serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())

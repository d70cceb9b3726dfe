#!/usr/bin/env python3
# source of data https://ourairports.com/data/

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import requests

from station_lookup import config
from station_lookup.exceptions import StationLookupError
from station_lookup.resolver import StationResolver

logger = logging.getLogger(__name__)

DATASET_FILES = [
    config.DEFAULT_AIRPORTS_FILE,
    config.DEFAULT_RUNWAYS_FILE,
    config.DEFAULT_FREQUENCIES_FILE,
]


class Command:
    def __init__(self, args):
        self.args = args
        self.data_dir = Path(args.data_dir)

    def run(self) -> int:
        method = f'run_{self.args.command}'
        return getattr(self, method)()

    def run_lookup(self) -> int:
        if not self.args.airports:
            print(json.dumps({'error': 'No ICAO provided'}))
            return 1
        status = 0
        with StationResolver(
            config.get_airports_file(self.data_dir),
            config.get_runways_file(self.data_dir),
            config.get_frequencies_file(self.data_dir),
        ) as resolver:
            for icao in self.args.airports:
                try:
                    print(json.dumps(resolver.resolve(icao).to_dict()))
                except StationLookupError as e:
                    print(json.dumps(e.to_dict()))
                    status = 1
        return status

    def run_download(self) -> int:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        session = requests.Session()
        for name in DATASET_FILES:
            target = self.data_dir / name
            if target.exists() and not self.args.force:
                logger.info(f"{target} already present")
                continue
            url = f"{config.OURAIRPORTS_BASE_URL}/{name}"
            logger.info(f"Downloading {url} to {target}")
            response = session.get(url, timeout=60)
            response.raise_for_status()
            target.write_bytes(response.content)
        return 0

    def run_serve(self) -> int:
        # the app reads its data location from the environment at startup
        os.environ['STATION_DATA_DIR'] = str(self.data_dir)
        from station_lookup.web.main import run
        run(host=self.args.host, port=self.args.port)
        return 0

    @staticmethod
    def choices():
        return [one[4:] for one in dir(Command) if one.startswith('run_')]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Airport station lookup')
    parser.add_argument('command', help='command to execute', choices=Command.choices())
    parser.add_argument('airports', help='list of airports to query', nargs='*')
    parser.add_argument('-d', '--data-dir', help='directory holding the reference csv files',
                        default=str(config.get_data_dir()))
    parser.add_argument('-f', '--force', help='force download even if files exist', action='store_true')
    parser.add_argument('--host', help='address to serve on', default='0.0.0.0')
    parser.add_argument('-p', '--port', help='port to serve on', type=int, default=8000)
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)
    return Command(args).run()


if __name__ == '__main__':
    sys.exit(main())

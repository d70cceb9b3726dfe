import shutil

import pytest
from pathlib import Path

from station_lookup.resolver import StationResolver
from station_lookup.sources.dataset import load_dataset


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def csv_dir(test_assets_dir) -> Path:
    """Return the directory holding the reference csv test files."""
    return test_assets_dir / 'csv'


@pytest.fixture
def data_dir(csv_dir, tmp_path) -> Path:
    """Return a writable copy of the reference csv test files."""
    target = tmp_path / 'data'
    shutil.copytree(csv_dir, target)
    return target


@pytest.fixture
def airports_dataset(csv_dir):
    return load_dataset(csv_dir / 'airports.csv', key='ident')


@pytest.fixture
def runways_dataset(csv_dir):
    return load_dataset(csv_dir / 'runways.csv', key='airport_ident')


@pytest.fixture
def frequencies_dataset(csv_dir):
    return load_dataset(csv_dir / 'frequencies.csv', key='airport_ident')


@pytest.fixture
def resolver(data_dir):
    """Return a StationResolver over a copy of the test files."""
    with StationResolver(
        data_dir / 'airports.csv',
        data_dir / 'runways.csv',
        data_dir / 'frequencies.csv',
    ) as r:
        yield r

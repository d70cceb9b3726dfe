import logging
from pathlib import Path

from station_lookup import config


def test_file_names_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv('STATION_DATA_DIR', str(tmp_path))
    monkeypatch.setenv('STATION_RUNWAYS_FILE', 'rwy.csv')

    assert config.get_runways_file() == tmp_path / 'rwy.csv'
    assert config.get_runways_file(Path('elsewhere')) == Path('elsewhere') / 'rwy.csv'
    assert config.get_airports_file(Path('elsewhere')) == Path('elsewhere') / 'airports.csv'


def test_log_level(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    assert config.get_log_level() == logging.DEBUG


def test_unknown_log_level_defaults_to_info(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'VERBOSE')
    assert config.get_log_level() == logging.INFO


def test_default_log_level(monkeypatch):
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    assert config.get_log_level() == logging.INFO

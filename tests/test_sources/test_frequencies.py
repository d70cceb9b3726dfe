from station_lookup.sources.frequencies import find_frequencies


def test_frequencies_in_file_order(frequencies_dataset):
    freqs = find_frequencies('EGLL', frequencies_dataset)

    assert [f.type for f in freqs] == ['TWR', 'ATIS', 'GND']
    assert freqs[0].desc == 'HEATHROW TOWER'
    assert freqs[1].mhz == '128.075'


def test_mhz_kept_as_written(frequencies_dataset):
    freqs = find_frequencies('lfpg', frequencies_dataset)
    assert freqs[0].to_dict() == {'type': 'TWR', 'desc': 'DE GAULLE TOWER', 'mhz': '119.250'}


def test_no_frequencies(frequencies_dataset):
    assert find_frequencies('KJFK', frequencies_dataset) == []


def test_no_dataset():
    assert find_frequencies('EGLL', None) == []

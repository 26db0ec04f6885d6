"""
Tests for the analyze-park command line entry point
"""

import json

from park_analyzer.main import collect_park_files, main

from park_builders import build_park_file, climate_chunk, scenario_chunk


def write_park(path, compression=0):
    path.write_bytes(build_park_file([
        (0x03, scenario_chunk()),
        (0x05, climate_chunk()),
    ], compression=compression))
    return path


class TestMain:

    def test_writes_analysis_json(self, tmp_path):
        park = write_park(tmp_path / 'forest.park')
        out_dir = tmp_path / 'out'

        assert main([str(park), '--output', str(out_dir)]) == 0

        result = json.loads((out_dir / 'forest_analysis.json').read_text(encoding='utf-8'))
        assert result['file_path'] == str(park)
        assert result['header']['num_chunks'] == 2
        assert result['chunks']['climate']['current']['temperature'] == 22
        assert result['chunks']['scenario']['objective']['type'] == 1

    def test_directory_input(self, tmp_path):
        parks = tmp_path / 'parks'
        parks.mkdir()
        write_park(parks / 'a.park')
        write_park(parks / 'b.park', compression=1)
        (parks / 'notes.txt').write_text('not a park')
        out_dir = tmp_path / 'out'

        assert main([str(parks), '--output', str(out_dir)]) == 0
        assert sorted(p.name for p in out_dir.iterdir()) == ['a_analysis.json', 'b_analysis.json']

    def test_no_files_found(self, tmp_path):
        empty = tmp_path / 'empty'
        empty.mkdir()
        assert main([str(empty), '--output', str(tmp_path / 'out')]) == 1

    def test_failed_file(self, tmp_path):
        bad = tmp_path / 'bad.park'
        bad.write_bytes(b'PARK')
        good = write_park(tmp_path / 'good.park')
        out_dir = tmp_path / 'out'

        assert main([str(bad), str(good), '--output', str(out_dir)]) == 1
        assert (out_dir / 'good_analysis.json').exists()
        assert not (out_dir / 'bad_analysis.json').exists()

    def test_log_file(self, tmp_path):
        park = write_park(tmp_path / 'forest.park')
        log_dir = tmp_path / 'logs'

        assert main([str(park), '--output', str(tmp_path / 'out'),
                     '--log-dir', str(log_dir), '-v']) == 0
        assert len(list(log_dir.glob('park_analyzer_*.log'))) == 1

    def test_collect_keeps_explicit_files(self, tmp_path):
        park = tmp_path / 'custom.sv6'
        park.write_bytes(b'')
        assert collect_park_files([park]) == [park]

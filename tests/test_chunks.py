"""
Tests for the per-chunk decoders and the registry
"""

import pytest

from park_analyzer.chunks import (
    AuthoringChunk,
    ChunkRegistry,
    ClimateChunk,
    GeneralChunk,
    ObjectiveType,
    ParkChunk,
    RawChunk,
    RawChunkData,
    ResearchChunk,
    ScenarioChunk,
    UnknownChunk,
    UnknownChunkData,
    WeatherState,
)
from park_analyzer.chunks.scenario import OBJECTIVE_DESCRIPTIONS, describe_objective
from park_analyzer.errors import OutOfBounds
from park_analyzer.parser import ChunkDescriptor, ChunkId, LocalizedString, ResearchItem

from park_builders import (
    authoring_chunk,
    climate_chunk,
    general_chunk,
    park_chunk,
    park_fixed_fields,
    research_chunk,
    scenario_chunk,
    u32,
    u64,
)


def parse(parser_class, data, chunk_id=None):
    header = ChunkDescriptor(chunk_id or parser_class.CHUNK_ID, 0, len(data))
    return parser_class(header=header, data=data).parse()


class TestAuthoring:

    def test_decode(self):
        record = parse(AuthoringChunk, authoring_chunk(authors=['Chris', 'Ted']))
        assert record.engine == 'OpenRCT2, v0.4.0'
        assert record.authors == ['Chris', 'Ted']
        assert record.date_started == 1600000000
        assert record.date_modified == 1700000000

    def test_no_authors(self):
        record = parse(AuthoringChunk, authoring_chunk(authors=[]))
        assert record.authors == []
        assert record.date_modified == 1700000000


class TestScenario:

    def test_decode(self):
        record = parse(ScenarioChunk, scenario_chunk(objective_type=1, year=3, guests=1500))
        assert record.category == 2
        assert record.name == LocalizedString('en-GB', 'Forest Frontiers')
        assert record.park_name.value == 'Forest Park'
        assert record.details.value == 'Deep in the forest'

        objective = record.objective
        assert objective.type == ObjectiveType.GUESTS_BY
        assert objective.year == 3
        assert objective.guests == 1500
        assert objective.currency == 50000
        assert objective.rating_warning_days == 7
        assert objective.completed_company_value == 123456
        assert objective.allow_early_completion == 1
        assert objective.scenario_file_name == 'forest.park'
        assert '{guests}' in objective.description

    def test_have_fun(self):
        record = parse(ScenarioChunk, scenario_chunk(objective_type=3, guests=9, currency=9))
        assert record.objective.description == 'Have Fun!'
        assert record.objective.describe() == 'Have Fun!'

    def test_unknown_objective(self):
        record = parse(ScenarioChunk, scenario_chunk(objective_type=99))
        assert record.objective.type == 99
        assert record.objective.description is None
        assert record.objective.describe() is None
        assert record.objective.scenario_file_name == 'forest.park'

    def test_describe_fills_placeholders(self):
        record = parse(ScenarioChunk, scenario_chunk(objective_type=1, year=2, guests=800))
        text = record.objective.describe()
        assert '800 guests' in text
        assert 'end of 2' in text

    def test_every_code_has_description(self):
        assert set(OBJECTIVE_DESCRIPTIONS) == set(range(1, 12))
        assert describe_objective(0) is None


class TestGeneral:

    def test_decode(self):
        record = parse(GeneralChunk, general_chunk())
        assert record.current_ticks == 12345
        assert record.date_months_elapsed == 14
        assert record.rand == (0xDEADBEEF, 0xCAFEBABE)
        assert record.guest_initial_cash == 500
        assert record.next_guest_number == 42


class TestClimate:

    def test_temperatures_at_fixed_offsets(self):
        data = climate_chunk(current=(1, 21, 0, 0, 0), forecast=(2, 17, 0, 0, 0), trailing=u32(0))
        assert len(data) == 44
        assert int.from_bytes(data[4:8], 'little') == 21
        assert int.from_bytes(data[24:28], 'little') == 17

        record = parse(ClimateChunk, data)
        assert record.current.temperature == 21
        assert record.next.temperature == 17
        assert record.trailing == b'\x00' * 4

    def test_weather_states(self):
        record = parse(ClimateChunk, climate_chunk())
        assert record.current == WeatherState(1, 22, 0, 0, 0)
        assert record.next == WeatherState(2, 18, 1, 2, 3)
        assert record.trailing == b''

    def test_short_chunk(self):
        with pytest.raises(OutOfBounds):
            parse(ClimateChunk, climate_chunk()[:30])


class TestPark:

    def test_expenditure_table_shape(self):
        table = [[1, 2, 3], [4, 5, 6]]
        record = parse(ParkChunk, park_chunk(expenditure=table))
        assert record.num_months == 2
        assert record.num_types == 3
        assert record.expenditure_table == table

    def test_empty_expenditure_table(self):
        record = parse(ParkChunk, park_chunk(expenditure=[]))
        assert record.expenditure_table == []
        assert record.historical_profit == 777

    def test_fields_after_table(self):
        record = parse(ParkChunk, park_chunk())
        assert record.park_name == 'Forest Frontiers'
        assert record.cash == 10000
        assert record.park_entrance_fee == 100
        assert record.marketing_campaigns == [1, 2]
        assert record.current_awards == []
        assert record.park_value == 250000
        assert record.park_rating == 650
        assert record.total_ride_value_for_money == 90
        assert record.suggested_guest_maximum == 800
        assert record.peep_warning_throttle == [0, 0, 0, 0]
        assert record.weekly_profit_history == []
        assert record.park_value_history == [7, 8, 9]

    def test_oversized_expenditure_table(self):
        data = park_fixed_fields() + u32(0xFFFFFFFF) + u32(0) + u64(777)
        with pytest.raises(OutOfBounds) as excinfo:
            parse(ParkChunk, data)
        assert excinfo.value.requested == 0xFFFFFFFF * 8
        assert excinfo.value.available == 8

    def test_negative_cash_stays_unsigned(self):
        record = parse(ParkChunk, park_chunk(cash=(-500) & 0xFFFFFFFFFFFFFFFF))
        assert record.cash == 2 ** 64 - 500


class TestResearch:

    def test_decode(self):
        record = parse(ResearchChunk, research_chunk())
        assert record.funding_level == 3
        assert record.priorities == 0x7F
        assert record.expected_day == 12
        assert record.last_item == ResearchItem(1, 2, 3, 4, 5)
        assert record.next_item is None
        assert [item.type for item in record.items_uninvented] == [10, 11]
        assert record.items_invented == []


class TestRegistry:

    def test_dispatch_known_layout(self):
        registry = ChunkRegistry()
        key, record = registry.decode(ChunkId.CLIMATE, climate_chunk())
        assert key == 'climate'
        assert record.current.temperature == 22

    def test_undecoded_known_chunk(self):
        registry = ChunkRegistry()
        assert registry.get_parser(ChunkId.TILES) is RawChunk
        key, record = registry.decode(ChunkId.TILES, b'\x01\x02')
        assert key == 'tiles'
        assert record == RawChunkData(chunk_id=0x30, data=b'\x01\x02')

    def test_unknown_chunk(self):
        registry = ChunkRegistry()
        assert registry.get_parser(0x42) is UnknownChunk
        key, record = registry.decode(0x42, memoryview(b'raw'))
        assert key == 0x42
        assert isinstance(record, UnknownChunkData)
        assert record.data == b'raw'

    def test_supported_chunks(self):
        supported = ChunkRegistry().list_supported_chunks()
        assert supported == {
            'authoring': 'AuthoringChunk',
            'scenario': 'ScenarioChunk',
            'general': 'GeneralChunk',
            'climate': 'ClimateChunk',
            'park': 'ParkChunk',
            'research': 'ResearchChunk',
        }

    def test_register_override(self):
        registry = ChunkRegistry()
        registry.register(ChunkId.CLIMATE, RawChunk)
        assert registry.supports_chunk(ChunkId.CLIMATE)
        _, record = registry.decode(ChunkId.CLIMATE, b'\x00')
        assert isinstance(record, RawChunkData)

    def test_to_dict(self):
        _, record = ChunkRegistry().decode(ChunkId.SCENARIO, scenario_chunk(objective_type=3))
        data = record.to_dict()
        assert data['name'] == {'lang': 'en-GB', 'value': 'Forest Frontiers'}
        assert data['objective']['description'] == 'Have Fun!'

# park_analyzer/chunks/climate/parser.py
from dataclasses import dataclass

from ...parser.constants import ChunkId
from ...parser.cursor import ByteCursor
from ..base import BaseChunk, ChunkData
from .entry import WeatherState


@dataclass(frozen=True)
class ClimateData(ChunkData):
    CHUNK_ID = ChunkId.CLIMATE

    current: WeatherState
    next: WeatherState
    trailing: bytes


class ClimateChunk(BaseChunk):
    """Climate (0x05) parser.

    Current weather state at offset 0, the forecast state at offset 20.
    Whatever follows the two states is kept verbatim in `trailing`.
    The game's climate id and climate update timer are not split out as
    fields; any bytes they occupy past the two states end up in
    `trailing`.
    """

    CHUNK_ID = ChunkId.CLIMATE

    def read(self, cursor: ByteCursor) -> ClimateData:
        current = WeatherState.read(cursor)
        forecast = WeatherState.read(cursor)
        return ClimateData(
            current=current,
            next=forecast,
            trailing=cursor.read_byte_array(cursor.remaining),
        )

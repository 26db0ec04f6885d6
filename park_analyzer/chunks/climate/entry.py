# park_analyzer/chunks/climate/entry.py
from dataclasses import dataclass

from ...parser.cursor import ByteCursor


@dataclass(frozen=True)
class WeatherState:
    """One weather snapshot, five u32 fields (20 bytes)."""
    weather: int
    temperature: int
    weather_effect: int
    weather_gloom: int
    level: int

    @classmethod
    def read(cls, cursor: ByteCursor) -> 'WeatherState':
        return cls(
            weather=cursor.read_uint(4),
            temperature=cursor.read_uint(4),
            weather_effect=cursor.read_uint(4),
            weather_gloom=cursor.read_uint(4),
            level=cursor.read_uint(4),
        )

"""Climate chunk parser."""
from .parser import ClimateChunk, ClimateData
from .entry import WeatherState

__all__ = ['ClimateChunk', 'ClimateData', 'WeatherState']

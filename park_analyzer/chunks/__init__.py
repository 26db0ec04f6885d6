# park_analyzer/chunks/__init__.py
"""Park chunk parsers package."""
from .base import BaseChunk, ChunkData, ChunkParsingError, RawChunkData, UnknownChunkData
from .authoring import AuthoringChunk, AuthoringData
from .scenario import ScenarioChunk, ScenarioData, Objective, ObjectiveType
from .general import GeneralChunk, GeneralData
from .climate import ClimateChunk, ClimateData, WeatherState
from .park import ParkChunk, ParkData
from .research import ResearchChunk, ResearchData
from .raw import RawChunk, UnknownChunk
from .registry import ChunkRegistry, chunk_registry

__all__ = [
    'BaseChunk',
    'ChunkData',
    'ChunkParsingError',
    'RawChunkData',
    'UnknownChunkData',
    'AuthoringChunk',
    'AuthoringData',
    'ScenarioChunk',
    'ScenarioData',
    'Objective',
    'ObjectiveType',
    'GeneralChunk',
    'GeneralData',
    'ClimateChunk',
    'ClimateData',
    'WeatherState',
    'ParkChunk',
    'ParkData',
    'ResearchChunk',
    'ResearchData',
    'RawChunk',
    'UnknownChunk',
    'ChunkRegistry',
    'chunk_registry',
]

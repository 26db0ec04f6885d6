# park_analyzer/__init__.py
"""OpenRCT2 park file analyzer package."""
from .parser import ChunkId, ParkFile, ParkFileParser, parse_park_file
from .errors import (
    ChunkParsingError,
    ChunkRangeInvalid,
    DecompressionFailure,
    OutOfBounds,
    ParkFileError,
    TruncatedDirectory,
    TruncatedHeader,
)

__version__ = '0.1.0'

__all__ = [
    'ChunkId',
    'ParkFile',
    'ParkFileParser',
    'parse_park_file',
    'ParkFileError',
    'TruncatedHeader',
    'TruncatedDirectory',
    'DecompressionFailure',
    'OutOfBounds',
    'ChunkParsingError',
    'ChunkRangeInvalid',
]

# park_analyzer/parser/__init__.py
"""Park file container parsing: header, directory and payload."""
from .constants import ChunkId, CompressionMode, PARK_MAGIC, HEADER_SIZE
from .cursor import ByteCursor, LocalizedString, ResearchItem
from .header import Header, read_header
from .directory import ChunkDescriptor, read_directory
from .payload import ChunkPayload, decompress_payload, slice_chunk, sort_descriptors, split_payload
from .file_parser import ChunkFailure, ParkFile, ParkFileParser, parse_park_file, prepare_for_json

__all__ = [
    'ChunkId',
    'CompressionMode',
    'PARK_MAGIC',
    'HEADER_SIZE',
    'ByteCursor',
    'LocalizedString',
    'ResearchItem',
    'Header',
    'read_header',
    'ChunkDescriptor',
    'read_directory',
    'ChunkPayload',
    'decompress_payload',
    'slice_chunk',
    'sort_descriptors',
    'split_payload',
    'ChunkFailure',
    'ParkFile',
    'ParkFileParser',
    'parse_park_file',
    'prepare_for_json',
]

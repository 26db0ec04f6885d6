"""
Chunk parser registry: maps chunk ids to their parsers.
"""
from typing import Dict, Optional, Tuple, Type, Union
import logging

from ..parser.constants import ChunkId
from ..parser.cursor import Buffer
from ..parser.directory import ChunkDescriptor
from .base import BaseChunk, ChunkData
from .authoring import AuthoringChunk
from .climate import ClimateChunk
from .general import GeneralChunk
from .park import ParkChunk
from .raw import RawChunk, UnknownChunk
from .research import ResearchChunk
from .scenario import ScenarioChunk

logger = logging.getLogger(__name__)

ChunkKey = Union[str, int]


class ChunkRegistry:
    """
    Registry of chunk parsers.
    Known chunks without a decoded layout fall back to RawChunk, unknown
    ids to UnknownChunk.
    """

    def __init__(self):
        self._parsers: Dict[int, Type[BaseChunk]] = {}
        self._register_chunk_parsers()

    def _register_chunk_parsers(self) -> None:
        """Register all available chunk parsers."""
        for parser_class in (
            AuthoringChunk,
            ScenarioChunk,
            GeneralChunk,
            ClimateChunk,
            ParkChunk,
            ResearchChunk,
        ):
            self.register(parser_class.CHUNK_ID, parser_class)

    def register(self, chunk_id: int, parser_class: Type[BaseChunk]) -> None:
        """Register a parser for a chunk id, replacing any previous one."""
        self._parsers[chunk_id] = parser_class

    def get_parser(self, chunk_id: int) -> Type[BaseChunk]:
        """Parser class for a chunk id (never None)."""
        if chunk_id in self._parsers:
            return self._parsers[chunk_id]
        if self.is_known(chunk_id):
            return RawChunk
        return UnknownChunk

    def supports_chunk(self, chunk_id: int) -> bool:
        """Check if a decoded layout exists for the chunk id."""
        return chunk_id in self._parsers

    @staticmethod
    def is_known(chunk_id: int) -> bool:
        try:
            ChunkId(chunk_id)
        except ValueError:
            return False
        return True

    @classmethod
    def key_for(cls, chunk_id: int) -> ChunkKey:
        """Output key: the chunk name for known ids, the id itself otherwise."""
        if cls.is_known(chunk_id):
            return ChunkId(chunk_id).key
        return chunk_id

    def list_supported_chunks(self) -> Dict[str, str]:
        """
        List all decoded chunk types

        Returns:
            Dictionary mapping chunk names to parser class names
        """
        return {
            str(self.key_for(chunk_id)): parser_class.__name__
            for chunk_id, parser_class in sorted(self._parsers.items())
        }

    def decode(self,
               chunk_id: int,
               data: Buffer,
               descriptor: Optional[ChunkDescriptor] = None) -> Tuple[ChunkKey, ChunkData]:
        """
        Decode one chunk

        Args:
            chunk_id: Identifier from the chunk directory
            data: The chunk's bytes
            descriptor: Directory entry, built from chunk_id if omitted

        Returns:
            Tuple of (output key, decoded record)
        """
        if descriptor is None:
            descriptor = ChunkDescriptor(chunk_id=chunk_id, offset=0, size=len(data))
        parser_class = self.get_parser(chunk_id)
        logger.debug(f"Decoding chunk {descriptor.name} with {parser_class.__name__}")
        return self.key_for(chunk_id), parser_class(header=descriptor, data=data).parse()


# Global registry instance
chunk_registry = ChunkRegistry()

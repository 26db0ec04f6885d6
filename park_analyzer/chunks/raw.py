# park_analyzer/chunks/raw.py
import logging

from ..parser.cursor import ByteCursor
from .base import BaseChunk, RawChunkData, UnknownChunkData

logger = logging.getLogger(__name__)


class RawChunk(BaseChunk):
    """Pass-through parser for known chunks whose layout is not decoded
    (objects, tiles, entities, rides, ...)."""

    def read(self, cursor: ByteCursor) -> RawChunkData:
        return RawChunkData(
            chunk_id=self.header.chunk_id,
            data=cursor.read_byte_array(cursor.remaining),
        )


class UnknownChunk(BaseChunk):
    """Pass-through parser for unrecognized chunk ids."""

    def read(self, cursor: ByteCursor) -> UnknownChunkData:
        logger.warning(
            f"Unknown chunk id 0x{self.header.chunk_id:02x}, "
            f"keeping {cursor.remaining} raw bytes"
        )
        return UnknownChunkData(
            chunk_id=self.header.chunk_id,
            data=cursor.read_byte_array(cursor.remaining),
        )

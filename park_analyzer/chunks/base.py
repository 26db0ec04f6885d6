"""Base chunk parser and decoded chunk records."""
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Optional
import logging

from ..errors import ChunkParsingError
from ..parser.cursor import Buffer, ByteCursor
from ..parser.directory import ChunkDescriptor

logger = logging.getLogger(__name__)

__all__ = ['BaseChunk', 'ChunkData', 'ChunkParsingError', 'RawChunkData', 'UnknownChunkData']


@dataclass(frozen=True)
class ChunkData:
    """Decoded contents of one chunk."""

    CHUNK_ID: ClassVar[Optional[int]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RawChunkData(ChunkData):
    """Known chunk type whose layout is not decoded; bytes kept verbatim."""
    chunk_id: int
    data: bytes


@dataclass(frozen=True)
class UnknownChunkData(ChunkData):
    """Chunk with an identifier this decoder does not know."""
    chunk_id: int
    data: bytes


class BaseChunk:
    """Base class for chunk parsers."""

    CHUNK_ID: ClassVar[Optional[int]] = None

    def __init__(self, header: Optional[ChunkDescriptor], data: Buffer):
        """Initialize chunk parser.

        Args:
            header: Optional directory entry of the chunk
            data: Raw chunk bytes
        """
        self.header = header
        self.data = data

    def parse(self) -> ChunkData:
        """Parse chunk data.

        Returns:
            Decoded chunk record

        Raises:
            ChunkParsingError: If chunk data is invalid
            OutOfBounds: If the layout runs past the chunk end
        """
        cursor = ByteCursor(self.data)
        record = self.read(cursor)
        self._check_consumed(cursor)
        return record

    def read(self, cursor: ByteCursor) -> ChunkData:
        raise NotImplementedError("Subclasses must implement read()")

    def _check_consumed(self, cursor: ByteCursor) -> None:
        """Log bytes the layout left unread."""
        if cursor.remaining:
            logger.debug(
                f"{self.__class__.__name__}: {cursor.remaining} of "
                f"{len(cursor)} bytes not consumed by layout"
            )

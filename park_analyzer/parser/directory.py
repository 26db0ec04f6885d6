# park_analyzer/parser/directory.py
from dataclasses import dataclass
from typing import List, Union
import logging

from ..errors import TruncatedDirectory
from .constants import DIRECTORY_ENTRY_SIZE, ChunkId, DirectoryEntry
from .cursor import Buffer, ByteCursor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChunkDescriptor:
    """Directory entry locating one chunk inside the game data payload."""
    chunk_id: int
    offset: int
    size: int

    @property
    def end(self) -> int:
        return self.offset + self.size

    @property
    def name(self) -> str:
        try:
            return ChunkId(self.chunk_id).key
        except ValueError:
            return f"0x{self.chunk_id:02x}"

    def to_dict(self) -> dict:
        return {
            'id': self.chunk_id,
            'name': self.name,
            'offset': self.offset,
            'size': self.size,
        }


def read_directory(source: Union[ByteCursor, Buffer], count: int) -> List[ChunkDescriptor]:
    """Read `count` chunk descriptors.

    Args:
        source: Cursor positioned at the directory, or the bytes that
            follow the header
        count: Number of chunks declared by the header

    Returns:
        Descriptors in file order (not sorted by offset)

    Raises:
        TruncatedDirectory: If fewer than `count` complete entries remain
    """
    cursor = source if isinstance(source, ByteCursor) else ByteCursor(source)

    needed = count * DIRECTORY_ENTRY_SIZE
    if cursor.remaining < needed:
        raise TruncatedDirectory(
            f"Directory declares {count} chunks ({needed} bytes) but only "
            f"{cursor.remaining} bytes remain"
        )

    descriptors = []
    for _ in range(count):
        entry = cursor.read_struct(DirectoryEntry)
        descriptors.append(ChunkDescriptor(
            chunk_id=entry.id,
            offset=entry.offset,
            size=entry.size,
        ))
        logger.debug(f"Chunk {descriptors[-1].name}: offset {entry.offset}, size {entry.size}")

    return descriptors

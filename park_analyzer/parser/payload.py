# park_analyzer/parser/payload.py
"""Game data payload: decompression and per-chunk slicing."""
from dataclasses import dataclass
from typing import Iterable, List, Union
import gzip
import logging
import zlib

from ..errors import ChunkRangeInvalid, DecompressionFailure
from .constants import CompressionMode
from .cursor import Buffer
from .directory import ChunkDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChunkPayload:
    """Read-only view of one chunk's bytes."""
    descriptor: ChunkDescriptor
    data: memoryview

    @property
    def chunk_id(self) -> int:
        return self.descriptor.chunk_id


def decompress_payload(data: Buffer,
                       compression: Union[CompressionMode, int],
                       expected_size: int = None) -> bytes:
    """Return the uncompressed game data.

    Args:
        data: Everything that follows the chunk directory
        compression: Compression mode from the header
        expected_size: Uncompressed size from the header; only logged

    Raises:
        DecompressionFailure: If the stream is corrupt or the mode unknown
    """
    if compression == CompressionMode.NONE:
        payload = bytes(data)
    elif compression == CompressionMode.GZIP:
        try:
            payload = gzip.decompress(bytes(data))
        except (OSError, EOFError, zlib.error) as e:
            raise DecompressionFailure(f"Failed to gunzip game data: {e}") from e
    else:
        raise DecompressionFailure(f"Unsupported compression mode {compression}")

    if expected_size is not None and len(payload) != expected_size:
        logger.debug(
            f"Game data is {len(payload)} bytes, header declares {expected_size}"
        )
    return payload


def sort_descriptors(descriptors: Iterable[ChunkDescriptor]) -> List[ChunkDescriptor]:
    """Order descriptors by ascending offset, keeping file order for ties."""
    return sorted(descriptors, key=lambda d: d.offset)


def slice_chunk(payload: Buffer, descriptor: ChunkDescriptor) -> ChunkPayload:
    """Cut `[offset, offset + size)` out of the payload."""
    if descriptor.end > len(payload):
        raise ChunkRangeInvalid(
            descriptor.chunk_id, descriptor.offset, descriptor.size, len(payload)
        )
    view = memoryview(payload).toreadonly()
    return ChunkPayload(
        descriptor=descriptor,
        data=view[descriptor.offset:descriptor.end],
    )


def split_payload(payload: Buffer,
                  descriptors: Iterable[ChunkDescriptor]) -> List[ChunkPayload]:
    """Slice every chunk in ascending offset order.

    Raises:
        ChunkRangeInvalid: On the first descriptor outside the payload
    """
    return [slice_chunk(payload, d) for d in sort_descriptors(descriptors)]

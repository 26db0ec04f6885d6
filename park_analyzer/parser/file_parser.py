"""Park file parser."""
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
import logging

from ..chunks.base import ChunkData
from ..chunks.registry import ChunkKey, ChunkRegistry, chunk_registry
from ..errors import ChunkParsingError, OutOfBounds
from .constants import HEADER_SIZE
from .cursor import Buffer, ByteCursor
from .directory import ChunkDescriptor, read_directory
from .header import Header
from .payload import decompress_payload, slice_chunk, sort_descriptors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChunkFailure:
    """A chunk that could not be decoded."""
    chunk_id: int
    name: str
    message: str


@dataclass(frozen=True)
class ParkFile:
    """Decoded park file.

    The directory and errors are tuples and the chunks a read-only
    mapping, so the result cannot change once built.
    """
    header: Header
    directory: Tuple[ChunkDescriptor, ...]
    chunks: Mapping[ChunkKey, ChunkData]
    errors: Tuple[ChunkFailure, ...] = ()

    def __getitem__(self, key: ChunkKey) -> ChunkData:
        return self.chunks[key]

    def __contains__(self, key: ChunkKey) -> bool:
        return key in self.chunks

    def get(self, chunk_id: int) -> Optional[ChunkData]:
        """Look a chunk up by numeric id."""
        return self.chunks.get(ChunkRegistry.key_for(chunk_id))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'header': self.header.to_dict(),
            'directory': [d.to_dict() for d in self.directory],
            'chunks': {key: chunk.to_dict() for key, chunk in self.chunks.items()},
            'errors': [
                {'id': e.chunk_id, 'name': e.name, 'message': e.message}
                for e in self.errors
            ],
        }


def prepare_for_json(data: Any) -> Any:
    """Convert data to JSON-serializable format."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).hex()
    elif isinstance(data, dict):
        return {str(k): prepare_for_json(v) for k, v in data.items()}
    elif isinstance(data, (list, tuple)):
        return [prepare_for_json(item) for item in data]
    return data


class ParkFileParser:
    """Main parser for park files.

    A failure in one chunk is logged and recorded in `ParkFile.errors`;
    other chunks still decode because each one reads through its own
    cursor. With `strict=True` the first chunk failure is raised instead.
    Header, directory and decompression failures always propagate.
    """

    def __init__(self, strict: bool = False, registry: Optional[ChunkRegistry] = None):
        self.strict = strict
        self.registry = registry or chunk_registry

    def parse_file(self, file_path: Union[str, Path]) -> ParkFile:
        """Read and decode a park file from disk."""
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Park file not found: {path}")

        data = path.read_bytes()
        logger.debug(f"Read {len(data)} bytes from {path}")
        return self.parse_bytes(data)

    def parse_bytes(self, data: Buffer) -> ParkFile:
        """Decode a complete park file held in memory."""
        header = Header.from_bytes(data)

        cursor = ByteCursor(data, HEADER_SIZE)
        directory = read_directory(cursor, header.num_chunks)

        payload = decompress_payload(
            memoryview(data)[cursor.tell():],
            header.compression,
            header.uncompressed_size,
        )

        chunks: Dict[ChunkKey, ChunkData] = {}
        errors: List[ChunkFailure] = []

        for descriptor in sort_descriptors(directory):
            try:
                chunk = slice_chunk(payload, descriptor)
                key, record = self.registry.decode(chunk.chunk_id, chunk.data, descriptor)
            except (ChunkParsingError, OutOfBounds) as e:
                if self.strict:
                    raise
                error_msg = f"Failed to parse {descriptor.name} chunk: {e}"
                logger.error(error_msg)
                errors.append(ChunkFailure(descriptor.chunk_id, descriptor.name, str(e)))
                continue

            if key in chunks:
                logger.warning(f"Duplicate {descriptor.name} chunk, keeping the later one")
            chunks[key] = record

        logger.debug(f"Decoded {len(chunks)} of {len(directory)} chunks")
        return ParkFile(
            header=header,
            directory=tuple(directory),
            chunks=MappingProxyType(chunks),
            errors=tuple(errors),
        )


def parse_park_file(file_path: Union[str, Path], strict: bool = False) -> ParkFile:
    return ParkFileParser(strict=strict).parse_file(file_path)

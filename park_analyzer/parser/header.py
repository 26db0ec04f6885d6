# park_analyzer/parser/header.py
from dataclasses import dataclass
from typing import Any, Dict, Union
import logging

from ..errors import TruncatedHeader
from .constants import HEADER_SIZE, PARK_MAGIC, CompressionMode, FileHeader
from .cursor import Buffer, ByteCursor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    """Fixed 64 byte header at the start of every park file.

    The FNV-1a hash is kept as read; it is never checked against the
    payload.
    """
    magic: int
    target_version: int
    min_version: int
    num_chunks: int
    uncompressed_size: int
    compression: Union[CompressionMode, int]
    compressed_size: int
    fnv1a: bytes
    padding: bytes

    @property
    def is_park_file(self) -> bool:
        return self.magic == PARK_MAGIC

    @classmethod
    def from_bytes(cls, data: Buffer) -> 'Header':
        """Parse the header from the first 64 bytes of `data`."""
        if len(data) < HEADER_SIZE:
            raise TruncatedHeader(
                f"Header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        raw = ByteCursor(data).read_struct(FileHeader)

        try:
            compression = CompressionMode(raw.compression)
        except ValueError:
            compression = raw.compression

        header = cls(
            magic=raw.magic,
            target_version=raw.target_version,
            min_version=raw.min_version,
            num_chunks=raw.num_chunks,
            uncompressed_size=raw.uncompressed_size,
            compression=compression,
            compressed_size=raw.compressed_size,
            fnv1a=raw.fnv1a,
            padding=raw.padding,
        )
        logger.debug(
            f"Header: version {header.target_version} (min {header.min_version}), "
            f"{header.num_chunks} chunks, compression {header.compression!r}"
        )
        return header

    def to_dict(self) -> Dict[str, Any]:
        return {
            'magic': self.magic,
            'target_version': self.target_version,
            'min_version': self.min_version,
            'num_chunks': self.num_chunks,
            'uncompressed_size': self.uncompressed_size,
            'compression': int(self.compression),
            'compressed_size': self.compressed_size,
            'fnv1a': self.fnv1a,
            'padding': self.padding,
        }


def read_header(data: Buffer) -> Header:
    return Header.from_bytes(data)

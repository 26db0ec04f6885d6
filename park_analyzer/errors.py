# park_analyzer/errors.py
"""Exceptions raised while decoding park files."""


class ParkFileError(Exception):
    """Base class for every park file decoding failure."""
    pass


class TruncatedHeader(ParkFileError):
    """Raised when the file is shorter than the fixed 64 byte header."""
    pass


class TruncatedDirectory(ParkFileError):
    """Raised when the chunk directory holds fewer entries than declared."""
    pass


class DecompressionFailure(ParkFileError):
    """Raised when the game data payload cannot be decompressed."""
    pass


class OutOfBounds(ParkFileError):
    """Raised when a read would go past the end of its buffer."""

    def __init__(self, position: int, requested: int, available: int):
        self.position = position
        self.requested = requested
        self.available = available
        super().__init__(
            f"Read of {requested} bytes at offset {position} exceeds buffer "
            f"({available} bytes remaining)"
        )


class ChunkParsingError(ParkFileError):
    """Raised when chunk parsing fails."""
    pass


class ChunkRangeInvalid(ChunkParsingError):
    """Raised when a directory entry points outside the game data payload."""

    def __init__(self, chunk_id: int, offset: int, size: int, payload_size: int):
        self.chunk_id = chunk_id
        self.offset = offset
        self.size = size
        self.payload_size = payload_size
        super().__init__(
            f"Chunk 0x{chunk_id:02x} range [{offset}, {offset + size}) "
            f"is outside the {payload_size} byte payload"
        )

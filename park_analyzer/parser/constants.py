# park_analyzer/parser/constants.py
from enum import IntEnum

from construct import Bytes, Int32ul, Int64ul, Struct

# "PARK" read as a little-endian u32
PARK_MAGIC = 0x4B524150

HEADER_SIZE = 64
MAX_STRING_LENGTH = 1024
TRUNCATION_MARKER = '...'


class CompressionMode(IntEnum):
    """Compression applied to everything after the chunk directory."""
    NONE = 0
    GZIP = 1


class ChunkId(IntEnum):
    """Known chunk identifiers of the park format."""
    AUTHORING = 0x01
    OBJECTS = 0x02
    SCENARIO = 0x03
    GENERAL = 0x04
    CLIMATE = 0x05
    PARK = 0x06
    HISTORY = 0x07          # not written by current versions
    RESEARCH = 0x08
    NOTIFICATIONS = 0x09
    INTERFACE = 0x20
    TILES = 0x30
    ENTITIES = 0x31
    RIDES = 0x32
    BANNERS = 0x33
    STAFF = 0x35            # not written by current versions
    CHEATS = 0x36
    RESTRICTED_OBJECTS = 0x37
    PACKED_OBJECTS = 0x80

    @property
    def key(self) -> str:
        """Name used for the chunk in decoded output."""
        return self.name.lower()


FileHeader = Struct(
    "magic" / Int32ul,
    "target_version" / Int32ul,
    "min_version" / Int32ul,
    "num_chunks" / Int32ul,
    "uncompressed_size" / Int64ul,
    "compression" / Int32ul,
    "compressed_size" / Int64ul,
    "fnv1a" / Bytes(8),
    "padding" / Bytes(20),
)

DirectoryEntry = Struct(
    "id" / Int32ul,
    "offset" / Int64ul,
    "size" / Int64ul,
)

DIRECTORY_ENTRY_SIZE = DirectoryEntry.sizeof()  # 20

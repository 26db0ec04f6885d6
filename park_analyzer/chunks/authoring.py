# park_analyzer/chunks/authoring.py
from dataclasses import dataclass
from typing import List

from ..parser.constants import ChunkId
from ..parser.cursor import ByteCursor
from .base import BaseChunk, ChunkData


@dataclass(frozen=True)
class AuthoringData(ChunkData):
    CHUNK_ID = ChunkId.AUTHORING

    engine: str
    authors: List[str]
    date_started: int     # unix timestamp
    date_modified: int


class AuthoringChunk(BaseChunk):
    """Authoring (0x01) parser: engine build string, authors and dates."""

    CHUNK_ID = ChunkId.AUTHORING

    def read(self, cursor: ByteCursor) -> AuthoringData:
        return AuthoringData(
            engine=cursor.read_null_terminated_string(),
            authors=cursor.read_string_array(),
            date_started=cursor.read_timestamp(),
            date_modified=cursor.read_timestamp(),
        )

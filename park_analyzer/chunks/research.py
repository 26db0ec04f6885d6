# park_analyzer/chunks/research.py
from dataclasses import dataclass
from typing import List, Optional

from ..parser.constants import ChunkId
from ..parser.cursor import ByteCursor, ResearchItem
from .base import BaseChunk, ChunkData


@dataclass(frozen=True)
class ResearchData(ChunkData):
    CHUNK_ID = ChunkId.RESEARCH

    funding_level: int
    priorities: int
    progress_stage: int
    progress: int
    expected_month: int
    expected_day: int
    last_item: Optional[ResearchItem]
    next_item: Optional[ResearchItem]
    items_uninvented: List[ResearchItem]
    items_invented: List[ResearchItem]


class ResearchChunk(BaseChunk):
    """Research (0x08) parser.

    The last and next items use a one byte presence flag, the item lists
    a four byte one.
    """

    CHUNK_ID = ChunkId.RESEARCH

    def read(self, cursor: ByteCursor) -> ResearchData:
        return ResearchData(
            funding_level=cursor.read_uint(4),
            priorities=cursor.read_uint(4),
            progress_stage=cursor.read_uint(4),
            progress=cursor.read_uint(4),
            expected_month=cursor.read_uint(4),
            expected_day=cursor.read_uint(4),
            last_item=cursor.read_optional_record(1),
            next_item=cursor.read_optional_record(1),
            items_uninvented=cursor.read_optional_record_array(),
            items_invented=cursor.read_optional_record_array(),
        )

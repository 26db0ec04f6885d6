# park_analyzer/chunks/general.py
from dataclasses import dataclass
from typing import Tuple

from ..parser.constants import ChunkId
from ..parser.cursor import ByteCursor
from .base import BaseChunk, ChunkData


@dataclass(frozen=True)
class GeneralData(ChunkData):
    CHUNK_ID = ChunkId.GENERAL

    game_paused: int
    current_ticks: int
    date_month_ticks: int
    date_months_elapsed: int
    rand: Tuple[int, int]
    guest_initial_happiness: int
    guest_initial_cash: int
    guest_initial_hunger: int
    guest_initial_thirst: int
    next_guest_number: int


class GeneralChunk(BaseChunk):
    """General (0x04) parser: simulation clock, RNG state and guest defaults.

    Peep spawn points follow these fields and are left undecoded.
    """

    CHUNK_ID = ChunkId.GENERAL

    def read(self, cursor: ByteCursor) -> GeneralData:
        return GeneralData(
            game_paused=cursor.read_uint(4),
            current_ticks=cursor.read_uint(4),
            date_month_ticks=cursor.read_uint(4),
            date_months_elapsed=cursor.read_uint(4),
            rand=(cursor.read_uint(4), cursor.read_uint(4)),
            guest_initial_happiness=cursor.read_uint(4),
            guest_initial_cash=cursor.read_money(4),
            guest_initial_hunger=cursor.read_uint(4),
            guest_initial_thirst=cursor.read_uint(4),
            next_guest_number=cursor.read_uint(4),
        )

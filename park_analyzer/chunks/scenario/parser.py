# park_analyzer/chunks/scenario/parser.py
from dataclasses import dataclass
import logging

from ...parser.constants import ChunkId
from ...parser.cursor import ByteCursor, LocalizedString
from ..base import BaseChunk, ChunkData
from .objective import Objective, describe_objective

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioData(ChunkData):
    CHUNK_ID = ChunkId.SCENARIO

    category: int
    name: LocalizedString
    park_name: LocalizedString
    details: LocalizedString
    objective: Objective


class ScenarioChunk(BaseChunk):
    """Scenario (0x03) parser.

    Holds the scenario category, its localized name, park name and
    details text, followed by the objective.
    """

    CHUNK_ID = ChunkId.SCENARIO

    def read(self, cursor: ByteCursor) -> ScenarioData:
        category = cursor.read_uint(4)
        name = cursor.read_localized_string_pair()
        park_name = cursor.read_localized_string_pair()
        details = cursor.read_localized_string_pair()

        objective_type = cursor.read_uint(4)
        description = describe_objective(objective_type)
        if description is None:
            logger.warning(f"Unknown scenario objective type {objective_type}")

        objective = Objective(
            type=objective_type,
            description=description,
            year=cursor.read_uint(4),
            guests=cursor.read_uint(8),
            currency=cursor.read_uint(8),
            rating_warning_days=cursor.read_uint(2),
            completed_company_value=cursor.read_money(8),
            allow_early_completion=cursor.read_bool(),
            scenario_file_name=cursor.read_null_terminated_string(),
        )

        return ScenarioData(
            category=category,
            name=name,
            park_name=park_name,
            details=details,
            objective=objective,
        )

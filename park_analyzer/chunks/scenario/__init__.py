"""Scenario chunk parser.

The scenario chunk carries the scenario's display texts as single-entry
string tables and the objective the player has to meet. Objective codes
1 to 11 map to template descriptions with `{guests}`, `{year}` and
`{currency}` placeholders; other codes decode with no description.
"""
from .parser import ScenarioChunk, ScenarioData
from .objective import OBJECTIVE_DESCRIPTIONS, Objective, ObjectiveType, describe_objective

__all__ = [
    'ScenarioChunk',
    'ScenarioData',
    'Objective',
    'ObjectiveType',
    'OBJECTIVE_DESCRIPTIONS',
    'describe_objective',
]

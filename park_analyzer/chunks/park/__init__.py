"""Park chunk parser.

Finances (cash, loan, park value), the monthly expenditure table, ratings,
guest counters and the rolling history arrays used by the finance and
park windows.
"""
from .parser import ParkChunk, ParkData, read_expenditure_table

__all__ = ['ParkChunk', 'ParkData', 'read_expenditure_table']

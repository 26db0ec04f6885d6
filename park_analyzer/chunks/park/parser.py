# park_analyzer/chunks/park/parser.py
from dataclasses import dataclass
from typing import List
import logging

from ...errors import OutOfBounds
from ...parser.constants import ChunkId
from ...parser.cursor import ByteCursor
from ..base import BaseChunk, ChunkData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParkData(ChunkData):
    """Park finances, ratings and history tables.

    Money fields are signed in the game but stored here as read, so a
    negative balance shows up as a large unsigned value.
    """
    CHUNK_ID = ChunkId.PARK

    park_name: str
    cash: int
    loan: int
    max_loan: int
    loan_interest_rate: int
    park_flags: int
    park_entrance_fee: int
    staff_handyman_colour: int
    staff_mechanic_colour: int
    staff_security_colour: int
    same_price_throughout_park: int
    num_months: int
    num_types: int
    expenditure_table: List[List[int]]
    historical_profit: int
    marketing_campaigns: List[int]
    current_awards: List[int]
    park_value: int
    company_value: int
    park_size: int
    num_guests_in_park: int
    num_guests_heading_for_park: int
    park_rating: int
    park_rating_casualty_penalty: int
    current_expenditure: int
    current_profit: int
    weekly_profit_average_dividend: int
    weekly_profit_average_divisor: int
    total_admissions: int
    total_income_from_admissions: int
    total_ride_value_for_money: int
    num_guests_in_park_last_week: int
    guest_change_modifier: int
    guest_generation_probability: int
    suggested_guest_maximum: int
    peep_warning_throttle: List[int]
    park_rating_history: List[int]
    guests_in_park_history: List[int]
    cash_history: List[int]
    weekly_profit_history: List[int]
    park_value_history: List[int]


def read_expenditure_table(cursor: ByteCursor, num_months: int, num_types: int) -> List[List[int]]:
    """Read a months x expenditure-types table of money values, row-major."""
    return [
        [cursor.read_money() for _ in range(num_types)]
        for _ in range(num_months)
    ]


class ParkChunk(BaseChunk):
    """Park (0x06) parser.

    The expenditure table is the only variable-shaped block: its month and
    category counts are stored right before it.
    """

    CHUNK_ID = ChunkId.PARK

    def read(self, cursor: ByteCursor) -> ParkData:
        park_name = cursor.read_null_terminated_string()
        cash = cursor.read_money()
        loan = cursor.read_money()
        max_loan = cursor.read_money()
        loan_interest_rate = cursor.read_uint(4)
        park_flags = cursor.read_uint(8)
        park_entrance_fee = cursor.read_money(4)
        staff_handyman_colour = cursor.read_uint(4)
        staff_mechanic_colour = cursor.read_uint(4)
        staff_security_colour = cursor.read_uint(4)
        same_price_throughout_park = cursor.read_uint(8)

        num_months = cursor.read_uint(4)
        num_types = cursor.read_uint(4)
        logger.debug(f"Expenditure table: {num_months} months x {num_types} types")
        table_size = num_months * max(num_types, 1) * 8
        if table_size > cursor.remaining:
            raise OutOfBounds(cursor.tell(), table_size, cursor.remaining)
        expenditure_table = read_expenditure_table(cursor, num_months, num_types)

        return ParkData(
            park_name=park_name,
            cash=cash,
            loan=loan,
            max_loan=max_loan,
            loan_interest_rate=loan_interest_rate,
            park_flags=park_flags,
            park_entrance_fee=park_entrance_fee,
            staff_handyman_colour=staff_handyman_colour,
            staff_mechanic_colour=staff_mechanic_colour,
            staff_security_colour=staff_security_colour,
            same_price_throughout_park=same_price_throughout_park,
            num_months=num_months,
            num_types=num_types,
            expenditure_table=expenditure_table,
            historical_profit=cursor.read_money(),
            marketing_campaigns=cursor.read_length_prefixed_array(),
            current_awards=cursor.read_length_prefixed_array(),
            park_value=cursor.read_money(),
            company_value=cursor.read_money(),
            park_size=cursor.read_uint(4),
            num_guests_in_park=cursor.read_uint(4),
            num_guests_heading_for_park=cursor.read_uint(4),
            park_rating=cursor.read_uint(4),
            park_rating_casualty_penalty=cursor.read_uint(4),
            current_expenditure=cursor.read_money(),
            current_profit=cursor.read_money(),
            weekly_profit_average_dividend=cursor.read_money(),
            weekly_profit_average_divisor=cursor.read_uint(4),
            total_admissions=cursor.read_money(),
            total_income_from_admissions=cursor.read_money(),
            total_ride_value_for_money=cursor.read_money(4),
            num_guests_in_park_last_week=cursor.read_uint(4),
            guest_change_modifier=cursor.read_uint(4),
            guest_generation_probability=cursor.read_uint(4),
            suggested_guest_maximum=cursor.read_uint(4),
            peep_warning_throttle=cursor.read_length_prefixed_array(),
            park_rating_history=cursor.read_length_prefixed_array(),
            guests_in_park_history=cursor.read_length_prefixed_array(),
            cash_history=cursor.read_length_prefixed_array(),
            weekly_profit_history=cursor.read_length_prefixed_array(),
            park_value_history=cursor.read_length_prefixed_array(),
        )

# park_analyzer/chunks/scenario/objective.py
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional


class ObjectiveType(IntEnum):
    """Scenario objective codes."""
    GUESTS_BY = 1
    PARK_VALUE_BY = 2
    HAVE_FUN = 3
    BUILD_THE_BEST = 4
    TEN_ROLLERCOASTERS = 5
    GUESTS_AND_RATING = 6
    MONTHLY_RIDE_INCOME = 7
    TEN_ROLLERCOASTERS_LENGTH = 8
    FINISH_FIVE_ROLLERCOASTERS = 9
    REPAY_LOAN_AND_PARK_VALUE = 10
    MONTHLY_FOOD_INCOME = 11


# Placeholders {guests}, {year} and {currency} are left for the caller.
OBJECTIVE_DESCRIPTIONS: Dict[int, str] = {
    ObjectiveType.GUESTS_BY: 'To have at least {guests} guests in your park at the end of {year}, with a park rating of at least 600',
    ObjectiveType.PARK_VALUE_BY: 'To achieve a park value of at least {currency} at the end of {year}',
    ObjectiveType.HAVE_FUN: 'Have Fun!',
    ObjectiveType.BUILD_THE_BEST: 'Build the best {guests} you can!',
    ObjectiveType.TEN_ROLLERCOASTERS: 'To have 10 different types of roller coasters operating in your park, each with an excitement value of at least 6.00',
    ObjectiveType.GUESTS_AND_RATING: 'To have at least {guests} guests in your park. You must not let the park rating drop below 700 at any time!',
    ObjectiveType.MONTHLY_RIDE_INCOME: 'To achieve a monthly income from ride tickets of at least {currency}',
    ObjectiveType.TEN_ROLLERCOASTERS_LENGTH: 'To have 10 different types of roller coasters operating in your park, each with a minimum length of {guests}, and an excitement rating of at least 7.00',
    ObjectiveType.FINISH_FIVE_ROLLERCOASTERS: 'To finish building all 5 of the partially built roller coasters in this park, designing them to achieve excitement ratings of at least {currency} each',
    ObjectiveType.REPAY_LOAN_AND_PARK_VALUE: 'To repay your loan and achieve a park value of at least {currency}',
    ObjectiveType.MONTHLY_FOOD_INCOME: 'To achieve a monthly profit from food, drink and merchandise sales of at least {currency}',
}


def describe_objective(objective_type: int) -> Optional[str]:
    """Template text for an objective code, None if the code is unknown."""
    return OBJECTIVE_DESCRIPTIONS.get(objective_type)


@dataclass(frozen=True)
class Objective:
    """Scenario objective.

    `guests` doubles as the ride id (BUILD_THE_BEST) and the minimum
    length (TEN_ROLLERCOASTERS_LENGTH); `currency` doubles as the minimum
    excitement (FINISH_FIVE_ROLLERCOASTERS).
    """
    type: int
    description: Optional[str]
    year: int
    guests: int
    currency: int
    rating_warning_days: int
    completed_company_value: int
    allow_early_completion: int
    scenario_file_name: str

    def describe(self) -> Optional[str]:
        """Description with the placeholders filled from this objective."""
        if self.description is None:
            return None
        return self.description.format(
            guests=self.guests,
            year=self.year,
            currency=self.currency,
        )

from datetime import datetime
from enum import Enum

from dateutil.relativedelta import relativedelta

from backend.agenda.periods import Granularity


class Direction(str, Enum):
    FORWARD = 'forward'
    BACKWARD = 'backward'


# relativedelta clamps the day of month, so Jan 31 + 1 month is Feb 28/29.
NAVIGATION_STEPS = {
    Granularity.DAY: relativedelta(days=1),
    Granularity.WEEK: relativedelta(weeks=1),
    Granularity.MONTH: relativedelta(months=1),
    Granularity.YEAR: relativedelta(years=1),
}


def advance(reference: datetime, granularity: Granularity, direction: Direction) -> datetime:
    step = NAVIGATION_STEPS[Granularity(granularity)]
    if Direction(direction) is Direction.FORWARD:
        return reference + step
    return reference - step

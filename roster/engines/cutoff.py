"""
Academic Cutoff Projector.

Age tiers for the older rooms are decided by a child's age on a fixed
calendar day (the academic cutoff), not by their exact birthday.
"""

from datetime import date
from typing import Optional

from ..config import DEFAULT_ACADEMIC_CUTOFF_MONTH, DEFAULT_ACADEMIC_CUTOFF_DAY, cutoff_date
from ..dates import DateLike, parse_date, years_between


class CutoffProjector:
    """
    Resolves which academic cutoff applies to a projection date.

    CUTOFF RULE:
    ------------
    If the projection date is on or after this year's cutoff, this year's
    cutoff applies; otherwise last year's does. With an August 31 cutoff:
      - 09/01/2024 -> 08/31/2024
      - 08/30/2024 -> 08/31/2023

    Usage:
        projector = CutoffProjector()
        projector.age_at_cutoff("01/01/2020", "09/01/2024")  # 4
    """

    def __init__(self, cutoff_month: int = DEFAULT_ACADEMIC_CUTOFF_MONTH,
                 cutoff_day: int = DEFAULT_ACADEMIC_CUTOFF_DAY):
        self.cutoff_month = cutoff_month
        self.cutoff_day = cutoff_day

    def cutoff_for_year(self, year: int) -> date:
        return cutoff_date(year, self.cutoff_month, self.cutoff_day)

    def effective_cutoff(self, projection: date) -> date:
        """The cutoff instant governing age tiers at the projection date."""
        this_year = self.cutoff_for_year(projection.year)
        if projection >= this_year:
            return this_year
        return self.cutoff_for_year(projection.year - 1)

    def age_at_cutoff(self, dob: DateLike, projection_date: DateLike) -> int:
        """
        Whole years old the child is on the effective cutoff.

        Returns 0 when either date is unparseable, so an unknown birth date
        never lands a child in an older tier.
        """
        dob_date = parse_date(dob)
        projection = parse_date(projection_date)
        if dob_date is None or projection is None:
            return 0
        return years_between(dob_date, self.effective_cutoff(projection))

    def next_cutoff(self, today: Optional[date] = None) -> date:
        """
        The next upcoming cutoff as seen from today.

        On or after this year's cutoff the next one is a year away.
        """
        today = today or date.today()
        this_year = self.cutoff_for_year(today.year)
        if today >= this_year:
            return self.cutoff_for_year(today.year + 1)
        return this_year

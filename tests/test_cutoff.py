"""
Tests for the academic cutoff projector.

Run: pytest tests/test_cutoff.py -v
"""

from datetime import date

from roster.engines import CutoffProjector


class TestEffectiveCutoff:
    """This year's cutoff on/after it, last year's before it"""

    def test_after_cutoff_uses_this_year(self):
        assert CutoffProjector().effective_cutoff(date(2024, 9, 1)) == date(2024, 8, 31)

    def test_on_cutoff_uses_this_year(self):
        assert CutoffProjector().effective_cutoff(date(2024, 8, 31)) == date(2024, 8, 31)

    def test_before_cutoff_uses_last_year(self):
        assert CutoffProjector().effective_cutoff(date(2024, 8, 30)) == date(2023, 8, 31)

    def test_custom_cutoff(self):
        projector = CutoffProjector(cutoff_month=9, cutoff_day=1)
        assert projector.effective_cutoff(date(2024, 8, 31)) == date(2023, 9, 1)
        assert projector.effective_cutoff(date(2024, 9, 1)) == date(2024, 9, 1)

    def test_leap_day_cutoff_clamps_in_common_years(self):
        projector = CutoffProjector(cutoff_month=2, cutoff_day=29)
        assert projector.effective_cutoff(date(2025, 3, 1)) == date(2025, 2, 28)
        assert projector.effective_cutoff(date(2024, 3, 1)) == date(2024, 2, 29)
        assert projector.next_cutoff(date(2024, 3, 1)) == date(2025, 2, 28)


class TestAgeAtCutoff:
    def test_age_after_cutoff(self):
        assert CutoffProjector().age_at_cutoff("01/01/2020", "09/01/2024") == 4

    def test_age_before_cutoff_uses_previous_year(self):
        assert CutoffProjector().age_at_cutoff("01/01/2020", "08/01/2024") == 3

    def test_birthday_after_cutoff_is_not_counted(self):
        # Turns 4 on Sep 1, one day after the cutoff
        assert CutoffProjector().age_at_cutoff("09/01/2020", "10/01/2024") == 3

    def test_unparseable_dates_are_zero(self):
        projector = CutoffProjector()
        assert projector.age_at_cutoff("bad", "09/01/2024") == 0
        assert projector.age_at_cutoff("01/01/2020", "13/40/2024") == 0


class TestNextCutoff:
    def test_before_cutoff_is_this_year(self):
        assert CutoffProjector().next_cutoff(date(2025, 3, 1)) == date(2025, 8, 31)

    def test_on_cutoff_rolls_to_next_year(self):
        assert CutoffProjector().next_cutoff(date(2025, 8, 31)) == date(2026, 8, 31)

    def test_after_cutoff_is_next_year(self):
        assert CutoffProjector().next_cutoff(date(2025, 10, 18)) == date(2026, 8, 31)

"""
caldate.hebrew.params
---------------------
Constants of the fixed Hebrew calendar.

Everything the year-start computation needs is gathered in one frozen
dataclass, validated on construction. `TRADITIONAL` is the calendar in use.
All offsets are measured from the start of the reference year (1 Tishrei of
`reference_year`, hour 0, which is 18:00 on the preceding civil evening).
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple

from ..core.interval import CalendarInterval

ONE_DAY = CalendarInterval(days=1)


@dataclass(frozen=True)
class MoladParams:
    reference_year: int
    reference_moon_offset: CalendarInterval     # molad of the reference year, after its hour 0
    reference_weekday: int                      # weekday of the reference year's start (Sunday = 0)

    years_per_cycle: int
    leap_residues: Tuple[int, ...]              # year mod years_per_cycle

    old_moon_threshold: CalendarInterval        # molad zaken
    tuesday_threshold: CalendarInterval         # gatarad, common years only
    monday_threshold: CalendarInterval          # betutakpat, years following a leap year

    postponed_weekdays: Tuple[int, ...]         # lo ADU rosh

    def __post_init__(self) -> None:
        if self.years_per_cycle <= 0:
            raise ValueError("years_per_cycle must be positive")
        if len(set(self.leap_residues)) != len(self.leap_residues):
            raise ValueError("leap_residues must be distinct")
        if not all(0 <= r < self.years_per_cycle for r in self.leap_residues):
            raise ValueError("leap_residues must lie in 0..years_per_cycle-1")
        if not (0 <= self.reference_weekday < 7):
            raise ValueError("reference_weekday must be in 0..6")
        if not all(0 <= w < 7 for w in self.postponed_weekdays):
            raise ValueError("postponed_weekdays must lie in 0..6")
        for name in ("reference_moon_offset", "old_moon_threshold", "tuesday_threshold", "monday_threshold"):
            value = getattr(self, name)
            if value.is_negative or value >= ONE_DAY:
                raise ValueError(f"{name} must lie within one day")

    @property
    def leap_years_per_cycle(self) -> int:
        return len(self.leap_residues)

    @property
    def months_per_cycle(self) -> int:
        return 12 * self.years_per_cycle + self.leap_years_per_cycle

    @property
    def moon(self) -> CalendarInterval:
        return CalendarInterval(hebrew_moons=1)

    @property
    def mean_year(self) -> CalendarInterval:
        return self.moon * Fraction(self.months_per_cycle, self.years_per_cycle)


TRADITIONAL = MoladParams(
    reference_year=5758,
    reference_moon_offset=CalendarInterval(hours=4, hebrew_parts=129),
    reference_weekday=4,
    years_per_cycle=19,
    leap_residues=(3, 6, 8, 11, 14, 17, 0),
    old_moon_threshold=CalendarInterval(hours=18),
    tuesday_threshold=CalendarInterval(hours=9, hebrew_parts=204),
    monday_threshold=CalendarInterval(hours=15, hebrew_parts=589),
    postponed_weekdays=(0, 3, 5),
)

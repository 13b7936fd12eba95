"""Calendar dates that may be deliberately wrong, and the per-level date set."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass

from paperdesk.randomizer import rand_in_pool, two_digit

_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def _days_in_month(month: int, year: int) -> int:
    if month in _THIRTY_DAY_MONTHS:
        return 30
    if month == 2:
        return 29 if year % 4 == 0 else 28
    return 31


def _today() -> "Date":
    return Date(31, 5, 2019)


@dataclass
class Date:
    """A day/month/year triple; the day may be impossible (e.g. 31 April)."""

    day: int = 1
    month: int = 11
    year: int = 2000

    @staticmethod
    def is_long_month(month: int) -> bool:
        """Return True for months with 31 days."""
        return month in _LONG_MONTHS

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: "Date") -> bool:
        return self._key() < other._key()

    def __gt__(self, other: "Date") -> bool:
        return self._key() > other._key()

    def __str__(self) -> str:
        return f"{two_digit(self.day)}.{two_digit(self.month)}.{self.year}"

    def _copy(self) -> "Date":
        return dataclasses.replace(self)

    def _assign(self, other: "Date") -> None:
        self.day, self.month, self.year = other.day, other.month, other.year

    def next_month(self) -> None:
        """Step one month forward in place."""
        self.month += 1
        if self.month == 13:
            self.month = 1
            self.year += 1

    def previous_month(self) -> None:
        """Step one month back in place."""
        self.month -= 1
        if self.month == 0:
            self.month = 12
            self.year -= 1

    def fill_day(self, valid: bool) -> None:
        """Set the day to a random valid day of the month, or to an invalid one."""
        if valid:
            self.day = rand_in_pool(1, _days_in_month(self.month, self.year))
        else:
            self.day = 31

    def years_before(self, years: int) -> "Date":
        """Return a copy moved ``years`` years into the past."""
        return Date(self.day, self.month, self.year - years)

    def years_after(self, years: int) -> "Date":
        """Return a copy moved ``years`` years into the future."""
        return Date(self.day, self.month, self.year + years)

    def _random_valid(self, first_year: int, last_year: int) -> "Date":
        candidate = Date()
        candidate.year = rand_in_pool(first_year, last_year)
        candidate.month = rand_in_pool(1, 12)
        candidate.fill_day(True)
        return candidate

    def randomize_earlier(self) -> None:
        """Replace with a random valid date before this one, not before 1970."""
        if self.year >= 1970 and not Date(1, 1, 1970) < self:
            raise ValueError(f"no valid date from 1970 lies before {self}")
        while True:
            candidate = self._random_valid(1970, self.year)
            if candidate < self:
                break
        self._assign(candidate)

    def randomize_later(self) -> None:
        """Replace with a random valid date after this one and before 31.05.2019."""
        limit = _today()
        if not self < Date(30, 5, 2019):
            raise ValueError(f"no valid date lies between {self} and {limit}")
        while True:
            candidate = self._random_valid(self.year, 2019)
            if candidate > self and candidate < limit:
                break
        self._assign(candidate)

    def randomize_invalid_earlier(self) -> None:
        """Replace with an impossible date in an earlier short month."""
        shifted = self._copy()
        shifted.previous_month()
        while self.is_long_month(shifted.month):
            shifted.previous_month()
        shifted.fill_day(False)
        self._assign(shifted)

    def _next_valid(self) -> "Date":
        if self.day < _days_in_month(self.month, self.year):
            return Date(self.day + 1, self.month, self.year)
        following = Date(1, self.month, self.year)
        following.next_month()
        return following

    def between(self, other: "Date") -> "Date":
        """Return a random valid date strictly between this date and ``other``.

        If this date is not before ``other`` the default date is returned.
        """
        if not self < other:
            return Date()
        if not self._next_valid() < other:
            raise ValueError(f"no valid date lies strictly between {self} and {other}")
        while True:
            candidate = self._random_valid(self.year, other.year)
            if self < candidate and candidate < other:
                return candidate

    def within_month_before(self) -> "Date":
        """Return a random date less than a month before this one."""
        start = self._copy()
        start.previous_month()
        return start.between(self)

    def before_month_of(self, other: "Date") -> "Date":
        """Return a random date after this one and more than a month before ``other``."""
        end = other._copy()
        end.previous_month()
        return self.between(end)


_DOCUMENT_INDEX = {"H": 0, "P": 1, "A": 2, "R": 3, "M": 4, "X": 5}


class DateGenerator:
    """The set of dates on one visitor's documents.

    Slots: 0 birth, 1 passport, 2 consent, 3 licence, 4 insurance,
    5 certificate, 6 today.
    """

    def __init__(self) -> None:
        self.dates = [Date() for _ in range(7)]
        self.dates[6] = _today()

    def generate(self, mistake: str | None = None) -> None:
        """Fill all dates, planting a date mistake for the given document letter.

        ``mistake`` is one of 'P', 'A', 'H', 'X', 'M', 'R', or None/'' for none.
        """
        negative = random.randrange(2) == 1
        today = self.dates[6]
        wrong = mistake if mistake and not negative else None
        before = mistake if mistake and negative else None

        birth = today.years_before(18)
        birth.randomize_earlier()
        self.dates[0] = birth
        adult = birth.years_after(14)

        for letter, slot in (("P", 1), ("R", 3)):
            if before == letter:
                self.dates[slot] = birth.between(adult)
            else:
                issued = adult._copy()
                issued.randomize_later()
                if wrong == letter:
                    issued.randomize_invalid_earlier()
                self.dates[slot] = issued

        self.dates[5] = self._recent("X", wrong, before, adult)

        if before == "M":
            self.dates[4] = birth.between(adult)
        else:
            insurance = adult.between(self.dates[5])
            if wrong == "M":
                insurance.randomize_invalid_earlier()
            self.dates[4] = insurance

        self.dates[2] = self._recent("A", wrong, before, adult)

        if mistake == "H":
            self.dates[0].randomize_invalid_earlier()

    def _recent(self, letter: str, wrong: str | None, before: str | None, adult: Date) -> Date:
        today = self.dates[6]
        if before == letter:
            return adult.before_month_of(today)
        if wrong == letter:
            return Date(31, 4, 2019)
        return today.within_month_before()

    def __getitem__(self, key: str) -> str:
        """Return the date for a document letter; unknown letters give today."""
        return str(self.dates[_DOCUMENT_INDEX.get(key, 6)])
from dataclasses import dataclass, field, replace

from canonical_opening_hours.temporal_objects import (
    Renderable, Weekday, NthDayOfTheMonth, MonthDay
)
from canonical_opening_hours.utils import cycle_slice


ORDERED_WEEKDAYS = [wday for wday in Weekday if wday != Weekday.NONE]


@dataclass(frozen=True)
class NthWeekdayOfTheMonthEntry(Renderable):
    """The "1-2" in "Mo[1-2,4]"."""
    start: NthDayOfTheMonth = NthDayOfTheMonth.NONE
    end: NthDayOfTheMonth = NthDayOfTheMonth.NONE

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def has_start(self):
        return self.start != NthDayOfTheMonth.NONE

    def has_end(self):
        return self.end != NthDayOfTheMonth.NONE

    def with_start(self, start):
        return replace(self, start=start)

    def with_end(self, end):
        return replace(self, end=end)


@dataclass(frozen=True)
class WeekdayRange(Renderable):
    """A weekday ("Mo") or a range of weekdays ("Mo-Fr").

    A single weekday can be restricted to some of its occurrences in
    the month ("Mo[1,3]") and shifted by a number of days ("Mo[-1] -2 days").
    """
    start: Weekday = Weekday.NONE
    end: Weekday = Weekday.NONE
    nths: tuple = ()
    offset: int = 0

    def is_empty(self):
        return self.start == Weekday.NONE and self.end == Weekday.NONE

    def has_start(self):
        return self.start != Weekday.NONE

    def has_end(self):
        return self.end != Weekday.NONE

    def has_offset(self):
        return self.offset != 0

    def has_nth(self):
        return bool(self.nths)

    def get_days(self):
        """Returns the list of the weekdays covered by the range.

        A range ending before it starts ("Fr-Mo") runs over the end
        of the week.
        """
        if self.is_empty() or not self.has_start():
            return []
        if not self.has_end():
            return [self.start]
        return cycle_slice(
            ORDERED_WEEKDAYS,
            ORDERED_WEEKDAYS.index(self.start),
            ORDERED_WEEKDAYS.index(self.end)
        )

    def get_days_count(self):
        return len(self.get_days())

    def has_wday(self, wday):
        if self.is_empty() or wday == Weekday.NONE:
            return False
        return wday in self.get_days()

    def has_sunday(self):
        return self.has_wday(Weekday.SUNDAY)

    def has_monday(self):
        return self.has_wday(Weekday.MONDAY)

    def has_tuesday(self):
        return self.has_wday(Weekday.TUESDAY)

    def has_wednesday(self):
        return self.has_wday(Weekday.WEDNESDAY)

    def has_thursday(self):
        return self.has_wday(Weekday.THURSDAY)

    def has_friday(self):
        return self.has_wday(Weekday.FRIDAY)

    def has_saturday(self):
        return self.has_wday(Weekday.SATURDAY)

    def with_start(self, wday):
        return replace(self, start=wday)

    def with_end(self, wday):
        return replace(self, end=wday)

    def with_offset(self, offset):
        return replace(self, offset=offset)

    def with_nth(self, entry):
        return replace(self, nths=self.nths + (entry,))


@dataclass(frozen=True)
class Weekdays(Renderable):
    """The weekdays and the holidays of a rule ("PH, Mo-Fr")."""
    weekday_ranges: tuple = ()
    holidays: tuple = ()

    def is_empty(self):
        return not self.weekday_ranges and not self.holidays

    def has_weekday(self):
        return bool(self.weekday_ranges)

    def has_holidays(self):
        return bool(self.holidays)

    def has_wday(self, wday):
        return any(r.has_wday(wday) for r in self.weekday_ranges)

    def with_weekday_ranges(self, ranges):
        return replace(self, weekday_ranges=tuple(ranges))

    def with_holidays(self, holidays):
        return replace(self, holidays=tuple(holidays))

    def with_weekday_range(self, weekday_range):
        return replace(
            self, weekday_ranges=self.weekday_ranges + (weekday_range,)
        )

    def with_holiday(self, holiday):
        return replace(self, holidays=self.holidays + (holiday,))


@dataclass(frozen=True)
class MonthdayRange(Renderable):
    start: MonthDay = field(default_factory=MonthDay)
    end: MonthDay = field(default_factory=MonthDay)
    period: int = 0
    plus: bool = False

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def has_start(self):
        return not self.start.is_empty()

    def has_end(self):
        # A bare day number ("Jan 01-05") is a valid end.
        return not self.end.is_empty() or self.end.has_daynum()

    def has_period(self):
        return self.period != 0

    def has_plus(self):
        return self.plus

    def with_start(self, start):
        return replace(self, start=start)

    def with_end(self, end):
        return replace(self, end=end)

    def with_period(self, period):
        return replace(self, period=period)

    def with_plus(self, plus=True):
        return replace(self, plus=plus)


@dataclass(frozen=True)
class YearRange(Renderable):
    start: int = 0
    end: int = 0
    period: int = 0
    plus: bool = False

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def is_open(self):
        return self.has_start() and not self.has_end()

    def has_start(self):
        return self.start != 0

    def has_end(self):
        return self.end != 0

    def has_period(self):
        return self.period != 0

    def has_plus(self):
        return self.plus

    def has_year(self, year):
        if not self.has_start():
            return False
        if self.has_plus() and not self.has_end():
            return year >= self.start
        end = self.end if self.has_end() else self.start
        if not self.start <= year <= end:
            return False
        return not self.has_period() or (year - self.start) % self.period == 0

    def with_start(self, start):
        return replace(self, start=start)

    def with_end(self, end):
        return replace(self, end=end)

    def with_period(self, period):
        return replace(self, period=period)

    def with_plus(self, plus=True):
        return replace(self, plus=plus)


@dataclass(frozen=True)
class WeekRange(Renderable):
    """A range of ISO week numbers ("01-53/2")."""
    start: int = 0
    end: int = 0
    period: int = 0

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def is_open(self):
        return self.has_start() and not self.has_end()

    def has_start(self):
        return self.start != 0

    def has_end(self):
        return self.end != 0

    def has_period(self):
        return self.period != 0

    def has_week(self, week):
        if not self.has_start():
            return False
        end = self.end if self.has_end() else self.start
        if not self.start <= week <= end:
            return False
        return not self.has_period() or (week - self.start) % self.period == 0

    def with_start(self, start):
        return replace(self, start=start)

    def with_end(self, end):
        return replace(self, end=end)

    def with_period(self, period):
        return replace(self, period=period)

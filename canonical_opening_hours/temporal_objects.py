"""Single temporal values: times, timespans, holidays and dates.

All the objects are immutable. Use the `with_*()` methods (or
`dataclasses.replace()`) to get a modified copy, and `str()` to get
their canonical opening_hours text.
"""

import datetime
import enum
from dataclasses import dataclass, field, replace

from canonical_opening_hours.exceptions import (
    EventTimeNotResolved, ValidationError
)
from canonical_opening_hours import validators


WEEKDAYS = (
    "Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"
)
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
)
EVENTS = (
    "sunrise", "sunset", "dawn", "dusk"
)


class Renderable:
    def __str__(self):
        from canonical_opening_hours import rendering
        return rendering.render(self)


class Weekday(enum.IntEnum):
    NONE = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def from_token(cls, token):
        """Returns the weekday from its two letters name ("Mo", "Tu"...)."""
        return cls(WEEKDAYS.index(token.capitalize()) + 1)

    @classmethod
    def from_date(cls, date):
        # datetime counts from Monday (0), we count from Sunday (1).
        return cls((date.weekday() + 1) % 7 + 1)

    def __str__(self):
        if self is Weekday.NONE:
            return "not-a-day"
        return WEEKDAYS[self.value - 1]


class Month(enum.IntEnum):
    NONE = 0
    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12

    @classmethod
    def from_token(cls, token):
        return cls(MONTHS.index(token.capitalize()) + 1)

    def __str__(self):
        if self is Month.NONE:
            return "None"
        return MONTHS[self.value - 1]


class Event(enum.Enum):
    NOT_EVENT = 0
    SUNRISE = 1
    SUNSET = 2
    DAWN = 3
    DUSK = 4

    @classmethod
    def from_token(cls, token):
        return cls(EVENTS.index(token.lower()) + 1)

    def __str__(self):
        if self is Event.NOT_EVENT:
            return "NotEvent"
        return EVENTS[self.value - 1]


class VariableDate(enum.Enum):
    NONE = 0
    EASTER = 1

    def __str__(self):
        return self.name.lower()


class NthDayOfTheMonth(enum.IntEnum):
    NONE = 0
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    LAST = -1

    def __str__(self):
        return str(self.value)


class TimeKind(enum.Enum):
    UNSET = 0
    MINUTES = 1
    HOURS_MINUTES = 2
    EVENT = 3
    EVENT_OFFSET = 4


def _split_minutes(total_minutes):
    # Hours are truncated toward zero, minutes keep the sign.
    hours = abs(total_minutes) // 60
    if total_minutes < 0:
        hours = -hours
    return hours, total_minutes - hours * 60


@dataclass(frozen=True)
class Time(Renderable):
    """A moment of the day.

    A Time is either unset, a number of minutes (used for periods),
    a clock time ("hours:minutes"), an event ("sunrise") or an event
    with an offset ("(sunrise+01:00)"). The kind is explicit, so
    combinations like "minutes of an event without offset" can't exist.
    """
    kind: TimeKind = TimeKind.UNSET
    duration: datetime.timedelta = datetime.timedelta()
    event: Event = Event.NOT_EVENT

    @classmethod
    def from_hours(cls, hours):
        return cls(TimeKind.HOURS_MINUTES, datetime.timedelta(hours=hours))

    @classmethod
    def from_hours_minutes(cls, hours, minutes):
        return cls(
            TimeKind.HOURS_MINUTES,
            datetime.timedelta(hours=hours, minutes=minutes)
        )

    @classmethod
    def from_minutes(cls, minutes):
        """Returns a Time holding a number of minutes.

        More than an hour (in absolute value) makes it a clock time.
        """
        return cls._from_duration(datetime.timedelta(minutes=minutes))

    @classmethod
    def from_event(cls, event, offset=None):
        """Returns an event time, with an optional signed offset.

        Parameters
        ----------
        Event
            The event (can't be `Event.NOT_EVENT`).
        datetime.timedelta, optional
            The offset relative to the event. An explicit null offset
            is kept and printed ("(sunset+00:00)").
        """
        if event is Event.NOT_EVENT:
            raise ValueError("An event time requires an event.")
        if offset is None:
            return cls(TimeKind.EVENT, datetime.timedelta(), event)
        return cls(TimeKind.EVENT_OFFSET, offset, event)

    @classmethod
    def _from_duration(cls, duration, event=Event.NOT_EVENT, hours=False):
        # Hours are only ever added: a clock time stays a clock time.
        if event is not Event.NOT_EVENT:
            return cls(TimeKind.EVENT_OFFSET, duration, event)
        if hours or abs(duration) > datetime.timedelta(hours=1):
            return cls(TimeKind.HOURS_MINUTES, duration)
        return cls(TimeKind.MINUTES, duration)

    def with_event(self, event):
        if event is Event.NOT_EVENT:
            if self.kind is TimeKind.EVENT:
                return Time()
            if self.kind is TimeKind.EVENT_OFFSET:
                return Time(TimeKind.HOURS_MINUTES, self.duration)
            return self
        if self.kind is TimeKind.UNSET or self.kind is TimeKind.EVENT:
            return Time.from_event(event)
        return Time.from_event(event, self.duration)

    @property
    def total_minutes(self):
        return int(self.duration.total_seconds() // 60)

    def has_value(self):
        return self.kind is not TimeKind.UNSET

    def is_event(self):
        return self.kind in (TimeKind.EVENT, TimeKind.EVENT_OFFSET)

    def is_event_offset(self):
        return self.kind is TimeKind.EVENT_OFFSET

    def is_hours_minutes(self):
        return self.kind is TimeKind.HOURS_MINUTES

    def is_minutes(self):
        return self.kind is TimeKind.MINUTES

    def is_time(self):
        return self.is_hours_minutes() or self.is_event()

    def _resolved_minutes(self, resolver):
        if not self.is_event():
            return self.total_minutes
        if resolver is None:
            raise EventTimeNotResolved(
                "The time of {!r} requires an event time resolver.".format(
                    str(self.event)
                )
            )
        event_time = resolver(self.event)
        if self.is_event_offset():
            return event_time.total_minutes + self.total_minutes
        return event_time.total_minutes

    def get_hours(self, resolver=None) -> int:
        """Returns the hours of the Time.

        Events are resolved by *resolver*, a function taking an `Event`
        and returning a clock `Time` (see `event_times`).
        """
        return _split_minutes(self._resolved_minutes(resolver))[0]

    def get_minutes(self, resolver=None) -> int:
        """Returns the minutes of the Time (without the hours)."""
        return _split_minutes(self._resolved_minutes(resolver))[1]

    def _has_hours(self, other):
        return self.is_hours_minutes() or other.is_hours_minutes()

    def __add__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        return Time._from_duration(
            self.duration + other.duration, self.event, self._has_hours(other)
        )

    def __sub__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        return Time._from_duration(
            self.duration - other.duration, self.event, self._has_hours(other)
        )

    def __neg__(self):
        return replace(self, duration=-self.duration)


@dataclass(frozen=True)
class Timespan(Renderable):
    start: Time = field(default_factory=Time)
    end: Time = field(default_factory=Time)
    period: Time = field(default_factory=Time)
    plus: bool = False

    def is_empty(self):
        return not self.has_start() and not self.has_end()

    def is_open(self):
        return self.has_start() and not self.has_end()

    def has_start(self):
        return self.start.has_value()

    def has_end(self):
        return self.end.has_value()

    def has_period(self):
        return self.period.has_value()

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

    def is_valid(self):
        try:
            validators.validate_timespan(self)
        except ValidationError:
            return False
        return True


@dataclass(frozen=True)
class Holiday(Renderable):
    """A public holiday ("PH", plural) or a school holiday ("SH")."""
    plural: bool = False
    offset: int = 0

    def is_plural(self):
        return self.plural

    def has_offset(self):
        return self.offset != 0

    def with_plural(self, plural=True):
        return replace(self, plural=plural)

    def with_offset(self, offset):
        return replace(self, offset=offset)


@dataclass(frozen=True)
class DateOffset(Renderable):
    """A day offset, optionally after a move to the next
    (or previous) given weekday: "+Su +2 days".
    """
    wday_offset: Weekday = Weekday.NONE
    positive: bool = True
    offset: int = 0

    def is_empty(self):
        return not self.has_offset() and not self.has_wday_offset()

    def has_wday_offset(self):
        return self.wday_offset != Weekday.NONE

    def has_offset(self):
        return self.offset != 0

    def is_wday_offset_positive(self):
        return self.positive

    def with_wday_offset(self, wday, positive=True):
        return replace(self, wday_offset=wday, positive=positive)

    def with_offset(self, offset):
        return replace(self, offset=offset)


@dataclass(frozen=True)
class MonthDay(Renderable):
    """A date, which can be incomplete ("Dec", "2020 Dec 25", "easter").

    A null year or day number means it's not set.
    """
    year: int = 0
    month: Month = Month.NONE
    daynum: int = 0
    variable_date: VariableDate = VariableDate.NONE
    offset: DateOffset = field(default_factory=DateOffset)

    def is_empty(self):
        return (
            not self.has_year() and not self.has_month() and
            not self.has_daynum() and not self.is_variable()
        )

    def is_variable(self):
        return self.variable_date is not VariableDate.NONE

    def has_year(self):
        return self.year != 0

    def has_month(self):
        return self.month != Month.NONE

    def has_daynum(self):
        return self.daynum != 0

    def has_offset(self):
        return not self.offset.is_empty()

    def with_year(self, year):
        return replace(self, year=year)

    def with_month(self, month):
        return replace(self, month=month)

    def with_daynum(self, daynum):
        return replace(self, daynum=daynum)

    def with_variable_date(self, variable_date):
        return replace(self, variable_date=variable_date)

    def with_offset(self, offset):
        return replace(self, offset=offset)

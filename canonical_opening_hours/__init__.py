"""Models of the opening_hours fields from OpenStreetMap,
and their canonical rendering.

Provides immutable objects for every part of a field (times, weekdays,
holidays, dates, years, weeks and rules), a renderer giving their
canonical text, and a parser building them from a field.

To get started, simply do:
>>> import canonical_opening_hours as coh
>>> oh = coh.OpeningHours("mo-fr 9:00-18:00; PH off")
>>> str(oh)
'Mo-Fr 09:00-18:00; PH closed'
"""
# flake8: noqa

from canonical_opening_hours.version import __version__, __appname__, __author__, __licence__
from canonical_opening_hours.main import OpeningHours
from canonical_opening_hours.sanitization import sanitize_field
from canonical_opening_hours.field_parser import parse_field
from canonical_opening_hours.rendering import render, write
from canonical_opening_hours.temporal_objects import (
    Weekday, Month, Event, VariableDate, NthDayOfTheMonth, TimeKind,
    Time, Timespan, Holiday, DateOffset, MonthDay
)
from canonical_opening_hours.temporal_ranges import (
    NthWeekdayOfTheMonthEntry, WeekdayRange, Weekdays,
    MonthdayRange, YearRange, WeekRange
)
from canonical_opening_hours.rules import RuleSequence, Modifier
from canonical_opening_hours import event_times
from canonical_opening_hours import exceptions

"""Renders the models into canonical opening_hours text.

Each `render_*()` function returns the text of one kind of object.
`render()` finds the right one from the type of its argument, and
`write()` sends the text to a caller-supplied sink.

>>> from canonical_opening_hours.temporal_objects import Time, Timespan
>>> render(Timespan(Time.from_hours(10), Time.from_hours(12)))
'10:00-12:00'
"""

import functools

from canonical_opening_hours.temporal_objects import (
    Time, Timespan, Holiday, DateOffset, MonthDay,
    Weekday, Month, Event, VariableDate, NthDayOfTheMonth,
    _split_minutes
)
from canonical_opening_hours.temporal_ranges import (
    NthWeekdayOfTheMonthEntry, WeekdayRange, Weekdays,
    MonthdayRange, YearRange, WeekRange
)
from canonical_opening_hours.rules import RuleSequence, Modifier
from canonical_opening_hours.utils import (
    print_offset, print_padded_number, print_vector, SpaceLatch
)


# Time


def render_time(time: Time) -> str:
    """Returns a string from a Time object."""
    if not time.has_value():
        return "hh:mm"
    if time.is_event():
        if not time.is_event_offset():
            return str(time.event)
        sign = '-' if time.total_minutes < 0 else '+'
        hours, minutes = _split_minutes(abs(time.total_minutes))
        return "({}{}{}:{})".format(
            str(time.event), sign,
            print_padded_number(hours, 2),
            print_padded_number(minutes, 2)
        )
    if time.is_minutes():
        return print_padded_number(abs(time.total_minutes), 2)
    return "{}:{}".format(
        print_padded_number(abs(time.get_hours()), 2),
        print_padded_number(abs(time.get_minutes()), 2)
    )


def render_timespan(timespan: Timespan) -> str:
    """Returns a string from a Timespan object."""
    output = render_time(timespan.start)
    if not timespan.is_open():
        output += '-' + render_time(timespan.end)
        if timespan.has_period():
            output += '/' + render_time(timespan.period)
    if timespan.has_plus():
        output += '+'
    return output


def render_timespans(timespans) -> str:
    return print_vector(timespans, render=render_timespan)


# Weekdays and holidays


def render_nth_entry(entry: NthWeekdayOfTheMonthEntry) -> str:
    output = ''
    if entry.has_start():
        output += str(entry.start)
    if entry.has_end():
        output += '-' + str(entry.end)
    return output


def render_weekday_range(weekday_range: WeekdayRange) -> str:
    output = str(weekday_range.start)
    if weekday_range.has_end():
        return output + '-' + str(weekday_range.end)
    if weekday_range.has_nth():
        output += '[' + print_vector(
            weekday_range.nths, ',', render=render_nth_entry
        ) + ']'
    return output + print_offset(weekday_range.offset, True)


def render_weekday_ranges(ranges) -> str:
    return print_vector(ranges, render=render_weekday_range)


def render_holiday(holiday: Holiday) -> str:
    if holiday.is_plural():
        return "PH"
    return "SH" + print_offset(holiday.offset, True)


def render_holidays(holidays) -> str:
    return print_vector(holidays, render=render_holiday)


def render_weekdays(weekdays: Weekdays) -> str:
    """Holidays always come before the weekdays: "PH, Mo-Fr"."""
    output = render_holidays(weekdays.holidays)
    if weekdays.has_weekday() and weekdays.has_holidays():
        output += ", "
    return output + render_weekday_ranges(weekdays.weekday_ranges)


# Dates


def render_date_offset(offset: DateOffset) -> str:
    output = ''
    if offset.has_wday_offset():
        output += '+' if offset.is_wday_offset_positive() else '-'
        output += str(offset.wday_offset)
    return output + print_offset(offset.offset, offset.has_wday_offset())


def render_monthday(monthday: MonthDay) -> str:
    put_space = SpaceLatch()
    output = ''
    if monthday.has_year():
        output += put_space() + str(monthday.year)
    if monthday.is_variable():
        output += put_space() + str(monthday.variable_date)
    else:
        if monthday.has_month():
            output += put_space() + str(monthday.month)
        if monthday.has_daynum():
            output += put_space() + print_padded_number(monthday.daynum, 2)
    if monthday.has_offset():
        output += put_space() + render_date_offset(monthday.offset)
    return output


def render_monthday_range(monthday_range: MonthdayRange) -> str:
    output = ''
    if monthday_range.has_start():
        output += render_monthday(monthday_range.start)
    if monthday_range.has_end():
        output += '-' + render_monthday(monthday_range.end)
        if monthday_range.has_period():
            output += '/' + str(monthday_range.period)
    elif monthday_range.has_plus():
        output += '+'
    return output


def render_monthday_ranges(ranges) -> str:
    return print_vector(ranges, render=render_monthday_range)


# Years and weeks


def render_year_range(year_range: YearRange) -> str:
    if year_range.is_empty():
        return ''
    output = str(year_range.start)
    if year_range.has_end():
        output += '-' + str(year_range.end)
        if year_range.has_period():
            output += '/' + str(year_range.period)
    elif year_range.has_plus():
        output += '+'
    return output


def render_year_ranges(ranges) -> str:
    return print_vector(ranges, render=render_year_range)


def render_week_range(week_range: WeekRange) -> str:
    if week_range.is_empty():
        return ''
    output = print_padded_number(week_range.start, 2)
    if week_range.has_end():
        output += '-' + print_padded_number(week_range.end, 2)
        if week_range.has_period():
            output += '/' + str(week_range.period)
    return output


def render_week_ranges(ranges) -> str:
    return "week " + print_vector(ranges, render=render_week_range)


# Rules


def render_rule_sequence(rule: RuleSequence) -> str:
    """Returns the canonical text of a rule.

    Every non-empty part is preceded by a single space,
    except the first one.
    """
    put_space = SpaceLatch()
    output = ''
    if rule.is_twenty_four_hours():
        output += put_space() + "24/7"
    elif rule.has_comment():
        output += put_space() + rule.comment + ':'
    else:
        if rule.has_years():
            output += put_space() + render_year_ranges(rule.years)
        if rule.has_months():
            output += put_space() + render_monthday_ranges(rule.months)
        if rule.has_weeks():
            output += put_space() + render_week_ranges(rule.weeks)
        if rule.has_separator_for_readability():
            output += ':'
        if rule.has_weekdays():
            output += put_space() + render_weekdays(rule.weekdays)
        if rule.has_times():
            output += put_space() + render_timespans(rule.times)
    if rule.modifier.is_printed():
        output += put_space() + str(rule.modifier)
    if rule.has_modifier_comment():
        output += put_space() + '"' + rule.modifier_comment + '"'
    return output


def _rule_separator(rule):
    if rule.any_separator == "||":
        return " || "
    return rule.any_separator + ' '


def render_rule_sequences(rules) -> str:
    """Joins the rules, each one with its own separator: "a; b || c"."""
    return print_vector(
        rules, separator=_rule_separator, render=render_rule_sequence
    )


# Dispatch


SEQUENCE_RENDERERS = {
    Timespan: render_timespans,
    WeekdayRange: render_weekday_ranges,
    Holiday: render_holidays,
    MonthdayRange: render_monthday_ranges,
    YearRange: render_year_ranges,
    WeekRange: render_week_ranges,
    RuleSequence: render_rule_sequences,
}


@functools.singledispatch
def render(obj) -> str:
    """Returns the canonical text of any model, or of a sequence of them."""
    raise TypeError(
        "Can't render an object of type {!r}.".format(type(obj).__name__)
    )


@render.register(tuple)
@render.register(list)
def _render_sequence(items):
    if not items:
        return ''
    renderer = SEQUENCE_RENDERERS.get(type(items[0]))
    if renderer is None:
        raise TypeError(
            "Can't render a sequence of {!r}.".format(
                type(items[0]).__name__
            )
        )
    return renderer(items)


@render.register(Weekday)
@render.register(Month)
@render.register(Event)
@render.register(VariableDate)
@render.register(NthDayOfTheMonth)
@render.register(Modifier)
def _render_enum(value):
    return str(value)


render.register(Time, render_time)
render.register(Timespan, render_timespan)
render.register(NthWeekdayOfTheMonthEntry, render_nth_entry)
render.register(WeekdayRange, render_weekday_range)
render.register(Holiday, render_holiday)
render.register(Weekdays, render_weekdays)
render.register(DateOffset, render_date_offset)
render.register(MonthDay, render_monthday)
render.register(MonthdayRange, render_monthday_range)
render.register(YearRange, render_year_range)
render.register(WeekRange, render_week_range)
render.register(RuleSequence, render_rule_sequence)


def write(obj, sink):
    """Writes the canonical text of *obj* into *sink*.

    The sink can be any object with a `write(str)` method,
    like a file or an `io.StringIO`.
    """
    sink.write(render(obj))
    return sink

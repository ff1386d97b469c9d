"""Provides validators that raise exceptions in case of invalid values.

The models accept anything their builder gives them and the renderers
print it as is. These functions are the opt-in semantic checks.
"""

import calendar
import datetime

from canonical_opening_hours.exceptions import ValidationError

# Extended times ("26:00") can go up to the end of the next day.
MAX_TIME = datetime.timedelta(hours=48)
MAX_WEEK = 53


def validate_time(time, name="time"):
    if not time.has_value():
        raise ValidationError("The {} is not set.".format(name))
    if time.is_hours_minutes():
        if not datetime.timedelta() <= time.duration <= MAX_TIME:
            raise ValidationError(
                "The {} must be between 00:00 and 48:00.".format(name)
            )


def validate_timespan(timespan):
    if not timespan.has_start():
        raise ValidationError("A timespan must have a beginning.")
    validate_time(timespan.start, "beginning")
    if timespan.has_end():
        validate_time(timespan.end, "end")
    if timespan.has_period():
        if not timespan.has_end():
            raise ValidationError("A repeating timespan must have an end.")
        period = timespan.period
        if period.is_event() or period.duration <= datetime.timedelta():
            raise ValidationError(
                "The period of a timespan must be a positive duration."
            )


def validate_weekday_range(weekday_range):
    if not weekday_range.has_start():
        raise ValidationError("A weekday range must have a first day.")
    if weekday_range.has_end() and (
        weekday_range.has_nth() or weekday_range.has_offset()
    ):
        raise ValidationError(
            "Only a single weekday can have nth entries or an offset."
        )
    for entry in weekday_range.nths:
        if not entry.has_start():
            raise ValidationError(
                "The nth entry {!r} has no beginning.".format(str(entry))
            )
        if entry.has_end() and not 0 < entry.start <= entry.end:
            raise ValidationError(
                "The nth entry {!r} is not a valid range.".format(str(entry))
            )


def validate_monthday(monthday, bare_daynum=False):
    """Checks a MonthDay.

    Set *bare_daynum* for the end of a range, which can be
    a day number alone ("Jan 01-05").
    """
    if monthday.is_variable() or not monthday.has_daynum():
        return
    if not monthday.has_month():
        if bare_daynum and 1 <= monthday.daynum <= 31:
            return
        raise ValidationError(
            "The day {} has no month.".format(monthday.daynum)
        )
    # Without a year, February 29 must be allowed.
    year = monthday.year if monthday.has_year() else 2000
    last_day = calendar.monthrange(year, int(monthday.month))[1]
    if not 1 <= monthday.daynum <= last_day:
        raise ValidationError(
            "{} doesn't have a day {}.".format(
                str(monthday.month), monthday.daynum
            )
        )


def validate_monthday_range(monthday_range):
    if not monthday_range.has_start():
        raise ValidationError("A monthday range must have a beginning.")
    validate_monthday(monthday_range.start)
    if monthday_range.has_end():
        validate_monthday(monthday_range.end, bare_daynum=True)
    elif monthday_range.has_period():
        raise ValidationError("A repeating monthday range must have an end.")


def validate_year_range(year_range):
    if not year_range.has_start():
        raise ValidationError("A year range must have a first year.")
    if year_range.has_end() and year_range.end < year_range.start:
        raise ValidationError(
            "The year range {}-{} ends before it starts.".format(
                year_range.start, year_range.end
            )
        )
    if year_range.has_period() and not year_range.has_end():
        raise ValidationError("A repeating year range must have an end.")


def validate_week_range(week_range):
    if not 1 <= week_range.start <= MAX_WEEK:
        raise ValidationError(
            "The week {} does not exist.".format(week_range.start)
        )
    if week_range.has_end():
        if not week_range.start <= week_range.end <= MAX_WEEK:
            raise ValidationError(
                "The week range {}-{} is invalid.".format(
                    week_range.start, week_range.end
                )
            )
    elif week_range.has_period():
        raise ValidationError("A repeating week range must have an end.")

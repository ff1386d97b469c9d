import enum
from dataclasses import dataclass, field, replace

from canonical_opening_hours.temporal_objects import Renderable
from canonical_opening_hours.temporal_ranges import Weekdays


SEPARATORS = (';', ',', '||')


class Modifier(enum.Enum):
    DEFAULT_OPEN = 0
    OPEN = 1
    CLOSED = 2
    UNKNOWN = 3
    COMMENT = 4

    def is_printed(self):
        """Returns False for the modifiers which don't appear in a field."""
        return self not in (Modifier.DEFAULT_OPEN, Modifier.COMMENT)

    def __str__(self):
        if not self.is_printed():
            return ''
        return self.name.lower()


@dataclass(frozen=True)
class RuleSequence(Renderable):
    """A rule of a field, e.g. "Jan-Mar Mo-Fr 10:00-18:00 closed".

    Attributes
    ----------
    years, months, weeks, times
        Tuples of YearRange, MonthdayRange, WeekRange and Timespan.
    weekdays
        The Weekdays (weekdays and holidays) of the rule.
    twenty_four_hours
        True for "24/7". The selectors are then ignored.
    modifier
        The state set by the rule.
    comment
        A text used instead of the selectors ('"on appointment":').
    modifier_comment
        The text following the modifier, without its quotes.
    separator_for_readability
        Whether a colon follows the wide range selectors ("Dec 25: ...").
    any_separator
        The separator joining this rule to the next one
        (";", "," or "||").
    """
    years: tuple = ()
    months: tuple = ()
    weeks: tuple = ()
    weekdays: Weekdays = field(default_factory=Weekdays)
    times: tuple = ()
    twenty_four_hours: bool = False
    modifier: Modifier = Modifier.DEFAULT_OPEN
    comment: str = ''
    modifier_comment: str = ''
    separator_for_readability: bool = False
    any_separator: str = ';'

    def is_empty(self):
        return (
            not self.has_years() and not self.has_months() and
            not self.has_weeks() and not self.has_weekdays() and
            not self.has_times()
        )

    def is_twenty_four_hours(self):
        return self.twenty_four_hours

    def has_years(self):
        return bool(self.years)

    def has_months(self):
        return bool(self.months)

    def has_weeks(self):
        return bool(self.weeks)

    def has_weekdays(self):
        return not self.weekdays.is_empty()

    def has_times(self):
        return bool(self.times)

    def has_comment(self):
        return bool(self.comment)

    def has_modifier_comment(self):
        return bool(self.modifier_comment)

    def has_separator_for_readability(self):
        return self.separator_for_readability

    def with_years(self, years):
        return replace(self, years=tuple(years))

    def with_months(self, months):
        return replace(self, months=tuple(months))

    def with_weeks(self, weeks):
        return replace(self, weeks=tuple(weeks))

    def with_weekdays(self, weekdays):
        return replace(self, weekdays=weekdays)

    def with_times(self, times):
        return replace(self, times=tuple(times))

    def with_twenty_four_hours(self, on=True):
        return replace(self, twenty_four_hours=on)

    def with_modifier(self, modifier):
        return replace(self, modifier=modifier)

    def with_comment(self, comment):
        return replace(self, comment=comment)

    def with_modifier_comment(self, comment):
        return replace(self, modifier_comment=comment)

    def with_separator_for_readability(self, on=True):
        return replace(self, separator_for_readability=on)

    def with_any_separator(self, separator):
        if separator not in SEPARATORS:
            raise ValueError(
                "The rule separator must be one of {}, not {!r}.".format(
                    ', '.join(SEPARATORS), separator
                )
            )
        return replace(self, any_separator=separator)

"""Reads opening_hours fields into RuleSequence objects.

>>> rules = parse_field("Mo-Fr 08:00-18:00; Sa 09:00-13:00; PH off")
>>> [str(rule) for rule in rules]
['Mo-Fr 08:00-18:00', 'Sa 09:00-13:00', 'PH closed']
"""

import datetime
import logging
import os

import lark
from lark.lexer import Token

from canonical_opening_hours.exceptions import ParseError, UnsupportedPattern
from canonical_opening_hours.temporal_objects import (
    Time, Event, Weekday, Month, VariableDate, NthDayOfTheMonth,
    Timespan, Holiday, DateOffset, MonthDay
)
from canonical_opening_hours.temporal_ranges import (
    NthWeekdayOfTheMonthEntry, WeekdayRange, Weekdays,
    MonthdayRange, YearRange, WeekRange
)
from canonical_opening_hours.rules import RuleSequence, Modifier

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.realpath(__file__))


def _comment_text(token):
    return token.value[1:-1]


def _signed(sign, value):
    return -value if sign == '-' else value


def _build_rule(parts, **kwargs):
    # 'parts' are ("years", ...), ("weekdays", ...), etc.
    fields = dict(parts)
    fields.update(kwargs)
    return RuleSequence(**fields)


class MainTransformer(lark.Transformer):
    def time_domain(self, args):
        rules = []
        for arg in args:
            if isinstance(arg, Token):
                rules[-1] = rules[-1].with_any_separator(arg.value)
            else:
                rules.append(arg)
        return tuple(rules)

    # Rule
    def rule_sequence(self, args):
        rule = RuleSequence()
        for arg in args:
            if isinstance(arg, RuleSequence):
                rule = arg
            else:
                modifier, comment = arg
                rule = rule.with_modifier(modifier).with_modifier_comment(
                    comment
                )
        return rule

    def always_open(self, args):
        return RuleSequence(twenty_four_hours=True)

    def comment_selectors(self, args):
        if len(args) > 1:
            raise UnsupportedPattern(
                "<comment: small_range_selectors> pattern is not supported."
            )
        return RuleSequence(comment=args[0].value)

    def selectors_with_colon(self, args):
        parts = [part for arg in args for part in arg]
        return _build_rule(parts, separator_for_readability=True)

    def selectors_without_colon(self, args):
        parts = [part for arg in args for part in arg]
        return _build_rule(parts)

    # Main selectors
    def wide_range_selectors(self, args):
        return args

    def small_range_selectors(self, args):
        return args

    # Years
    def year_selector(self, args):
        return ("years", tuple(args))

    def year_range(self, args):
        values = [int(arg) for arg in args]
        return YearRange(*values)

    def year_range_plus(self, args):
        return YearRange(int(args[0]), plus=True)

    # Months and dates
    def monthday_selector(self, args):
        return ("months", tuple(args))

    def monthday_range_dates(self, args):
        period = int(args[2]) if len(args) == 3 else 0
        return MonthdayRange(args[0], args[1], period=period)

    def monthday_range_daynum(self, args):
        period = int(args[2]) if len(args) == 3 else 0
        return MonthdayRange(args[0], MonthDay(daynum=int(args[1])), period)

    def monthday_range_plus(self, args):
        return MonthdayRange(args[0], plus=True)

    def monthday_range_date(self, args):
        return MonthdayRange(args[0])

    def date(self, args):
        monthday = MonthDay()
        for arg in args:
            if isinstance(arg, DateOffset):
                monthday = monthday.with_offset(arg)
            elif arg.type == "YEAR":
                monthday = monthday.with_year(int(arg))
            elif arg.type == "MONTH":
                monthday = monthday.with_month(Month.from_token(arg.value))
            elif arg.type == "DAYNUM":
                monthday = monthday.with_daynum(int(arg))
            else:  # arg.type == "VARIABLE_DATE"
                monthday = monthday.with_variable_date(VariableDate.EASTER)
        return monthday

    def date_offset(self, args):
        if isinstance(args[0], int):
            return DateOffset(offset=args[0])
        offset = args[2] if len(args) == 3 else 0
        return DateOffset(
            Weekday.from_token(args[1].value),
            positive=args[0] == '+',
            offset=offset
        )

    # Weeks
    def week_selector(self, args):
        return ("weeks", tuple(args))

    def week_range(self, args):
        values = [int(arg) for arg in args]
        return WeekRange(*values)

    # Weekdays and holidays
    def weekday_selector_holidays_first(self, args):
        return ("weekdays", Weekdays(tuple(args[1]), tuple(args[0])))

    def weekday_selector_holidays_last(self, args):
        return ("weekdays", Weekdays(tuple(args[0]), tuple(args[1])))

    def weekday_selector_holidays(self, args):
        return ("weekdays", Weekdays(holidays=tuple(args[0])))

    def weekday_selector_weekdays(self, args):
        return ("weekdays", Weekdays(weekday_ranges=tuple(args[0])))

    def weekday_selector_in_holiday(self, args):
        raise UnsupportedPattern(
            "<holiday weekday> pattern (weekdays in holidays) "
            "is not supported."
        )

    def weekday_sequence(self, args):
        return args

    def holiday_sequence(self, args):
        return args

    def weekday_range(self, args):
        start = Weekday.from_token(args[0].value)
        if len(args) == 1:
            return WeekdayRange(start)
        return WeekdayRange(start, Weekday.from_token(args[1].value))

    def weekday_range_nth(self, args):
        offset = args[2] if len(args) == 3 else 0
        return WeekdayRange(
            Weekday.from_token(args[0].value),
            nths=tuple(args[1]),
            offset=offset
        )

    def weekday_range_offset(self, args):
        return WeekdayRange(Weekday.from_token(args[0].value), offset=args[1])

    def nth(self, args):
        return args

    def nth_entry(self, args):
        start = NthDayOfTheMonth(int(args[0]))
        if len(args) == 1:
            return NthWeekdayOfTheMonthEntry(start)
        return NthWeekdayOfTheMonthEntry(start, NthDayOfTheMonth(int(args[1])))

    def nth_entry_negative(self, args):
        if int(args[0]) != 1:
            raise UnsupportedPattern(
                "Only the last weekday of the month ([-1]) can be "
                "counted from the end."
            )
        return NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.LAST)

    def holiday(self, args):
        offset = args[1] if len(args) == 2 else 0
        return Holiday(plural=args[0].value.upper() == "PH", offset=offset)

    def day_offset(self, args):
        return _signed(args[0].value, int(args[1]))

    # Times
    def time_selector(self, args):
        return ("times", tuple(args))

    def timespan_point(self, args):
        return Timespan(args[0])

    def timespan_plus(self, args):
        return Timespan(args[0], plus=True)

    def timespan_range(self, args):
        return Timespan(args[0], args[1])

    def timespan_range_plus(self, args):
        return Timespan(args[0], args[1], plus=True)

    def timespan_period(self, args):
        return Timespan(args[0], args[1], args[2])

    def hour_minutes(self, args):
        return Time.from_hours_minutes(int(args[0]), int(args[1]))

    def minutes(self, args):
        return Time.from_minutes(int(args[0]))

    def variable_time_event(self, args):
        return Time.from_event(Event.from_token(args[0].value))

    def variable_time_offset(self, args):
        event, sign, hours, minutes = args
        offset = datetime.timedelta(hours=int(hours), minutes=int(minutes))
        return Time.from_event(
            Event.from_token(event.value), _signed(sign.value, offset)
        )

    # Modifiers
    def rule_modifier_open(self, args):
        comment = _comment_text(args[1]) if len(args) == 2 else ''
        return (Modifier.OPEN, comment)

    def rule_modifier_closed(self, args):
        if args[0].value.lower() == "off":
            logger.debug("Reading 'off' as 'closed'.")
        comment = _comment_text(args[1]) if len(args) == 2 else ''
        return (Modifier.CLOSED, comment)

    def rule_modifier_unknown(self, args):
        comment = _comment_text(args[1]) if len(args) == 2 else ''
        return (Modifier.UNKNOWN, comment)

    def rule_modifier_comment(self, args):
        return (Modifier.COMMENT, _comment_text(args[0]))


def get_parser():
    """
        Returns a Lark parser able to parse a valid field.
    """
    with open(os.path.join(BASE_DIR, "field.ebnf"), 'r') as f:
        grammar = f.read()
    return lark.Lark(grammar, start="time_domain", parser="earley")


def get_tree(field):
    try:
        return PARSER.parse(field)
    except lark.exceptions.LarkError as e:
        raise ParseError(
            "The field {!r} could not be parsed.".format(field)
        ) from e


def parse_field(field):
    """Returns a tuple of RuleSequence objects from a field.

    Raises
    ------
    ParseError
        When the field is not valid.
    UnsupportedPattern
        When the field contains a pattern the models can't hold.
    """
    field = field.strip(' \n\t;')
    logger.debug("Parsing field %r.", field)
    tree = get_tree(field)
    try:
        rules = MainTransformer().transform(tree)
    except lark.exceptions.VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise
    logger.debug("Field %r gave %d rule(s).", field, len(rules))
    return rules


PARSER = get_parser()

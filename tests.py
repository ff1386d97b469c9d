import unittest
import datetime
import io
import time

import pytz

from canonical_opening_hours import OpeningHours, sanitize_field, parse_field
from canonical_opening_hours.temporal_objects import (
    Weekday, Month, Event, VariableDate, NthDayOfTheMonth, TimeKind,
    Time, Timespan, Holiday, DateOffset, MonthDay
)
from canonical_opening_hours.temporal_ranges import (
    NthWeekdayOfTheMonthEntry, WeekdayRange, Weekdays,
    MonthdayRange, YearRange, WeekRange
)
from canonical_opening_hours.rules import RuleSequence, Modifier
from canonical_opening_hours.rendering import (
    render, write, render_week_ranges, render_rule_sequences
)
from canonical_opening_hours.utils import (
    print_offset, print_padded_number, print_vector, cycle_slice, SpaceLatch
)
from canonical_opening_hours.event_times import (
    FixedEventTimes, SolarEventTimes, unresolved
)
from canonical_opening_hours import validators
from canonical_opening_hours.exceptions import (
    COHError,
    ParseError,
    InconsistentField,
    UnsupportedPattern,
    EventTimeNotResolved,
    ValidationError
)

unittest.util._MAX_LENGTH = 1000


def hm(hours, minutes=0):
    return Time.from_hours_minutes(hours, minutes)


def span(start, end):
    return Timespan(hm(*start), hm(*end))


class TestHelpers(unittest.TestCase):
    def test_print_offset(self):
        self.assertEqual(print_offset(0, False), '')
        self.assertEqual(print_offset(0, True), '')
        self.assertEqual(print_offset(2, False), "+2 days")
        self.assertEqual(print_offset(1, False), "+1 day")
        self.assertEqual(print_offset(-1, False), "-1 day")
        self.assertEqual(print_offset(-3, True), " -3 days")

    def test_print_padded_number(self):
        self.assertEqual(print_padded_number(5, 2), "05")
        self.assertEqual(print_padded_number(123, 2), "123")
        # No padding is kept from a call to another.
        self.assertEqual(print_padded_number(7), "7")

    def test_print_vector(self):
        self.assertEqual(print_vector([]), '')
        self.assertEqual(print_vector([1, 2, 3]), "1, 2, 3")
        self.assertEqual(print_vector([1, 2], ','), "1,2")
        self.assertEqual(
            print_vector([1, 2, 3], separator=lambda i: '+' * i),
            "1+2++3"
        )
        self.assertEqual(
            print_vector([1, 2], render=lambda i: str(i * 10)),
            "10, 20"
        )

    def test_cycle_slice(self):
        self.assertEqual(cycle_slice([1, 2, 3, 4, 5], 1, 3), [2, 3, 4])
        self.assertEqual(cycle_slice([1, 2, 3, 4, 5], 3, 1), [4, 5, 1, 2])

    def test_space_latch(self):
        put_space = SpaceLatch()
        self.assertEqual(put_space(), '')
        self.assertEqual(put_space(), ' ')
        self.assertEqual(put_space(), ' ')


class TestTime(unittest.TestCase):
    def test_unset(self):
        self.assertFalse(Time().has_value())
        self.assertEqual(str(Time()), "hh:mm")

    def test_hours_minutes(self):
        self.assertEqual(str(hm(8, 5)), "08:05")
        self.assertEqual(str(hm(18, 30)), "18:30")
        self.assertEqual(str(Time.from_hours(24)), "24:00")
        self.assertTrue(hm(8).is_hours_minutes())
        self.assertTrue(hm(8).is_time())
        self.assertEqual(hm(8, 5).get_hours(), 8)
        self.assertEqual(hm(8, 5).get_minutes(), 5)

    def test_minutes(self):
        t = Time.from_minutes(30)
        self.assertEqual(t.kind, TimeKind.MINUTES)
        self.assertTrue(t.is_minutes())
        self.assertFalse(t.is_time())
        self.assertEqual(str(t), "30")
        self.assertEqual(str(Time.from_minutes(5)), "05")
        self.assertEqual(str(Time.from_minutes(60)), "60")

    def test_minutes_promoted_to_hours(self):
        t = Time.from_minutes(90)
        self.assertEqual(t.kind, TimeKind.HOURS_MINUTES)
        self.assertEqual(str(t), "01:30")
        t = Time.from_minutes(-90)
        self.assertEqual(t.kind, TimeKind.HOURS_MINUTES)
        self.assertEqual(t.get_hours(), -1)
        self.assertEqual(t.get_minutes(), -30)
        self.assertEqual(str(t), "01:30")

    def test_events(self):
        self.assertEqual(str(Time.from_event(Event.SUNSET)), "sunset")
        self.assertEqual(
            str(Time.from_event(
                Event.SUNRISE, datetime.timedelta(hours=1, minutes=30)
            )),
            "(sunrise+01:30)"
        )
        self.assertEqual(
            str(Time.from_event(Event.DUSK, -datetime.timedelta(minutes=45))),
            "(dusk-00:45)"
        )
        self.assertEqual(
            str(Time.from_event(Event.DAWN, datetime.timedelta())),
            "(dawn+00:00)"
        )
        t = Time.from_event(Event.DAWN)
        self.assertTrue(t.is_event())
        self.assertFalse(t.is_event_offset())
        self.assertTrue(t.is_time())
        with self.assertRaises(ValueError):
            Time.from_event(Event.NOT_EVENT)

    def test_with_event(self):
        t = Time().with_event(Event.SUNSET)
        self.assertEqual(t.kind, TimeKind.EVENT)
        t = hm(1).with_event(Event.SUNSET)
        self.assertEqual(str(t), "(sunset+01:00)")
        self.assertEqual(str(t.with_event(Event.NOT_EVENT)), "01:00")
        self.assertEqual(
            Time.from_event(Event.DAWN).with_event(Event.NOT_EVENT), Time()
        )

    def test_arithmetic(self):
        self.assertEqual(str(hm(10) + Time.from_minutes(30)), "10:30")
        t = Time.from_minutes(20) + Time.from_minutes(20)
        self.assertEqual(t.kind, TimeKind.MINUTES)
        self.assertEqual(str(t), "40")
        self.assertEqual(str(hm(10) - Time.from_minutes(30)), "09:30")
        self.assertEqual((-hm(1)).get_hours(), -1)
        t = Time.from_event(Event.SUNSET) + Time.from_minutes(30)
        self.assertEqual(str(t), "(sunset+00:30)")

    def test_arithmetic_keeps_clock_times(self):
        t = hm(10) - hm(9, 30)
        self.assertEqual(t.kind, TimeKind.HOURS_MINUTES)
        self.assertEqual(str(t), "00:30")
        t = Time.from_minutes(20) + hm(0, 10)
        self.assertEqual(t.kind, TimeKind.HOURS_MINUTES)
        self.assertEqual(str(t), "00:30")
        self.assertEqual(str(hm(10, 30) - Time.from_minutes(45)), "09:45")
        self.assertEqual(str(hm(1) - hm(0, 20)), "00:40")

    def test_event_resolution(self):
        t = Time.from_event(Event.SUNRISE, datetime.timedelta(minutes=30))
        with self.assertRaises(EventTimeNotResolved):
            t.get_hours()
        with self.assertRaises(EventTimeNotResolved):
            t.get_minutes(unresolved)
        resolver = FixedEventTimes({"sunrise": datetime.time(6, 15)})
        self.assertEqual(t.get_hours(resolver), 6)
        self.assertEqual(t.get_minutes(resolver), 45)
        t = Time.from_event(Event.SUNRISE)
        self.assertEqual(t.get_hours(resolver), 6)
        self.assertEqual(t.get_minutes(resolver), 15)
        # Non-event times don't need a resolver.
        self.assertEqual(hm(10, 5).get_minutes(resolver), 5)

    def test_rendering_is_stable(self):
        t = Time.from_event(Event.SUNSET, -datetime.timedelta(hours=2))
        self.assertEqual(str(t), str(t))


class TestTimespan(unittest.TestCase):
    def test_render(self):
        self.assertEqual(str(span((10, 0), (12, 0))), "10:00-12:00")
        self.assertEqual(str(Timespan(hm(10))), "10:00")
        self.assertEqual(str(Timespan(hm(10), plus=True)), "10:00+")
        self.assertEqual(
            str(span((10, 0), (12, 0)).with_plus()), "10:00-12:00+"
        )
        self.assertEqual(
            str(Timespan(
                Time.from_event(Event.SUNRISE), Time.from_event(Event.SUNSET)
            )),
            "sunrise-sunset"
        )

    def test_period(self):
        timespan = span((10, 0), (16, 0))
        self.assertEqual(
            str(timespan.with_period(Time.from_minutes(90))),
            "10:00-16:00/01:30"
        )
        self.assertEqual(
            str(timespan.with_period(Time.from_minutes(45))),
            "10:00-16:00/45"
        )
        # Open timespans don't print their period.
        self.assertEqual(
            str(Timespan(hm(10), period=Time.from_minutes(45))), "10:00"
        )

    def test_state(self):
        self.assertTrue(Timespan().is_empty())
        self.assertFalse(Timespan().is_open())
        self.assertTrue(Timespan(hm(10)).is_open())
        self.assertFalse(span((10, 0), (12, 0)).is_open())
        self.assertTrue(span((10, 0), (12, 0)).has_end())

    def test_is_valid(self):
        self.assertTrue(span((10, 0), (12, 0)).is_valid())
        self.assertTrue(Timespan(hm(10)).is_valid())
        self.assertFalse(Timespan().is_valid())
        self.assertFalse(
            Timespan(hm(10), period=Time.from_minutes(30)).is_valid()
        )
        self.assertFalse(Timespan(hm(50), hm(52)).is_valid())

    def test_immutable(self):
        timespan = span((10, 0), (12, 0))
        with self.assertRaises(AttributeError):
            timespan.plus = True
        timespan.with_plus()
        self.assertFalse(timespan.plus)


class TestWeekdays(unittest.TestCase):
    def test_weekday(self):
        self.assertEqual(str(Weekday.MONDAY), "Mo")
        self.assertEqual(str(Weekday.SUNDAY), "Su")
        self.assertEqual(str(Weekday.NONE), "not-a-day")
        self.assertLess(Weekday.SUNDAY, Weekday.MONDAY)
        self.assertLess(Weekday.FRIDAY, Weekday.SATURDAY)
        self.assertEqual(Weekday.from_token("we"), Weekday.WEDNESDAY)
        self.assertEqual(
            Weekday.from_date(datetime.date(2018, 1, 1)), Weekday.MONDAY
        )
        self.assertEqual(
            Weekday.from_date(datetime.date(2018, 1, 7)), Weekday.SUNDAY
        )

    def test_weekday_range_render(self):
        self.assertEqual(str(WeekdayRange(Weekday.MONDAY)), "Mo")
        self.assertEqual(
            str(WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY)), "Mo-Fr"
        )
        # Nth entries and offsets belong to single days.
        self.assertEqual(
            str(WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY, offset=2)),
            "Mo-Fr"
        )

    def test_weekday_range_nth(self):
        wr = WeekdayRange(Weekday.MONDAY).with_nth(
            NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.FIRST)
        ).with_nth(
            NthWeekdayOfTheMonthEntry(
                NthDayOfTheMonth.SECOND, NthDayOfTheMonth.FOURTH
            )
        )
        self.assertEqual(str(wr), "Mo[1,2-4]")
        wr = WeekdayRange(
            Weekday.SUNDAY,
            nths=(NthWeekdayOfTheMonthEntry(NthDayOfTheMonth.LAST),),
            offset=2
        )
        self.assertEqual(str(wr), "Su[-1] +2 days")
        self.assertEqual(
            str(WeekdayRange(Weekday.MONDAY, offset=-1)), "Mo -1 day"
        )

    def test_has_wday(self):
        mo_fr = WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY)
        sa_su = WeekdayRange(Weekday.SATURDAY, Weekday.SUNDAY)
        self.assertTrue(mo_fr.has_wday(Weekday.WEDNESDAY))
        self.assertTrue(mo_fr.has_monday())
        self.assertTrue(mo_fr.has_friday())
        self.assertFalse(mo_fr.has_saturday())
        self.assertFalse(mo_fr.has_wday(Weekday.NONE))
        self.assertFalse(sa_su.has_wday(Weekday.WEDNESDAY))
        self.assertTrue(sa_su.has_saturday())
        self.assertTrue(sa_su.has_sunday())
        self.assertTrue(WeekdayRange(Weekday.TUESDAY).has_tuesday())
        self.assertFalse(WeekdayRange(Weekday.TUESDAY).has_thursday())
        self.assertFalse(WeekdayRange().has_wday(Weekday.MONDAY))

    def test_days_count(self):
        self.assertEqual(WeekdayRange().get_days_count(), 0)
        self.assertEqual(WeekdayRange(Weekday.MONDAY).get_days_count(), 1)
        self.assertEqual(
            WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY).get_days_count(), 5
        )
        fr_mo = WeekdayRange(Weekday.FRIDAY, Weekday.MONDAY)
        self.assertEqual(fr_mo.get_days_count(), 4)
        self.assertEqual(
            fr_mo.get_days(),
            [Weekday.FRIDAY, Weekday.SATURDAY, Weekday.SUNDAY, Weekday.MONDAY]
        )

    def test_holiday(self):
        self.assertEqual(str(Holiday(plural=True)), "PH")
        self.assertEqual(str(Holiday(plural=False, offset=0)), "SH")
        self.assertEqual(str(Holiday(plural=False, offset=1)), "SH +1 day")
        self.assertEqual(str(Holiday().with_offset(-2)), "SH -2 days")
        # Offsets are only printed for school holidays.
        self.assertEqual(str(Holiday(plural=True, offset=3)), "PH")

    def test_weekdays(self):
        mo_fr = WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY)
        ph = Holiday(plural=True)
        self.assertTrue(Weekdays().is_empty())
        self.assertEqual(str(Weekdays((mo_fr,), (ph,))), "PH, Mo-Fr")
        self.assertEqual(
            str(Weekdays().with_weekday_range(mo_fr).with_weekday_range(
                WeekdayRange(Weekday.SUNDAY)
            )),
            "Mo-Fr, Su"
        )
        self.assertEqual(
            str(Weekdays(holidays=(ph, Holiday()))), "PH, SH"
        )
        weekdays = Weekdays().with_holiday(ph)
        self.assertTrue(weekdays.has_holidays())
        self.assertFalse(weekdays.has_weekday())
        self.assertTrue(Weekdays((mo_fr,)).has_wday(Weekday.TUESDAY))


class TestDates(unittest.TestCase):
    def test_date_offset(self):
        self.assertEqual(str(DateOffset()), '')
        self.assertTrue(DateOffset().is_empty())
        self.assertEqual(str(DateOffset(Weekday.SUNDAY)), "+Su")
        self.assertEqual(
            str(DateOffset(Weekday.SUNDAY, positive=False, offset=1)),
            "-Su +1 day"
        )
        self.assertEqual(str(DateOffset(offset=-2)), "-2 days")

    def test_monthday(self):
        dec_25 = MonthDay(month=Month.DEC, daynum=25)
        self.assertEqual(str(dec_25), "Dec 25")
        self.assertEqual(str(dec_25.with_year(2020)), "2020 Dec 25")
        self.assertEqual(str(dec_25.with_daynum(5)), "Dec 05")
        self.assertEqual(str(MonthDay(month=Month.JAN)), "Jan")
        self.assertEqual(
            str(dec_25.with_offset(DateOffset(Weekday.SUNDAY))),
            "Dec 25 +Su"
        )

    def test_variable_date(self):
        easter = MonthDay(variable_date=VariableDate.EASTER)
        self.assertEqual(str(easter), "easter")
        # The variable date wins over the month and the day.
        self.assertEqual(
            str(easter.with_month(Month.MAR).with_daynum(3)), "easter"
        )
        self.assertEqual(
            str(easter.with_offset(DateOffset(offset=1))), "easter +1 day"
        )
        self.assertEqual(str(easter.with_year(2019)), "2019 easter")

    def test_monthday_range(self):
        jan = MonthDay(month=Month.JAN)
        self.assertEqual(
            str(MonthdayRange(jan, MonthDay(month=Month.MAR))), "Jan-Mar"
        )
        jan_01_05 = MonthdayRange(jan.with_daynum(1), MonthDay(daynum=5))
        self.assertTrue(jan_01_05.has_end())
        self.assertEqual(str(jan_01_05), "Jan 01-05")
        self.assertEqual(
            str(MonthdayRange(
                jan.with_daynum(1), MonthDay(month=Month.JUN, daynum=30), 2
            )),
            "Jan 01-Jun 30/2"
        )
        dec_25 = MonthDay(month=Month.DEC, daynum=25)
        self.assertEqual(str(MonthdayRange(dec_25, plus=True)), "Dec 25+")
        self.assertEqual(str(MonthdayRange(dec_25, period=2)), "Dec 25")
        self.assertTrue(MonthdayRange().is_empty())


class TestYearsAndWeeks(unittest.TestCase):
    def test_year_range(self):
        self.assertEqual(str(YearRange()), '')
        self.assertEqual(str(YearRange(2020)), "2020")
        self.assertEqual(str(YearRange(2010, 2020)), "2010-2020")
        self.assertEqual(str(YearRange(2010, 2020, 2)), "2010-2020/2")
        self.assertEqual(str(YearRange(2020, plus=True)), "2020+")
        self.assertEqual(str(YearRange(2020, period=2)), "2020")
        self.assertTrue(YearRange(2020).is_open())

    def test_has_year(self):
        self.assertTrue(YearRange(2010, 2020, 2).has_year(2012))
        self.assertFalse(YearRange(2010, 2020, 2).has_year(2013))
        self.assertFalse(YearRange(2010, 2020).has_year(2021))
        self.assertTrue(YearRange(2020, plus=True).has_year(2050))
        self.assertFalse(YearRange(2020).has_year(2021))

    def test_week_range(self):
        self.assertEqual(str(WeekRange()), '')
        self.assertEqual(str(WeekRange(1)), "01")
        self.assertEqual(str(WeekRange(1, 53, 2)), "01-53/2")
        self.assertEqual(str(WeekRange(10, 12)), "10-12")
        self.assertEqual(
            render_week_ranges((WeekRange(1, 10), WeekRange(20))),
            "week 01-10, 20"
        )
        self.assertTrue(WeekRange(1, 53, 2).has_week(3))
        self.assertFalse(WeekRange(1, 53, 2).has_week(4))


class TestRuleSequence(unittest.TestCase):
    maxDiff = None

    def setUp(self):
        self.mo_fr = Weekdays((WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY),))
        self.times = (span((10, 0), (12, 0)), span((13, 0), (18, 0)))

    def test_simple(self):
        rule = RuleSequence(weekdays=self.mo_fr, times=self.times)
        self.assertEqual(str(rule), "Mo-Fr 10:00-12:00, 13:00-18:00")
        self.assertEqual(str(RuleSequence(times=self.times[:1])), "10:00-12:00")
        self.assertEqual(str(RuleSequence(weekdays=self.mo_fr)), "Mo-Fr")
        self.assertEqual(str(RuleSequence()), '')
        self.assertTrue(RuleSequence().is_empty())

    def test_all_selectors(self):
        rule = RuleSequence(
            years=(YearRange(2020),),
            months=(MonthdayRange(
                MonthDay(month=Month.JAN), MonthDay(month=Month.MAR)
            ),),
            weeks=(WeekRange(1, 10),),
            weekdays=self.mo_fr,
            times=self.times[:1],
            modifier=Modifier.CLOSED
        )
        self.assertEqual(
            str(rule), "2020 Jan-Mar week 01-10 Mo-Fr 10:00-12:00 closed"
        )

    def test_twenty_four_hours(self):
        rule = RuleSequence(
            twenty_four_hours=True, weekdays=self.mo_fr, times=self.times,
            years=(YearRange(2020),)
        )
        self.assertEqual(str(rule), "24/7")
        self.assertEqual(
            str(rule.with_modifier(Modifier.CLOSED).with_modifier_comment(
                "works"
            )),
            '24/7 closed "works"'
        )

    def test_comment(self):
        rule = RuleSequence(
            comment='"on appointment"', weekdays=self.mo_fr, times=self.times
        )
        self.assertEqual(str(rule), '"on appointment":')
        self.assertEqual(
            str(rule.with_modifier(Modifier.CLOSED)),
            '"on appointment": closed'
        )

    def test_separator_for_readability(self):
        dec_25 = (MonthdayRange(MonthDay(month=Month.DEC, daynum=25)),)
        rule = RuleSequence(
            months=dec_25, times=self.times[:1],
            separator_for_readability=True
        )
        self.assertEqual(str(rule), "Dec 25: 10:00-12:00")
        rule = RuleSequence(
            months=dec_25, modifier=Modifier.CLOSED,
            separator_for_readability=True
        )
        self.assertEqual(str(rule), "Dec 25: closed")

    def test_modifiers(self):
        self.assertEqual(str(RuleSequence(modifier=Modifier.CLOSED)), "closed")
        rule = RuleSequence(weekdays=self.mo_fr)
        self.assertEqual(str(rule.with_modifier(Modifier.OPEN)), "Mo-Fr open")
        self.assertEqual(
            str(rule.with_modifier(Modifier.UNKNOWN)), "Mo-Fr unknown"
        )
        self.assertEqual(
            str(rule.with_modifier(Modifier.DEFAULT_OPEN)), "Mo-Fr"
        )
        self.assertEqual(str(rule.with_modifier(Modifier.COMMENT)), "Mo-Fr")
        rule = RuleSequence(
            modifier=Modifier.COMMENT, modifier_comment="by appointment"
        )
        self.assertEqual(str(rule), '"by appointment"')
        self.assertEqual(str(Modifier.COMMENT), '')

    def test_no_double_spaces(self):
        rule = RuleSequence(
            weekdays=self.mo_fr, modifier=Modifier.OPEN,
            modifier_comment="summer"
        )
        self.assertEqual(str(rule), 'Mo-Fr open "summer"')

    def test_any_separator(self):
        rule = RuleSequence()
        self.assertEqual(rule.any_separator, ';')
        self.assertEqual(rule.with_any_separator("||").any_separator, "||")
        with self.assertRaises(ValueError):
            rule.with_any_separator('|')


class TestRuleSequences(unittest.TestCase):
    def setUp(self):
        self.first = RuleSequence(
            weekdays=Weekdays((WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY),)),
            times=(span((8, 0), (18, 0)),)
        )
        self.second = RuleSequence(
            weekdays=Weekdays(holidays=(Holiday(plural=True),)),
            modifier=Modifier.CLOSED
        )

    def test_separators(self):
        self.assertEqual(
            render_rule_sequences([self.first, self.second]),
            "Mo-Fr 08:00-18:00; PH closed"
        )
        self.assertEqual(
            render_rule_sequences(
                [self.first.with_any_separator(','), self.second]
            ),
            "Mo-Fr 08:00-18:00, PH closed"
        )
        self.assertEqual(
            render_rule_sequences(
                [self.first.with_any_separator("||"), self.second]
            ),
            "Mo-Fr 08:00-18:00 || PH closed"
        )

    def test_last_separator_is_ignored(self):
        self.assertEqual(
            render_rule_sequences(
                [self.first, self.second.with_any_separator("||")]
            ),
            "Mo-Fr 08:00-18:00; PH closed"
        )
        self.assertEqual(render_rule_sequences([]), '')
        self.assertEqual(render_rule_sequences([self.first]), str(self.first))

    def test_render_dispatch(self):
        rules = (self.first.with_any_separator("||"), self.second, self.first)
        self.assertEqual(
            render(rules),
            "Mo-Fr 08:00-18:00 || PH closed; Mo-Fr 08:00-18:00"
        )
        self.assertEqual(render(rules), render(rules))
        self.assertEqual(render(self.first.times), "08:00-18:00")
        self.assertEqual(render(Weekday.TUESDAY), "Tu")
        self.assertEqual(render(Month.MAY), "May")
        self.assertEqual(render([]), '')
        with self.assertRaises(TypeError):
            render(object())
        with self.assertRaises(TypeError):
            render([object()])

    def test_write(self):
        sink = io.StringIO()
        write([self.first, self.second], sink)
        write(Holiday(), sink)
        self.assertEqual(sink.getvalue(), "Mo-Fr 08:00-18:00; PH closedSH")


class TestEventTimes(unittest.TestCase):
    def test_unresolved(self):
        with self.assertRaises(EventTimeNotResolved):
            unresolved(Event.SUNSET)

    def test_fixed_event_times(self):
        resolver = FixedEventTimes({
            Event.SUNSET: datetime.time(21, 30),
            "dawn": hm(7, 30),
        })
        self.assertEqual(resolver(Event.SUNSET), hm(21, 30))
        self.assertEqual(resolver(Event.DAWN), hm(7, 30))
        with self.assertRaises(EventTimeNotResolved):
            resolver(Event.DUSK)

    def test_solar_event_times(self):
        # London, summer solstice (times in UTC).
        resolver = SolarEventTimes(51.5, -0.12, datetime.date(2018, 6, 21))
        self.assertEqual(Time.from_event(Event.SUNRISE).get_hours(resolver), 3)
        self.assertEqual(Time.from_event(Event.SUNSET).get_hours(resolver), 20)
        self.assertEqual(
            Time.from_event(
                Event.SUNSET, datetime.timedelta(hours=1)
            ).get_hours(resolver),
            21
        )

    def test_timezone(self):
        resolver = SolarEventTimes(51.5, -0.12, datetime.date(2018, 6, 21))
        self.assertIs(resolver.tzinfo, pytz.utc)
        # British Summer Time is one hour ahead of UTC.
        resolver = SolarEventTimes(
            51.5, -0.12, datetime.date(2018, 6, 21),
            tzinfo=pytz.timezone("Europe/London")
        )
        self.assertEqual(Time.from_event(Event.SUNRISE).get_hours(resolver), 4)
        self.assertEqual(Time.from_event(Event.SUNSET).get_hours(resolver), 21)

    def test_polar_day(self):
        # Tromsø, summer solstice: the sun never sets.
        resolver = SolarEventTimes(69.65, 18.96, datetime.date(2018, 6, 21))
        with self.assertRaises(EventTimeNotResolved):
            resolver(Event.SUNSET)


class TestValidators(unittest.TestCase):
    def test_timespan(self):
        validators.validate_timespan(span((10, 0), (12, 0)))
        with self.assertRaises(ValidationError):
            validators.validate_timespan(Timespan())
        with self.assertRaises(ValidationError):
            validators.validate_timespan(
                span((10, 0), (12, 0)).with_period(Time.from_minutes(-5))
            )

    def test_weekday_range(self):
        validators.validate_weekday_range(WeekdayRange(Weekday.MONDAY))
        with self.assertRaises(ValidationError):
            validators.validate_weekday_range(WeekdayRange())
        with self.assertRaises(ValidationError):
            validators.validate_weekday_range(
                WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY, offset=1)
            )

    def test_monthday(self):
        validators.validate_monthday(MonthDay(month=Month.FEB, daynum=29))
        with self.assertRaises(ValidationError):
            validators.validate_monthday(
                MonthDay(year=2019, month=Month.FEB, daynum=29)
            )
        with self.assertRaises(ValidationError):
            validators.validate_monthday(MonthDay(month=Month.APR, daynum=31))
        with self.assertRaises(ValidationError):
            validators.validate_monthday(MonthDay(daynum=5))
        validators.validate_monthday_range(MonthdayRange(
            MonthDay(month=Month.JAN, daynum=1), MonthDay(daynum=5)
        ))

    def test_years_and_weeks(self):
        validators.validate_year_range(YearRange(2010, 2020, 2))
        with self.assertRaises(ValidationError):
            validators.validate_year_range(YearRange(2020, 2010))
        with self.assertRaises(ValidationError):
            validators.validate_year_range(YearRange(2020, period=2))
        validators.validate_week_range(WeekRange(1, 53, 2))
        with self.assertRaises(ValidationError):
            validators.validate_week_range(WeekRange(54))
        with self.assertRaises(ValidationError):
            validators.validate_week_range(WeekRange(10, 5))


class TestParsing(unittest.TestCase):
    maxDiff = None

    def test_models(self):
        rules = parse_field("Mo-Fr 08:00-18:00; PH off")
        self.assertEqual(len(rules), 2)
        self.assertEqual(
            rules[0].weekdays.weekday_ranges,
            (WeekdayRange(Weekday.MONDAY, Weekday.FRIDAY),)
        )
        self.assertEqual(rules[0].times, (span((8, 0), (18, 0)),))
        self.assertEqual(rules[0].any_separator, ';')
        self.assertEqual(rules[1].weekdays.holidays, (Holiday(plural=True),))
        self.assertEqual(rules[1].modifier, Modifier.CLOSED)

    def test_events(self):
        rules = parse_field("(sunrise-01:00)-sunset")
        self.assertEqual(
            rules[0].times[0].start,
            Time.from_event(Event.SUNRISE, -datetime.timedelta(hours=1))
        )
        self.assertEqual(rules[0].times[0].end, Time.from_event(Event.SUNSET))

    def test_canonical_fields(self):
        for field in (
            "24/7",
            "Mo-Fr 08:00-18:00; Sa 09:00-13:00; PH closed",
            "sunrise-sunset",
            "(sunrise-01:00)-(sunset+01:00)",
            "Jan-Feb 10:00-20:00",
            "2010-2020/2 Mo-Fr 10:00-20:00",
            "2020+ Mo-Fr 10:00-20:00",
            "week 01-20/2 Mo-Fr 10:00-20:00",
            "Dec 25: closed",
            'Dec 25: closed "except if there is snow"',
            '"on appointment"',
            'Mo-Fr "on appointment"',
            "Mo[1,3] 10:00-20:00",
            "Su[-1] -2 days 10:00-12:00",
            "SH +1 day 10:00-12:00",
            "easter +1 day 10:00-12:00",
            "Dec 25 +Su closed",
            "10:00+",
            "10:00-16:00/45",
            "Mo 10:00-12:00 || \"on appointment\"",
            "Mo-Fr 10:00-18:00, We closed",
            "24/7 closed \"renovation\"",
        ):
            self.assertEqual(sanitize_field(field), field)

    def test_sanitize(self):
        self.assertEqual(sanitize_field("mo-fr 9:00-12:00"), "Mo-Fr 09:00-12:00")
        self.assertEqual(
            sanitize_field("Mo-Fr 10:00-20:00 ; Sa OFF;"),
            "Mo-Fr 10:00-20:00; Sa closed"
        )
        self.assertEqual(
            sanitize_field("SUNRISE-SUNSET"), "sunrise-sunset"
        )
        self.assertEqual(
            sanitize_field("Mo-Fr,PH 10:00-20:00"), "PH, Mo-Fr 10:00-20:00"
        )
        self.assertEqual(
            sanitize_field("week 1-20/2 10:00-20:00"),
            "week 01-20/2 10:00-20:00"
        )
        self.assertEqual(
            sanitize_field("10:00-16:00/90"), "10:00-16:00/01:30"
        )

    def test_comma_inside_selectors(self):
        rules = parse_field("Mo,We 10:00-12:00,13:00-18:00")
        self.assertEqual(len(rules), 1)
        self.assertEqual(
            str(rules[0]), "Mo, We 10:00-12:00, 13:00-18:00"
        )

    def test_comma_between_rules(self):
        rules = parse_field("Mo-Fr 10:00-18:00, We off")
        self.assertEqual(len(rules), 2)
        self.assertEqual(rules[0].any_separator, ',')
        self.assertEqual(rules[1].modifier, Modifier.CLOSED)

    def test_long_fields(self):
        days = ("Mo", "Tu", "We", "Th", "Fr", "Sa", "Su")
        field = "; ".join(
            day + " 08:00-10:00, 11:00-12:00, 13:00-15:00, 16:00-18:00"
            for day in days
        )
        start = time.perf_counter()
        self.assertEqual(sanitize_field(field), field)
        self.assertLess(time.perf_counter() - start, 5)

        field = ", ".join(
            "Mo, Tu, We 10:00-11:00, 12:00-13:00, 14:00-15:00"
            for _ in range(7)
        )
        start = time.perf_counter()
        rules = parse_field(field)
        self.assertLess(time.perf_counter() - start, 5)
        self.assertEqual(len(rules), 7)
        self.assertEqual(len(rules[0].times), 3)
        self.assertEqual(render_rule_sequences(rules), field)

    def test_additional_rule_separator(self):
        # A "," only separates rules after times, a modifier or "24/7".
        self.assertEqual(len(parse_field("Mo, Tu off")), 1)
        self.assertEqual(len(parse_field("Mo off, Tu 10:00-12:00")), 2)
        self.assertEqual(len(parse_field("24/7, PH closed")), 2)
        rules = parse_field("10:00-12:00, PH off")
        self.assertEqual(len(rules), 2)
        self.assertEqual(rules[0].times, (span((10, 0), (12, 0)),))
        rules = parse_field("PH, Mo 10:00-12:00")
        self.assertEqual(len(rules), 1)
        self.assertTrue(rules[0].weekdays.has_holidays())
        with self.assertRaises(ParseError):
            parse_field("Mo off, 10:00-12:00")

    def test_years_and_dates(self):
        rule = parse_field("2020 Jan 01 10:00-12:00")[0]
        self.assertFalse(rule.has_years())
        self.assertEqual(
            rule.months,
            (MonthdayRange(MonthDay(2020, Month.JAN, 1)),)
        )
        rule = parse_field("2020, 2022 Jan")[0]
        self.assertEqual(rule.years, (YearRange(2020), YearRange(2022)))
        self.assertEqual(rule.months, (MonthdayRange(MonthDay(month=Month.JAN)),))
        rule = parse_field("2020 Mo")[0]
        self.assertEqual(rule.years, (YearRange(2020),))

    def test_date_offset_or_open_end(self):
        rule = parse_field("Dec 25 +Su closed")[0]
        self.assertEqual(
            rule.months[0].start.offset, DateOffset(Weekday.SUNDAY)
        )
        self.assertFalse(rule.has_weekdays())
        rule = parse_field("Dec 25+ 10:00-12:00")[0]
        self.assertTrue(rule.months[0].has_plus())

    def test_readability_separator(self):
        rule = parse_field("Dec 25: 10:00-12:00")[0]
        self.assertTrue(rule.has_separator_for_readability())
        self.assertEqual(
            rule.months,
            (MonthdayRange(MonthDay(month=Month.DEC, daynum=25)),)
        )

    def test_errors(self):
        with self.assertRaises(ParseError):
            parse_field("Mo-Fr 25h")
        with self.assertRaises(UnsupportedPattern):
            parse_field('"on appointment": 10:00-12:00')
        with self.assertRaises(UnsupportedPattern):
            parse_field("SH Mo-Fr 10:00-12:00")
        with self.assertRaises(UnsupportedPattern):
            parse_field("Mo[-2] 10:00-12:00")
        with self.assertRaises(InconsistentField):
            sanitize_field('Mo "on appointment')
        self.assertTrue(issubclass(UnsupportedPattern, NotImplementedError))
        self.assertTrue(issubclass(InconsistentField, COHError))


class TestOpeningHours(unittest.TestCase):
    def test_field(self):
        oh = OpeningHours("mo-fr 08:00-18:00 ; PH off")
        self.assertEqual(oh.field, "mo-fr 08:00-18:00 ; PH off")
        self.assertEqual(oh.sanitized_field, "Mo-Fr 08:00-18:00; PH closed")
        self.assertEqual(str(oh), oh.sanitized_field)
        self.assertEqual(len(oh), 2)
        self.assertEqual([rule.modifier for rule in oh], [
            Modifier.DEFAULT_OPEN, Modifier.CLOSED
        ])
        self.assertFalse(oh.is_24_7())

    def test_24_7(self):
        self.assertTrue(OpeningHours("24/7").is_24_7())
        self.assertFalse(OpeningHours("24/7 closed").is_24_7())

    def test_errors(self):
        with self.assertRaises(TypeError):
            OpeningHours(None)
        with self.assertRaises(InconsistentField):
            OpeningHours('Mo-Fr "unclosed')

    def test_from_rules(self):
        oh = OpeningHours.from_rules([
            RuleSequence(twenty_four_hours=True, modifier=Modifier.OPEN)
        ])
        self.assertEqual(oh.render(), "24/7 open")
        self.assertTrue(oh.is_24_7())

    def test_resolve_time(self):
        oh = OpeningHours(
            "sunrise-sunset",
            event_times=FixedEventTimes({
                "sunrise": datetime.time(8, 0),
                "sunset": datetime.time(21, 30),
            })
        )
        timespan = oh.rules[0].times[0]
        self.assertEqual(oh.resolve_time(timespan.start), (8, 0))
        self.assertEqual(oh.resolve_time(timespan.end), (21, 30))
        with self.assertRaises(EventTimeNotResolved):
            OpeningHours("sunset-dusk").resolve_time(Time.from_event(Event.DUSK))


if __name__ == '__main__':
    unittest.main()
    exit(0)

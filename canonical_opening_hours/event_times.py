"""Resolvers giving the clock time of the events (sunrise, sunset, dawn, dusk).

A resolver is any callable taking an `Event` and returning a clock `Time`.
It's given to `Time.get_hours()` / `Time.get_minutes()` or to
`OpeningHours(field, event_times=...)`.
"""

import logging

import astral
import astral.sun
import pytz

from canonical_opening_hours.temporal_objects import Time, Event
from canonical_opening_hours.exceptions import EventTimeNotResolved

logger = logging.getLogger(__name__)


def unresolved(event):
    """The default resolver: no event can be resolved."""
    raise EventTimeNotResolved(
        "No event time resolver was given to get the time "
        "of {!r}.".format(str(event))
    )


def _to_time(value):
    if isinstance(value, Time):
        return value
    return Time.from_hours_minutes(value.hour, value.minute)


class FixedEventTimes:
    """Resolves the events from a dict.

    >>> resolver = FixedEventTimes({"sunrise": datetime.time(8, 0)})
    >>> resolver(Event.SUNRISE).get_hours()
    8
    """
    def __init__(self, event_times):
        self.event_times = {}
        for event, value in event_times.items():
            if not isinstance(event, Event):
                event = Event.from_token(event)
            self.event_times[event] = _to_time(value)

    def __call__(self, event):
        try:
            return self.event_times[event]
        except KeyError:
            raise EventTimeNotResolved(
                "The time of {!r} is unknown.".format(str(event))
            )

    def __repr__(self):
        return "<FixedEventTimes {}>".format(
            ', '.join(str(e) for e in self.event_times)
        )


class SolarEventTimes:
    """Resolves the events of a given day at a given place, with astral.

    Parameters
    ----------
    float
        The latitude of the place.
    float
        The longitude of the place.
    datetime.date
        The day of the events.
    pytz.timezone object, optional
        The timezone of the returned times (UTC by default).
    """
    def __init__(self, latitude, longitude, date, tzinfo=pytz.timezone("UTC")):
        self.observer = astral.Observer(latitude=latitude, longitude=longitude)
        self.date = date
        self.tzinfo = tzinfo
        self._solar_hours = None

    @property
    def solar_hours(self):
        if self._solar_hours is None:
            logger.debug(
                "Computing solar hours of %s at (%s, %s).",
                self.date, self.observer.latitude, self.observer.longitude
            )
            try:
                self._solar_hours = astral.sun.sun(
                    self.observer, date=self.date, tzinfo=self.tzinfo
                )
            except ValueError as e:
                # Raised by astral when the sun doesn't reach the needed
                # elevation (polar days and nights).
                raise EventTimeNotResolved(str(e)) from e
        return self._solar_hours

    def __call__(self, event):
        if event is Event.NOT_EVENT:
            raise EventTimeNotResolved("This time is not an event.")
        return _to_time(self.solar_hours[str(event)])

    def __repr__(self):
        return "<SolarEventTimes {} ({}, {})>".format(
            self.date, self.observer.latitude, self.observer.longitude
        )

from canonical_opening_hours import sanitization
from canonical_opening_hours.field_parser import parse_field
from canonical_opening_hours.rendering import render_rule_sequences
from canonical_opening_hours.event_times import unresolved
from canonical_opening_hours.rules import Modifier


class OpeningHours:
    """An opening_hours field and its rules.

    Parameters
    ----------
    str
        The field to parse.
    callable, optional
        A resolver giving the time of the events (sunrise, sunset...),
        see `canonical_opening_hours.event_times`.

    Attributes
    ----------
    field
        The field, as given.
    rules
        The tuple of RuleSequence objects of the field.
    sanitized_field
        The canonical form of the field.
    """
    def __init__(self, field, event_times=None):
        if not isinstance(field, str):
            raise TypeError("The field must be a string.")
        self.field = field
        sanitization.pre_check_field(field)
        self.rules = parse_field(field)
        self.sanitized_field = render_rule_sequences(self.rules)
        self.event_times = event_times or unresolved

    @classmethod
    def from_rules(cls, rules, event_times=None):
        """Returns an OpeningHours object from already built rules."""
        oh = cls.__new__(cls)
        oh.rules = tuple(rules)
        oh.field = oh.sanitized_field = render_rule_sequences(oh.rules)
        oh.event_times = event_times or unresolved
        return oh

    def render(self):
        return render_rule_sequences(self.rules)

    def is_24_7(self):
        """Returns whether the field is only "24/7"."""
        return (
            len(self.rules) == 1 and
            self.rules[0].is_twenty_four_hours() and
            self.rules[0].modifier in (Modifier.DEFAULT_OPEN, Modifier.OPEN)
        )

    def resolve_time(self, time):
        """Returns the (hours, minutes) of a Time, resolving the events."""
        return (
            time.get_hours(self.event_times),
            time.get_minutes(self.event_times)
        )

    def __iter__(self):
        return iter(self.rules)

    def __len__(self):
        return len(self.rules)

    def __repr__(self):
        return "<OpeningHours {!r}>".format(self.sanitized_field)

    def __str__(self):
        return self.render()

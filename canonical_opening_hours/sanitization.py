"""Rewrites fields in their canonical form."""

import logging

from canonical_opening_hours.exceptions import InconsistentField
from canonical_opening_hours.field_parser import parse_field
from canonical_opening_hours.rendering import render_rule_sequences

logger = logging.getLogger(__name__)


def pre_check_field(field):
    if field.count('"') % 2 != 0:
        raise InconsistentField("This field contains an odd number of quotes.")
    return field


def sanitize_rules(rules):
    return render_rule_sequences(rules)


def sanitize_field(field):
    """Returns the canonical form of a field.

    >>> sanitize_field("mo-fr 9:00-12:00 ; sa OFF")
    'Mo-Fr 09:00-12:00; Sa closed'
    """
    pre_check_field(field)
    sanitized_field = sanitize_rules(parse_field(field))
    if sanitized_field != field:
        logger.debug("Field %r sanitized to %r.", field, sanitized_field)
    return sanitized_field

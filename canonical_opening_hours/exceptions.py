class COHError(Exception):
    """Base class for COH errors."""
    pass


class ParseError(COHError):
    """
    Raised when field parsing fails.
    """
    pass


class InconsistentField(ParseError):
    """
    Raised when a field contains an error which can't be
    corrected automatically.
    """
    pass


class UnsupportedPattern(ParseError, NotImplementedError):
    """
    Raised when the field is parsable, but a pattern in it
    can't be held by the model.
    """
    pass


class EventTimeNotResolved(COHError):
    """
    Raised when the time of an event (sunrise, sunset, dawn or dusk)
    is needed but no resolver can give it.
    """
    pass


class ValidationError(COHError):
    """
    Raised when a value is well-formed but semantically wrong
    (e.g. a range ending before it starts).
    """
    pass

__appname__ = "canonical_opening_hours"
__version__ = "0.3.0"
__author__ = "rezemika"
__licence__ = "AGPLv3"

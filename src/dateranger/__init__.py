"""dateranger — date-range calculus with absolute and relative string forms."""

__version__ = "0.1.0"

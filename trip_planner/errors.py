"""Exceptions raised for caller mistakes (never for ordinary user input)."""


class TripPlannerError(Exception):
    """Base class for trip planner errors."""


class UnknownConfigField(TripPlannerError, KeyError):
    __str__ = Exception.__str__


class InvalidBoardType(TripPlannerError, ValueError):
    pass


class InvalidMealField(TripPlannerError, ValueError):
    pass


class DateOutOfRange(TripPlannerError, ValueError):
    """Raised when a selection edit targets a date outside the current trip."""

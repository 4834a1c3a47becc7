class WideTimeError(Exception):
    """Base error."""

class YearOverflowError(WideTimeError, OverflowError):
    """Raised when a computed year does not fit the calendar year field."""

    def __init__(self, year: int):
        super().__init__(f"year {year} does not fit the calendar year field")
        self.year = year

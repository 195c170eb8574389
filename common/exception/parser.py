class DatetimeParsingError(ValueError):
    pass

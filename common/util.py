import datetime
import random
import string

from dateutil.parser import parse

from common.exception.parser import DatetimeParsingError

UTC = datetime.timezone(datetime.timedelta(hours=0), 'UTC')


def to_string(string):
    if isinstance(string, bytes):
        return string.decode()

    if isinstance(string, int):
        return str(string)

    if isinstance(string, str):
        return string

    raise TypeError(
        f'Passed value is not str or bytes or int ({type(string)})')


def token_to_string(token):
    # Binary device tokens travel hex encoded
    if isinstance(token, (bytes, bytearray)):
        return token.hex()
    if token is None:
        return None
    return to_string(token)


def string_to_utc_datetime(datestring):
    if datestring:
        try:
            datetime_ = parse(datestring)
        except ValueError as e:
            raise DatetimeParsingError(e)

        return datetime_to_utc_datetime(datetime_)


def datetime_to_utc_datetime(datetime_):
    if datetime_:
        if not datetime_.tzinfo:
            return datetime_.replace(tzinfo=UTC)
        else:
            return datetime_.astimezone(UTC)


def to_utc_datetime(value):
    """Accepts a datetime, an ISO 8601 string or epoch milliseconds."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime.datetime):
        return datetime_to_utc_datetime(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.datetime.fromtimestamp(value / 1000, UTC)
    if isinstance(value, str):
        return string_to_utc_datetime(value)
    raise DatetimeParsingError(f'Can not parse datetime from {type(value)}')


def utc_now():
    current_time = datetime.datetime.now(UTC)
    return current_time


def random_string(length=8):
    letters = string.ascii_letters
    return ''.join(random.choice(letters) for i in range(length))


def to_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)

import dataclasses
import datetime
from typing import Optional

import deserialize

from common.util import to_utc_datetime


@deserialize.default('data', {})
@deserialize.default('expiration_time', None)
@deserialize.parser('expiration_time', to_utc_datetime)
@dataclasses.dataclass
class Notification:
    data: dict
    expiration_time: Optional[datetime.datetime]

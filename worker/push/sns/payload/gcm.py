import datetime
from typing import Optional

from common.json_encoder import dumps_compact
from common.util import datetime_to_utc_datetime

TIME_TO_LIVE_MAX = 4 * 7 * 24 * 60 * 60  # 4 weeks, in seconds
OPTIONAL_KEYS = ('content_available', 'notification')


def generate_gcm_payload(
    data: dict,
    push_id: str,
    timestamp: datetime.datetime,
    expiration_time: Optional[datetime.datetime] = None,
) -> dict:
    timestamp = datetime_to_utc_datetime(timestamp)
    payload = {
        'priority': 'high',
        'data': {
            'data': dumps_compact(data),
            'push_id': push_id,
            'time': timestamp.isoformat(),
        },
    }
    for key in OPTIONAL_KEYS:
        if key in data:
            payload[key] = data[key]

    if expiration_time:
        time_to_live = int(
            (datetime_to_utc_datetime(expiration_time) - timestamp).total_seconds()
        )
        payload['time_to_live'] = min(max(time_to_live, 0), TIME_TO_LIVE_MAX)

    return payload

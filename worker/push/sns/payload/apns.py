import datetime
from typing import Optional

from common.json_encoder import dumps_compact


class APNsNotification:
    """
    Native APNs notification compiled from generic push data.

    Well known keys are moved into the ``aps`` dictionary, everything else is
    delivered as a custom top level key.
    """
    APS_KEYS = ('alert', 'badge', 'sound', 'category', 'thread-id')
    APS_FLAGS = ('content-available', 'mutable-content')
    APS_ALIASES = {'threadId': 'thread-id'}

    def __init__(self, aps: dict, custom: dict, expiry: Optional[int] = None):
        self.aps = aps
        self.custom = custom
        self.expiry = expiry  # epoch seconds, sent as APNs header not body

    @classmethod
    def from_data(
        cls,
        data: dict,
        expiration_time: Optional[datetime.datetime] = None
    ) -> 'APNsNotification':
        aps = {}
        custom = {}
        title = None
        for key, value in data.items():
            key = cls.APS_ALIASES.get(key, key)
            if key in cls.APS_KEYS:
                aps[key] = value
            elif key == 'title':
                title = value
            elif key in cls.APS_FLAGS:
                if value == 1:
                    aps[key] = 1
            else:
                custom[key] = value

        if title is not None:
            alert = aps.get('alert')
            if not isinstance(alert, dict):
                alert = {} if alert is None else {'body': alert}
            aps['alert'] = {**alert, 'title': title}

        expiry = int(expiration_time.timestamp()) if expiration_time else None
        return cls(aps=aps, custom=custom, expiry=expiry)

    def to_dict(self) -> dict:
        return {**self.custom, 'aps': self.aps}

    def compile(self) -> str:
        return dumps_compact(self.to_dict())

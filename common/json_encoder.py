import datetime
import json
import uuid

from common.util import datetime_to_utc_datetime


class ManualJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, datetime.datetime):
            return datetime_to_utc_datetime(o).isoformat()
        if isinstance(o, uuid.UUID):
            return str(o)
        return super().default(o)


def dumps_compact(obj) -> str:
    return json.dumps(obj, cls=ManualJSONEncoder, separators=(',', ':'))

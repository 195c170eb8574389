import datetime
from typing import Optional

from common.exception.push import PayloadSerializationError, PushMisconfiguredError
from common.json_encoder import dumps_compact
from common.structure.enum import PushType
from common.structure.notification import Notification
from common.structure.push_config import PlatformConfig
from common.structure.result import Payload
from common.util import random_string, utc_now
from worker.push.sns.payload.apns import APNsNotification
from worker.push.sns.payload.gcm import generate_gcm_payload

PUSH_ID_LENGTH = 10


def generate_ios_payload(notification: Notification, production: bool) -> Payload:
    prefix = 'APNS' if production else 'APNS_SANDBOX'
    apns_notification = APNsNotification.from_data(
        notification.data, notification.expiration_time
    )
    return {prefix: apns_notification.compile()}


def generate_gcm_envelope(
    notification: Notification,
    push_id: Optional[str] = None,
    timestamp: Optional[datetime.datetime] = None,
) -> Payload:
    payload = generate_gcm_payload(
        notification.data,
        push_id or random_string(PUSH_ID_LENGTH),
        timestamp or utc_now(),
        notification.expiration_time,
    )
    # SNS wants the platform body as JSON text, not the GCM key itself
    return {'GCM': dumps_compact(payload)}


def generate_adm_payload(notification: Notification) -> Payload:
    return {'ADM': dumps_compact({'data': notification.data})}


def build_payload(
    push_type: PushType,
    notification: Notification,
    variant: Optional[PlatformConfig] = None,
    push_id: Optional[str] = None,
    timestamp: Optional[datetime.datetime] = None,
) -> Payload:
    try:
        if push_type == PushType.IOS:
            return generate_ios_payload(
                notification, production=bool(variant and variant.production)
            )
        elif push_type == PushType.GCM:
            return generate_gcm_envelope(notification, push_id, timestamp)
        elif push_type == PushType.ADM:
            return generate_adm_payload(notification)
        else:
            raise PushMisconfiguredError(f'Can not build payload for {push_type}')
    except (TypeError, ValueError) as e:
        raise PayloadSerializationError(
            f'Can not serialize {push_type.value} payload: {e}'
        ) from e

from typing import Awaitable, List

from common.structure.enum import PushType
from common.structure.installation import Device
from common.structure.notification import Notification
from common.structure.result import DispatchResult
from worker.push.sns.payload import build_payload
from worker.push.sns.sender import AbstractSender


class GCMSender(AbstractSender):
    push_type = PushType.GCM

    def send_batch(
        self,
        notification: Notification,
        devices: List[Device]
    ) -> List[Awaitable[DispatchResult]]:
        payload = build_payload(self.push_type, notification)
        return self.send_to_sns(payload, devices, self.variants[0].arn)

from typing import Awaitable, List

from common.structure.enum import PushType
from common.structure.installation import Device
from common.structure.notification import Notification
from common.structure.result import DispatchResult
from worker.push.sns.payload import build_payload
from worker.push.sns.sender import AbstractSender


class APNsSender(AbstractSender):
    push_type = PushType.IOS

    def send_batch(
        self,
        notification: Notification,
        devices: List[Device]
    ) -> List[Awaitable[DispatchResult]]:
        payloads = [
            build_payload(self.push_type, notification, variant)
            for variant in self.variants
        ]

        sends = []
        for variant, payload in zip(self.variants, payloads):
            # NOTE: devices without app identifier go out through every variant
            variant_devices = [
                device for device in devices
                if variant.accepts(device.app_identifier)
            ]
            if variant_devices:
                sends.extend(self.send_to_sns(payload, variant_devices, variant.arn))

        return sends

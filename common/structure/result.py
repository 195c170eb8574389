import dataclasses
from typing import Any, Dict

from common.structure.enum import PushType
from common.structure.installation import Device

Payload = Dict[str, str]


@dataclasses.dataclass(frozen=True)
class EndpointHandle:
    device: Device
    endpoint_arn: str


@dataclasses.dataclass(frozen=True)
class DeviceInfo:
    device_type: PushType
    device_token: str


@dataclasses.dataclass(frozen=True)
class DispatchResult:
    device: DeviceInfo
    transmitted: bool
    response: Any = None

    @classmethod
    def of(cls, push_type: PushType, device: Device, transmitted: bool, response=None):
        return cls(
            device=DeviceInfo(device_type=push_type, device_token=device.device_token),
            transmitted=transmitted,
            response=response,
        )

    def to_dict(self) -> dict:
        return {
            'device': {
                'device_type': self.device.device_type.value,
                'device_token': self.device.device_token,
            },
            'transmitted': self.transmitted,
            'response': self.response,
        }

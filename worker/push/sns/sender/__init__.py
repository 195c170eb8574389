import traceback
from abc import ABC, abstractmethod
from typing import Awaitable, List

from common.json_encoder import dumps_compact
from common.logger.logger import get_logger
from common.structure.enum import PushType
from common.structure.installation import Device
from common.structure.notification import Notification
from common.structure.push_config import PlatformConfig
from common.structure.result import DispatchResult, EndpointHandle, Payload
from worker.push.sns.external.sns.abstract import AbstractSNS
from worker.push.sns.resolver import EndpointResolver, error_detail

logger = get_logger(__name__)


class AbstractSender(ABC):
    push_type: PushType

    def __init__(self, sns: AbstractSNS, variants: List[PlatformConfig]):
        self.sns: AbstractSNS = sns
        self.variants: List[PlatformConfig] = variants
        self.resolver = EndpointResolver(sns)

    @abstractmethod
    def send_batch(
        self,
        notification: Notification,
        devices: List[Device]
    ) -> List[Awaitable[DispatchResult]]:
        """
        Build the payload(s) for ``devices`` and return one pending
        resolve/publish chain per device. Payloads are built before this
        returns, so serialization errors surface before any gateway call.
        """
        raise NotImplementedError('inherit class and implement method')

    def send_to_sns(
        self,
        payload: Payload,
        devices: List[Device],
        platform_arn: str
    ) -> List[Awaitable[DispatchResult]]:
        return [
            self.send_to_device(payload, device, platform_arn)
            for device in devices
        ]

    async def send_to_device(
        self,
        payload: Payload,
        device: Device,
        platform_arn: str
    ) -> DispatchResult:
        resolved = await self.resolver.resolve(self.push_type, device, platform_arn)
        if isinstance(resolved, DispatchResult):
            return resolved
        return await self.publish(resolved, payload)

    async def publish(self, handle: EndpointHandle, payload: Payload) -> DispatchResult:
        try:
            response = await self.sns.publish(
                target_arn=handle.endpoint_arn,
                message=dumps_compact(payload),
                message_structure='json',
            )
        except Exception as e:
            logger.error(f'Error sending push: {e}')
            logger.debug(f'Error details {traceback.format_exc()}')
            return DispatchResult.of(
                self.push_type, handle.device, transmitted=False, response=error_detail(e)
            )

        if response and response.get('MessageId'):
            logger.debug(f'Successfully sent push to {response["MessageId"]}')

        return DispatchResult.of(
            self.push_type, handle.device, transmitted=True, response=response
        )

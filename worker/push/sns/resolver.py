import traceback
from typing import Union

from common.exception.push import SNSError
from common.logger.logger import get_logger
from common.structure.enum import PushType
from common.structure.installation import Device
from common.structure.result import DispatchResult, EndpointHandle
from worker.push.sns.external.sns.abstract import AbstractSNS

logger = get_logger(__name__)


def error_detail(error: Exception):
    if isinstance(error, SNSError) and error.response is not None:
        return error.response
    return ''.join(traceback.format_exception(type(error), error, error.__traceback__))


class EndpointResolver:
    """Exchanges a device token for an SNS endpoint ARN."""

    def __init__(self, sns: AbstractSNS):
        self.sns: AbstractSNS = sns

    async def resolve(
        self,
        push_type: PushType,
        device: Device,
        platform_arn: str,
    ) -> Union[EndpointHandle, DispatchResult]:
        try:
            response = await self.sns.create_platform_endpoint(
                platform_application_arn=platform_arn,
                token=device.device_token,
            )
        except Exception as e:
            logger.error(f'Error creating endpoint for {push_type.value} device: {e}')
            logger.debug(f'Error details {traceback.format_exc()}')
            return DispatchResult.of(push_type, device, transmitted=False, response=error_detail(e))

        endpoint_arn = (response or {}).get('EndpointArn')
        if not endpoint_arn:
            logger.error(f'No endpoint arn for {push_type.value} device: {response}')
            return DispatchResult.of(push_type, device, transmitted=False, response=response)

        return EndpointHandle(device=device, endpoint_arn=endpoint_arn)

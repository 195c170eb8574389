import asyncio
from typing import Dict, List, Optional, Union

import deserialize

from common.exception.push import PushMisconfiguredError
from common.logger.logger import get_logger
from common.structure.enum import PushType
from common.structure.installation import Installation
from common.structure.notification import Notification
from common.structure.push_config import PlatformConfig
from common.structure.result import DispatchResult
from worker.push.sns.classifier import classify_installations
from worker.push.sns.external.sns.abstract import AbstractSNS
from worker.push.sns.external.sns.client import DEFAULT_REGION, SNSClient
from worker.push.sns.sender import AbstractSender
from worker.push.sns.sender.adm import ADMSender
from worker.push.sns.sender.apns import APNsSender
from worker.push.sns.sender.gcm import GCMSender

logger = get_logger(__name__)


def _to_variants(push_type: PushType, config) -> List[PlatformConfig]:
    configs = config if isinstance(config, list) else [config]
    if not configs:
        raise PushMisconfiguredError(f'No configuration for {push_type.value}')

    variants = []
    for variant in configs:
        if isinstance(variant, PlatformConfig):
            variants.append(variant)
            continue
        try:
            variants.append(deserialize.deserialize(PlatformConfig, variant))
        except deserialize.DeserializeException as e:
            raise PushMisconfiguredError(
                f'Invalid {push_type.value} configuration: {e}'
            ) from e
    return variants


class SNSPushAdapter:
    """
    Sends push notifications to iOS, GCM and ADM devices through AWS SNS.

    :param access_key: AWS access key id (required)
    :param secret_key: AWS secret access key (required)
    :param region: SNS region
    :param push_types: mapping of push type (``ios``, ``gcm``, ``adm``) to
        one platform configuration or a list of them, e.g.
        ``{'ios': [{'arn': ..., 'production': True, 'bundle_id': ...}]}``
    :param sns: gateway client, a :class:`SNSClient` is created when omitted
    """

    def __init__(
        self,
        access_key: str = None,
        secret_key: str = None,
        region: str = DEFAULT_REGION,
        push_types: Optional[dict] = None,
        sns: Optional[AbstractSNS] = None,
    ):
        if not access_key or not secret_key:
            raise PushMisconfiguredError('Need to provide AWS keys')

        self.sns_config: Dict[PushType, List[PlatformConfig]] = {}
        for key, config in (push_types or {}).items():
            push_type = PushType.of(key)
            if push_type is None:
                raise PushMisconfiguredError(f'Push to {key} is not supported')
            self.sns_config[push_type] = _to_variants(push_type, config)

        self.sns: AbstractSNS = sns or SNSClient(
            access_key=access_key,
            secret_key=secret_key,
            region=region or DEFAULT_REGION,
        )
        self.sender_map: Dict[PushType, AbstractSender] = {
            push_type: self.create_sender(push_type, variants)
            for push_type, variants in self.sns_config.items()
        }

    def create_sender(
        self,
        push_type: PushType,
        variants: List[PlatformConfig]
    ) -> AbstractSender:
        if push_type == PushType.IOS:
            return APNsSender(self.sns, variants)
        elif push_type == PushType.GCM:
            return GCMSender(self.sns, variants)
        elif push_type == PushType.ADM:
            return ADMSender(self.sns, variants)
        else:
            raise PushMisconfiguredError(f'Push to {push_type} is not supported')

    @property
    def available_push_types(self) -> List[PushType]:
        return list(self.sns_config.keys())

    async def send(
        self,
        notification: Union[Notification, dict],
        installations: List[Union[Installation, dict]],
    ) -> List[DispatchResult]:
        if not isinstance(notification, Notification):
            notification = deserialize.deserialize(Notification, notification)

        device_map = classify_installations(installations, self.available_push_types)

        sends = []
        try:
            for push_type, devices in device_map.items():
                if not devices:
                    continue
                sends.extend(self.sender_map[push_type].send_batch(notification, devices))
        except Exception:
            for pending in sends:
                pending.close()
            raise

        results: List[DispatchResult] = []
        for completed in asyncio.as_completed(sends):
            results.append(await completed)

        sent = sum(1 for result in results if result.transmitted)
        logger.info(f'sent: {sent}, failed: {len(results) - sent}')
        return results

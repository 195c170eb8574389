from typing import Dict, Iterable, List, Optional, Union

import deserialize

from common.logger.logger import get_logger
from common.structure.enum import PushType
from common.structure.installation import Device, Installation

logger = get_logger(__name__)

# NOTE: installation feeds may send camelCase keys
CAMEL_CASE_KEYS = {
    'deviceToken': 'device_token',
    'deviceType': 'device_type',
    'pushType': 'push_type',
    'appIdentifier': 'app_identifier',
}


def to_installation(installation: Union[Installation, dict]) -> Optional[Installation]:
    if isinstance(installation, Installation):
        return installation
    if not isinstance(installation, dict):
        logger.warning(f'skipping malformed installation: {installation!r}')
        return None

    data = {
        CAMEL_CASE_KEYS.get(key, key): value
        for key, value in installation.items()
    }
    try:
        return deserialize.deserialize(Installation, data)
    except (deserialize.DeserializeException, TypeError, ValueError) as e:
        logger.warning(f'skipping malformed installation {installation!r}: {e}')
        return None


def classify_installations(
    installations: Iterable[Union[Installation, dict]],
    valid_push_types: Iterable[PushType],
) -> Dict[PushType, List[Device]]:
    """
    Classify the device tokens of installations by their push type.

    Every valid push type gets a (possibly empty) list. Malformed
    installations, installations without a device token and installations
    with a push type outside ``valid_push_types`` are skipped.
    """
    device_map: Dict[PushType, List[Device]] = {
        push_type: [] for push_type in valid_push_types
    }

    for installation in map(to_installation, installations):
        # No device token, ignore
        if installation is None or not installation.device_token:
            continue

        logger.debug(f'classifying installation: {installation}')
        push_type = PushType.of(installation.effective_push_type)
        if push_type not in device_map:
            continue

        device_map[push_type].append(Device(
            device_token=installation.device_token,
            app_identifier=installation.app_identifier,
        ))

    return device_map

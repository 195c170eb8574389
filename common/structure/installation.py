import dataclasses
from typing import Optional

import deserialize

from common.util import token_to_string


@deserialize.default('device_token', None)
@deserialize.default('device_type', None)
@deserialize.default('push_type', None)
@deserialize.default('app_identifier', None)
@deserialize.parser('device_token', token_to_string)
@dataclasses.dataclass
class Installation:
    device_token: Optional[str]
    device_type: Optional[str]
    push_type: Optional[str]
    app_identifier: Optional[str]

    @property
    def effective_push_type(self) -> Optional[str]:
        return self.push_type if self.push_type else self.device_type


@dataclasses.dataclass(frozen=True)
class Device:
    device_token: str
    app_identifier: Optional[str] = None

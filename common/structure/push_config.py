import dataclasses
from typing import Optional

import deserialize

from common.util import to_bool


@deserialize.default('production', False)
@deserialize.default('bundle_id', None)
@deserialize.parser('production', to_bool)
@dataclasses.dataclass
class PlatformConfig:
    arn: str
    production: bool
    bundle_id: Optional[str]  # iOS only

    def accepts(self, app_identifier: Optional[str]) -> bool:
        # Same rule as APNs: no app identifier means every bundle
        if not app_identifier:
            return True
        return app_identifier == self.bundle_id

from pathlib import Path

import deserialize

from common.configutil import get_config


class Config:
    @deserialize.default('region', 'us-east-1')
    @deserialize.default('push_types', {})
    class PushAdapter:
        access_key: str
        secret_key: str
        region: str
        push_types: dict

    push_adapter: PushAdapter


config_path = f'{Path(__file__).resolve().parent}/config'


def load_config() -> Config:
    return deserialize.deserialize(
        Config, get_config(config_path)
    )

import json
import os
from copy import deepcopy
from typing import Iterable, List

from common.exception.push import PushMisconfiguredError

ENV_SEPARATOR = '__'


def replace_key(dct_ptr: dict, attribute: List[str], value):
    key, rest = attribute[0], attribute[1:]
    if not rest:
        dct_ptr[key] = value
        return

    child = dct_ptr.setdefault(key, {})
    if not isinstance(child, dict):
        raise PushMisconfiguredError(
            f'Can not override {key} ({type(child).__name__}) with {ENV_SEPARATOR.join(rest)}'
        )
    replace_key(child, rest, value)


def read_json(path: str):
    with open(path) as json_file:
        return json.load(json_file)


def override_dict(d: dict, u: dict):
    result = deepcopy(d)
    for k, v in u.items():
        if isinstance(v, dict):
            result[k] = override_dict(d.get(k, {}), v)
        else:
            result[k] = v
    return result


def override_from_env(config: dict, sections: Iterable[str]) -> dict:
    """
    Apply ``SECTION__KEY__...`` environment variables to ``config``.

    Only variables under one of ``sections`` are applied, e.g.
    ``PUSH_ADAPTER__REGION=eu-west-1`` sets ``config['push_adapter']['region']``.
    """
    sections = set(sections)
    for key, value in os.environ.items():
        attribute = key.lower().split(ENV_SEPARATOR)
        if len(attribute) < 2 or attribute[0] not in sections:
            continue
        replace_key(config, attribute, value)
    return config


def get_config(config_path: str) -> dict:
    config_env = os.environ.get('ENV', 'local')

    default = read_json(f'{config_path}/default.json')
    config = override_dict(
        default,
        read_json(f'{config_path}/{config_env}.json'),
    )

    return override_from_env(config, sections=default.keys())

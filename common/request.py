import json

import aiohttp

from common.logger.logger import get_logger

logger = get_logger(__name__)


async def _json_response(response):
    json_ = None
    try:
        json_ = await response.json()
    except json.decoder.JSONDecodeError:
        logger.exception('Malformed response body (JSONDecodeError)')
    except aiohttp.ContentTypeError:
        logger.exception(f'Empty response {response.status}')

    return response.status, json_, response.headers


class Request:
    DEFAULT_HEADERS = {'Accept': 'application/json', 'Content-Type': 'application/json'}
    DEFAULT_HEADERS_FORM_DATA = {
        'Accept': 'application/json',
        'Content-Type': 'application/x-www-form-urlencoded; charset=utf-8'
    }

    async def post(self, url='', parameters=None, headers=None, is_json=True):
        if headers is None:
            headers = {}
        if parameters is None:
            parameters = {}

        logger.debug(f'POST request to {url}')
        if is_json:
            post_params = {'json': parameters}
            default_header = self.DEFAULT_HEADERS
        else:
            post_params = {'data': parameters}
            default_header = self.DEFAULT_HEADERS_FORM_DATA
        async with aiohttp.ClientSession(headers={**default_header, **headers}) as session:
            async with session.post(url, **post_params) as resp:
                return await _json_response(resp)

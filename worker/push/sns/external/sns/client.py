import urllib.parse

from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from common.exception.push import SNSError
from common.logger.logger import get_logger
from common.request import Request
from worker.push.sns.external.sns.abstract import AbstractSNS

logger = get_logger(__name__)

DEFAULT_REGION = 'us-east-1'


class SNSClient(Request, AbstractSNS):
    """
    Minimal SNS query API client.

    Requests are form encoded, signed with AWS Signature V4 and answered in
    JSON (``Accept: application/json``). Every non-2xx answer raises
    :class:`SNSError` carrying the decoded error body.
    """
    SERVICE_NAME = 'sns'
    API_VERSION = '2010-03-31'

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        region: str = DEFAULT_REGION,
        endpoint_url: str = None,
    ):
        self.credentials = Credentials(access_key, secret_key)
        self.region = region or DEFAULT_REGION
        self.endpoint_url = endpoint_url or f'https://sns.{self.region}.amazonaws.com/'

    def sign(self, body: str) -> dict:
        request = AWSRequest(
            method='POST',
            url=self.endpoint_url,
            data=body,
            headers=dict(self.DEFAULT_HEADERS_FORM_DATA),
        )
        SigV4Auth(self.credentials, self.SERVICE_NAME, self.region).add_auth(request)
        return dict(request.headers.items())

    async def call(self, action: str, parameters: dict) -> dict:
        body = urllib.parse.urlencode({
            'Action': action,
            'Version': self.API_VERSION,
            **parameters,
        })
        status, response, _ = await self.post(
            url=self.endpoint_url,
            parameters=body,
            headers=self.sign(body),
            is_json=False,
        )
        logger.debug(response)

        if not 200 <= status < 300 or response is None:
            error = (response or {}).get('Error', {})
            raise SNSError(
                action=action,
                status=status,
                code=error.get('Code'),
                message=error.get('Message'),
                response=response,
            )

        return response.get(f'{action}Response', {}).get(f'{action}Result') or {}

    async def create_platform_endpoint(
        self,
        platform_application_arn: str,
        token: str
    ) -> dict:
        return await self.call('CreatePlatformEndpoint', {
            'PlatformApplicationArn': platform_application_arn,
            'Token': token,
        })

    async def publish(
        self,
        target_arn: str,
        message: str,
        message_structure: str = 'json'
    ) -> dict:
        return await self.call('Publish', {
            'TargetArn': target_arn,
            'Message': message,
            'MessageStructure': message_structure,
        })

import asyncio

import pytest

from common.exception.push import SNSError
from worker.push.sns.external.sns.abstract import AbstractSNS


class FakeSNS(AbstractSNS):
    """In-memory gateway; tokens listed in the failure sets fail."""

    def __init__(self):
        self.endpoint_failures = set()
        self.missing_endpoint_arn = set()
        self.publish_failures = set()
        self.endpoints = []
        self.published = []

    async def create_platform_endpoint(self, platform_application_arn, token):
        self.endpoints.append((platform_application_arn, token))
        await asyncio.sleep(0)
        if token in self.endpoint_failures:
            raise SNSError(
                action='CreatePlatformEndpoint',
                status=400,
                code='InvalidParameter',
                message='Invalid token',
                response={'Error': {'Code': 'InvalidParameter', 'Message': 'Invalid token'}},
            )
        if token in self.missing_endpoint_arn:
            return {}
        return {'EndpointArn': f'{platform_application_arn}/endpoint/{token}'}

    async def publish(self, target_arn, message, message_structure='json'):
        self.published.append({
            'TargetArn': target_arn,
            'Message': message,
            'MessageStructure': message_structure,
        })
        await asyncio.sleep(0)
        token = target_arn.rsplit('/', 1)[-1]
        if token in self.publish_failures:
            raise SNSError(
                action='Publish',
                status=400,
                code='EndpointDisabled',
                message='Endpoint is disabled',
                response={'Error': {'Code': 'EndpointDisabled', 'Message': 'Endpoint is disabled'}},
            )
        return {'MessageId': f'message-{len(self.published)}'}


IOS_ARN_A = 'arn:aws:sns:us-east-1:123456789012:app/APNS/bundle-a'
IOS_ARN_B = 'arn:aws:sns:us-east-1:123456789012:app/APNS_SANDBOX/bundle-b'
GCM_ARN = 'arn:aws:sns:us-east-1:123456789012:app/GCM/android'
ADM_ARN = 'arn:aws:sns:us-east-1:123456789012:app/ADM/kindle'


@pytest.fixture
def sns():
    return FakeSNS()


@pytest.fixture
def push_types():
    return {
        'ios': [
            {'arn': IOS_ARN_A, 'production': True, 'bundle_id': 'bundleA'},
            {'arn': IOS_ARN_B, 'production': False, 'bundle_id': 'bundleB'},
        ],
        'gcm': {'arn': GCM_ARN},
        'adm': {'arn': ADM_ARN},
    }

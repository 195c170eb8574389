from abc import ABC, abstractmethod


class AbstractSNS(ABC):
    @abstractmethod
    async def create_platform_endpoint(
        self,
        platform_application_arn: str,
        token: str
    ) -> dict:
        raise NotImplementedError('inherit class and implement method')

    @abstractmethod
    async def publish(
        self,
        target_arn: str,
        message: str,
        message_structure: str = 'json'
    ) -> dict:
        raise NotImplementedError('inherit class and implement method')

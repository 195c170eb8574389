class PushError(Exception):
    pass


class PushMisconfiguredError(PushError):
    pass


class PayloadSerializationError(PushError):
    pass


class SNSError(PushError):
    def __init__(
        self,
        action: str,
        status: int,
        code: str = None,
        message: str = None,
        response=None,
    ):
        super().__init__(f'{action} failed ({status} {code}): {message}')
        self.action = action
        self.status = status
        self.code = code
        self.message = message
        self.response = response

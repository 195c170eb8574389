import enum


class PushType(str, enum.Enum):
    IOS = 'ios'
    GCM = 'gcm'
    ADM = 'adm'

    @classmethod
    def of(cls, value):
        try:
            return cls(value)
        except ValueError:
            return None

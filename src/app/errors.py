from dataclasses import dataclass
from enum import IntEnum

from fastapi import status


class ErrorCode(IntEnum):
    BAD_REQUEST = status.HTTP_400_BAD_REQUEST
    NOT_FOUND = status.HTTP_404_NOT_FOUND
    INTERNAL_ERROR = status.HTTP_500_INTERNAL_SERVER_ERROR


@dataclass(frozen=True)
class ServiceError:
    """Failure returned by a service call.

    ``message`` is safe to show to the client. ``error`` is the underlying
    cause and only goes to the logs.
    """

    message: str
    error: BaseException
    code: ErrorCode

    @property
    def is_client_error(self) -> bool:
        return self.code < ErrorCode.INTERNAL_ERROR

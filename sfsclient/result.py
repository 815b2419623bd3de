"""Result codes, result values and the exception raised for failed operations."""

from __future__ import annotations

from enum import IntEnum


class ResultCode(IntEnum):
    """Outcome codes reported by the client."""

    SUCCESS = 0x00000000

    # Generic errors
    INVALID_ARG = 0x80000001
    NOT_IMPL = 0x80000002
    NOT_SET = 0x80000003
    OUT_OF_MEMORY = 0x80000004
    UNEXPECTED = 0x80000005

    # Connection errors
    CONNECTION_SETUP_FAILED = 0x80001000
    CONNECTION_UNEXPECTED_ERROR = 0x80001001

    # Generic HTTP errors
    HTTP_TIMEOUT = 0x80002000
    HTTP_UNEXPECTED = 0x80002001

    # Last three hex digits mirror the HTTP status code
    HTTP_BAD_REQUEST = 0x80002400
    HTTP_NOT_FOUND = 0x80002404
    HTTP_METHOD_NOT_ALLOWED = 0x80002405
    HTTP_TOO_MANY_REQUESTS = 0x80002429
    HTTP_SERVICE_NOT_AVAILABLE = 0x80002503

    # Service errors
    SERVICE_INVALID_RESPONSE = 0x80003000
    SERVICE_UNEXPECTED_CONTENT_TYPE = 0x80003001


_CODE_NAMES = {
    ResultCode.SUCCESS: "Success",
    ResultCode.INVALID_ARG: "InvalidArg",
    ResultCode.NOT_IMPL: "NotImpl",
    ResultCode.NOT_SET: "NotSet",
    ResultCode.OUT_OF_MEMORY: "OutOfMemory",
    ResultCode.UNEXPECTED: "Unexpected",
    ResultCode.CONNECTION_SETUP_FAILED: "ConnectionSetupFailed",
    ResultCode.CONNECTION_UNEXPECTED_ERROR: "ConnectionUnexpectedError",
    ResultCode.HTTP_TIMEOUT: "HttpTimeout",
    ResultCode.HTTP_UNEXPECTED: "HttpUnexpected",
    ResultCode.HTTP_BAD_REQUEST: "HttpBadRequest",
    ResultCode.HTTP_NOT_FOUND: "HttpNotFound",
    ResultCode.HTTP_METHOD_NOT_ALLOWED: "HttpMethodNotAllowed",
    ResultCode.HTTP_TOO_MANY_REQUESTS: "HttpTooManyRequests",
    ResultCode.HTTP_SERVICE_NOT_AVAILABLE: "HttpServiceNotAvailable",
    ResultCode.SERVICE_INVALID_RESPONSE: "ServiceInvalidResponse",
    ResultCode.SERVICE_UNEXPECTED_CONTENT_TYPE: "ServiceUnexpectedContentType",
}


def code_to_string(code: int) -> str:
    """Return the display name of a result code, or "Unknown" for unlisted values."""
    try:
        return _CODE_NAMES[ResultCode(code)]
    except ValueError:
        return "Unknown"


class Result:
    """A result code with an optional message; truthy when it is a success."""

    __slots__ = ("code", "message")

    def __init__(self, code: ResultCode, message: str = "") -> None:
        self.code = ResultCode(code)
        self.message = message

    def is_success(self) -> bool:
        return self.code == ResultCode.SUCCESS

    def is_failure(self) -> bool:
        return not self.is_success()

    def __bool__(self) -> bool:
        return self.is_success()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Result):
            raise TypeError("Results should not be compared directly; compare their codes")
        if isinstance(other, int):
            return int(self.code) == int(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Result({self.code.name}, {self.message!r})"

    def __str__(self) -> str:
        text = code_to_string(self.code)
        return f"{text}: {self.message}" if self.message else text


class SFSError(Exception):
    """Raised when an operation fails with a result code."""

    def __init__(self, code: ResultCode, message: str = "") -> None:
        self.code = ResultCode(code)
        self.message = message
        super().__init__(message or code_to_string(self.code))

    @property
    def result(self) -> Result:
        return Result(self.code, self.message)
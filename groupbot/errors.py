"""Error taxonomy for robot construction and message delivery.

Every error renders as ``"<Kind>: <detail>"`` so callers can log or compare
it directly. The bare detail is kept on ``.detail``.
"""

from __future__ import annotations


class RobotError(Exception):
    """Base class for every error raised by groupbot."""

    kind = "RobotError"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"{self.kind}: {detail}")


class UnsupportedPlatformError(RobotError):
    """The platform identifier is not registered."""

    kind = "UnsupportedPlatform"


class InvalidCredentialError(RobotError):
    """The token is not one the platform could accept."""

    kind = "InvalidCredential"


class InvalidWebhookURLError(RobotError):
    """The webhook URL built from the token is malformed."""

    kind = "InvalidWebhookURL"


class MessageEncodeFailedError(RobotError):
    kind = "MessageEncodeFailed"


class HttpRequestFailedError(RobotError):
    """Transport-level failure: DNS, connect, TLS, timeout or a broken response."""

    kind = "HttpRequestFailed"


class HttpResponseBodyDecodeFailedError(RobotError):
    kind = "HttpResponseBodyDecodeFailed"


class SendMessageFailedError(RobotError):
    """The platform answered, but rejected the message."""

    kind = "SendMessageFailed"

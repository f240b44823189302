"""Send text and markdown messages to group-chat webhook robots."""

from groupbot.errors import (
    HttpRequestFailedError,
    HttpResponseBodyDecodeFailedError,
    InvalidCredentialError,
    InvalidWebhookURLError,
    MessageEncodeFailedError,
    RobotError,
    SendMessageFailedError,
    UnsupportedPlatformError,
)
from groupbot.registry import PlatformDescriptor, PlatformRegistry, platforms
from groupbot.robot import Robot, new

__all__ = [
    "HttpRequestFailedError",
    "HttpResponseBodyDecodeFailedError",
    "InvalidCredentialError",
    "InvalidWebhookURLError",
    "MessageEncodeFailedError",
    "PlatformDescriptor",
    "PlatformRegistry",
    "Robot",
    "RobotError",
    "SendMessageFailedError",
    "UnsupportedPlatformError",
    "new",
    "platforms",
]

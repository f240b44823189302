"""Robot — sends text and markdown messages to one group-chat webhook.

A Robot holds a resolved webhook URL plus three platform strategies (text
body builder, markdown body builder, response checker). The send pipeline
itself knows nothing about platforms::

    robot = new("dingtalk", access_token)
    await robot.send_markdown_message("Deploy", "**api** is live")

Every failure is raised as a ``RobotError`` subclass; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx

import groupbot.platforms  # noqa: F401  (registers the built-in platforms)
from groupbot.errors import (
    HttpRequestFailedError,
    InvalidWebhookURLError,
    MessageEncodeFailedError,
    RobotError,
)
from groupbot.registry import PlatformRegistry, platforms

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Robot:
    """A configured webhook sender. Immutable and safe to share between tasks."""

    webhook: str
    build_text_body: Callable[[str], bytes]
    build_markdown_body: Callable[[str, str], bytes]
    check_response: Callable[[bytes], None]
    platform: str = "custom"
    timeout: float = DEFAULT_TIMEOUT
    transport: httpx.AsyncBaseTransport | None = None

    async def send_text_message(self, content: str) -> None:
        """Send a plain text message."""
        body = self._encode(self.build_text_body, content)
        await self._deliver(body)

    async def send_markdown_message(self, title: str, text: str) -> None:
        """Send a markdown message."""
        body = self._encode(self.build_markdown_body, title, text)
        await self._deliver(body)

    @staticmethod
    def _encode(builder: Callable[..., bytes], *args: str) -> bytes:
        try:
            return builder(*args)
        except RobotError:
            raise
        except (TypeError, ValueError) as e:
            raise MessageEncodeFailedError(str(e)) from e

    async def _deliver(self, body: bytes) -> None:
        # A Robot from a failed construction must not reach the network.
        if not self.webhook:
            raise InvalidWebhookURLError("invalid webhook url: empty")

        logger.debug("POST %s robot (%d bytes)", self.platform, len(body))
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                resp = await client.post(self.webhook, content=body, headers=JSON_HEADERS)
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as e:
            raise HttpRequestFailedError(str(e) or type(e).__name__) from e

        logger.debug("%s robot responded with status=%d", self.platform, resp.status_code)
        # Platforms report failures inside a 200 response, so only the body counts.
        self.check_response(resp.content)


def new(
    platform: str,
    token: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
    registry: PlatformRegistry = platforms,
) -> Robot:
    """Build a Robot for *platform*.

    *token* is the platform credential, or the full webhook URL for the
    ``default`` platform. Raises UnsupportedPlatformError for an unknown
    platform and InvalidCredentialError / InvalidWebhookURLError when the
    token fails the platform's local check. No request is made.
    """
    descriptor, webhook = registry.resolve(platform, token)
    return Robot(
        webhook=webhook,
        build_text_body=descriptor.build_text_body,
        build_markdown_body=descriptor.build_markdown_body,
        check_response=descriptor.check_response,
        platform=descriptor.name,
        timeout=timeout,
        transport=transport,
    )

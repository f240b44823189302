"""Platform registry — maps platform identifiers to their wire conventions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from groupbot.errors import UnsupportedPlatformError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlatformDescriptor:
    """Everything that differs between two chat platforms.

    Attributes:
        name: Platform identifier (e.g. 'dingtalk').
        url_template: Webhook URL with a ``{token}`` placeholder. Empty when
            the caller supplies the whole URL.
        build_text_body: content -> serialized request body.
        build_markdown_body: (title, text) -> serialized request body.
        check_response: raw response body -> None, or raises.
        webhook_for: token -> validated webhook URL, or raises.
    """

    name: str
    url_template: str
    build_text_body: Callable[[str], bytes]
    build_markdown_body: Callable[[str, str], bytes]
    check_response: Callable[[bytes], None]
    webhook_for: Callable[[str], str]


class PlatformRegistry:
    """Catalog of supported platforms.

    Filled once at import time by ``groupbot.platforms`` and only read after
    that, so lookups need no locking.
    """

    def __init__(self) -> None:
        self._platforms: dict[str, PlatformDescriptor] = {}

    def register(self, descriptor: PlatformDescriptor) -> PlatformDescriptor:
        """Register a platform. Raises ValueError on duplicate name."""
        if descriptor.name in self._platforms:
            msg = f"Platform '{descriptor.name}' is already registered"
            raise ValueError(msg)
        self._platforms[descriptor.name] = descriptor
        logger.info("Registered platform: %s", descriptor.name)
        return descriptor

    def get(self, name: str) -> PlatformDescriptor | None:
        """Look up a platform by identifier."""
        return self._platforms.get(name)

    @property
    def names(self) -> list[str]:
        """All registered platform identifiers."""
        return list(self._platforms)

    def resolve(self, name: str, token: str) -> tuple[PlatformDescriptor, str]:
        """Return the descriptor for *name* and the webhook URL for *token*.

        Raises UnsupportedPlatformError for an unknown identifier; token
        validation errors from the platform propagate unchanged. No network
        I/O happens here.
        """
        descriptor = self._platforms.get(name)
        if descriptor is None:
            raise UnsupportedPlatformError(name)
        return descriptor, descriptor.webhook_for(token)


platforms = PlatformRegistry()

"""Generic webhook: the caller supplies the full URL."""

from __future__ import annotations

from urllib.parse import urlparse

import httpx

from groupbot.envelopes import check_ok_envelope
from groupbot.errors import InvalidWebhookURLError
from groupbot.messages import build_markdown_body, build_text_body
from groupbot.registry import PlatformDescriptor, platforms

NAME = "default"


def webhook_for(token: str) -> str:
    """The token is the webhook URL; it must be an absolute http(s) URL."""
    url = token.strip()
    try:
        parsed = urlparse(url)
        # httpx must be able to build a request for it too.
        httpx.URL(url)
    except (httpx.InvalidURL, ValueError) as e:
        raise InvalidWebhookURLError(f"invalid webhook url: {url!r}") from e
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidWebhookURLError(f"invalid webhook url: {url!r}")
    return url


descriptor = platforms.register(
    PlatformDescriptor(
        name=NAME,
        url_template="",
        build_text_body=build_text_body,
        build_markdown_body=build_markdown_body,
        check_response=check_ok_envelope,
        webhook_for=webhook_for,
    )
)

"""WeChat Work (企业微信) group robot."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from groupbot.envelopes import check_errcode_envelope
from groupbot.errors import InvalidWebhookURLError
from groupbot.messages import build_text_body, encode_body
from groupbot.registry import PlatformDescriptor, platforms

NAME = "wechatwork"
API_HOST = "qyapi.weixin.qq.com"
API_PATH = "/cgi-bin/webhook/send"
URL_TEMPLATE = f"https://{API_HOST}{API_PATH}?key={{token}}"

# Byte limits on the UTF-8 encoded content, enforced by the platform.
MAX_TEXT_BYTES = 2048
MAX_MARKDOWN_BYTES = 4096

_KEY_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _check_size(content: str, limit: int) -> None:
    size = len(content.encode("utf-8"))
    if size > limit:
        msg = f"content is {size} bytes, limit is {limit}"
        raise ValueError(msg)


def build_wechat_text_body(content: str) -> bytes:
    _check_size(content, MAX_TEXT_BYTES)
    return build_text_body(content)


def build_wechat_markdown_body(title: str, text: str) -> bytes:
    """WeChat Work markdown has no title field, so the title becomes a heading."""
    content = f"## {title}\n\n{text}" if title else text
    _check_size(content, MAX_MARKDOWN_BYTES)
    return encode_body({"msgtype": "markdown", "markdown": {"content": content}})


def webhook_for(token: str) -> str:
    """Accept a bare robot key or a full webhook URL carrying one."""
    token = token.strip()
    if token.startswith(("http://", "https://")):
        try:
            parsed = urlparse(token)
        except ValueError as e:
            raise InvalidWebhookURLError(f"invalid webhook url: {token!r}") from e
        if parsed.scheme != "https" or parsed.hostname != API_HOST or parsed.path != API_PATH:
            raise InvalidWebhookURLError(f"invalid webhook url: {token!r}")
        token = parse_qs(parsed.query).get("key", [""])[0]
    if not _KEY_RE.fullmatch(token):
        raise InvalidWebhookURLError(f"invalid webhook url: key {token!r} is not a robot key")
    return URL_TEMPLATE.format(token=token)


descriptor = platforms.register(
    PlatformDescriptor(
        name=NAME,
        url_template=URL_TEMPLATE,
        build_text_body=build_wechat_text_body,
        build_markdown_body=build_wechat_markdown_body,
        check_response=check_errcode_envelope,
        webhook_for=webhook_for,
    )
)

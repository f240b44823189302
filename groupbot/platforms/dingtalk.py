"""DingTalk custom robot.

The access token is only checked for shape. DingTalk itself may still refuse
a well-formed token, which comes back as SendMessageFailed.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from groupbot.envelopes import check_errcode_envelope
from groupbot.errors import InvalidCredentialError
from groupbot.messages import build_markdown_body, build_text_body
from groupbot.registry import PlatformDescriptor, platforms

NAME = "dingtalk"
API_HOST = "oapi.dingtalk.com"
API_PATH = "/robot/send"
URL_TEMPLATE = f"https://{API_HOST}{API_PATH}?access_token={{token}}"

_ACCESS_TOKEN_RE = re.compile(r"[0-9a-f]{64}")


def _token_from_url(url: str) -> str:
    try:
        parsed = urlparse(url)
    except ValueError:
        return ""
    if parsed.scheme != "https" or parsed.hostname != API_HOST or parsed.path != API_PATH:
        return ""
    return parse_qs(parsed.query).get("access_token", [""])[0]


def webhook_for(token: str) -> str:
    """Accept a bare access token or a full robot URL carrying one."""
    token = token.strip()
    if token.startswith(("http://", "https://")):
        token = _token_from_url(token)
    if not _ACCESS_TOKEN_RE.fullmatch(token):
        raise InvalidCredentialError("token is not exist")
    return URL_TEMPLATE.format(token=token)


descriptor = platforms.register(
    PlatformDescriptor(
        name=NAME,
        url_template=URL_TEMPLATE,
        build_text_body=build_text_body,
        build_markdown_body=build_markdown_body,
        check_response=check_errcode_envelope,
        webhook_for=webhook_for,
    )
)

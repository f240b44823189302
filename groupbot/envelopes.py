"""Inbound response envelopes and the response checkers built on them.

A checker takes the raw response body and returns ``None`` when the platform
accepted the message. It raises ``SendMessageFailedError`` with the
platform's own text when the message was rejected, and
``HttpResponseBodyDecodeFailedError`` when the body isn't the expected
envelope at all.
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationError

from groupbot.errors import HttpResponseBodyDecodeFailedError, SendMessageFailedError


class OkEnvelope(BaseModel):
    """Generic webhook envelope: success when ``errmsg == "ok"``."""

    errmsg: str
    errcode: int = 0

    @property
    def success(self) -> bool:
        return self.errmsg == "ok"


class ErrcodeEnvelope(BaseModel):
    """DingTalk / WeChat Work envelope: success when ``errcode == 0``."""

    errcode: int
    errmsg: str = ""

    @property
    def success(self) -> bool:
        return self.errcode == 0


def _decode(model: type[OkEnvelope] | type[ErrcodeEnvelope], body: bytes):
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        # First error is enough, the full report repeats the raw body.
        first = e.errors()[0]
        loc = ".".join(str(p) for p in first["loc"])
        detail = f"{loc}: {first['msg']}" if loc else first["msg"]
        raise HttpResponseBodyDecodeFailedError(detail) from e


def check_ok_envelope(body: bytes) -> None:
    envelope = _decode(OkEnvelope, body)
    if not envelope.success:
        raise SendMessageFailedError(envelope.errmsg)


def check_errcode_envelope(body: bytes) -> None:
    envelope = _decode(ErrcodeEnvelope, body)
    if not envelope.success:
        raise SendMessageFailedError(envelope.errmsg or f"errcode {envelope.errcode}")

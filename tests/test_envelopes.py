"""Tests for response envelope checks."""

import pytest

from groupbot.envelopes import (
    ErrcodeEnvelope,
    OkEnvelope,
    check_errcode_envelope,
    check_ok_envelope,
)
from groupbot.errors import HttpResponseBodyDecodeFailedError, SendMessageFailedError

# -- errmsg == "ok" ------------------------------------------------------------


def test_ok_envelope_success() -> None:
    assert check_ok_envelope(b'{"errmsg":"ok","errcode":0}') is None


def test_ok_envelope_failure() -> None:
    with pytest.raises(SendMessageFailedError) as exc_info:
        check_ok_envelope(b'{"errmsg":"fail","errcode":400}')
    assert str(exc_info.value) == "SendMessageFailed: fail"


def test_ok_envelope_missing_errmsg() -> None:
    with pytest.raises(HttpResponseBodyDecodeFailedError, match="errmsg"):
        check_ok_envelope(b'{"errcode":0}')


@pytest.mark.parametrize("body", [b"", b"not json", b"[]"])
def test_ok_envelope_undecodable(body) -> None:
    with pytest.raises(HttpResponseBodyDecodeFailedError):
        check_ok_envelope(body)


def test_ok_envelope_model() -> None:
    assert OkEnvelope(errmsg="ok").success
    assert not OkEnvelope(errmsg="OK").success


# -- errcode == 0 --------------------------------------------------------------


def test_errcode_envelope_success() -> None:
    assert check_errcode_envelope(b'{"errcode":0,"errmsg":"ok"}') is None


def test_errcode_envelope_failure_uses_platform_text() -> None:
    with pytest.raises(SendMessageFailedError) as exc_info:
        check_errcode_envelope(b'{"errcode":93000,"errmsg":"invalid webhook url"}')
    assert str(exc_info.value) == "SendMessageFailed: invalid webhook url"


def test_errcode_envelope_failure_without_text() -> None:
    with pytest.raises(SendMessageFailedError, match="errcode 45009"):
        check_errcode_envelope(b'{"errcode":45009}')


def test_errcode_envelope_wrong_type() -> None:
    with pytest.raises(HttpResponseBodyDecodeFailedError):
        check_errcode_envelope(b'{"errcode":"nope"}')


def test_errcode_envelope_model() -> None:
    assert ErrcodeEnvelope(errcode=0).success
    assert not ErrcodeEnvelope(errcode=1, errmsg="x").success

"""Outbound message bodies and the generic JSON body builders."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TextMessage:
    content: str

    def to_body(self) -> dict[str, Any]:
        return {"msgtype": "text", "text": {"content": self.content}}


@dataclass(frozen=True)
class MarkdownMessage:
    title: str
    text: str

    def to_body(self) -> dict[str, Any]:
        return {"msgtype": "markdown", "markdown": {"title": self.title, "text": self.text}}


def encode_body(body: dict[str, Any]) -> bytes:
    """Serialize a request body as compact UTF-8 JSON.

    Raises TypeError/ValueError when the body can't be serialized.
    """
    return json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def build_text_body(content: str) -> bytes:
    """``{"msgtype":"text","text":{"content":...}}``"""
    return encode_body(TextMessage(content).to_body())


def build_markdown_body(title: str, text: str) -> bytes:
    """``{"msgtype":"markdown","markdown":{"title":...,"text":...}}``"""
    return encode_body(MarkdownMessage(title, text).to_body())

"""Minimal client for the Telegram Bot HTTP API."""

import http.client
import json
import posixpath
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, urlencode, urlunsplit

from readadviser.errors import wrap

_GET_UPDATES_METHOD = "getUpdates"
_SEND_MESSAGE_METHOD = "sendMessage"


@dataclass
class Chat:
    id: int = 0


@dataclass
class From:
    username: str = ""


@dataclass
class IncomingMessage:
    text: str = ""
    from_: From = field(default_factory=From)
    chat: Chat = field(default_factory=Chat)


@dataclass
class Update:
    id: int = 0
    message: IncomingMessage | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Update":
        """Build an update from the decoded JSON object."""
        raw = data.get("message")
        message = None
        if raw is not None:
            sender = raw.get("from") or {}
            chat = raw.get("chat") or {}
            message = IncomingMessage(
                text=raw.get("text") or "",
                from_=From(username=sender.get("username") or ""),
                chat=Chat(id=chat.get("id") or 0),
            )
        return cls(id=data.get("update_id") or 0, message=message)


class TelegramClient:
    """Talks to the bot API on ``host`` with the given bot token."""

    def __init__(self, host: str, token: str) -> None:
        self.host = host
        self.base_path = "bot" + token

    def updates(self, offset: int, limit: int) -> list[Update]:
        """Fetch pending updates starting at ``offset``."""
        data = self._do_request(
            _GET_UPDATES_METHOD, {"offset": str(offset), "limit": str(limit)}
        )
        response = json.loads(data)
        if not isinstance(response, dict):
            raise ValueError("unexpected updates response")
        return [Update.from_dict(item) for item in response.get("result") or []]

    def send_message(self, chat_id: int, text: str) -> None:
        """Send ``text`` to the chat ``chat_id``."""
        try:
            self._do_request(
                _SEND_MESSAGE_METHOD, {"chat_id": str(chat_id), "text": text}
            )
        except Exception as err:
            raise wrap("can't send message", err) from err

    def _url(self, method: str, params: dict[str, str]) -> str:
        path = "/" + quote(posixpath.join(self.base_path, method))
        query = urlencode(sorted(params.items()))
        return urlunsplit(("https", self.host, path, query, ""))

    def _do_request(self, method: str, params: dict[str, str]) -> bytes:
        try:
            url = self._url(method, params)
            try:
                with urllib.request.urlopen(url) as response:
                    return response.read()
            except urllib.error.HTTPError as err:
                return err.read()
        except (OSError, ValueError, http.client.HTTPException) as err:
            raise wrap("can't do request", err) from err
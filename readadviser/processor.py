"""Turns Telegram updates into events and carries out the bot's commands."""

import logging
from dataclasses import dataclass
from urllib.parse import urlsplit

from readadviser.errors import wrap
from readadviser.events import Event, EventType, Fetcher, Processor
from readadviser.storage import NoSavedPagesError, Page, Storage
from readadviser.telegram_client import TelegramClient, Update

logger = logging.getLogger(__name__)

RND_CMD = "/rnd"
HELP_CMD = "/help"
START_CMD = "/start"

MSG_HELP = """👆I can save and keep you pages. Also I can offer you them to read.👆

🥵In order to save the page, just send me al link to it.🥵

😈In order to get a random page from your list, send me command /rnd.😈
👽Caution! After that, this page will be removed from your list!👽"""

MSG_HELLO = "Hi friend! 👾\n\n" + MSG_HELP

MSG_UNKNOWN_COMMAND = "💩Unknown Command bro💩"
MSG_NO_SAVED_PAGES = "🤡You have no saved pages🤡"
MSG_SAVED = "👌Saved Bro!👌"
MSG_ALREADY_EXISTS = "✌️You have already have this page in your list✌️"


class UnknownEventTypeError(Exception):
    """Raised for events the processor does not know how to handle."""

    def __init__(self, message: str = "Unknow event type") -> None:
        super().__init__(message)


class UnknownMetaTypeError(Exception):
    """Raised when an event carries no Telegram metadata."""

    def __init__(self, message: str = "Unknow meta type") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Meta:
    chat_id: int
    username: str


def is_url(text: str) -> bool:
    """Tell whether ``text`` parses as a URL with a host."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in text):
        return False
    try:
        parts = urlsplit(text)
    except ValueError:
        return False
    host = parts.netloc.rpartition("@")[2]
    if any(ch.isspace() for ch in host):
        return False
    return bool(host)


def _to_event(update: Update) -> Event:
    if update.message is None:
        return Event(type=EventType.UNKNOWN, text="")
    return Event(
        type=EventType.MESSAGE,
        text=update.message.text,
        meta=Meta(
            chat_id=update.message.chat.id,
            username=update.message.from_.username,
        ),
    )


def _meta(event: Event) -> Meta:
    if not isinstance(event.meta, Meta):
        raise wrap("can't get meta", UnknownMetaTypeError())
    return event.meta


class TelegramProcessor(Fetcher, Processor):
    """Fetches updates from Telegram and answers users' commands."""

    def __init__(self, client: TelegramClient, storage: Storage) -> None:
        self._client = client
        self._storage = storage
        self._offset = 0

    def fetch(self, limit: int) -> list[Event]:
        """Return new events and advance past the updates received."""
        try:
            updates = self._client.updates(self._offset, limit)
        except Exception as err:
            raise wrap("can't get events", err) from err
        if not updates:
            return []
        events = [_to_event(update) for update in updates]
        self._offset = updates[-1].id + 1
        return events

    def process(self, event: Event) -> None:
        """Handle an event, raising for types other than messages."""
        if event.type is EventType.MESSAGE:
            self.process_message(event)
            return
        raise wrap("can't process message", UnknownEventTypeError())

    def process_message(self, event: Event) -> None:
        """Run the command contained in a message event."""
        try:
            meta = _meta(event)
        except Exception as err:
            raise wrap("can't process message", err) from err
        try:
            self._do_cmd(event.text, meta.chat_id, meta.username)
        except Exception as err:
            raise wrap("can't process message", err) from err

    def _do_cmd(self, text: str, chat_id: int, username: str) -> None:
        text = text.strip()
        logger.info("got new command '%s' from '%s'", text, username)

        if is_url(text):
            self._save_page(chat_id, text, username)
        elif text == RND_CMD:
            self._send_random(chat_id, username)
        elif text == HELP_CMD:
            self._client.send_message(chat_id, MSG_HELP)
        elif text == START_CMD:
            self._client.send_message(chat_id, MSG_HELLO)
        else:
            self._client.send_message(chat_id, MSG_UNKNOWN_COMMAND)

    def _save_page(self, chat_id: int, page_url: str, username: str) -> None:
        page = Page(url=page_url, user_name=username)
        try:
            if self._storage.is_exists(page):
                self._client.send_message(chat_id, MSG_ALREADY_EXISTS)
                return
            self._storage.save(page)
        except Exception as err:
            raise wrap("can't do command: save page", err) from err
        try:
            self._client.send_message(chat_id, MSG_SAVED)
        except Exception as err:
            logger.warning("can't confirm saved page: %s", err)

    def _send_random(self, chat_id: int, username: str) -> None:
        try:
            try:
                page = self._storage.pick_random(username)
            except NoSavedPagesError:
                self._client.send_message(chat_id, MSG_NO_SAVED_PAGES)
                return
            self._client.send_message(chat_id, page.url)
            self._storage.remove(page)
        except Exception as err:
            raise wrap("can't do command: send random", err) from err
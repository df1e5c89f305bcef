"""Entry point of the reading adviser bot."""

import argparse
import logging
import sys

from readadviser.consumer import EventConsumer
from readadviser.processor import TelegramProcessor
from readadviser.sqlite_storage import SQLiteStorage
from readadviser.telegram_client import TelegramClient

logger = logging.getLogger(__name__)

TG_BOT_HOST = "api.telegram.org"
SQLITE_STORAGE_PATH = "data/sqlite/storage.db"
BATCH_SIZE = 100


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Telegram bot that keeps pages to read.")
    parser.add_argument(
        "-tg-bot-token",
        "--tg-bot-token",
        dest="token",
        default="",
        help="token for access to telegram bot",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the bot; return a non-zero status when it cannot start."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    args = _parse_args(argv)

    try:
        storage = SQLiteStorage(SQLITE_STORAGE_PATH)
    except Exception as err:
        logger.error("can't connect to storage: %s", err)
        return 1

    with storage:
        try:
            storage.init()
        except Exception as err:
            logger.error("can't connect to storage: %s", err)
            return 1

        if not args.token:
            logger.error("token is not specified")
            return 1

        processor = TelegramProcessor(TelegramClient(TG_BOT_HOST, args.token), storage)
        logger.info("service started")

        consumer = EventConsumer(processor, processor, BATCH_SIZE)
        try:
            consumer.start()
        except Exception as err:
            logger.error("service is stopped %s", err)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
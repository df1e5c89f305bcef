"""A Telegram bot that saves links and offers a random one to read."""

__version__ = "0.1.0"
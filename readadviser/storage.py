"""Saved pages and the storage interface."""

import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass


class NoSavedPagesError(Exception):
    """Raised when a user has no saved pages."""

    def __init__(self, message: str = "No saved pages") -> None:
        super().__init__(message)


@dataclass
class Page:
    url: str
    user_name: str

    def hash(self) -> str:
        """SHA-1 hex digest of the URL followed by the user name."""
        digest = hashlib.sha1()
        digest.update(self.url.encode("utf-8"))
        digest.update(self.user_name.encode("utf-8"))
        return digest.hexdigest()


class Storage(ABC):
    """Persistent collection of pages per user."""

    @abstractmethod
    def save(self, page: Page) -> None:
        """Store ``page``."""

    @abstractmethod
    def pick_random(self, user_name: str) -> Page:
        """Return a random page of ``user_name``; raise NoSavedPagesError if none."""

    @abstractmethod
    def remove(self, page: Page) -> None:
        """Delete ``page``."""

    @abstractmethod
    def is_exists(self, page: Page) -> bool:
        """Tell whether ``page`` is stored."""
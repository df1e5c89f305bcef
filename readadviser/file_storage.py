"""Storage keeping each page in its own file under a per-user directory."""

import json
import os
import random
from pathlib import Path

from readadviser.errors import WrappedError, wrap
from readadviser.storage import NoSavedPagesError, Page, Storage

_DEFAULT_PERM = 0o774


class FileStorage(Storage):
    """Pages stored as files named by their hash in ``base_path/<user>/``."""

    def __init__(self, base_path: str | os.PathLike) -> None:
        self.base_path = Path(base_path)

    def _page_path(self, page: Page) -> Path:
        return self.base_path / page.user_name / page.hash()

    def save(self, page: Page) -> None:
        user_dir = self.base_path / page.user_name
        try:
            user_dir.mkdir(mode=_DEFAULT_PERM, parents=True, exist_ok=True)
            payload = json.dumps({"url": page.url, "user_name": page.user_name})
            (user_dir / page.hash()).write_text(payload, encoding="utf-8")
        except OSError as err:
            raise wrap("can't save page", err) from err

    def pick_random(self, user_name: str) -> Page:
        user_dir = self.base_path / user_name
        try:
            files = sorted(user_dir.iterdir())
        except OSError as err:
            raise wrap("can't pick random page", err) from err
        if not files:
            raise NoSavedPagesError()
        try:
            return self._decode_page(random.choice(files))
        except WrappedError as err:
            raise wrap("can't pick random page", err) from err

    def remove(self, page: Page) -> None:
        try:
            self._page_path(page).unlink()
        except OSError as err:
            raise wrap("can't remove file", err) from err

    def is_exists(self, page: Page) -> bool:
        path = self._page_path(page)
        try:
            path.stat()
        except FileNotFoundError:
            return False
        except OSError as err:
            raise wrap(f"can't check if file {path} exists", err) from err
        return True

    @staticmethod
    def _decode_page(path: Path) -> Page:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return Page(url=data["url"], user_name=data["user_name"])
        except (OSError, ValueError, KeyError, TypeError) as err:
            raise wrap("can't decode page", err) from err
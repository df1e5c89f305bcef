"""Storage backed by an SQLite database."""

import os
import sqlite3

from readadviser.errors import wrap
from readadviser.storage import NoSavedPagesError, Page, Storage


class SQLiteStorage(Storage):
    """Pages kept in a ``pages`` table of an SQLite database."""

    def __init__(self, path: str | os.PathLike) -> None:
        try:
            self._conn = sqlite3.connect(path)
        except sqlite3.Error as err:
            raise wrap("failed to open database:", err) from err
        try:
            self._conn.execute("SELECT 1").fetchone()
        except sqlite3.Error as err:
            self._conn.close()
            raise wrap("failed to connect database:", err) from err

    def __enter__(self) -> "SQLiteStorage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def init(self) -> None:
        """Create the pages table if it is missing."""
        try:
            with self._conn:
                self._conn.execute(
                    "CREATE TABLE IF NOT EXISTS pages (url, user_name TEXT);"
                )
        except sqlite3.Error as err:
            raise wrap("failed to create table:", err) from err

    def save(self, page: Page) -> None:
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO pages (url, user_name) VALUES (?, ?);",
                    (page.url, page.user_name),
                )
        except sqlite3.Error as err:
            raise wrap("failed to save page:", err) from err

    def pick_random(self, user_name: str) -> Page:
        try:
            row = self._conn.execute(
                "SELECT url, user_name FROM pages WHERE user_name = ? "
                "ORDER BY RANDOM() LIMIT 1;",
                (user_name,),
            ).fetchone()
        except sqlite3.Error as err:
            raise wrap("can't pick random page:", err) from err
        if row is None:
            raise NoSavedPagesError()
        return Page(url=row[0], user_name=user_name)

    def remove(self, page: Page) -> None:
        try:
            with self._conn:
                self._conn.execute(
                    "DELETE FROM pages WHERE url = ? AND user_name = ?;",
                    (page.url, page.user_name),
                )
        except sqlite3.Error as err:
            raise wrap("failed to remove page:", err) from err

    def is_exists(self, page: Page) -> bool:
        try:
            (count,) = self._conn.execute(
                "SELECT COUNT(*) FROM pages WHERE url = ? AND user_name = ?",
                (page.url, page.user_name),
            ).fetchone()
        except sqlite3.Error as err:
            raise wrap("failed to check page existence:", err) from err
        return count > 0

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
import logging
import sqlite3

import pytest

from readadviser.main import SQLITE_STORAGE_PATH, main


def test_missing_storage_directory_fails(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    with caplog.at_level(logging.ERROR):
        status = main(["-tg-bot-token", "token"])
    assert status == 1
    assert "can't connect to storage" in caplog.text


def test_missing_token_fails_after_storage_init(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data" / "sqlite").mkdir(parents=True)
    with caplog.at_level(logging.ERROR):
        status = main([])
    assert status == 1
    assert "token is not specified" in caplog.text

    db_path = tmp_path / SQLITE_STORAGE_PATH
    conn = sqlite3.connect(db_path)
    try:
        tables = [
            row[0]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        ]
    finally:
        conn.close()
    assert tables == ["pages"]


def test_empty_token_is_rejected(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data" / "sqlite").mkdir(parents=True)
    with caplog.at_level(logging.ERROR):
        status = main(["--tg-bot-token", ""])
    assert status == 1
    assert "token is not specified" in caplog.text


def test_unknown_flag_exits_with_usage_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as info:
        main(["--no-such-flag"])
    assert info.value.code == 2
# readadviser

A small Telegram bot for links you mean to read later.

Send the bot a link and it keeps the page for you. Send `/rnd` and it
replies with one of your saved pages, picked at random, and removes it
from your list.

## Commands

- any link with a host, such as `https://example.com/article`: save the
  page (if it is already saved, the bot says so instead)
- `/rnd`: get a random saved page (it is removed from your list afterwards)
- `/help`: show the help text
- `/start`: greet and show the help text

Anything else gets an "unknown command" reply. Pages are kept per
Telegram username.

## Installing

```
pip install .
```

## Running

```
mkdir -p data/sqlite
readadviser --tg-bot-token token
```

Replace `token` with the token issued for your bot; `-tg-bot-token` is
accepted as well. The command exits with status 1 if no token is given or
the database cannot be opened.

Saved pages are kept in an SQLite database at `data/sqlite/storage.db`,
relative to the working directory. The directory must exist; the `pages`
table is created on start if it is missing. The bot polls Telegram for
updates in batches of 100 and waits a second between polls when there is
nothing new. Errors while fetching or handling a message are logged and
the loop carries on.

## Using it as a library

The parts are usable on their own:

- `readadviser.telegram_client.TelegramClient(host, token)` talks to the
  Bot API with `updates(offset, limit)` and `send_message(chat_id, text)`.
- `readadviser.storage.Page` is a saved page (`url`, `user_name`);
  `Page.hash()` gives the SHA-1 hex digest of the URL followed by the user
  name. `readadviser.storage.Storage` is the abstract storage interface
  (`save`, `pick_random`, `remove`, `is_exists`); `pick_random` raises
  `NoSavedPagesError` when a user has nothing saved.
- `readadviser.sqlite_storage.SQLiteStorage(path)` stores pages in SQLite;
  call `init()` once to create the table, and `close()` (or use it as a
  context manager) when done.
- `readadviser.file_storage.FileStorage(base_path)` stores each page as a
  JSON file named by its hash under `base_path/<user name>/`.
- `readadviser.processor.TelegramProcessor(client, storage)` turns updates
  into `readadviser.events.Event` objects (`fetch`) and runs the bot
  commands (`process`).
- `readadviser.consumer.EventConsumer(fetcher, processor, batch_size)` runs
  the endless fetch-and-process loop with `start()`.
- Failures are raised as `readadviser.errors.WrappedError`, whose message
  says what was being done and whose `__cause__` is the underlying error.

## What it does not do

- The `readadviser` command always uses the SQLite database at the fixed
  path above; `FileStorage` can only be used from code.
- Updates are received by long polling only; there is no webhook server.
- There is no way to list or delete saved pages other than `/rnd`.

## Tests

```
pip install .[test]
pytest
```
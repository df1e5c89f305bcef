from unittest import mock

import pytest

from readadviser.consumer import Consumer, EventConsumer
from readadviser.events import Event, EventType, Fetcher, Processor


class _Stop(BaseException):
    """Ends the endless consuming loop in tests."""


class ScriptedFetcher(Fetcher):
    def __init__(self, script):
        self.script = list(script)
        self.limits = []

    def fetch(self, limit):
        self.limits.append(limit)
        if not self.script:
            raise _Stop()
        step = self.script.pop(0)
        if isinstance(step, Exception):
            raise step
        return step


class RecordingProcessor(Processor):
    def __init__(self, failing=()):
        self.seen = []
        self.failing = set(failing)

    def process(self, event):
        self.seen.append(event.text)
        if event.text in self.failing:
            raise RuntimeError("boom")


def _events(*texts):
    return [Event(type=EventType.MESSAGE, text=text) for text in texts]


def _run(consumer):
    with mock.patch("readadviser.consumer.time.sleep") as sleep:
        with pytest.raises(_Stop):
            consumer.start()
    return sleep


def test_consumer_is_abstract():
    with pytest.raises(TypeError):
        Consumer()


def test_processes_all_events_in_order():
    fetcher = ScriptedFetcher([_events("a", "b"), _events("c")])
    processor = RecordingProcessor()
    _run(EventConsumer(fetcher, processor, 100))
    assert processor.seen == ["a", "b", "c"]


def test_fetch_is_called_with_batch_size():
    fetcher = ScriptedFetcher([_events("a")])
    _run(EventConsumer(fetcher, RecordingProcessor(), 7))
    assert fetcher.limits == [7, 7]


def test_fetch_error_does_not_stop_loop():
    fetcher = ScriptedFetcher([RuntimeError("network"), _events("x")])
    processor = RecordingProcessor()
    _run(EventConsumer(fetcher, processor, 10))
    assert processor.seen == ["x"]
    assert len(fetcher.limits) == 3


def test_processor_error_does_not_skip_other_events():
    fetcher = ScriptedFetcher([_events("ok1", "bad", "ok2")])
    processor = RecordingProcessor(failing={"bad"})
    _run(EventConsumer(fetcher, processor, 10))
    assert processor.seen == ["ok1", "bad", "ok2"]


def test_empty_batch_sleeps_one_second():
    fetcher = ScriptedFetcher([[], _events("a")])
    sleep = _run(EventConsumer(fetcher, RecordingProcessor(), 10))
    sleep.assert_called_once_with(1)


def test_non_empty_batches_do_not_sleep():
    fetcher = ScriptedFetcher([_events("a"), _events("b")])
    sleep = _run(EventConsumer(fetcher, RecordingProcessor(), 10))
    assert sleep.call_count == 0
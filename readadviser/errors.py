"""Error wrapping that keeps the original exception as the cause."""


class WrappedError(Exception):
    """An error annotated with a message describing what was being done."""

    def __init__(self, msg: str, err: BaseException) -> None:
        super().__init__(f"{msg} {err}")
        self.msg = msg
        self.err = err
        self.__cause__ = err


def wrap(msg: str, err: BaseException) -> WrappedError:
    """Return a WrappedError whose text is ``msg`` followed by ``err``."""
    return WrappedError(msg, err)
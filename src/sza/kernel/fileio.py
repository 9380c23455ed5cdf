import functools
import io
import os
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path
from types import TracebackType
from typing import IO, Self


def buffered(
    source: Callable[[int], bytes],
    buffer_size: int = io.DEFAULT_BUFFER_SIZE,
) -> Iterator[bytes]:
    return iter(functools.partial(source, buffer_size), b'')


class ResourceStream(AbstractContextManager['ResourceStream']):
    """Forward-only byte stream that is closed exactly once.

    The wrapped stream is closed when the context exits, whether the body
    finished or raised.
    """

    __slots__ = ('stream', 'closed')

    def __init__(self, stream: IO[bytes]) -> None:
        self.stream = stream
        self.closed = False

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        __exc_type: type[BaseException] | None,
        __exc_value: BaseException | None,
        __traceback: TracebackType | None,
    ) -> bool | None:
        self.close()
        return None

    def read(self) -> bytes:
        if self.closed:
            raise OSError('I/O operation on closed file')  # noqa: TRY003
        return b''.join(buffered(self.stream.read))

    @classmethod
    @contextmanager
    def load(cls, file_path: str | os.PathLike[str]) -> Iterator[Self]:
        with cls(Path(file_path).open('rb')) as res:
            yield res

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.stream.close()


def read_file(file_path: str | os.PathLike[str]) -> bytes:
    with ResourceStream.load(file_path) as res:
        return res.read()


def write_file(file_path: str | os.PathLike[str], data: bytes) -> int:
    with Path(file_path).open('wb') as res:
        return res.write(data)

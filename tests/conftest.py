import io
import struct
import warnings
import zipfile
from collections.abc import Iterable

import pytest
from PIL import Image

from sza.graphics.image import encode_image


def make_image(width: int, height: int, color: tuple[int, ...] = (255, 0, 0, 255)) -> Image.Image:
    return Image.new('RGBA', (width, height), color)


def make_png(width: int, height: int, color: tuple[int, ...] = (255, 0, 0, 255)) -> bytes:
    return encode_image(make_image(width, height, color))


def make_archive(entries: Iterable[tuple[str, bytes | str]]) -> bytes:
    with io.BytesIO() as stream, warnings.catch_warnings():
        # duplicate entry names are part of what is being tested
        warnings.simplefilter('ignore', UserWarning)
        with zipfile.ZipFile(stream, 'w') as archive:
            for name, data in entries:
                archive.writestr(name, data)
        return stream.getvalue()


def patch_headers(
    data: bytes,
    *,
    set_flags: int = 0,
    clear_flags: int = 0,
    method: int | None = None,
) -> bytes:
    """Rewrite flag bits and compression method of every entry, local and central."""
    buffer = bytearray(data)
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        offsets = [info.header_offset for info in archive.infolist()]

    def patch(flags_at: int) -> None:
        (flags,) = struct.unpack_from('<H', buffer, flags_at)
        struct.pack_into('<H', buffer, flags_at, (flags | set_flags) & ~clear_flags)
        if method is not None:
            struct.pack_into('<H', buffer, flags_at + 2, method)

    for offset in offsets:
        assert buffer[offset : offset + 4] == b'PK\x03\x04'
        patch(offset + 6)

    # no archive comment, the central directory offset closes the end record
    (central,) = struct.unpack_from('<I', buffer, len(buffer) - 6)
    for _ in offsets:
        assert buffer[central : central + 4] == b'PK\x01\x02'
        patch(central + 8)
        sizes = struct.unpack_from('<3H', buffer, central + 28)
        central += 46 + sum(sizes)
    return bytes(buffer)


class TrackingStream(io.BytesIO):
    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()


@pytest.fixture
def two_frames() -> bytes:
    return make_archive(
        [
            ('b.png', make_png(30, 5)),
            ('animation.txt', 'a.png (50ms)\nb.png (75ms)'),
            ('a.png', make_png(10, 20)),
        ],
    )

import io
import logging
import math
import os
import urllib.request
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO

from sza.graphics.frame import Frame
from sza.graphics.image import Size, scaled_size
from sza.kernel.errors import (
    InvalidDurationError,
    InvalidScaleFactorError,
    MissingDescriptorError,
    MissingReferencedImageError,
    StreamError,
)
from sza.kernel.fileio import ResourceStream
from sza.kernel.preset import ArchiveSettings
from sza.zipped.archive import ArchiveContents, read_entries
from sza.zipped.descriptor import parse_line


class Animation:
    """Ordered, immutable sequence of timed frames.

    `width` and `height` bound every frame. They are the maxima over the
    frames unless given explicitly, which is how scaled copies keep the
    scaled bounding box of their source.
    """

    __slots__ = ('_frames', '_width', '_height')

    def __init__(self, frames: Iterable[Frame], size: Size | None = None) -> None:
        frames = tuple(frames)
        if not frames:
            raise ValueError('animation needs at least one frame')  # noqa: TRY003
        if size is None:
            size = (
                max(frame.width for frame in frames),
                max(frame.height for frame in frames),
            )
        self._frames = frames
        self._width, self._height = size

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> Size:
        return self._width, self._height

    @property
    def frames(self) -> tuple[Frame, ...]:
        return self._frames

    @property
    def durations(self) -> list[int]:
        return [frame.duration_ms for frame in self._frames]

    @property
    def total_duration_ms(self) -> int:
        return sum(self.durations)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def __getitem__(self, index: int) -> Frame:
        return self._frames[index]

    def scale(self, factor: float) -> 'Animation':
        return scale(self, factor)

    def __repr__(self) -> str:
        return f'Animation<{self._width}x{self._height}>[{len(self)}]'


def scale(animation: Animation, factor: float) -> Animation:
    """Create an independent copy of `animation` resized by `factor`.

    The bounding box is scaled on its own instead of being measured again
    on the scaled frames, so both may differ by rounding.
    """
    if not (math.isfinite(factor) and factor > 0):
        raise InvalidScaleFactorError(factor)
    return Animation(
        (frame.scaled(factor) for frame in animation),
        scaled_size(animation.size, factor),
    )


def resolve_frames(cfg: ArchiveSettings, contents: ArchiveContents) -> Iterator[Frame]:
    for line in contents.descriptor:
        name, duration = parse_line(line, cfg.descriptor)
        image = contents.images.get(name)
        if image is None:
            raise MissingReferencedImageError(name)
        try:
            frame = Frame(image, duration)
        except InvalidDurationError as exc:
            raise InvalidDurationError(duration, line) from exc
        yield frame


def parse(cfg: ArchiveSettings, resource: ResourceStream) -> Animation:
    with resource:
        contents = read_entries(cfg, resource)

    if not contents.descriptor:
        raise MissingDescriptorError(cfg.descriptor)

    animation = Animation(resolve_frames(cfg, contents))
    (cfg.logger or logging).debug(f'loaded {animation!r}')
    return animation


def from_stream(cfg: ArchiveSettings, stream: IO[bytes]) -> Animation:
    return parse(cfg, ResourceStream(stream))


def from_bytes(cfg: ArchiveSettings, data: bytes) -> Animation:
    return from_stream(cfg, io.BytesIO(data))


def from_path(cfg: ArchiveSettings, path: str | os.PathLike[str]) -> Animation:
    try:
        stream = Path(path).open('rb')
    except OSError as exc:
        raise StreamError(exc) from exc
    return from_stream(cfg, stream)


def from_url(cfg: ArchiveSettings, url: str) -> Animation:
    try:
        stream = urllib.request.urlopen(url)  # noqa: S310
    except OSError as exc:
        raise StreamError(exc) from exc
    return from_stream(cfg, stream)

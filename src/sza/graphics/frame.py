from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from sza.graphics.image import Size, TImage, blank_canvas, resize_bicubic, scaled_size
from sza.kernel.errors import InvalidDurationError


@dataclass(frozen=True, slots=True)
class Frame:
    """A still image shown for `duration_ms` milliseconds."""

    image: TImage
    duration_ms: int

    def __post_init__(self) -> None:
        if self.duration_ms <= 0:
            raise InvalidDurationError(self.duration_ms)
        if not (self.image.width > 0 and self.image.height > 0):
            raise ValueError(f'frame image must not be empty: {self.image.size}')  # noqa: TRY003

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> Size:
        return self.image.size

    def __iter__(self) -> Iterator[TImage | int]:
        return iter((self.image, self.duration_ms))

    def scaled(self, factor: float) -> 'Frame':
        return Frame(resize_bicubic(self.image, scaled_size(self.size, factor)), self.duration_ms)


def pad_frame_image(size: Size, frame: Frame) -> TImage:
    nbase = blank_canvas(size)
    nbase.paste(frame.image.convert('RGBA'), box=(0, 0))
    return nbase


def pad_frames(size: Size, frames: Iterable[Frame]) -> Iterator[Frame]:
    yield from (Frame(pad_frame_image(size, frame), frame.duration_ms) for frame in frames)

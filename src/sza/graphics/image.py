import io
import struct
from collections.abc import Sequence

import numpy as np
from PIL import Image

Size = tuple[int, int]
Matrix = Sequence[Sequence[int]] | Sequence[Sequence[Sequence[int]]]


TImage = Image.Image

DECODE_ERRORS = (
    OSError,
    SyntaxError,
    ValueError,
    struct.error,
    Image.DecompressionBombError,
)


def convert_to_pil_image(char: Matrix) -> TImage:
    npp = np.array(list(char), dtype=np.uint8)
    return Image.fromarray(npp)


def blank_canvas(size: Size) -> TImage:
    width, height = size
    return Image.fromarray(np.zeros((height, width, 4), dtype=np.uint8))


def decode_image(data: bytes) -> TImage:
    # Image.open is lazy, force decoding while the buffer is at hand
    with Image.open(io.BytesIO(data)) as im:
        im.load()
        return im.copy()


def encode_image(im: TImage, fmt: str = 'PNG') -> bytes:
    with io.BytesIO() as stream:
        im.save(stream, format=fmt)
        return stream.getvalue()


def scaled_size(size: Size, factor: float) -> Size:
    width, height = size
    return max(1, round(width * factor)), max(1, round(height * factor))


def resize_bicubic(im: TImage, size: Size) -> TImage:
    # palette and bilevel images ignore the filter, draw into ARGB first
    return im.convert('RGBA').resize(size, resample=Image.Resampling.BICUBIC)

import io
import logging
import zipfile
import zlib
from collections.abc import Iterable, Iterator
from typing import NamedTuple

from parse import parse  # type: ignore[import-untyped]

from sza.graphics.image import DECODE_ERRORS, TImage, decode_image, encode_image
from sza.kernel.errors import ImageDecodeError, InvalidDurationError, StreamError
from sza.kernel.fileio import ResourceStream
from sza.kernel.preset import ArchiveSettings
from sza.zipped.descriptor import CLOSE_MARK, OPEN_MARK, split_lines

# unsupported compression raises NotImplementedError, encrypted entries RuntimeError,
# names that do not decode UnicodeDecodeError
STREAM_ERRORS = (
    OSError,
    EOFError,
    NotImplementedError,
    RuntimeError,
    UnicodeDecodeError,
    zipfile.BadZipFile,
    zlib.error,
)


class ArchiveContents(NamedTuple):
    descriptor: list[str]
    images: dict[str, TImage]


def iter_entries(cfg: ArchiveSettings, buffer: bytes) -> Iterator[tuple[str, bytes]]:
    # an exhausted stream is an archive without entries
    if not buffer:
        return
    # names without the utf-8 flag are still read in the descriptor encoding
    with zipfile.ZipFile(io.BytesIO(buffer), metadata_encoding=cfg.encoding) as archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            yield info.filename, archive.read(info)


def decode_entry(name: str, data: bytes) -> TImage:
    try:
        return decode_image(data)
    except DECODE_ERRORS as exc:
        raise ImageDecodeError(name) from exc


def read_entries(cfg: ArchiveSettings, resource: ResourceStream) -> ArchiveContents:
    """Buffer every entry of the archive in a single forward pass.

    Lines of the descriptor entry are collected in order, any other entry
    is decoded as an image and kept by its exact name.
    """
    logger = cfg.logger or logging
    descriptor: list[str] = []
    images: dict[str, TImage] = {}
    try:
        for name, data in iter_entries(cfg, resource.read()):
            if name == cfg.descriptor:
                text = data.decode(cfg.encoding, errors='replace')
                descriptor.extend(split_lines(text))
                continue
            if name in images:
                logger.warning(f'duplicate archive entry {name}, keeping the last one')
            images[name] = decode_entry(name, data)
            logger.debug(f'decoded {name}: {images[name].size}')
    except STREAM_ERRORS as exc:
        raise StreamError(exc) from exc
    return ArchiveContents(descriptor, images)


def findall(pattern: str, names: Iterable[str]) -> Iterator[str]:
    for name in names:
        if parse(pattern, name, evaluate_result=False):
            yield name


def find(pattern: str, names: Iterable[str]) -> str | None:
    return next(findall(pattern, names), None)


def check_entry_name(cfg: ArchiveSettings, name: str) -> str:
    if name == cfg.descriptor:
        raise ValueError(f'entry name is reserved for the descriptor: {name!r}')  # noqa: TRY003
    if OPEN_MARK in name or CLOSE_MARK in name or name != name.strip():
        raise ValueError(f'entry name cannot be referenced from descriptor: {name!r}')  # noqa: TRY003
    return name


def compose(
    cfg: ArchiveSettings,
    frames: Iterable[tuple[str, TImage, int]],
) -> bytes:
    lines: list[str] = []
    written: set[str] = set()
    with io.BytesIO() as stream:
        with zipfile.ZipFile(stream, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
            for name, im, duration in frames:
                if duration <= 0:
                    raise InvalidDurationError(duration)
                lines.append(f'{check_entry_name(cfg, name)} {OPEN_MARK}{duration}{CLOSE_MARK}')
                # frames may reuse a sprite, store it once
                if name in written:
                    continue
                archive.writestr(name, encode_image(im))
                written.add(name)
            archive.writestr(cfg.descriptor, '\n'.join(lines).encode(cfg.encoding))
        return stream.getvalue()

import logging
from dataclasses import dataclass, replace
from typing import Any, Self

from sza.kernel.fileio import read_file, write_file


@dataclass(frozen=True)
class _DefaultOverride:
    def __call__(self, **kwargs: Any) -> Self:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class ArchiveSettings:
    descriptor: str
    encoding: str = 'utf-8'
    logger: logging.Logger | None = None


@dataclass(frozen=True)
class Preset(ArchiveSettings, _DefaultOverride):
    # static pass through
    read_file = staticmethod(read_file)
    write_file = staticmethod(write_file)

import re
from typing import NamedTuple

from sza.kernel.errors import MalformedDescriptorLineError

LINE_BREAK = re.compile(r'\r\n|\r|\n')
DURATION = re.compile(r'[+-]?\d+')

OPEN_MARK = '('
CLOSE_MARK = 'ms)'


class DescriptorLine(NamedTuple):
    name: str
    duration_ms: int


def split_lines(text: str) -> list[str]:
    lines = LINE_BREAK.split(text)
    # a terminated last line does not start another one
    if lines[-1] == '':
        lines.pop()
    return lines


def parse_line(line: str, filename: str) -> DescriptorLine:
    """Parse a single `NAME (DURATIONms)` line.

    Both delimiters are looked up by their first occurrence in the line,
    `ms)` has to come after `(`.
    """
    idx = line.find(OPEN_MARK)
    idx2 = line.find(CLOSE_MARK)
    if idx < 0 or idx2 <= idx:
        raise MalformedDescriptorLineError(line, filename)

    duration = line[idx + len(OPEN_MARK) : idx2]
    if not DURATION.fullmatch(duration):
        raise MalformedDescriptorLineError(line, filename)

    return DescriptorLine(line[:idx].strip(), int(duration))

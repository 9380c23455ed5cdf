class AnimationError(Exception):
    pass


class StreamError(AnimationError):
    def __init__(self, reason: object) -> None:
        super().__init__(f'could not read animation archive: {reason}')
        self.reason = reason


class MissingDescriptorError(AnimationError):
    def __init__(self, filename: str) -> None:
        super().__init__(f'{filename} is missing from the animation archive')
        self.filename = filename


class MalformedDescriptorLineError(AnimationError):
    def __init__(self, line: str, filename: str) -> None:
        super().__init__(
            f'{filename} should use the format: FILENAME (TIMEms) in: {line!r}'
        )
        self.line = line
        self.filename = filename


class MissingReferencedImageError(AnimationError):
    def __init__(self, name: str) -> None:
        super().__init__(f'could not find referenced image: {name}')
        self.name = name


class ImageDecodeError(AnimationError):
    def __init__(self, entry: str) -> None:
        super().__init__(f'could not decode archive entry as image: {entry}')
        self.entry = entry


class InvalidDurationError(AnimationError):
    def __init__(self, duration: int, line: str | None = None) -> None:
        where = f' in: {line!r}' if line is not None else ''
        super().__init__(f'frame duration must be positive, got {duration}ms{where}')
        self.duration = duration
        self.line = line


class InvalidScaleFactorError(AnimationError):
    def __init__(self, factor: float) -> None:
        super().__init__(f'scale factor must be a positive number, got {factor}')
        self.factor = factor

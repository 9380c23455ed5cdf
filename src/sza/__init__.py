from sza.graphics.frame import Frame
from sza.kernel.errors import (
    AnimationError,
    ImageDecodeError,
    InvalidDurationError,
    InvalidScaleFactorError,
    MalformedDescriptorLineError,
    MissingDescriptorError,
    MissingReferencedImageError,
    StreamError,
)
from sza.zipped import ANIMATION_DESCRIPTOR_FILE, Animation, sza

__all__ = (
    'ANIMATION_DESCRIPTOR_FILE',
    'Animation',
    'AnimationError',
    'Frame',
    'ImageDecodeError',
    'InvalidDurationError',
    'InvalidScaleFactorError',
    'MalformedDescriptorLineError',
    'MissingDescriptorError',
    'MissingReferencedImageError',
    'StreamError',
    'sza',
)

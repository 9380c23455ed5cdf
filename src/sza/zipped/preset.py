from dataclasses import dataclass

from sza.kernel.preset import Preset
from sza.zipped import anim, archive

ANIMATION_DESCRIPTOR_FILE = 'animation.txt'


@dataclass(frozen=True)
class ZippedPreset(Preset):
    read_entries = archive.read_entries
    compose = archive.compose
    parse = anim.parse
    from_stream = anim.from_stream
    from_bytes = anim.from_bytes
    from_path = anim.from_path
    from_url = anim.from_url

    # static pass through
    scale = staticmethod(anim.scale)
    find = staticmethod(archive.find)
    findall = staticmethod(archive.findall)


sza = ZippedPreset(descriptor=ANIMATION_DESCRIPTOR_FILE)

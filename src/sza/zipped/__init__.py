from sza.zipped.anim import Animation
from sza.zipped.preset import ANIMATION_DESCRIPTOR_FILE, sza

__all__ = ('ANIMATION_DESCRIPTOR_FILE', 'Animation', 'sza')

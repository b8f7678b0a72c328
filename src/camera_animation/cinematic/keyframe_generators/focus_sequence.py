"""
Focus-sequence preset generator.

Visits up to four high-importance objects in scene order, one keypoint each,
starting at time 0 and spaced duration / count apart. Scenes without
high-importance objects get an orbit instead.
"""

from typing import List

from ..animation_state import Keypoint, PresetName, SceneObject
from ..vector_math import offset
from .base_generator import BasePresetGenerator
from .orbit_shot import OrbitPresetGenerator


FOCUS_WEIGHTS = (3.0, 2.0, 3.0)
MAX_FOCUS_OBJECTS = 4


class FocusSequencePresetGenerator(BasePresetGenerator):
    """Generate one focus keypoint per high-importance object"""

    preset = PresetName.FOCUS_SEQUENCE

    def __init__(self, fallback: OrbitPresetGenerator = None):
        super().__init__()
        self.fallback = fallback or OrbitPresetGenerator()

    def generate_keypoints(self, objects: List[SceneObject], duration: float) -> List[Keypoint]:
        important_objects = [
            obj for obj in objects
            if obj.is_high_importance and obj.position is not None
        ][:MAX_FOCUS_OBJECTS]

        if not important_objects:
            self.logger.info("No high-importance objects, falling back to orbit")
            return self.fallback.generate_keypoints(objects, duration)

        time_per_object = duration / len(important_objects)

        return [
            Keypoint(
                time=index * time_per_object,
                position=offset(obj.position, obj.max_scale, FOCUS_WEIGHTS),
                target=obj.position,
                description=f"Focus on {obj.name}",
            )
            for index, obj in enumerate(important_objects)
        ]

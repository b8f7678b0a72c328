"""
Fly-through preset generator.

Enters above one corner of the scene looking at the opposite corner, passes
over the origin at mid-time and exits past the far corner.
"""

from typing import List

from ..animation_state import Keypoint, PresetName, SceneObject
from .base_generator import BasePresetGenerator


class FlyThroughPresetGenerator(BasePresetGenerator):
    """Generate keypoints for a diagonal pass through the scene"""

    preset = PresetName.FLY_THROUGH

    def generate_keypoints(self, objects: List[SceneObject], duration: float) -> List[Keypoint]:
        bounds = self.calculate_bounds(objects)
        lo, hi = bounds.min, bounds.max

        return [
            Keypoint(
                time=0.0,
                position=[lo[0] - 10, hi[1] + 5, hi[2] + 10],
                target=[hi[0], lo[1], lo[2]],
                description='Fly-through start',
            ),
            Keypoint(
                time=duration * 0.5,
                position=[0.0, hi[1], 0.0],
                target=[0.0, 0.0, 0.0],
                description='Fly-through middle',
            ),
            Keypoint(
                time=duration,
                position=[hi[0] + 10, lo[1] - 5, lo[2] - 10],
                target=[lo[0], hi[1], hi[2]],
                description='Fly-through end',
            ),
        ]

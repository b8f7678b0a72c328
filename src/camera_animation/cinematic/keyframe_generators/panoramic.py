"""
Panoramic preset generator.

Sweeps left, front and right of the scene center at a fixed height.
"""

from typing import List

from ..animation_state import Keypoint, PresetName, SceneObject
from .base_generator import BasePresetGenerator


class PanoramicPresetGenerator(BasePresetGenerator):
    """Generate keypoints for a wide left-to-right sweep"""

    preset = PresetName.PANORAMIC

    distance_factor = 2.0
    height_factor = 0.8

    def generate_keypoints(self, objects: List[SceneObject], duration: float) -> List[Keypoint]:
        bounds = self.calculate_bounds(objects)
        center = bounds.center
        diameter = bounds.diameter
        distance = diameter * self.distance_factor
        height = center[1] + diameter * self.height_factor

        return [
            Keypoint(
                time=0.0,
                position=[center[0] - distance, height, center[2]],
                target=center,
                description='Panoramic start - left',
            ),
            Keypoint(
                time=duration * 0.5,
                position=[center[0], height, center[2] + distance],
                target=center,
                description='Panoramic middle - front',
            ),
            Keypoint(
                time=duration,
                position=[center[0] + distance, height, center[2]],
                target=center,
                description='Panoramic end - right',
            ),
        ]

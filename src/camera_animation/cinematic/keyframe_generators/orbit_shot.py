"""
Orbit preset generator for circling the scene.

Samples equal angular steps around the vertical axis through the scene
center, inclusive of both ends, so the last keypoint closes the loop.
"""

import logging
import math
from typing import List

from ..animation_state import Keypoint, PresetName, SceneObject
from .base_generator import BasePresetGenerator


logger = logging.getLogger(__name__)


class OrbitPresetGenerator(BasePresetGenerator):
    """Generate keypoints for a full orbit around the scene center"""

    preset = PresetName.ORBIT

    steps = 8
    radius_factor = 1.5
    height_factor = 0.3

    def generate_keypoints(self, objects: List[SceneObject], duration: float) -> List[Keypoint]:
        bounds = self.calculate_bounds(objects)
        center = bounds.center
        radius = bounds.diameter * self.radius_factor
        height = center[1] + radius * self.height_factor

        keypoints = []
        for i in range(self.steps + 1):
            progress = i / self.steps
            angle = progress * 2 * math.pi

            keypoints.append(Keypoint(
                time=progress * duration,
                position=[
                    center[0] + math.cos(angle) * radius,
                    height,
                    center[2] + math.sin(angle) * radius,
                ],
                target=center,
                description=f"Orbital position {i + 1}",
            ))

        logger.debug(f"Generated {len(keypoints)} orbit keypoints at radius {radius:.2f} around {center}")
        return keypoints

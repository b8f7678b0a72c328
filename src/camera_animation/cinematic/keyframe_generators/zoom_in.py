"""
Zoom-in preset generator.

Moves from a wide view of the main object down to a close view, both looking
at the object. The main object is the first high-importance object, else the
first positioned object.
"""

from typing import List, Optional

from ..animation_state import Keypoint, PresetName, SceneObject
from ..vector_math import offset
from .base_generator import BasePresetGenerator


WIDE_WEIGHTS = (10.0, 8.0, 10.0)
CLOSE_WEIGHTS = (2.0, 1.5, 2.0)


class ZoomInPresetGenerator(BasePresetGenerator):
    """Generate keypoints for a zoom onto the main object"""

    preset = PresetName.ZOOM_IN

    def select_main_object(self, objects: List[SceneObject]) -> Optional[SceneObject]:
        positioned = [obj for obj in objects if obj.position is not None]
        for obj in positioned:
            if obj.is_high_importance:
                return obj
        return positioned[0] if positioned else None

    def generate_keypoints(self, objects: List[SceneObject], duration: float) -> List[Keypoint]:
        main_object = self.select_main_object(objects)

        if main_object is None:
            return [
                Keypoint(time=0.0, position=[10, 10, 10], target=[0, 0, 0], description='Zoom start'),
                Keypoint(time=duration, position=[2, 2, 2], target=[0, 0, 0], description='Zoom end'),
            ]

        target = main_object.position
        scale = main_object.max_scale

        return [
            Keypoint(
                time=0.0,
                position=offset(target, scale, WIDE_WEIGHTS),
                target=target,
                description='Zoom start - wide view',
            ),
            Keypoint(
                time=duration,
                position=offset(target, scale, CLOSE_WEIGHTS),
                target=target,
                description='Zoom end - close view',
            ),
        ]

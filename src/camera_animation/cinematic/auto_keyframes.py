"""
Automatic keyframe derivation from scene geometry.

Builds an opening wide shot, up to four focus shots on important objects and a
closing panoramic shot.
"""

import logging
from typing import Iterable, List, Optional

from ..errors import InvalidInput
from .animation_state import Keypoint, SceneObject
from .bounds_calculator import SceneObjectLike, calculate_scene_bounds, coerce_scene_objects
from .frame_sequencer import prepare_keypoints, validate_duration
from .vector_math import offset


logger = logging.getLogger(__name__)

MAX_FOCUS_OBJECTS = 4
OPENING_WEIGHTS = (0.8, 0.5, 0.8)
CLOSING_WEIGHTS = (-0.6, 0.7, 0.6)
FOCUS_WEIGHTS = (1.0, 1.0, 1.0)
FOCUS_DISTANCE_FACTOR = 3.0


def select_focus_objects(objects: Iterable[SceneObject], focus_points: Iterable[str] = (),
                         limit: int = MAX_FOCUS_OBJECTS) -> List[SceneObject]:
    """High-importance or explicitly named objects, in scene order"""
    names = set(focus_points or ())
    selected = [
        obj for obj in objects
        if obj.position is not None and (obj.is_high_importance or obj.name in names)
    ]
    return selected[:limit]


def auto_keyframes(objects: Optional[Iterable[SceneObjectLike]], duration: float,
                   focus_points: Iterable[str] = (),
                   max_focus_objects: int = MAX_FOCUS_OBJECTS) -> List[Keypoint]:
    """
    Generate keypoints that tour a scene.

    Args:
        objects: Scene objects with position, optional scale/importance/name
        duration: Tour length in seconds
        focus_points: Object names to focus on besides high-importance ones
        max_focus_objects: Cap on focus shots

    Returns:
        Time-sorted keypoints: opening at 0, focus shots, closing at duration

    Raises:
        InvalidInput: If objects is empty or missing, or duration is not positive
    """
    scene_objects = coerce_scene_objects(objects)
    if not scene_objects:
        raise InvalidInput('Scene data with objects is required')
    duration = validate_duration(duration)

    bounds = calculate_scene_bounds(scene_objects)
    center = bounds.center
    opening_distance = bounds.diameter * 2

    keyframes = [
        Keypoint(
            time=0.0,
            position=offset(center, opening_distance, OPENING_WEIGHTS),
            target=center,
            description='Opening wide shot of the scene',
        )
    ]

    focus_objects = select_focus_objects(scene_objects, focus_points, max_focus_objects)
    time_per_object = duration / (len(focus_objects) + 1)

    for index, obj in enumerate(focus_objects):
        focus_distance = obj.max_scale * FOCUS_DISTANCE_FACTOR
        keyframes.append(Keypoint(
            time=time_per_object * (index + 1),
            position=offset(obj.position, focus_distance, FOCUS_WEIGHTS),
            target=obj.position,
            description=f"Focus on {obj.name}",
        ))

    keyframes.append(Keypoint(
        time=duration,
        position=offset(center, opening_distance, CLOSING_WEIGHTS),
        target=center,
        description='Closing panoramic view',
    ))

    logger.debug(f"Generated {len(keyframes)} auto keyframes with {len(focus_objects)} focus shots")
    return prepare_keypoints(keyframes)


__all__ = ['MAX_FOCUS_OBJECTS', 'select_focus_objects', 'auto_keyframes']

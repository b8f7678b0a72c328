"""
Scene bounds calculation for camera framing.

Each object contributes its position inflated by its full scale on both sides
of every axis, so the resulting box is deliberately conservative.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from .animation_state import SceneBounds, SceneObject
from .vector_math import expand_bounds

logger = logging.getLogger(__name__)

DEFAULT_BOUNDS_EXTENT = 10.0

SceneObjectLike = Union[SceneObject, Mapping[str, Any]]


def default_bounds() -> SceneBounds:
    """Box used when a scene has no positioned geometry"""
    return SceneBounds(
        min=[-DEFAULT_BOUNDS_EXTENT] * 3,
        max=[DEFAULT_BOUNDS_EXTENT] * 3,
    )


def coerce_scene_objects(objects: Optional[Iterable[SceneObjectLike]]) -> List[SceneObject]:
    """Accept SceneObject instances or plain dicts"""
    if not objects:
        return []
    return [
        obj if isinstance(obj, SceneObject) else SceneObject.from_dict(obj)
        for obj in objects
    ]


class BoundsCalculator:
    """Calculate axis-aligned bounds for scene objects."""

    def calculate_scene_bounds(self, objects: Optional[Iterable[SceneObjectLike]]) -> SceneBounds:
        """
        Calculate combined bounds for a set of scene objects.

        Args:
            objects: Scene objects with position and optional scale

        Returns:
            Bounds covering every object's position +/- scale, or the default
            box when no object has a position
        """
        scene_objects = coerce_scene_objects(objects)

        bounds = SceneBounds(min=[float('inf')] * 3, max=[float('-inf')] * 3)
        valid_bounds_count = 0
        skipped = 0

        for obj in scene_objects:
            if obj.position is None:
                skipped += 1
                continue
            bounds = expand_bounds(bounds, obj.position, obj.scale)
            valid_bounds_count += 1

        if skipped:
            logger.warning(f"Skipped {skipped} scene objects without a position")

        if valid_bounds_count == 0:
            return default_bounds()

        logger.debug(f"Scene bounds over {valid_bounds_count} objects: min={bounds.min}, max={bounds.max}")
        return bounds


def calculate_scene_bounds(objects: Optional[Iterable[SceneObjectLike]]) -> SceneBounds:
    """Module-level convenience wrapper around BoundsCalculator"""
    return BoundsCalculator().calculate_scene_bounds(objects)


__all__ = [
    'BoundsCalculator',
    'DEFAULT_BOUNDS_EXTENT',
    'calculate_scene_bounds',
    'coerce_scene_objects',
    'default_bounds',
]

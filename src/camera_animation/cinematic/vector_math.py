"""
Vector utilities for camera keyframing.

Vectors are plain [x, y, z] float lists.
"""

from typing import Sequence, Tuple

from .animation_state import SceneBounds, Vec3


def lerp(start: Sequence[float], end: Sequence[float], t: float) -> Vec3:
    """
    Interpolate between two positions.

    Args:
        start: Starting position [x, y, z]
        end: Ending position [x, y, z]
        t: Interpolation factor; values outside 0.0-1.0 extrapolate

    Returns:
        Interpolated position [x, y, z]
    """
    return [
        start[i] + (end[i] - start[i]) * t
        for i in range(3)
    ]


def expand_bounds(bounds: SceneBounds, position: Sequence[float], scale: Sequence[float]) -> SceneBounds:
    """Grow bounds to contain position - scale and position + scale on every axis."""
    return SceneBounds(
        min=[min(bounds.min[i], position[i] - scale[i]) for i in range(3)],
        max=[max(bounds.max[i], position[i] + scale[i]) for i in range(3)],
    )


def offset(origin: Sequence[float], distance: float, weights: Tuple[float, float, float]) -> Vec3:
    """Return origin + distance * weights, per axis."""
    return [origin[i] + distance * weights[i] for i in range(3)]


__all__ = ['lerp', 'expand_bounds', 'offset']

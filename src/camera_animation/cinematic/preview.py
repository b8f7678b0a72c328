"""
Path preview interpolation.

Densifies keypoints into evenly spaced points per segment without committing
to a frame rate or easing. Each segment emits resolution + 1 points including
both ends, so shared segment boundaries appear twice.
"""

import logging
from typing import Iterable, List

from ..errors import InvalidInput
from .animation_state import PreviewPoint
from .frame_sequencer import KeypointLike, prepare_keypoints
from .vector_math import lerp


logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 30


def preview(keypoints: Iterable[KeypointLike], resolution: int = DEFAULT_RESOLUTION) -> List[PreviewPoint]:
    """
    Generate interpolated preview points between consecutive keypoints.

    Raises:
        InvalidInput: If fewer than 2 keypoints are supplied or resolution < 1
    """
    sorted_keypoints = prepare_keypoints(keypoints)
    if isinstance(resolution, bool) or int(resolution) != resolution or resolution < 1:
        raise InvalidInput(f"Resolution must be a positive integer, got: {resolution}",
                           details={'resolution': resolution})
    resolution = int(resolution)

    points = []
    for start, end in zip(sorted_keypoints, sorted_keypoints[1:]):
        for j in range(resolution + 1):
            t = j / resolution
            points.append(PreviewPoint(
                time=start.time + (end.time - start.time) * t,
                position=lerp(start.position, end.position, t),
                target=lerp(start.target, end.target, t),
            ))

    logger.debug(f"Generated {len(points)} preview points from {len(sorted_keypoints)} keypoints")
    return points


__all__ = ['DEFAULT_RESOLUTION', 'preview']

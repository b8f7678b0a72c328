"""
Frame sequencing for camera animations.

Turns a sorted keypoint list into one camera pose per output frame. Each frame
samples a time evenly spaced over [0, duration], finds the bracketing pair of
keypoints with a linear scan and linearly interpolates position and target
within that segment.
"""

import logging
import math
from typing import Any, Iterable, List, Mapping, Sequence, Tuple, Union

from ..errors import InvalidInput
from .animation_state import CameraFrame, Keypoint, UP_VECTOR
from .vector_math import lerp


logger = logging.getLogger(__name__)

DEFAULT_FPS = 30
DEFAULT_FOV = 75.0

KeypointLike = Union[Keypoint, Mapping[str, Any]]


def prepare_keypoints(keypoints: Iterable[KeypointLike]) -> List[Keypoint]:
    """
    Validate and time-sort keypoints.

    The sort is stable, so keypoints sharing a time keep their input order.

    Raises:
        InvalidInput: If fewer than 2 keypoints are supplied or one is malformed
    """
    prepared = []
    for index, keypoint in enumerate(keypoints or []):
        if isinstance(keypoint, Keypoint):
            prepared.append(keypoint)
            continue
        try:
            prepared.append(Keypoint.from_dict(keypoint))
        except (KeyError, TypeError, ValueError, IndexError) as exc:
            raise InvalidInput(
                f"Malformed keypoint at index {index}: {exc!r}",
                details={'index': index},
            ) from exc
    if len(prepared) < 2:
        raise InvalidInput(
            'At least 2 keypoints are required',
            details={'keypoint_count': len(prepared)},
        )
    return sorted(prepared, key=lambda keypoint: keypoint.time)


def validate_duration(duration: float) -> float:
    """Return duration as float, rejecting non-positive values"""
    try:
        value = float(duration)
    except (TypeError, ValueError):
        raise InvalidInput(f"Duration must be numeric, got: {duration!r}")
    if not value > 0 or math.isinf(value):
        raise InvalidInput(f"Duration must be positive, got: {value}", details={'duration': value})
    return value


def calculate_frame_count(duration: float, fps: int) -> int:
    """Number of frames for duration at fps"""
    return math.ceil(duration * fps)


def find_segment(keypoints: Sequence[Keypoint], time: float) -> Tuple[Keypoint, Keypoint]:
    """
    Find the keypoint pair bracketing time.

    Times before the first keypoint use the first segment, times after the
    last keypoint use the last segment.
    """
    for i in range(len(keypoints) - 1):
        if keypoints[i].time <= time <= keypoints[i + 1].time:
            return keypoints[i], keypoints[i + 1]

    if time < keypoints[0].time:
        return keypoints[0], keypoints[1]
    return keypoints[-2], keypoints[-1]


def segment_progress(start: Keypoint, end: Keypoint, time: float) -> float:
    """
    Local interpolation parameter within a segment.

    Not clamped: times outside the segment give values below 0 or above 1,
    so edge segments extrapolate past the first and last keypoints.
    """
    segment_duration = end.time - start.time
    if segment_duration <= 0:
        return 0.0
    return (time - start.time) / segment_duration


def generate_frames(keypoints: Iterable[KeypointLike], duration: float,
                    fps: int = DEFAULT_FPS, fov: float = DEFAULT_FOV) -> List[CameraFrame]:
    """
    Generate per-frame camera states between keypoints.

    Args:
        keypoints: At least 2 keypoints (sorted here if needed)
        duration: Animation length in seconds, must be positive
        fps: Frames per second, at least 1
        fov: Field of view attached to every frame

    Returns:
        ceil(duration * fps) frames; the first at time 0, the last at duration

    Raises:
        InvalidInput: On too few keypoints, non-positive duration or fps, or
            when fewer than 2 frames would be produced
    """
    sorted_keypoints = prepare_keypoints(keypoints)
    duration = validate_duration(duration)

    if isinstance(fps, bool) or int(fps) != fps or fps < 1:
        raise InvalidInput(f"FPS must be a positive integer, got: {fps}", details={'fps': fps})
    fps = int(fps)

    total_frames = calculate_frame_count(duration, fps)
    if total_frames < 2:
        raise InvalidInput(
            'Animation must span at least 2 frames',
            details={'duration': duration, 'fps': fps, 'frame_count': total_frames},
        )

    frames = []
    last_index = total_frames - 1

    for frame_index in range(total_frames):
        time = (frame_index / last_index) * duration

        start, end = find_segment(sorted_keypoints, time)
        t = segment_progress(start, end, time)

        frames.append(CameraFrame(
            frame_index=frame_index,
            time=time,
            position=lerp(start.position, end.position, t),
            target=lerp(start.target, end.target, t),
            fov=float(fov),
            up=list(UP_VECTOR),
        ))

    logger.debug(f"Generated {len(frames)} frames from {len(sorted_keypoints)} keypoints at {fps} fps")
    return frames


__all__ = [
    'DEFAULT_FPS',
    'DEFAULT_FOV',
    'prepare_keypoints',
    'validate_duration',
    'calculate_frame_count',
    'find_segment',
    'segment_progress',
    'generate_frames',
]

"""
Assembly of complete camera animations and their export forms.
"""

import csv
import io
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Union

from ..errors import InvalidInput
from .animation_state import Animation, AnimationSettings, AnimationStyle, CameraFrame
from .easing import apply_easing, resolve_style
from .frame_sequencer import DEFAULT_FOV, DEFAULT_FPS, KeypointLike, generate_frames, prepare_keypoints
from .style_registry import get_interpolation_label


logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('json', 'csv')
CSV_COLUMNS = ['frame_index', 'time', 'px', 'py', 'pz', 'tx', 'ty', 'tz', 'fov', 'smoothness']


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def create_animation(scene_id: str, duration: float, keypoints: Iterable[KeypointLike],
                     style: Union[AnimationStyle, str, None] = AnimationStyle.EDUCATIONAL,
                     fps: int = DEFAULT_FPS, fov: float = DEFAULT_FOV) -> Animation:
    """
    Build an animation from keypoints.

    Keypoints are time-sorted, sampled into frames, and the frames are
    annotated with the style's easing curve. The style's interpolation label
    is recorded as metadata only.

    Raises:
        InvalidInput: On fewer than 2 keypoints or an unusable duration/fps
    """
    resolved_style = resolve_style(style)
    sorted_keypoints = prepare_keypoints(keypoints)

    frames = generate_frames(sorted_keypoints, duration, fps=fps, fov=fov)
    apply_easing(frames, resolved_style)

    animation = Animation(
        id=str(uuid.uuid4()),
        scene_id=scene_id,
        keypoints=sorted_keypoints,
        frames=frames,
        settings=AnimationSettings(
            fps=int(fps),
            interpolation_label=get_interpolation_label(resolved_style),
            smoothing=True,
        ),
        metadata={
            'created_at': _utc_timestamp(),
            'duration': float(duration),
            'style': resolved_style.value,
            'keypoint_count': len(sorted_keypoints),
            'frame_count': len(frames),
        },
    )

    logger.info(f"Created {resolved_style.value} animation {animation.id} with {len(frames)} frames")
    return animation


def frames_to_csv(frames: List[CameraFrame]) -> str:
    """Render frames as CSV text, one row per frame"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    writer.writerow(CSV_COLUMNS)
    for frame in frames:
        writer.writerow([
            frame.frame_index,
            frame.time,
            *frame.position,
            *frame.target,
            frame.fov,
            '' if frame.smoothness is None else frame.smoothness,
        ])
    return buffer.getvalue()


def export_animation(animation: Animation, format: str = 'json', fps: Optional[int] = None) -> Dict[str, Any]:
    """
    Export animation frames for offline rendering.

    When fps differs from the animation's own rate, frames are resampled
    from the animation keypoints at the requested rate.

    Raises:
        InvalidInput: On an unsupported format or unusable fps
    """
    if format not in EXPORT_FORMATS:
        raise InvalidInput(f"Unsupported export format: {format}",
                           details={'format': format, 'supported': list(EXPORT_FORMATS)})

    frames = animation.frames
    export_fps = animation.settings.fps if fps is None else fps

    if export_fps != animation.settings.fps:
        style = animation.metadata.get('style')
        duration = animation.metadata.get('duration', animation.duration)
        fov = frames[0].fov if frames else DEFAULT_FOV
        frames = generate_frames(animation.keypoints, duration, fps=export_fps, fov=fov)
        apply_easing(frames, style)
        logger.debug(f"Resampled animation {animation.id} to {export_fps} fps")

    if format == 'csv':
        exported_frames: Any = frames_to_csv(frames)
    else:
        exported_frames = [frame.to_dict() for frame in frames]

    return {
        'format': format,
        'fps': export_fps,
        'frames': exported_frames,
        'metadata': {
            'exported_at': _utc_timestamp(),
            'animation_id': animation.id,
            'frame_count': len(frames),
        },
    }


__all__ = ['EXPORT_FORMATS', 'create_animation', 'frames_to_csv', 'export_animation']

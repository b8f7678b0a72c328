"""Camera animation engine: keypoints in, per-frame camera states out."""

from .errors import AnimationError, InvalidInput
from .cinematic import (
    Animation,
    CameraFrame,
    Keypoint,
    PreviewPoint,
    SceneBounds,
    SceneObject,
    auto_keyframes,
    calculate_scene_bounds,
    create_animation,
    generate_frames,
    generate_preset_keypoints,
    lerp,
    preview,
)

__version__ = '0.1.0'

__all__ = [
    'AnimationError',
    'InvalidInput',
    'Animation',
    'CameraFrame',
    'Keypoint',
    'PreviewPoint',
    'SceneBounds',
    'SceneObject',
    'auto_keyframes',
    'calculate_scene_bounds',
    'create_animation',
    'generate_frames',
    'generate_preset_keypoints',
    'lerp',
    'preview',
]

"""
Cinematic module for camera keyframing and frame sequencing.

This module provides the engine components:
- Animation state data structures and enums
- Vector interpolation and bounds arithmetic
- Easing functions per animation style
- Style and preset registry
- Scene bounds calculation
- Frame sequencing and animation assembly
- Automatic and preset keypoint generation
- Path preview interpolation
"""

# Core data structures
from .animation_state import (
    Animation,
    AnimationSettings,
    AnimationStyle,
    CameraFrame,
    Keypoint,
    PresetName,
    PreviewPoint,
    SceneBounds,
    SceneObject,
)

# Vector utilities
from .vector_math import lerp, expand_bounds

# Easing functions
from .easing import EasingFunctions, apply_easing, get_easing_function, get_easing_function_by_name, resolve_style

# Style management
from .style_registry import ANIMATION_STYLES, PRESET_CATALOG, get_interpolation_label, list_all_presets, list_all_styles

# Scene bounds
from .bounds_calculator import BoundsCalculator, calculate_scene_bounds

# Frame sequencing
from .frame_sequencer import generate_frames, prepare_keypoints
from .animation_builder import create_animation, export_animation

# Keypoint derivation
from .auto_keyframes import auto_keyframes
from .keyframe_generators import PresetGeneratorFactory, generate_preset_keypoints
from .preview import preview

__all__ = [
    # Data structures
    'Animation',
    'AnimationSettings',
    'AnimationStyle',
    'CameraFrame',
    'Keypoint',
    'PresetName',
    'PreviewPoint',
    'SceneBounds',
    'SceneObject',

    # Vector utilities
    'lerp',
    'expand_bounds',

    # Easing functions
    'EasingFunctions',
    'apply_easing',
    'get_easing_function',
    'get_easing_function_by_name',
    'resolve_style',

    # Style management
    'ANIMATION_STYLES',
    'PRESET_CATALOG',
    'get_interpolation_label',
    'list_all_presets',
    'list_all_styles',

    # Scene bounds
    'BoundsCalculator',
    'calculate_scene_bounds',

    # Frame sequencing
    'generate_frames',
    'prepare_keypoints',
    'create_animation',
    'export_animation',

    # Keypoint derivation
    'auto_keyframes',
    'PresetGeneratorFactory',
    'generate_preset_keypoints',
    'preview',
]

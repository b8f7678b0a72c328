"""
Preset generators package for scene-derived camera keypoints.

This package contains one generator per named preset:
- BasePresetGenerator: Abstract base class with common functionality
- OrbitPresetGenerator: Full circle around the scene center
- FlyThroughPresetGenerator: Diagonal pass through the scene
- ZoomInPresetGenerator: Wide-to-close view of the main object
- PanoramicPresetGenerator: Left-to-right sweep
- FocusSequencePresetGenerator: One stop per high-importance object

Usage:
    from camera_animation.cinematic.keyframe_generators import PresetGeneratorFactory

    factory = PresetGeneratorFactory()
    keypoints = factory.generate_keypoints('orbit', objects, duration=30)
"""

from .base_generator import BasePresetGenerator, PresetGeneratorFactory, generate_preset_keypoints

__all__ = [
    'BasePresetGenerator',
    'PresetGeneratorFactory',
    'generate_preset_keypoints',
]

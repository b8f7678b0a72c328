"""
Style and preset registry for camera animations.

This module holds the data-driven configuration for animation styles
(descriptive interpolation labels) and the preset catalog shown to callers.
Interpolation labels are metadata only; positions are always interpolated
linearly between keypoints.
"""

from typing import Dict, List

from .animation_state import AnimationStyle, PresetName


ANIMATION_STYLES = {
    AnimationStyle.SMOOTH: {
        "description": "Gentle acceleration and deceleration",
        "interpolation": "cubic",
    },
    AnimationStyle.CINEMATIC: {
        "description": "Film-like pacing with soft starts and stops",
        "interpolation": "bezier",
    },
    AnimationStyle.EDUCATIONAL: {
        "description": "Constant pacing for clear explanations",
        "interpolation": "linear",
    },
    AnimationStyle.DRAMATIC: {
        "description": "Pronounced ease in and out",
        "interpolation": "ease-in-out",
    },
}

PRESET_CATALOG = {
    PresetName.ORBIT: {
        "name": "Orbital View",
        "description": "Smooth orbital camera movement around the main object",
        "style": AnimationStyle.CINEMATIC,
        "default_duration": 30,
    },
    PresetName.FLY_THROUGH: {
        "name": "Fly Through",
        "description": "Camera flies through the scene showing different perspectives",
        "style": AnimationStyle.DRAMATIC,
        "default_duration": 45,
    },
    PresetName.ZOOM_IN: {
        "name": "Zoom In",
        "description": "Gradual zoom into important details",
        "style": AnimationStyle.EDUCATIONAL,
        "default_duration": 20,
    },
    PresetName.PANORAMIC: {
        "name": "Panoramic Sweep",
        "description": "Wide panoramic view of the entire scene",
        "style": AnimationStyle.SMOOTH,
        "default_duration": 35,
    },
    PresetName.FOCUS_SEQUENCE: {
        "name": "Focus Sequence",
        "description": "Sequential focus on different objects in the scene",
        "style": AnimationStyle.EDUCATIONAL,
        "default_duration": 60,
    },
}


def get_interpolation_label(style: AnimationStyle) -> str:
    """Get the descriptive interpolation label for a style"""
    return ANIMATION_STYLES.get(style, ANIMATION_STYLES[AnimationStyle.EDUCATIONAL])["interpolation"]


def list_all_styles() -> List[str]:
    """Get list of all style labels"""
    return [style.value for style in ANIMATION_STYLES]


def get_preset_info(preset: PresetName) -> Dict:
    """Get catalog entry for a preset in wire form"""
    entry = PRESET_CATALOG[preset]
    return {
        "id": preset.value,
        "name": entry["name"],
        "description": entry["description"],
        "style": entry["style"].value,
        "default_duration": entry["default_duration"],
    }


def list_all_presets() -> List[Dict]:
    """Get catalog entries for every preset"""
    return [get_preset_info(preset) for preset in PRESET_CATALOG]


__all__ = [
    'ANIMATION_STYLES',
    'PRESET_CATALOG',
    'get_interpolation_label',
    'list_all_styles',
    'get_preset_info',
    'list_all_presets',
]

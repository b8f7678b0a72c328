"""
Easing functions for camera animation pacing.

This module maps each animation style to a scalar easing curve. Each function
takes a progress value t (0.0 to 1.0) and returns an eased value. The easing
pass annotates frames with a smoothness value and leaves their poses untouched.
"""

import logging
from typing import Callable, Dict, List, Union

from .animation_state import AnimationStyle, CameraFrame


logger = logging.getLogger(__name__)

EasingFunction = Callable[[float], float]


class EasingFunctions:
    """Collection of easing functions for animation styles"""

    @staticmethod
    def linear(t: float) -> float:
        """Linear - no easing"""
        return t

    @staticmethod
    def smoothstep(t: float) -> float:
        """Smoothstep - zero first derivative at both ends"""
        return t * t * (3 - 2 * t)

    @staticmethod
    def smootherstep(t: float) -> float:
        """Smootherstep - zero first and second derivative at both ends"""
        return t * t * t * (t * (6 * t - 15) + 10)

    @staticmethod
    def ease_in_out(t: float) -> float:
        """Quadratic ease in/out - slow start and end, fast middle"""
        if t < 0.5:
            return 2 * t * t
        return -1 + (4 - 2 * t) * t


# Function lookup map, resolved once per animation
EASING_FUNCTION_MAP: Dict[AnimationStyle, EasingFunction] = {
    AnimationStyle.SMOOTH: EasingFunctions.smoothstep,
    AnimationStyle.CINEMATIC: EasingFunctions.smootherstep,
    AnimationStyle.EDUCATIONAL: EasingFunctions.linear,
    AnimationStyle.DRAMATIC: EasingFunctions.ease_in_out,
}


def resolve_style(style: Union[AnimationStyle, str, None]) -> AnimationStyle:
    """Resolve a style label, falling back to educational for unknown names"""
    if isinstance(style, AnimationStyle):
        return style
    try:
        return AnimationStyle(style)
    except ValueError:
        logger.warning(f"Unknown animation style: {style}, using educational")
        return AnimationStyle.EDUCATIONAL


def get_easing_function(style: AnimationStyle) -> EasingFunction:
    """Get the easing function for a given style"""
    return EASING_FUNCTION_MAP.get(style, EasingFunctions.linear)


def get_easing_function_by_name(style_name: str) -> EasingFunction:
    """Get easing function by style label"""
    return get_easing_function(resolve_style(style_name))


def apply_easing(frames: List[CameraFrame], style: Union[AnimationStyle, str, None]) -> List[CameraFrame]:
    """
    Annotate frames with eased progress in place.

    Progress is the frame index over the last index. The first and last frames
    are left unannotated; position, target, time and frame index are never touched.

    Args:
        frames: Frames produced by the frame sequencer
        style: Animation style or style label

    Returns:
        The same frame list
    """
    easing_func = get_easing_function(resolve_style(style))
    last_index = len(frames) - 1

    for index, frame in enumerate(frames):
        if index == 0 or index == last_index:
            continue
        frame.smoothness = easing_func(index / last_index)

    return frames


__all__ = [
    'EasingFunctions',
    'EASING_FUNCTION_MAP',
    'resolve_style',
    'get_easing_function',
    'get_easing_function_by_name',
    'apply_easing',
]

"""
Base preset generator for scene-derived camera keypoints.

This module provides the abstract base class and factory for all preset
generators. Each preset inherits from BasePresetGenerator and implements
generate_keypoints; presets are deterministic and take only scene objects
and a duration.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Union

from ..animation_state import Keypoint, PresetName, SceneBounds, SceneObject
from ..bounds_calculator import SceneObjectLike, calculate_scene_bounds, coerce_scene_objects
from ..frame_sequencer import validate_duration


logger = logging.getLogger(__name__)


class BasePresetGenerator(ABC):
    """Abstract base class for all preset generators"""

    preset: PresetName

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def generate_keypoints(self, objects: List[SceneObject], duration: float) -> List[Keypoint]:
        """
        Generate keypoints for this preset.

        Args:
            objects: Validated scene objects (may be empty)
            duration: Positive duration in seconds

        Returns:
            List of keypoints ordered by time
        """

    def calculate_bounds(self, objects: List[SceneObject]) -> SceneBounds:
        return calculate_scene_bounds(objects)

    def validate_params(self, objects: Optional[Iterable[SceneObjectLike]], duration: float):
        """Normalize scene objects and reject non-positive durations"""
        return coerce_scene_objects(objects), validate_duration(duration)


class PresetGeneratorFactory:
    """Factory for resolving preset names to generators"""

    def __init__(self):
        self._generators: Dict[PresetName, BasePresetGenerator] = {}
        self._initialize_generators()

    def _initialize_generators(self):
        """Initialize all available generators"""
        # Import generators here to avoid circular imports
        from .orbit_shot import OrbitPresetGenerator
        from .fly_through import FlyThroughPresetGenerator
        from .zoom_in import ZoomInPresetGenerator
        from .panoramic import PanoramicPresetGenerator
        from .focus_sequence import FocusSequencePresetGenerator

        orbit = OrbitPresetGenerator()
        self._generators = {
            PresetName.ORBIT: orbit,
            PresetName.FLY_THROUGH: FlyThroughPresetGenerator(),
            PresetName.ZOOM_IN: ZoomInPresetGenerator(),
            PresetName.PANORAMIC: PanoramicPresetGenerator(),
            PresetName.FOCUS_SEQUENCE: FocusSequencePresetGenerator(orbit),
        }

        logger.debug(f"Preset generator factory initialized with {len(self._generators)} generators")

    def resolve_preset(self, preset: Union[PresetName, str, None]) -> PresetName:
        """Resolve a preset name, falling back to orbit for unknown names"""
        if isinstance(preset, PresetName):
            return preset
        try:
            return PresetName(preset)
        except ValueError:
            logger.warning(f"Unknown preset: {preset}, using orbit")
            return PresetName.ORBIT

    def get_generator(self, preset: Union[PresetName, str, None]) -> BasePresetGenerator:
        return self._generators[self.resolve_preset(preset)]

    def generate_keypoints(self, preset: Union[PresetName, str, None],
                           objects: Optional[Iterable[SceneObjectLike]],
                           duration: float) -> List[Keypoint]:
        """
        Generate keypoints using the appropriate preset generator.

        Raises:
            InvalidInput: If duration is not positive
        """
        generator = self.get_generator(preset)
        scene_objects, duration = generator.validate_params(objects, duration)

        keypoints = generator.generate_keypoints(scene_objects, duration)

        logger.debug(f"Generated {len(keypoints)} keypoints for preset {generator.preset.value}")
        return keypoints

    def list_supported_presets(self) -> List[str]:
        """Get list of supported preset names"""
        return [preset.value for preset in self._generators]

    def is_preset_supported(self, preset: str) -> bool:
        """Check if preset name is known"""
        return preset in self.list_supported_presets()


def generate_preset_keypoints(preset: Union[PresetName, str, None],
                              objects: Optional[Iterable[SceneObjectLike]],
                              duration: float) -> List[Keypoint]:
    """Module-level convenience wrapper around PresetGeneratorFactory"""
    return PresetGeneratorFactory().generate_keypoints(preset, objects, duration)


__all__ = [
    'BasePresetGenerator',
    'PresetGeneratorFactory',
    'generate_preset_keypoints',
]

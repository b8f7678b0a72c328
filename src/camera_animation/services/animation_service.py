"""Service layer for camera animation operations."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..cinematic import (
    Animation,
    PresetGeneratorFactory,
    auto_keyframes,
    create_animation,
    export_animation,
    list_all_presets,
    preview,
)
from ..config import AnimationConfig
from ..errors import InvalidInput
from ..logging import module_logger


logger = module_logger(service='camera-animation', component='service')


class AnimationService:
    """
    Wrap engine operations as response dictionaries.

    Engine failures surface as ``InvalidInput``; the transport layer renders
    them as structured error payloads.
    """

    def __init__(self, config: Optional[AnimationConfig] = None) -> None:
        self._config = config or AnimationConfig()
        self._presets = PresetGeneratorFactory()

    @property
    def config(self) -> AnimationConfig:
        return self._config

    @staticmethod
    def _timestamp() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _scene_objects(payload: Dict[str, Any]):
        scene_data = payload.get('scene_data') or {}
        return scene_data.get('objects')

    # ------------------------------------------------------------------
    # Animation operations
    def create_animation(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        started = time.perf_counter()
        animation = create_animation(
            scene_id=payload.get('scene_id', ''),
            duration=payload.get('duration'),
            keypoints=payload.get('key_points') or [],
            style=payload.get('style') or self._config.default_style,
            fps=payload.get('fps') or self._config.default_fps,
            fov=self._config.default_fov,
        )

        logger.debug(f"create_animation took {(time.perf_counter() - started) * 1000:.1f}ms")
        return {
            'success': True,
            'animation': animation.to_dict(),
            'metadata': dict(animation.metadata),
        }

    def auto_keyframes(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        duration = payload.get('duration') or self._config.default_auto_duration
        keyframes = auto_keyframes(
            self._scene_objects(payload),
            duration,
            focus_points=payload.get('focus_points') or [],
            max_focus_objects=self._config.max_focus_objects,
        )

        return {
            'success': True,
            'keyframes': [keyframe.to_dict() for keyframe in keyframes],
            'metadata': {
                'generated_at': self._timestamp(),
                'duration': duration,
                'keyframe_count': len(keyframes),
            },
        }

    def preview(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        keypoints = payload.get('key_points') or []
        resolution = payload.get('resolution') or self._config.default_preview_resolution
        points = preview(keypoints, resolution)

        return {
            'success': True,
            'preview_points': [point.to_dict() for point in points],
            'metadata': {
                'original_keypoints': len(keypoints),
                'interpolated_points': len(points),
                'resolution': resolution,
            },
        }

    # ------------------------------------------------------------------
    # Presets
    def list_presets(self) -> Dict[str, Any]:
        return {'success': True, 'presets': list_all_presets()}

    def preset(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        preset = self._presets.resolve_preset(payload.get('preset'))
        duration = payload.get('duration') or self._config.default_preset_duration
        keyframes = self._presets.generate_keypoints(preset, self._scene_objects(payload), duration)

        return {
            'success': True,
            'preset': preset.value,
            'keyframes': [keyframe.to_dict() for keyframe in keyframes],
            'metadata': {
                'generated_at': self._timestamp(),
                'duration': duration,
                'keyframe_count': len(keyframes),
            },
        }

    # ------------------------------------------------------------------
    # Export
    def export_animation(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            animation = Animation.from_dict(payload.get('animation') or {})
        except (KeyError, TypeError, ValueError, IndexError) as exc:
            raise InvalidInput(f"Malformed animation: {exc!r}", details={'parameter': 'animation'}) from exc

        export_data = export_animation(animation, payload.get('format') or 'json', payload.get('fps'))
        return {'success': True, 'export_data': export_data}


__all__ = ['AnimationService']

"""Request schema definitions for camera animation endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, conlist


Vector3 = conlist(float, min_length=3, max_length=3)
StyleLabel = Literal['smooth', 'cinematic', 'educational', 'dramatic']


class AnimationModel(BaseModel):
    """Base model accepting camelCase wire names and extra keys."""

    model_config = ConfigDict(extra='allow', populate_by_name=True)


class KeypointPayload(AnimationModel):
    time: float = Field(ge=0)
    position: Vector3
    target: Vector3
    description: Optional[str] = None


class SceneObjectPayload(AnimationModel):
    name: str = ''
    position: Optional[Vector3] = None
    scale: Vector3 = Field(default_factory=lambda: [1.0, 1.0, 1.0])
    importance: Optional[str] = None


class SceneDataPayload(AnimationModel):
    objects: List[SceneObjectPayload] = Field(default_factory=list)


class CreateAnimationPayload(AnimationModel):
    scene_id: str = Field(alias='sceneId')
    duration: float = Field(gt=0)
    style: StyleLabel = 'educational'
    key_points: List[KeypointPayload] = Field(alias='keyPoints', min_length=2)
    fps: Optional[int] = Field(default=None, ge=1, le=120)


class AutoKeyframesPayload(AnimationModel):
    scene_data: SceneDataPayload = Field(alias='sceneData')
    duration: Optional[float] = Field(default=None, gt=0)
    focus_points: List[str] = Field(default_factory=list, alias='focusPoints')


class PreviewPayload(AnimationModel):
    key_points: List[KeypointPayload] = Field(alias='keyPoints', min_length=2)
    resolution: Optional[int] = Field(default=None, ge=1)


class PresetPayload(AnimationModel):
    preset: str
    scene_data: SceneDataPayload = Field(default_factory=SceneDataPayload, alias='sceneData')
    duration: Optional[float] = Field(default=None, gt=0)


class ExportPayload(AnimationModel):
    animation: Dict[str, Any]
    format: Literal['json', 'csv'] = 'json'
    fps: Optional[int] = Field(default=None, ge=1, le=120)


MODEL_MAP = {
    'create_animation': CreateAnimationPayload,
    'auto_keyframes': AutoKeyframesPayload,
    'preview': PreviewPayload,
    'preset': PresetPayload,
    'export_animation': ExportPayload,
}


def validate_payload(model_cls, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Validate payload with provided model and return snake_case fields."""
    try:
        return model_cls.model_validate(data or {}).model_dump()
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc


__all__ = [
    'MODEL_MAP',
    'KeypointPayload',
    'SceneObjectPayload',
    'SceneDataPayload',
    'CreateAnimationPayload',
    'AutoKeyframesPayload',
    'PreviewPayload',
    'PresetPayload',
    'ExportPayload',
    'validate_payload',
]

"""
Animation state data structures for camera keyframing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

Vec3 = List[float]

DEFAULT_SCALE = (1.0, 1.0, 1.0)
UP_VECTOR = (0.0, 1.0, 0.0)


class AnimationStyle(Enum):
    """Named pacing styles for generated animations"""
    SMOOTH = "smooth"
    CINEMATIC = "cinematic"
    EDUCATIONAL = "educational"
    DRAMATIC = "dramatic"


class PresetName(Enum):
    """Scene-derived keyframe presets"""
    ORBIT = "orbit"
    FLY_THROUGH = "fly-through"
    ZOOM_IN = "zoom-in"
    PANORAMIC = "panoramic"
    FOCUS_SEQUENCE = "focus-sequence"


def as_vec3(value: Sequence[float]) -> Vec3:
    """Copy a 3-component sequence into a float list."""
    return [float(value[0]), float(value[1]), float(value[2])]


@dataclass(frozen=True)
class Keypoint:
    """Desired camera pose at a point in time"""
    time: float
    position: Vec3
    target: Vec3
    description: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'time', float(self.time))
        object.__setattr__(self, 'position', as_vec3(self.position))
        object.__setattr__(self, 'target', as_vec3(self.target))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Keypoint':
        return cls(
            time=data['time'],
            position=data['position'],
            target=data['target'],
            description=data.get('description'),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            'time': self.time,
            'position': list(self.position),
            'target': list(self.target),
        }
        if self.description is not None:
            payload['description'] = self.description
        return payload


@dataclass(frozen=True)
class SceneObject:
    """Positioned scene geometry consumed by bounds and keyframe derivation"""
    name: str = ""
    position: Optional[Vec3] = None
    scale: Vec3 = field(default_factory=lambda: list(DEFAULT_SCALE))
    importance: Optional[str] = None

    def __post_init__(self):
        if self.position is not None:
            object.__setattr__(self, 'position', as_vec3(self.position))
        object.__setattr__(self, 'scale', as_vec3(self.scale if self.scale is not None else DEFAULT_SCALE))

    @property
    def max_scale(self) -> float:
        return max(self.scale)

    @property
    def is_high_importance(self) -> bool:
        return self.importance == 'high'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SceneObject':
        return cls(
            name=data.get('name') or "",
            position=data.get('position'),
            scale=data.get('scale') or list(DEFAULT_SCALE),
            importance=data.get('importance'),
        )


@dataclass(frozen=True)
class SceneBounds:
    """Axis-aligned box enclosing scene geometry"""
    min: Vec3
    max: Vec3

    def __post_init__(self):
        object.__setattr__(self, 'min', as_vec3(self.min))
        object.__setattr__(self, 'max', as_vec3(self.max))

    @property
    def center(self) -> Vec3:
        return [(self.min[i] + self.max[i]) / 2 for i in range(3)]

    @property
    def size(self) -> Vec3:
        return [self.max[i] - self.min[i] for i in range(3)]

    @property
    def diameter(self) -> float:
        """Largest axis extent, used for camera framing distances"""
        return max(self.size)

    def contains(self, point: Sequence[float]) -> bool:
        return all(self.min[i] <= point[i] <= self.max[i] for i in range(3))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'min': list(self.min),
            'max': list(self.max),
            'center': self.center,
            'size': self.size,
        }


@dataclass
class CameraFrame:
    """One sampled camera pose"""
    frame_index: int
    time: float
    position: Vec3
    target: Vec3
    fov: float
    up: Vec3 = field(default_factory=lambda: list(UP_VECTOR))
    smoothness: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CameraFrame':
        return cls(
            frame_index=int(data['frame_index']),
            time=float(data['time']),
            position=as_vec3(data['position']),
            target=as_vec3(data['target']),
            fov=float(data['fov']),
            up=as_vec3(data.get('up') or UP_VECTOR),
            smoothness=data.get('smoothness'),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            'frame_index': self.frame_index,
            'time': self.time,
            'position': list(self.position),
            'target': list(self.target),
            'fov': self.fov,
            'up': list(self.up),
        }
        if self.smoothness is not None:
            payload['smoothness'] = self.smoothness
        return payload


@dataclass(frozen=True)
class PreviewPoint:
    """Lightweight interpolated pose for path previews"""
    time: float
    position: Vec3
    target: Vec3

    def to_dict(self) -> Dict[str, Any]:
        return {
            'time': self.time,
            'position': list(self.position),
            'target': list(self.target),
        }


@dataclass
class AnimationSettings:
    fps: int
    interpolation_label: str
    smoothing: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'fps': self.fps,
            'interpolation_label': self.interpolation_label,
            'smoothing': self.smoothing,
        }


@dataclass
class Animation:
    """Keypoints plus their sampled frames, owned by the caller"""
    id: str
    scene_id: str
    keypoints: List[Keypoint]
    frames: List[CameraFrame]
    settings: AnimationSettings
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def duration(self) -> float:
        return self.frames[-1].time if self.frames else 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Animation':
        settings = data.get('settings') or {}
        return cls(
            id=str(data['id']),
            scene_id=str(data.get('scene_id', '')),
            keypoints=[Keypoint.from_dict(item) for item in data.get('keypoints', [])],
            frames=[CameraFrame.from_dict(item) for item in data.get('frames', [])],
            settings=AnimationSettings(
                fps=int(settings.get('fps', 30)),
                interpolation_label=settings.get('interpolation_label', 'linear'),
                smoothing=bool(settings.get('smoothing', True)),
            ),
            metadata=dict(data.get('metadata') or {}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'scene_id': self.scene_id,
            'metadata': dict(self.metadata),
            'keypoints': [keypoint.to_dict() for keypoint in self.keypoints],
            'frames': [frame.to_dict() for frame in self.frames],
            'settings': self.settings.to_dict(),
        }

"""Service layer for camera animation operations."""

from .animation_service import AnimationService

__all__ = ['AnimationService']

"""Payload validation and controller for camera animation routes."""

from .controller import AnimationController
from .schemas import MODEL_MAP, validate_payload

__all__ = ['AnimationController', 'MODEL_MAP', 'validate_payload']

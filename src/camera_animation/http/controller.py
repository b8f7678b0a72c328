"""Controller functions for camera animation routes."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from ..errors import AnimationError, error_response
from ..logging import module_logger
from ..services.animation_service import AnimationService
from ..transport import HTTP_OPERATIONS, normalize_transport_response
from .schemas import (
    AutoKeyframesPayload,
    CreateAnimationPayload,
    ExportPayload,
    PresetPayload,
    PreviewPayload,
    validate_payload,
)


logger = module_logger(service='camera-animation', component='controller')


class AnimationController:
    """Coordinate payload validation and service execution."""

    def __init__(self, service: Optional[AnimationService] = None) -> None:
        self._service = service or AnimationService()

    # ------------------------------------------------------------------
    # Animation endpoints
    def create_animation(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        def run() -> Dict[str, Any]:
            data = validate_payload(CreateAnimationPayload, payload)
            self._check_duration_range(data['duration'])
            return self._service.create_animation(data)
        return self._safe_call('create_animation', run, default_error_code='CREATE_ANIMATION_FAILED')

    def auto_keyframes(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._safe_call(
            'auto_keyframes',
            lambda: self._service.auto_keyframes(validate_payload(AutoKeyframesPayload, payload)),
            default_error_code='AUTO_KEYFRAMES_FAILED',
        )

    def preview(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._safe_call(
            'preview',
            lambda: self._service.preview(validate_payload(PreviewPayload, payload)),
            default_error_code='PREVIEW_FAILED',
        )

    def list_presets(self, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._safe_call('list_presets', self._service.list_presets, default_error_code='LIST_PRESETS_FAILED')

    def preset(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._safe_call(
            'preset',
            lambda: self._service.preset(validate_payload(PresetPayload, payload)),
            default_error_code='PRESET_FAILED',
        )

    def export_animation(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._safe_call(
            'export_animation',
            lambda: self._service.export_animation(validate_payload(ExportPayload, payload)),
            default_error_code='EXPORT_FAILED',
        )

    # ------------------------------------------------------------------
    def dispatch(self, route: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Route a transport request to its controller method."""
        contract = HTTP_OPERATIONS.get(route.strip('/'))
        if contract is None:
            return error_response('UNKNOWN_ROUTE', f"No operation registered for route: {route}",
                                  details={'route': route})
        handler = getattr(self, contract.operation)
        return handler(payload or {})

    def _check_duration_range(self, duration: float) -> None:
        config = self._service.config
        if not config.min_duration <= duration <= config.max_duration:
            raise ValueError(
                f"duration must be between {config.min_duration} and {config.max_duration}, got: {duration}"
            )

    def _safe_call(self, operation: str, func: Callable[[], Dict[str, Any]], *, default_error_code: str) -> Dict[str, Any]:
        try:
            response = func()
        except AnimationError as exc:
            logger.info(f"engine_rejected operation={operation} code={exc.code} error={exc.message}")
            response = exc
        except ValueError as exc:
            logger.warning(f"validation_failed operation={operation} error={exc}")
            response = {'success': False, 'error': str(exc), 'error_code': 'VALIDATION_ERROR'}
        except Exception as exc:  # pragma: no cover - unexpected service failure
            logger.exception(f"controller_error operation={operation} error={exc}")
            response = {'success': False, 'error': str(exc), 'error_code': default_error_code}
        return normalize_transport_response(operation, response, default_error_code=default_error_code)


__all__ = ['AnimationController']

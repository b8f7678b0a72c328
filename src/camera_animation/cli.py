"""
Command-line entry point for the camera animation engine.

Every command routes through the same controller used by transport
integrations and prints the structured response as JSON.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import click
from rich.console import Console

from .cinematic import list_all_styles
from .config import AnimationConfig
from .http import AnimationController
from .logging import setup_logging
from .services import AnimationService
from .transport import CLI_OPERATIONS


def _load_json(path: Optional[str]) -> Any:
    if not path:
        return None
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def _scene_data(path: Optional[str]) -> Dict[str, Any]:
    scene = _load_json(path) or {}
    # Accept either {"objects": [...]} or a bare object list
    if isinstance(scene, list):
        return {'objects': scene}
    return scene


def _keypoints(path: str) -> Any:
    data = _load_json(path)
    if isinstance(data, dict):
        return data.get('keyPoints') or data.get('key_points') or data.get('keypoints') or []
    return data


def _run(ctx: click.Context, command: str, payload: Optional[Dict[str, Any]] = None) -> None:
    controller: AnimationController = ctx.obj['controller']
    contract = CLI_OPERATIONS[command]
    response = controller.dispatch(contract.http_route, payload)
    Console().print_json(data=response)
    if not response.get('success'):
        ctx.exit(1)


@click.group()
@click.option('--config', 'config_file', type=click.Path(dir_okay=False), default=None,
              help='JSON config file (defaults to $CAMERA_ANIMATION_CONFIG).')
@click.option('--log-level', default=None, help='DEBUG, INFO, WARNING or ERROR (default $ANIMATION_LOG_LEVEL or WARNING).')
@click.pass_context
def main(ctx: click.Context, config_file: Optional[str], log_level: Optional[str]) -> None:
    """Generate camera keypoints, frames and previews from scene data."""
    setup_logging('camera-animation', level=log_level, default_level='WARNING')
    service = AnimationService(AnimationConfig(config_file))
    ctx.ensure_object(dict)
    ctx.obj['controller'] = AnimationController(service)


@main.command('presets')
@click.pass_context
def presets_command(ctx: click.Context) -> None:
    """List the preset catalog."""
    _run(ctx, 'presets')


@main.command('preset')
@click.argument('name')
@click.option('--scene', type=click.Path(exists=True, dir_okay=False), default=None,
              help='Scene JSON with an "objects" list.')
@click.option('--duration', type=float, default=None, help='Duration in seconds.')
@click.pass_context
def preset_command(ctx: click.Context, name: str, scene: Optional[str], duration: Optional[float]) -> None:
    """Generate keypoints for a named preset."""
    _run(ctx, 'preset', {'preset': name, 'sceneData': _scene_data(scene), 'duration': duration})


@main.command('auto-keyframes')
@click.option('--scene', type=click.Path(exists=True, dir_okay=False), required=True,
              help='Scene JSON with an "objects" list.')
@click.option('--duration', type=float, default=None, help='Duration in seconds.')
@click.option('--focus', 'focus_points', multiple=True, help='Object name to focus on (repeatable).')
@click.pass_context
def auto_keyframes_command(ctx: click.Context, scene: str, duration: Optional[float], focus_points) -> None:
    """Derive opening, focus and closing keypoints from a scene."""
    _run(ctx, 'auto-keyframes', {
        'sceneData': _scene_data(scene),
        'duration': duration,
        'focusPoints': list(focus_points),
    })


@main.command('animate')
@click.option('--keypoints', 'keypoints_file', type=click.Path(exists=True, dir_okay=False), required=True,
              help='JSON keypoint list (or object with "keyPoints").')
@click.option('--duration', type=float, required=True, help='Duration in seconds.')
@click.option('--style', default='educational', show_default=True,
              type=click.Choice(list_all_styles()))
@click.option('--fps', type=int, default=None, help='Frames per second.')
@click.option('--scene-id', default='cli', show_default=True)
@click.pass_context
def animate_command(ctx: click.Context, keypoints_file: str, duration: float, style: str,
                    fps: Optional[int], scene_id: str) -> None:
    """Sample keypoints into per-frame camera states."""
    _run(ctx, 'animate', {
        'sceneId': scene_id,
        'duration': duration,
        'style': style,
        'keyPoints': _keypoints(keypoints_file),
        'fps': fps,
    })


@main.command('preview')
@click.option('--keypoints', 'keypoints_file', type=click.Path(exists=True, dir_okay=False), required=True,
              help='JSON keypoint list (or object with "keyPoints").')
@click.option('--resolution', type=int, default=None, help='Points per segment.')
@click.pass_context
def preview_command(ctx: click.Context, keypoints_file: str, resolution: Optional[int]) -> None:
    """Densify keypoints into preview points."""
    _run(ctx, 'preview', {'keyPoints': _keypoints(keypoints_file), 'resolution': resolution})


@main.command('export')
@click.option('--animation', 'animation_file', type=click.Path(exists=True, dir_okay=False), required=True,
              help='Animation JSON as produced by "animate".')
@click.option('--format', 'export_format', type=click.Choice(['json', 'csv']), default='json', show_default=True)
@click.option('--fps', type=int, default=None, help='Resample to this frame rate.')
@click.pass_context
def export_command(ctx: click.Context, animation_file: str, export_format: str, fps: Optional[int]) -> None:
    """Export animation frames for offline rendering."""
    animation = _load_json(animation_file) or {}
    # Accept the full "animate" response as well as a bare animation
    if 'animation' in animation:
        animation = animation['animation']
    _run(ctx, 'export', {'animation': animation, 'format': export_format, 'fps': fps})


if __name__ == '__main__':  # pragma: no cover
    main()

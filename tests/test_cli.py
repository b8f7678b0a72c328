import json

import pytest
from click.testing import CliRunner

from camera_animation import cli
from camera_animation.config import AnimationConfig


KEYPOINTS = [
    {'time': 0, 'position': [0, 0, 0], 'target': [0, 0, 0]},
    {'time': 2, 'position': [4, 0, 0], 'target': [0, 0, 0]},
]


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
    monkeypatch.setattr(cli, 'setup_logging', lambda *args, **kwargs: None)
    for key in AnimationConfig.DEFAULTS:
        monkeypatch.delenv(f"CAMERA_ANIMATION_{key.upper()}", raising=False)
    monkeypatch.delenv('CAMERA_ANIMATION_CONFIG', raising=False)


@pytest.fixture
def runner():
    return CliRunner()


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


def test_presets_command(runner):
    result = runner.invoke(cli.main, ['presets'])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert len(data['presets']) == 5


def test_preset_command_with_scene_list(runner, tmp_path):
    scene = _write(tmp_path, 'scene.json', [{'name': 'a', 'position': [0, 0, 0]}])

    result = runner.invoke(cli.main, ['preset', 'panoramic', '--scene', scene, '--duration', '10'])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data['preset'] == 'panoramic'
    assert [kf['time'] for kf in data['keyframes']] == [0, 5, 10]


def test_auto_keyframes_command_with_focus(runner, tmp_path):
    scene = _write(tmp_path, 'scene.json', {'objects': [
        {'name': 'a', 'position': [0, 0, 0]},
        {'name': 'b', 'position': [6, 0, 0]},
    ]})

    result = runner.invoke(cli.main, ['auto-keyframes', '--scene', scene, '--duration', '30', '--focus', 'b'])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data['keyframes'][1]['description'] == 'Focus on b'


def test_animate_then_export(runner, tmp_path):
    keypoints = _write(tmp_path, 'keypoints.json', {'keyPoints': KEYPOINTS})

    animated = runner.invoke(cli.main, ['animate', '--keypoints', keypoints, '--duration', '2', '--fps', '5',
                                        '--style', 'smooth'])
    assert animated.exit_code == 0
    animation_file = tmp_path / 'animation.json'
    animation_file.write_text(animated.stdout, encoding='utf-8')

    exported = runner.invoke(cli.main, ['export', '--animation', str(animation_file), '--format', 'csv'])

    assert exported.exit_code == 0
    data = json.loads(exported.stdout)
    assert data['export_data']['fps'] == 5
    assert data['export_data']['frames'].count('\n') == 11


def test_preview_command(runner, tmp_path):
    keypoints = _write(tmp_path, 'keypoints.json', KEYPOINTS)

    result = runner.invoke(cli.main, ['preview', '--keypoints', keypoints, '--resolution', '2'])

    assert result.exit_code == 0
    assert len(json.loads(result.stdout)['preview_points']) == 3


def test_failure_exits_nonzero(runner, tmp_path):
    keypoints = _write(tmp_path, 'keypoints.json', KEYPOINTS[:1])

    result = runner.invoke(cli.main, ['preview', '--keypoints', keypoints])

    assert result.exit_code == 1
    assert json.loads(result.stdout)['success'] is False


def test_config_option_sets_defaults(runner, tmp_path):
    config = _write(tmp_path, 'config.json', {'default_fps': 2})
    keypoints = _write(tmp_path, 'keypoints.json', KEYPOINTS)

    result = runner.invoke(cli.main, ['--config', config, 'animate', '--keypoints', keypoints, '--duration', '2'])

    assert result.exit_code == 0
    assert len(json.loads(result.stdout)['animation']['frames']) == 4


def test_animate_style_choices_follow_style_registry(runner, tmp_path):
    keypoints = _write(tmp_path, 'keypoints.json', KEYPOINTS)

    result = runner.invoke(cli.main, ['animate', '--keypoints', keypoints, '--duration', '2', '--style', 'wobbly'])

    assert result.exit_code == 2
    assert 'dramatic' in result.output

import math

import pytest

from camera_animation.cinematic.animation_state import PresetName
from camera_animation.cinematic.keyframe_generators import PresetGeneratorFactory, generate_preset_keypoints
from camera_animation.cinematic.style_registry import list_all_presets
from camera_animation.errors import InvalidInput


@pytest.fixture
def factory():
    return PresetGeneratorFactory()


def test_orbit_with_default_bounds(factory):
    keypoints = factory.generate_keypoints('orbit', [], 40)

    assert len(keypoints) == 9
    assert [kp.time for kp in keypoints] == pytest.approx([i * 5 for i in range(9)])
    assert keypoints[0].position == pytest.approx([30, 9, 0])
    assert keypoints[2].position == pytest.approx([0, 9, 30], abs=1e-9)
    assert keypoints[8].position == pytest.approx(keypoints[0].position, abs=1e-9)
    assert keypoints[3].description == 'Orbital position 4'
    for kp in keypoints:
        assert kp.target == [0, 0, 0]
        assert math.hypot(kp.position[0], kp.position[2]) == pytest.approx(30)


def test_orbit_centers_on_scene(factory):
    keypoints = factory.generate_keypoints(
        PresetName.ORBIT, [{'position': [10, 0, 0], 'scale': [2, 2, 2]}], 10,
    )

    # diameter 4 gives radius 6 around x=10
    assert keypoints[0].target == [10, 0, 0]
    assert keypoints[0].position == pytest.approx([16, 1.8, 0])


def test_fly_through_with_default_bounds(factory):
    keypoints = factory.generate_keypoints('fly-through', None, 30)

    assert [kp.time for kp in keypoints] == [0, 15, 30]
    assert keypoints[0].position == [-20, 15, 20]
    assert keypoints[0].target == [10, -10, -10]
    assert keypoints[1].position == [0, 10, 0]
    assert keypoints[1].target == [0, 0, 0]
    assert keypoints[2].position == [20, -15, -20]
    assert keypoints[2].target == [-10, 10, 10]


def test_zoom_in_frames_main_object(factory):
    keypoints = factory.generate_keypoints(
        'zoom-in',
        [{'name': 'minor', 'position': [9, 9, 9]},
         {'name': 'hero', 'position': [1, 2, 3], 'scale': [1, 2, 1], 'importance': 'high'}],
        20,
    )

    assert keypoints[0].position == pytest.approx([21, 18, 23])
    assert keypoints[1].position == pytest.approx([5, 5, 7])
    assert keypoints[0].target == keypoints[1].target == [1, 2, 3]
    assert [kp.time for kp in keypoints] == [0, 20]


def test_zoom_in_uses_first_object_without_importance(factory):
    keypoints = factory.generate_keypoints('zoom-in', [{'position': [0, 0, 0]}], 10)

    assert keypoints[0].position == pytest.approx([10, 8, 10])
    assert keypoints[1].position == pytest.approx([2, 1.5, 2])


def test_zoom_in_without_objects_uses_fixed_path(factory):
    keypoints = factory.generate_keypoints('zoom-in', [], 10)

    assert keypoints[0].position == [10, 10, 10]
    assert keypoints[1].position == [2, 2, 2]
    assert keypoints[1].target == [0, 0, 0]


def test_panoramic_with_default_bounds(factory):
    keypoints = factory.generate_keypoints('panoramic', [], 10)

    assert [kp.position for kp in keypoints] == [[-40, 16, 0], [0, 16, 40], [40, 16, 0]]
    assert [kp.time for kp in keypoints] == [0, 5, 10]


def test_focus_sequence_visits_important_objects(factory):
    objects = [
        {'name': 'a', 'position': [0, 0, 0], 'importance': 'high'},
        {'name': 'b', 'position': [10, 0, 0], 'scale': [2, 2, 2], 'importance': 'high'},
        {'name': 'c', 'position': [5, 5, 5]},
    ]

    keypoints = factory.generate_keypoints('focus-sequence', objects, 20)

    assert [kp.time for kp in keypoints] == [0, 10]
    assert keypoints[0].position == pytest.approx([3, 2, 3])
    assert keypoints[1].position == pytest.approx([16, 4, 6])
    assert keypoints[1].description == 'Focus on b'


def test_focus_sequence_falls_back_to_orbit(factory):
    focus = factory.generate_keypoints('focus-sequence', [{'position': [0, 0, 0]}], 16)
    orbit = factory.generate_keypoints('orbit', [{'position': [0, 0, 0]}], 16)

    assert focus == orbit


def test_unknown_preset_falls_back_to_orbit(factory):
    assert factory.resolve_preset('barrel-roll') is PresetName.ORBIT
    assert generate_preset_keypoints('barrel-roll', [], 10) == factory.generate_keypoints('orbit', [], 10)


def test_supported_presets(factory):
    assert factory.list_supported_presets() == ['orbit', 'fly-through', 'zoom-in', 'panoramic', 'focus-sequence']
    assert factory.is_preset_supported('panoramic')
    assert not factory.is_preset_supported('barrel-roll')


def test_non_positive_duration_rejected(factory):
    with pytest.raises(InvalidInput):
        factory.generate_keypoints('orbit', [], -1)


def test_every_preset_returns_time_sorted_keypoints(factory):
    objects = [{'name': 'x', 'position': [1, 0, 0], 'importance': 'high'}]
    for name in factory.list_supported_presets():
        keypoints = factory.generate_keypoints(name, objects, 12)
        times = [kp.time for kp in keypoints]
        assert len(keypoints) >= 1
        assert times == sorted(times)
        assert all(0 <= t <= 12 for t in times)


def test_preset_catalog_entries():
    presets = {entry['id']: entry for entry in list_all_presets()}

    assert set(presets) == {'orbit', 'fly-through', 'zoom-in', 'panoramic', 'focus-sequence'}
    assert presets['orbit']['default_duration'] == 30
    assert presets['focus-sequence']['style'] == 'educational'

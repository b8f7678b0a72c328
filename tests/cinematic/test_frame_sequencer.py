import math

import pytest

from camera_animation.cinematic.animation_state import Keypoint
from camera_animation.cinematic.frame_sequencer import (
    calculate_frame_count,
    find_segment,
    generate_frames,
    prepare_keypoints,
    segment_progress,
)
from camera_animation.errors import InvalidInput


def _line_keypoints():
    return [
        {'time': 0, 'position': [0, 0, 0], 'target': [0, 0, 0]},
        {'time': 10, 'position': [10, 0, 0], 'target': [0, 0, 0]},
    ]


def test_frame_count_is_ceiling_of_duration_times_fps():
    assert calculate_frame_count(10, 30) == 300
    assert calculate_frame_count(1.01, 30) == 31


def test_two_keypoint_line_hits_both_ends():
    frames = generate_frames(_line_keypoints(), duration=10, fps=30)

    assert len(frames) == 300
    assert frames[0].time == 0
    assert frames[0].position == pytest.approx([0, 0, 0])
    assert frames[-1].time == pytest.approx(10)
    assert frames[-1].position == pytest.approx([10, 0, 0])


def test_frame_indices_and_times_are_monotonic():
    frames = generate_frames(_line_keypoints(), duration=10, fps=3)

    assert [frame.frame_index for frame in frames] == list(range(30))
    times = [frame.time for frame in frames]
    assert times == sorted(times)
    assert all(0 <= t <= 10 for t in times)


def test_frames_carry_fov_and_up_vector():
    frames = generate_frames(_line_keypoints(), duration=2, fps=2, fov=60)

    for frame in frames:
        assert frame.fov == 60
        assert frame.up == [0, 1, 0]
        assert frame.smoothness is None


def test_keypoint_time_hit_exactly_reproduces_pose():
    keypoints = [
        {'time': 0, 'position': [0, 0, 0], 'target': [0, 0, 0]},
        {'time': 1.25, 'position': [5, 5, 0], 'target': [1, 0, 0]},
        {'time': 2.5, 'position': [10, 0, 0], 'target': [2, 0, 0]},
    ]
    # 5 frames over 2.5 seconds put frame 2 on the middle keypoint
    frames = generate_frames(keypoints, duration=2.5, fps=2)

    assert len(frames) == 5
    assert frames[2].time == pytest.approx(1.25)
    assert frames[2].position == pytest.approx([5, 5, 0])
    assert frames[2].target == pytest.approx([1, 0, 0])


def test_unsorted_keypoints_are_sorted_before_sampling():
    keypoints = list(reversed(_line_keypoints()))

    frames = generate_frames(keypoints, duration=10, fps=1)

    assert frames[0].position == pytest.approx([0, 0, 0])
    assert frames[-1].position == pytest.approx([10, 0, 0])


def test_duration_past_last_keypoint_extrapolates_last_segment():
    frames = generate_frames(_line_keypoints(), duration=20, fps=1)

    assert frames[-1].time == pytest.approx(20)
    assert frames[-1].position == pytest.approx([20, 0, 0])


def test_time_before_first_keypoint_extrapolates_first_segment():
    keypoints = [
        {'time': 2, 'position': [2, 0, 0], 'target': [0, 2, 0]},
        {'time': 10, 'position': [10, 0, 0], 'target': [0, 10, 0]},
    ]

    frames = generate_frames(keypoints, duration=10, fps=1)

    assert frames[0].time == 0
    assert frames[0].position == pytest.approx([0, 0, 0])
    assert frames[0].target == pytest.approx([0, 0, 0])


def test_segment_progress_is_not_clamped():
    start = Keypoint(time=0, position=[0, 0, 0], target=[0, 0, 0])
    end = Keypoint(time=10, position=[10, 0, 0], target=[0, 0, 0])

    assert segment_progress(start, end, 20) == pytest.approx(2.0)
    assert segment_progress(start, end, -5) == pytest.approx(-0.5)


@pytest.mark.parametrize("missing", ['time', 'position', 'target'])
def test_keypoint_missing_field_is_invalid_input(missing):
    keypoints = _line_keypoints()
    del keypoints[1][missing]

    with pytest.raises(InvalidInput) as excinfo:
        generate_frames(keypoints, duration=10)

    assert excinfo.value.details == {'index': 1}


def test_zero_length_segment_uses_start_pose():
    start = Keypoint(time=5, position=[1, 1, 1], target=[0, 0, 0])
    end = Keypoint(time=5, position=[9, 9, 9], target=[0, 0, 0])

    assert segment_progress(start, end, 5) == 0.0


def test_find_segment_out_of_range_uses_edge_segments():
    keypoints = prepare_keypoints([
        {'time': 1, 'position': [0, 0, 0], 'target': [0, 0, 0]},
        {'time': 2, 'position': [1, 0, 0], 'target': [0, 0, 0]},
        {'time': 3, 'position': [2, 0, 0], 'target': [0, 0, 0]},
    ])

    assert find_segment(keypoints, 0) == (keypoints[0], keypoints[1])
    assert find_segment(keypoints, 9) == (keypoints[1], keypoints[2])


def test_prepare_keypoints_is_stable_for_equal_times():
    keypoints = prepare_keypoints([
        {'time': 1, 'position': [0, 0, 0], 'target': [0, 0, 0], 'description': 'first'},
        {'time': 0, 'position': [0, 0, 0], 'target': [0, 0, 0], 'description': 'start'},
        {'time': 1, 'position': [0, 0, 0], 'target': [0, 0, 0], 'description': 'second'},
    ])

    assert [kp.description for kp in keypoints] == ['start', 'first', 'second']


@pytest.mark.parametrize("keypoints", [None, [], _line_keypoints()[:1]])
def test_fewer_than_two_keypoints_rejected(keypoints):
    with pytest.raises(InvalidInput):
        generate_frames(keypoints, duration=10)


@pytest.mark.parametrize("duration", [0, -1, math.inf, 'long'])
def test_unusable_duration_rejected(duration):
    with pytest.raises(InvalidInput):
        generate_frames(_line_keypoints(), duration=duration)


@pytest.mark.parametrize("fps", [0, -5, 2.5, True])
def test_unusable_fps_rejected(fps):
    with pytest.raises(InvalidInput):
        generate_frames(_line_keypoints(), duration=10, fps=fps)


def test_single_frame_animation_rejected():
    with pytest.raises(InvalidInput):
        generate_frames(_line_keypoints(), duration=0.01, fps=30)


def test_sampling_midway_interpolates_linearly():
    keypoints = prepare_keypoints(_line_keypoints())

    start, end = find_segment(keypoints, 5)
    t = segment_progress(start, end, 5)

    assert t == pytest.approx(0.5)
    frames = generate_frames(keypoints, duration=10, fps=2)
    # 20 frames over 10 seconds; every frame lies on the line x == time
    for frame in frames:
        assert frame.position[0] == pytest.approx(frame.time)

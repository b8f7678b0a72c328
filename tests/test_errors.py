from camera_animation.errors import AnimationError, ErrorPayload, InvalidInput, error_response


def test_invalid_input_is_a_value_error():
    exc = InvalidInput('At least 2 keypoints are required', details={'keypoint_count': 1})

    assert isinstance(exc, ValueError)
    assert isinstance(exc, AnimationError)
    assert exc.to_payload() == {
        'success': False,
        'error_code': 'INVALID_INPUT',
        'error': 'At least 2 keypoints are required',
        'details': {'keypoint_count': 1},
    }


def test_payload_omits_empty_details():
    assert 'details' not in ErrorPayload('X', 'boom').to_dict()
    assert 'details' not in AnimationError('boom').to_payload()


def test_error_response_helper():
    result = error_response('UNKNOWN_ROUTE', 'nope', details={'route': 'x'})

    assert result['success'] is False
    assert result['error_code'] == 'UNKNOWN_ROUTE'
    assert result['details'] == {'route': 'x'}

from message_wrap.layout import compute_available_width


def test_container_minus_padding_with_margin():
    # (600 - 2 * 18) * 0.95 = 535.8
    assert compute_available_width(600) == 535


def test_face_graphic_reserves_space():
    # (610 - 36 - (144 + 20)) * 0.95 = 389.5
    assert compute_available_width(610, face_width=144) == 389


def test_minimum_width():
    assert compute_available_width(100) == 200
    assert compute_available_width(300, face_width=144) == 200


def test_override_width():
    assert compute_available_width(600, override_width=500) == 500


def test_override_width_respects_minimum():
    assert compute_available_width(600, override_width=50) == 200


def test_bad_inputs_do_not_raise():
    assert compute_available_width("wide") == 200
    assert compute_available_width(600, padding=None, face_width="big") == 535
    assert compute_available_width(float("nan")) == 200

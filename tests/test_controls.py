import pytest

from scopview.controls import (
    MOVE_SPEED,
    TRANS_SPEED,
    Key,
    RenderConfig,
    process_input,
    update_alpha,
    update_wireframe,
)


def test_default_config_matches_window_defaults():
    config = RenderConfig()
    assert (config.fov, config.width, config.height) == (45, 800, 600)
    assert config.wireframe is False
    assert config.current_alpha == 0.0


def test_wireframe_toggles_once_per_press():
    config = RenderConfig()
    assert update_wireframe(config, True) is True
    assert config.wireframe is True
    assert update_wireframe(config, True) is False
    assert config.wireframe is True
    assert update_wireframe(config, False) is False
    assert config.wireframe_latch is False
    assert update_wireframe(config, True) is True
    assert config.wireframe is False


def test_alpha_press_sets_target_and_steps():
    config = RenderConfig()
    current = update_alpha(config, True)
    assert config.target_alpha == 1.0
    assert current == pytest.approx(TRANS_SPEED)


def test_alpha_held_does_not_flip_target_again():
    config = RenderConfig()
    update_alpha(config, True)
    update_alpha(config, True)
    assert config.target_alpha == 1.0


def test_alpha_converges_without_overshoot():
    config = RenderConfig()
    update_alpha(config, True)
    for _ in range(200):
        value = update_alpha(config, False)
        assert 0.0 <= value <= 1.0
    assert config.current_alpha == 1.0


def test_alpha_fades_back_after_second_press():
    config = RenderConfig()
    update_alpha(config, True)
    for _ in range(100):
        update_alpha(config, False)
    update_alpha(config, True)
    assert config.target_alpha == 0.0
    for _ in range(100):
        update_alpha(config, False)
    assert config.current_alpha == 0.0


def test_no_keys_leaves_camera_still():
    position, close = process_input(set(), (1.0, 2.0, 3.0), RenderConfig(), 0.5)
    assert position == (1.0, 2.0, 3.0)
    assert close is False


def test_escape_requests_close():
    _, close = process_input({Key.ESCAPE}, (0.0, 0.0, 0.0), RenderConfig(), 0.1)
    assert close is True


@pytest.mark.parametrize(
    "key, axis, sign",
    [
        (Key.LEFT, 0, -1),
        (Key.RIGHT, 0, 1),
        (Key.UP, 1, 1),
        (Key.DOWN, 1, -1),
        (Key.RIGHT_SHIFT, 2, 1),
        (Key.RIGHT_CONTROL, 2, -1),
    ],
)
def test_arrow_keys_move_along_one_axis(key, axis, sign):
    position, _ = process_input({key}, (0.0, 0.0, 0.0), RenderConfig(), 1.0)
    assert position[axis] == pytest.approx(sign * MOVE_SPEED)
    assert [value for index, value in enumerate(position) if index != axis] == [0.0, 0.0]


def test_opposite_keys_cancel():
    position, _ = process_input(
        {Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN}, (4.0, 5.0, -6.0), RenderConfig(), 0.3
    )
    assert position == pytest.approx((4.0, 5.0, -6.0))


def test_process_input_updates_toggles():
    config = RenderConfig()
    process_input({Key.COMMA, Key.T}, (0.0, 0.0, 0.0), config, 0.0)
    assert config.wireframe is True
    assert config.target_alpha == 1.0


def test_process_input_does_not_mutate_camera_argument():
    camera = [0.0, 0.0, -10.0]
    process_input({Key.LEFT}, camera, RenderConfig(), 1.0)
    assert camera == [0.0, 0.0, -10.0]
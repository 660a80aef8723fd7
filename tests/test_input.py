from mazegame.core.keys import InputState, Key


def test_press_is_an_edge_for_one_frame():
    state = InputState()
    state.press(Key.RIGHT)
    assert state.is_key_pressed(Key.RIGHT) is True
    assert state.is_key_pressed(Key.LEFT) is False

    state.end_frame()
    assert state.is_key_pressed(Key.RIGHT) is False
    assert state.is_key_down(Key.RIGHT) is True


def test_held_key_does_not_repeat_until_released():
    state = InputState()
    state.press(Key.W)
    state.end_frame()
    # Auto-repeat press events while held
    state.press(Key.W)
    assert state.is_key_pressed(Key.W) is False

    state.release(Key.W)
    state.press(Key.W)
    assert state.is_key_pressed(Key.W) is True


def test_several_keys_in_one_frame():
    state = InputState()
    state.press(Key.D)
    state.press(Key.S)
    assert state.is_key_pressed(Key.D)
    assert state.is_key_pressed(Key.S)

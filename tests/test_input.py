from types import SimpleNamespace

import pytest

from kanji_cards import (
    KEY_ACTIONS,
    LanguageCode,
    SessionState,
    is_card_touch,
    is_tap,
    touch_displacement,
)

KR = LanguageCode.KR
JP = LanguageCode.JP


def mouse_touch(button, scrolling=False, pos=(100, 100), opos=(100, 100)):
    return SimpleNamespace(
        profile=["pos", "button"],
        button=button,
        is_mouse_scrolling=scrolling,
        x=pos[0],
        y=pos[1],
        ox=opos[0],
        oy=opos[1],
    )


def finger_touch(pos=(100, 100), opos=(100, 100)):
    return SimpleNamespace(profile=["pos"], is_mouse_scrolling=False, x=pos[0], y=pos[1], ox=opos[0], oy=opos[1])


@pytest.mark.parametrize("button", ["scrollup", "scrolldown", "scrollleft", "scrollright"])
def test_mouse_wheel_is_not_a_card_touch(button):
    assert not is_card_touch(mouse_touch(button, scrolling=True))


@pytest.mark.parametrize("button", ["right", "middle"])
def test_other_mouse_buttons_are_ignored(button):
    assert not is_card_touch(mouse_touch(button))


def test_left_click_and_finger_are_card_touches():
    assert is_card_touch(mouse_touch("left"))
    assert is_card_touch(finger_touch())


def test_wheel_tick_leaves_session_alone(session):
    # A wheel tick arrives as a down/up pair that never moves
    touch = mouse_touch("scrolldown", scrolling=True)
    if is_card_touch(touch):
        session.touch(*touch_displacement(touch))
    assert session.state() == SessionState(0, False, KR)


def test_displacement_is_scaled_to_units():
    touch = finger_touch(pos=(10, 300), opos=(130, 140))
    assert touch_displacement(touch) == (-120, 160)
    # On a 2x screen the same drag is half as many units
    assert touch_displacement(touch, 2.0) == (-60, 80)


def test_scaled_drag_turns_into_swipe(session):
    touch = finger_touch(pos=(0, 100), opos=(120, 100))
    session.touch(*touch_displacement(touch, 2.0))
    assert session.state() == SessionState(1, False, KR)
    # 100 pixels at 2x is only 50 units, which is not past the threshold
    short = finger_touch(pos=(0, 100), opos=(100, 100))
    assert session.touch(*touch_displacement(short, 2.0)) is False
    assert session.state() == SessionState(1, False, KR)


def test_tap_slop_is_a_circle():
    assert is_tap(6, 8)
    assert is_tap(-10, 0)
    assert not is_tap(9, 9)
    assert not is_tap(0, 10.5)


def test_key_bindings():
    assert KEY_ACTIONS[32] == "tap"
    assert KEY_ACTIONS[275] == "next_card"
    assert KEY_ACTIONS[276] == "previous_card"
    assert KEY_ACTIONS[273] == KEY_ACTIONS[274] == "toggle_language"


def test_keyboard_drives_session(session):
    assert session.press(276) is False
    assert session.press(32) is True
    assert session.state() == SessionState(0, True, KR)
    assert session.press(273) is True
    assert session.state() == SessionState(0, True, JP)
    assert session.press(275) is True
    assert session.state() == SessionState(1, False, JP)
    # Language keys do nothing on the front face
    assert session.press(274) is False
    assert session.press(276) is True
    assert session.state() == SessionState(0, False, JP)


def test_unbound_key_is_reported(session):
    assert session.press(107) is None
    assert session.state() == SessionState(0, False, KR)

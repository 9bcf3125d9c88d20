from intercept.core import Action, AppElement, Context, Event, InputState, Key
from intercept.settings import Settings


def test_is_pressed_reflects_pressed_keys():
    state = InputState(pressed_keys={Key.W, Key.A})
    assert state.is_pressed(Key.W)
    assert state.is_pressed(Key.A)
    assert not state.is_pressed(Key.S)


def test_is_pressed_accepts_plain_key_codes():
    state = InputState(pressed_keys={Key.ESCAPE})
    assert state.is_pressed(int(Key.ESCAPE))


def test_contexts_have_independent_input_states():
    first = Context()
    second = Context()
    first.input.pressed_keys.add(Key.Q)
    assert not second.input.is_pressed(Key.Q)
    assert first.input is not second.input


def test_app_element_keeps_and_replaces_context():
    ctx = Context()
    other = Context()
    element = AppElement(ctx)
    assert element.context is ctx
    element.context = other
    assert element.context is other


def test_base_hooks_leave_context_untouched():
    settings = Settings()
    ctx = Context(settings=settings)
    element = AppElement(ctx)
    assert element.handle_event(Event(key=Key.ENTER, action=Action.PRESS)) is None
    assert element.update(1.0) is None
    assert element.draw(1.0) is None
    assert ctx.settings is settings
    assert settings == Settings()


def test_event_keeps_given_scroll_and_defaults_rest():
    event = Event(scroll_y=2.5)
    assert event.scroll_y == 2.5
    assert event.key == 0
    assert event.action == 0
"""Shared building blocks: input events, input state, the context and scene elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Key(IntEnum):
    """Keyboard keys the application reacts to, with their usual key codes."""

    SPACE = 32
    A = 65
    D = 68
    Q = 81
    S = 83
    W = 87
    ESCAPE = 256
    ENTER = 257


class Action(IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass
class Event:
    """A keyboard or scroll event."""

    key: int = 0
    scancode: int = 0
    action: int = 0
    mods: int = 0
    scroll_x: float = 0.0
    scroll_y: float = 0.0


@dataclass
class InputState:
    """Current state of keyboard and mouse, as polled by the main loop."""

    pressed_keys: set = field(default_factory=set)
    cursor: tuple = (0.0, 0.0)
    left_button_pressed: bool = False
    should_close: bool = False

    def is_pressed(self, key):
        """True while ``key`` is held down."""
        return key in self.pressed_keys


@dataclass(eq=False)
class Context:
    """Links the parts of a running application to each other."""

    settings: object = None
    renderer: object = None
    scene: object = None
    app: object = None
    terrain: object = None
    input: InputState = field(default_factory=InputState)


class AppElement:
    """Something that takes part in the event, update and draw cycle."""

    def __init__(self, context=None):
        self.context = context

    def handle_event(self, event):
        """React to an input event; does nothing by default."""

    def update(self, dt):
        """Advance by ``dt`` seconds; does nothing by default."""

    def draw(self, dt):
        """Emit geometry for this frame; does nothing by default."""
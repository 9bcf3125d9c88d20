"""The application: wires settings, renderer and scene together and runs the main loop."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque

from .core import Action, AppElement, Context, Key
from .renderer import Renderer
from .scene import Scene
from .settings import SETTINGS_FILENAME, Settings, can_be_loaded

TIME_PER_UPDATE = 1.0 / 60.0


class App(AppElement):
    """Owns the settings, the renderer and the scene and drives them in a fixed-step loop.

    Settings are read from ``settings_path`` when it can be opened and are
    written back on :meth:`close`; a ``settings_path`` of None disables both.
    """

    def __init__(self, settings_path=SETTINGS_FILENAME, clock=time.perf_counter):
        super().__init__(Context())
        self.settings_path = settings_path
        self._clock = clock
        self._events = deque()
        self._time_since_last_update = 0.0
        self._closed = False

        context = self.context
        context.app = self
        self.settings = self._default_settings()
        context.settings = self.settings
        self.renderer = Renderer(context)
        context.renderer = self.renderer
        self.scene = Scene(context)
        context.scene = self.scene

    def _default_settings(self):
        if self.settings_path is not None and can_be_loaded(self.settings_path):
            return Settings.load(self.settings_path)
        return Settings()

    @property
    def input(self):
        """The keyboard and mouse state the loop polls."""
        return self.context.input

    def post_event(self, event):
        """Queue an input event and track the key state it implies."""
        pressed = self.context.input.pressed_keys
        if event.action in (Action.PRESS, Action.REPEAT):
            pressed.add(event.key)
        elif event.action == Action.RELEASE:
            pressed.discard(event.key)
        self._events.append(event)

    def handle_events(self):
        """Dispatch every queued event in arrival order."""
        while self._events:
            self.handle_event(self._events.popleft())

    def handle_event(self, event):
        """Pass an event to the renderer, then to the scene."""
        self.renderer.handle_event(event)
        self.scene.handle_event(event)

    def update(self, dt):
        """Advance the camera and the scene by ``dt`` seconds."""
        self.renderer.update(dt)
        self.scene.update(dt)

    def draw(self, dt):
        """Build this frame's geometry and return the renderer's draw lists."""
        self.renderer.new_frame()
        self.scene.draw(dt)
        return self.renderer.draw(dt)

    def _should_stop(self):
        state = self.context.input
        return state.should_close or state.is_pressed(Key.Q)

    def run(self, duration=None):
        """Run the main loop; returns the number of fixed updates performed.

        The loop ends when the window is asked to close, Q is held, or, if
        ``duration`` is given, once that many seconds have passed.
        """
        updates = 0
        elapsed_total = 0.0
        last = self._clock()
        while not self._should_stop() and (duration is None or elapsed_total < duration):
            now = self._clock()
            elapsed = now - last
            last = now
            elapsed_total += elapsed
            self._time_since_last_update += elapsed
            while self._time_since_last_update >= TIME_PER_UPDATE:
                self._time_since_last_update -= TIME_PER_UPDATE
                self.handle_events()
                self.update(TIME_PER_UPDATE)
                updates += 1
            self.draw(elapsed)
        return updates

    def reset_settings(self):
        """Replace the settings with the defaults."""
        self.settings = Settings()
        self.context.settings = self.settings

    def close(self):
        """Save the settings; calling it again does nothing."""
        if self._closed:
            return
        self._closed = True
        if self.settings_path is not None:
            self.context.settings.save(self.settings_path)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="intercept", description="Projectile and target interception simulation."
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="stop after this many seconds (default: run until closed)",
    )
    parser.add_argument(
        "--settings",
        default=SETTINGS_FILENAME,
        help="settings file to load and save",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Run the application; returns the process exit status."""
    args = _parse_args(argv)
    try:
        with App(settings_path=args.settings) as app:
            app.run(args.duration)
        return 0
    except Exception as error:  # noqa: BLE001 - report any failure as an exit status
        print(error, file=sys.stderr)
        return 1
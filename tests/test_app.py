import pytest

from intercept.app import TIME_PER_UPDATE, App, main
from intercept.core import Action, Event, Key
from intercept.settings import Settings


class FakeClock:
    def __init__(self, step):
        self.step = step
        self.now = 0.0

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.txt"


@pytest.fixture
def app(settings_path):
    return App(settings_path=settings_path)


def test_context_links_all_parts(app):
    assert app.context.app is app
    assert app.context.scene is app.scene
    assert app.context.renderer is app.renderer
    assert app.context.settings is app.settings


def test_defaults_without_settings_file(app):
    assert app.settings == Settings()


def test_settings_loaded_from_file(settings_path):
    stored = Settings(gravity=-1.5, trajectory_step_count=42)
    stored.save(settings_path)
    app = App(settings_path=settings_path)
    assert app.settings.gravity == pytest.approx(-1.5)
    assert app.settings.trajectory_step_count == 42


def test_close_saves_settings(app, settings_path):
    app.settings.gravity = -3.0
    app.close()
    assert Settings.load(settings_path).gravity == pytest.approx(-3.0)


def test_context_manager_saves_settings(settings_path):
    with App(settings_path=settings_path) as app:
        app.settings.camera_speed = 12.0
    assert Settings.load(settings_path).camera_speed == pytest.approx(12.0)


def test_no_settings_path_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with App(settings_path=None) as app:
        app.settings.gravity = -2.0
    assert app.settings.gravity == pytest.approx(-2.0)
    assert sorted(p.name for p in tmp_path.iterdir()) == []


def test_space_event_toggles_pause(app):
    assert app.settings.is_paused is True
    app.post_event(Event(key=Key.SPACE, action=Action.PRESS))
    app.handle_events()
    assert app.settings.is_paused is False


def test_escape_event_toggles_camera_control(app):
    app.post_event(Event(key=Key.ESCAPE, action=Action.PRESS))
    app.handle_events()
    assert app.settings.is_camera_control_enabled is True


def test_post_event_tracks_pressed_keys(app):
    app.post_event(Event(key=Key.W, action=Action.PRESS))
    assert app.input.is_pressed(Key.W)
    app.post_event(Event(key=Key.W, action=Action.RELEASE))
    assert not app.input.is_pressed(Key.W)


def test_events_are_consumed_once(app):
    app.post_event(Event(key=Key.SPACE, action=Action.PRESS))
    app.handle_events()
    app.handle_events()
    assert app.settings.is_paused is False


def test_reset_settings_restores_defaults(app):
    app.settings.gravity = -1.0
    app.reset_settings()
    assert app.settings == Settings()
    assert app.context.settings is app.settings


def test_run_stops_when_window_should_close(settings_path):
    app = App(settings_path=settings_path, clock=FakeClock(0.1))
    app.input.should_close = True
    assert app.run(10.0) == 0


def test_run_stops_when_q_is_held(settings_path):
    app = App(settings_path=settings_path, clock=FakeClock(0.1))
    app.post_event(Event(key=Key.Q, action=Action.PRESS))
    assert app.run(10.0) == 0


def test_run_performs_fixed_updates(settings_path):
    app = App(settings_path=settings_path, clock=FakeClock(0.05))
    updates = app.run(0.2)
    assert 0 < updates <= round(0.2 / TIME_PER_UPDATE) + 1
    assert len(app.renderer.lines) > 0


def test_run_processes_queued_events(settings_path):
    app = App(settings_path=settings_path, clock=FakeClock(0.05))
    app.post_event(Event(key=Key.SPACE, action=Action.PRESS))
    app.run(0.1)
    assert app.settings.is_paused is False


def test_draw_returns_lists_with_terrain(app):
    triangles, lines, points = app.draw(0.0)
    assert lines is app.renderer.lines
    assert len(lines) > 0
    assert len(lines) % 2 == 0


def test_main_runs_and_saves(settings_path):
    assert main(["--duration", "0", "--settings", str(settings_path)]) == 0
    assert Settings.load(settings_path) == Settings()


def test_main_reports_bad_settings_file(settings_path, capsys):
    settings_path.write_text("not-a-number\n", encoding="utf-8")
    assert main(["--duration", "0", "--settings", str(settings_path)]) == 1
    assert capsys.readouterr().err != ""
# intercept

A small physics simulation of projectiles aimed at moving targets.

Each target flies along a precomputed ballistic trajectory (gravity plus
thrust along its velocity), perturbed by seeded Perlin noise. Its projectile
searches first the horizontal and then the vertical launch angle that brings
its trajectory closest to the target's, skipping angles whose path passes
through a spherical obstacle. When a projectile and its target come within
the sum of their radii, both are marked destroyed.

The scene does not depend on any window system. Drawing fills lists of
coloured triangles, lines and points, and the renderer keeps a smoothed
camera model-view-projection matrix; both can be inspected or handed to any
drawing code.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the simulation

```
intercept --duration 10
```

This runs the application loop (`intercept.app.main`) at a fixed 60 updates
per second of wall-clock time. Options:

- `--duration SECONDS`: stop after this many seconds; without it the loop
  runs until interrupted.
- `--settings PATH`: settings file to read at start and write back at exit
  (default `___settings__.txt` in the working directory).

The command exits with status 0, or prints the error and exits with status 1.

## Using it as a library

```python
import numpy as np

from intercept.app import App

rng = np.random.default_rng(1)

with App() as app:                     # settings are saved when the block ends
    editor = app.scene.editor
    editor.create_random_pair(rng)
    editor.create_random_obstacle(rng)
    app.scene.reset()                  # compute trajectories and aim projectiles
    app.context.settings.is_paused = False
    app.run(5.0)                       # run for five seconds of wall-clock time
    print(editor.destroyed_target_count())
```

`App(settings_path=None)` neither reads nor writes a settings file, and
`App(clock=...)` takes any function returning seconds, which makes `run`
deterministic in tests.

Input is given to the application as events: `App.post_event(Event(...))`
queues an event (with `Key` and `Action` from `intercept.core`) and keeps the
set of held keys in `app.input`; `app.input.cursor` and
`app.input.left_button_pressed` hold the mouse state.

Building blocks:

- `intercept.vecmath`: vectors, quaternions (`Quat`), `polar_to_cartesian`,
  `rotation_between_vectors`, `look_at`, `rotate_towards`, `perspective`,
  `look_at_matrix`, `random_float`, `random_vec3` and related helpers.
- `intercept.noise`: seeded 3D gradient noise (`perlin_noise3`, `Noise`).
- `intercept.settings`: `Settings` with every tunable value, and `load`,
  `loads`, `dumps`, `save`; `can_be_loaded` checks a settings file.
- `intercept.translator`: `Language` and `Translator` for English/Ukrainian
  interface strings, read from a file of alternating lines.
- `intercept.trajectory.Trajectory`: a mutable list of points with a cursor
  that advances once per `trajectory_advance_period` while not paused.
- `intercept.model.Model`: coloured triangle meshes read from `v x y z r g b`
  and `f a b c` lines.
- `intercept.bodies`: `Body`, `Target`, `Projectile`, `Obstacle`, `Pair` and
  `DrawingMode`.
- `intercept.editor.Editor`: open/closed state of pair and obstacle editors,
  random body creation, removal, translation and help texts.
- `intercept.scene.Scene`: owns pairs, obstacles, terrain and the editor;
  handles key events and mouse picking along the camera ray.
- `intercept.camera.compute_matrices` and `intercept.renderer.Renderer`:
  camera movement and the draw lists.

## Controls

Keys take effect through events posted with `App.post_event`:

| Key     | Effect                                              |
|---------|-----------------------------------------------------|
| Escape  | toggle camera control                               |
| Enter   | reset all bodies and re-aim projectiles             |
| Space   | pause or resume the simulation                      |
| W/A/S/D | move the camera while held and control is enabled   |
| Q       | stop the loop while held                            |

With camera control enabled, scrolling changes the field of view and the
left mouse button opens or closes the editor of the pair or obstacle in view.

## What it does not do

The package opens no window and draws nothing on screen: there is no
graphical interface and no GPU output. The `intercept` command runs the
simulation without display or keyboard, so it is mainly useful with
`--duration`; to see or steer the scene, read the renderer's draw lists and
post events from your own code.
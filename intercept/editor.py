"""Editing state of the interface: open editors, translation, help and random bodies."""

from __future__ import annotations

import logging
from pathlib import Path

from .bodies import ROCKET_MODEL_PATH, Obstacle, Pair, Projectile, Target
from .core import AppElement
from .settings import Settings
from .translator import Language, Translator
from .vecmath import random_float, random_vec3

logger = logging.getLogger(__name__)

HELP_DIRECTORY = "./translation"

_HELP_FILES = {
    Language.ENGLISH: "help_eng.txt",
    Language.UKRAINIAN: "help_ukr.txt",
}


class Editor(AppElement):
    """Keeps track of which pair and obstacle editors are open and edits the scene."""

    def __init__(
        self,
        context=None,
        translator=None,
        help_directory=HELP_DIRECTORY,
        model_path=ROCKET_MODEL_PATH,
    ):
        super().__init__(context)
        if translator is None:
            translator = Translator()
            try:
                translator.load()
            except OSError as error:
                logger.error("Failed to load translation: %s", error)
        self.translator = translator
        self.language = Language.ENGLISH
        self.theme = 1
        self.is_options_menu_open = False
        self.is_help_page_open = False
        self.model_path = model_path
        self._pair_editors: dict[int, bool] = {}
        self._obstacle_editors: dict[int, bool] = {}
        self._help_texts: dict[Language, str] = {}
        self.load_help_texts(help_directory)

    @property
    def _scene(self):
        return self.context.scene

    @property
    def _settings(self):
        return self.context.settings

    def load_help_texts(self, directory=HELP_DIRECTORY):
        """Read the help page of every language; a missing file gives an empty page."""
        for language, name in _HELP_FILES.items():
            try:
                text = (Path(directory) / name).read_text(encoding="utf-8")
            except OSError:
                text = ""
            self._help_texts[language] = text

    def help_text(self):
        """Help page in the current language."""
        return self._help_texts.get(Language(self.language), "")

    def tr(self, text):
        """Translate ``text`` into the current language."""
        return self.translator.translate(text, self.language)

    @staticmethod
    def _check_index(index, items, what):
        if not 0 <= index < len(items):
            raise IndexError(f"no {what} with index {index}")

    def toggle_pair_editor(self, index):
        """Open or close the editor of pair ``index``; returns whether it is open."""
        self._check_index(index, self._scene.pairs, "pair")
        state = not self._pair_editors.get(index, False)
        self._pair_editors[index] = state
        return state

    def toggle_obstacle_editor(self, index):
        """Open or close the editor of obstacle ``index``; returns whether it is open."""
        self._check_index(index, self._scene.obstacles, "obstacle")
        state = not self._obstacle_editors.get(index, False)
        self._obstacle_editors[index] = state
        return state

    def open_pair_editors(self):
        """Indices of pairs whose editor is open, in ascending order."""
        return sorted(i for i, is_open in self._pair_editors.items() if is_open)

    def open_obstacle_editors(self):
        """Indices of obstacles whose editor is open, in ascending order."""
        return sorted(i for i, is_open in self._obstacle_editors.items() if is_open)

    def remove_pair(self, index):
        """Close the editor of pair ``index`` and flag the pair for removal."""
        pairs = self._scene.pairs
        self._check_index(index, pairs, "pair")
        self._pair_editors[index] = False
        pairs[index].remove()

    def remove_obstacle(self, index):
        """Close the editor of obstacle ``index`` and flag it for removal."""
        obstacles = self._scene.obstacles
        self._check_index(index, obstacles, "obstacle")
        self._obstacle_editors[index] = False
        obstacles[index].remove()

    def create_random_pair(self, rng=None):
        """Add a pair with random parameters to the scene and return it."""
        projectile = Projectile(self.context, model_path=self.model_path)
        target = Target(self.context)
        self.randomize_projectile(projectile, rng)
        self.randomize_target(target, rng)
        pair = Pair(self.context, projectile, target)
        self._scene.pairs.append(pair)
        return pair

    def create_random_obstacle(self, rng=None):
        """Add an obstacle with random parameters to the scene and return it."""
        obstacle = Obstacle(self.context)
        self.randomize_obstacle(obstacle, rng)
        self._scene.obstacles.append(obstacle)
        return obstacle

    def randomize_projectile(self, projectile, rng=None):
        """Draw the projectile's parameters from the configured ranges."""
        s = self._settings
        projectile.position = random_vec3(
            s.min_random_projectile_position, s.max_random_projectile_position, rng
        )
        projectile.initial_speed = random_float(
            s.min_random_projectile_initial_speed, s.max_random_projectile_initial_speed, rng
        )
        projectile.color = random_vec3(
            s.min_random_projectile_color, s.max_random_projectile_color, rng
        )
        projectile.acceleration = random_float(
            s.min_random_projectile_acceleration, s.max_random_projectile_acceleration, rng
        )
        projectile.radius = random_float(
            s.min_random_projectile_radius, s.max_random_projectile_radius, rng
        )

    def randomize_target(self, target, rng=None):
        """Draw the target's parameters from the configured ranges."""
        s = self._settings
        target.position = random_vec3(
            s.min_random_target_position, s.max_random_target_position, rng
        )
        target.initial_angle_in_hp = random_float(
            s.min_random_target_initial_angle_in_hp, s.max_random_target_initial_angle_in_hp, rng
        )
        target.initial_angle_in_vp = random_float(
            s.min_random_target_initial_angle_in_vp, s.max_random_target_initial_angle_in_vp, rng
        )
        target.initial_speed = random_float(
            s.min_random_target_initial_speed, s.max_random_target_initial_speed, rng
        )
        target.color = random_vec3(s.min_random_target_color, s.max_random_target_color, rng)
        target.acceleration = random_float(
            s.min_random_target_acceleration, s.max_random_target_acceleration, rng
        )
        target.radius = random_float(
            s.min_random_target_radius, s.max_random_target_radius, rng
        )

    def randomize_obstacle(self, obstacle, rng=None):
        """Draw the obstacle's parameters from the configured ranges."""
        s = self._settings
        obstacle.radius = random_float(
            s.min_random_obstacle_radius, s.max_random_obstacle_radius, rng
        )
        obstacle.color = random_vec3(
            s.min_random_obstacle_color, s.max_random_obstacle_color, rng
        )
        obstacle.position = random_vec3(
            s.min_random_obstacle_position, s.max_random_obstacle_position, rng
        )

    def destroyed_target_count(self):
        """Number of pairs whose target has been destroyed."""
        return sum(1 for pair in self._scene.pairs if pair.target().is_destroyed)

    def reset_settings(self):
        """Restore the default settings."""
        app = self.context.app
        if app is not None:
            app.reset_settings()
        else:
            self.context.settings = Settings()
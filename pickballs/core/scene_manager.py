"""Scene generation and ownership."""
from typing import List, Optional

import numpy as np

from pickballs import config
from pickballs.models.ball import Ball
from pickballs.models.camera import Camera, Viewport
from pickballs.models.scene import Scene


class SceneManager:
    """Builds the random ball scene and owns it for the session."""

    def __init__(self, ball_count: int = config.BALL_COUNT,
                 outer_radius: float = config.OUTER_RADIUS,
                 min_radius: float = config.BALL_MIN_RADIUS,
                 max_radius: float = config.BALL_MAX_RADIUS,
                 seed: Optional[int] = config.RANDOM_SEED):
        if ball_count < 0:
            raise ValueError(f"ball_count must be >= 0, got {ball_count}")
        if outer_radius <= 0:
            raise ValueError(f"outer_radius must be > 0, got {outer_radius}")
        if not 0 < min_radius <= max_radius:
            raise ValueError(
                f"need 0 < min_radius <= max_radius, got {min_radius}, {max_radius}"
            )

        self.ball_count = ball_count
        self.outer_radius = outer_radius
        self.min_radius = min_radius
        self.max_radius = max_radius
        self.rng = np.random.default_rng(seed)
        self.scene: Optional[Scene] = None

    def build(self, width: float = config.WINDOW_WIDTH - config.PANEL_WIDTH,
              height: float = config.WINDOW_HEIGHT) -> Scene:
        """Create the default camera and a fresh set of random balls."""
        viewport = Viewport(width, height)
        self.scene = Scene(
            camera=self.default_camera(viewport),
            viewport=viewport,
            balls=self._generate_balls()
        )
        print(f"✅ Placed {len(self.scene.balls)} balls "
              f"within radius {self.outer_radius:g}.")
        return self.scene

    @staticmethod
    def default_camera(viewport: Viewport) -> Camera:
        """Camera from the configured position, looking at the target."""
        return Camera.look_at(
            config.CAMERA_POSITION,
            config.CAMERA_TARGET,
            config.CAMERA_UP,
            config.CAMERA_FOV,
            viewport.aspect,
            config.CAMERA_NEAR,
            config.CAMERA_FAR
        )

    def get_scene(self) -> Optional[Scene]:
        """Get the current scene."""
        return self.scene

    def resize(self, width: float, height: float) -> None:
        """Track a new viewport size, keeping the camera's pose."""
        if self.scene is None:
            return
        self.scene.viewport = Viewport(width, height)

    def _generate_balls(self) -> List[Ball]:
        balls = []
        for idx in range(self.ball_count):
            color = self.rng.random(3).tolist()
            radius = self.min_radius + self.rng.random() * (
                self.max_radius - self.min_radius
            )
            balls.append(Ball(
                id=idx,
                center=self._random_position(),
                radius=float(radius),
                color=color
            ))
        return balls

    def _random_position(self) -> np.ndarray:
        """Uniform point inside the outer sphere, by rejection from its cube."""
        r = self.outer_radius
        while True:
            pos = r * (2.0 * self.rng.random(3) - 1.0)
            if pos @ pos <= r * r:
                return pos

"""Mouse picking of balls.

A click at viewport pixel ``(x, y)`` is turned into a world-space ray from
the camera's eye through the matching point on the far clipping plane. A
ball is hit when its center lies within ``radius`` of that ray. Every ball
along the ray is hit; there is no nearest-hit filtering.

Preconditions are checked with ``assert``: an out-of-viewport click or a
degenerate camera is a caller bug, and the input layer is expected to
filter such events before they get here.
"""
from dataclasses import dataclass
from typing import Iterable, Set

import numpy as np

from pickballs.models.ball import Ball
from pickballs.models.camera import Camera, Viewport
from pickballs.models.scene import Scene

# Maps [0, width] -> [-1, 1]. Must stay 2: any other factor skews every ray.
NDC_SCALE = 2.0


@dataclass(frozen=True, eq=False)
class PickRay:
    """Ray from the camera eye through the clicked far-plane point.

    ``direction`` is ``far_point - origin`` and is not normalized.
    """
    origin: np.ndarray
    direction: np.ndarray
    far_point: np.ndarray

    def at(self, t: float) -> np.ndarray:
        """Point on the ray; t = 1 is the far-plane point."""
        return self.origin + t * self.direction


def viewport_to_ndc(x: float, y: float, viewport: Viewport) -> np.ndarray:
    """Homogeneous normalized device coordinates of a far-plane click.

    Pixel Y grows downward while device Y grows upward, hence the flip.
    """
    half_w = viewport.width / 2.0
    half_h = viewport.height / 2.0
    return np.array([
        (x - half_w) * NDC_SCALE / viewport.width,
        (y - half_h) * -NDC_SCALE / viewport.height,
        1.0,
        1.0,
    ])


def unproject(x: float, y: float, camera: Camera,
              viewport: Viewport) -> PickRay:
    """Build the pick ray for a click at viewport pixel ``(x, y)``."""
    assert 0 <= x <= viewport.width, f"x={x}"
    assert 0 <= y <= viewport.height, f"y={y}"

    # On the far plane clip w equals far, so scaling the NDC vector by far
    # gives the clip-space point directly.
    clip = viewport_to_ndc(x, y, viewport) * camera.far
    eye = camera.inverse_projection @ clip
    world = camera.world_transform @ eye
    assert world[3] != 0, "far-plane point at infinity"
    far_point = world[:3] / world[3]

    origin = camera.position
    direction = far_point - origin
    assert np.any(direction), "degenerate pick ray"
    return PickRay(origin=origin, direction=direction, far_point=far_point)


def distance_to_ray(origin, direction, center) -> float:
    """Perpendicular distance from ``center`` to the line through ``origin``.

    The line is unbounded in both directions, so negating ``direction``
    gives the same result.
    """
    origin = np.asarray(origin, dtype=np.float64)
    direction = np.asarray(direction, dtype=np.float64)
    v = np.asarray(center, dtype=np.float64) - origin

    dd = direction @ direction
    assert dd > 0, "ray direction must be non-zero"
    t = (v @ direction) / dd
    return float(np.linalg.norm(v - t * direction))


def is_hit(ray: PickRay, ball: Ball) -> bool:
    """True if the ball's center lies within its radius of the ray."""
    return distance_to_ray(ray.origin, ray.direction, ball.center) <= ball.radius


def pick_balls(scene: Scene, x: float, y: float) -> Set[int]:
    """Select every ball under the click and return the IDs hit."""
    ray = unproject(x, y, scene.camera, scene.viewport)
    hits = set()
    for ball in scene.balls:
        if is_hit(ray, ball):
            ball.selected = True
            hits.add(ball.id)
    return hits


def clear_selection(balls: Iterable[Ball]) -> None:
    """Deselect all balls."""
    for ball in balls:
        ball.selected = False


class BallPicker:
    """Pointer-event interface to the picking functions.

    The picker borrows the scene; callers may swap ``scene.camera`` or
    ``scene.viewport`` between events but not during one.
    """

    def __init__(self, scene: Scene):
        self.scene = scene

    def on_pointer_down(self, x: float, y: float) -> Set[int]:
        """Handle a button press at viewport pixel ``(x, y)``."""
        return pick_balls(self.scene, x, y)

    def on_pointer_up(self) -> None:
        """Handle a button release."""
        clear_selection(self.scene.balls)

    def selected_ids(self) -> Set[int]:
        """IDs of the currently selected balls."""
        return {b.id for b in self.scene.balls if b.selected}

"""4x4 homogeneous transforms in the OpenGL convention.

Matrices act on column vectors (``M @ p``). Eye space looks down -Z with
+Y up, and the perspective projection maps the view frustum onto the
[-1, 1] clip cube.
"""
import math
from typing import Sequence

import numpy as np


def _normalize(v: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(v)
    assert norm > 0, "cannot normalize a zero-length vector"
    return v / norm


def look_at_matrix(eye: Sequence[float], target: Sequence[float],
                   up: Sequence[float]) -> np.ndarray:
    """World-to-eye matrix for a camera at ``eye`` looking at ``target``."""
    eye = np.asarray(eye, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    up = np.asarray(up, dtype=np.float64)

    forward = _normalize(target - eye)
    side = _normalize(np.cross(forward, up))
    true_up = np.cross(side, forward)

    view = np.eye(4)
    view[0, :3] = side
    view[1, :3] = true_up
    view[2, :3] = -forward
    view[:3, 3] = -view[:3, :3] @ eye
    return view


def perspective_matrix(fov: float, aspect: float, near: float,
                       far: float) -> np.ndarray:
    """Eye-to-clip matrix for a vertical field of view given in degrees."""
    assert aspect > 0, f"aspect={aspect}"
    assert 0 < near < far, f"near={near}, far={far}"

    f = 1.0 / math.tan(math.radians(fov) / 2.0)
    proj = np.zeros((4, 4))
    proj[0, 0] = f / aspect
    proj[1, 1] = f
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = 2.0 * far * near / (near - far)
    proj[3, 2] = -1.0
    return proj


def to_homogeneous(point: Sequence[float]) -> np.ndarray:
    """Append w = 1 to a 3D point."""
    return np.append(np.asarray(point, dtype=np.float64), 1.0)


def from_homogeneous(point: np.ndarray) -> np.ndarray:
    """Perspective divide back to a 3D point."""
    assert point[3] != 0, "point at infinity"
    return point[:3] / point[3]

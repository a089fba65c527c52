"""Camera and viewport models."""
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from pickballs.utils.transforms import (
    from_homogeneous,
    look_at_matrix,
    perspective_matrix,
    to_homogeneous,
)


@dataclass(frozen=True)
class Viewport:
    """Pixel rectangle of the rendering surface, origin at the top-left."""
    width: float
    height: float

    def __post_init__(self):
        assert self.width > 0 and self.height > 0, \
            f"viewport={self.width}x{self.height}"

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def contains(self, x: float, y: float) -> bool:
        """True if the pixel lies within [0, width] x [0, height]."""
        return 0 <= x <= self.width and 0 <= y <= self.height


@dataclass(frozen=True, eq=False)
class Camera:
    """Perspective camera described by its view and projection transforms.

    The camera is replaced, never mutated, when the user rotates the view,
    so a pick always sees a consistent set of matrices.
    """
    view_matrix: np.ndarray
    projection_matrix: np.ndarray
    near: float
    far: float

    def __post_init__(self):
        assert 0 < self.near < self.far, f"near={self.near}, far={self.far}"
        view = np.asarray(self.view_matrix, dtype=np.float64)
        proj = np.asarray(self.projection_matrix, dtype=np.float64)
        assert view.shape == (4, 4) and proj.shape == (4, 4)
        object.__setattr__(self, "view_matrix", view)
        object.__setattr__(self, "projection_matrix", proj)
        object.__setattr__(self, "_world_transform", np.linalg.inv(view))
        object.__setattr__(self, "_inverse_projection", np.linalg.inv(proj))

    @classmethod
    def look_at(cls, position: Sequence[float], target: Sequence[float],
                up: Sequence[float], fov: float, aspect: float,
                near: float, far: float) -> 'Camera':
        """Create a camera at ``position`` looking at ``target``."""
        return cls(
            view_matrix=look_at_matrix(position, target, up),
            projection_matrix=perspective_matrix(fov, aspect, near, far),
            near=near,
            far=far
        )

    @classmethod
    def from_renderer(cls, camera, viewport: Viewport) -> 'Camera':
        """Snapshot of an Open3D rendering camera for the given viewport.

        The renderer's own projection matrix has its far plane at infinity,
        so the projection is rebuilt from the field of view and clip planes.
        """
        near = camera.get_near()
        far = camera.get_far()
        return cls(
            view_matrix=np.asarray(camera.get_view_matrix(), dtype=np.float64),
            projection_matrix=perspective_matrix(
                camera.get_field_of_view(), viewport.aspect, near, far
            ),
            near=near,
            far=far
        )

    @property
    def world_transform(self) -> np.ndarray:
        """Eye-to-world matrix (inverse of the view matrix)."""
        return self._world_transform

    @property
    def inverse_projection(self) -> np.ndarray:
        """Clip-to-eye matrix (inverse of the projection matrix)."""
        return self._inverse_projection

    @property
    def position(self) -> np.ndarray:
        """Eye position in world space."""
        return self._world_transform[:3, 3].copy()

    def project(self, point: Sequence[float],
                viewport: Viewport) -> Tuple[float, float]:
        """Project a world-space point to viewport pixel coordinates."""
        clip = self.projection_matrix @ self.view_matrix @ to_homogeneous(point)
        ndc = from_homogeneous(clip)
        x = (ndc[0] + 1.0) * viewport.width / 2.0
        y = (1.0 - ndc[1]) * viewport.height / 2.0
        return float(x), float(y)

import numpy as np
import pytest

from pickballs.models.camera import Camera, Viewport
from pickballs.models.scene import Scene
from pickballs.utils.transforms import look_at_matrix, perspective_matrix

EYE = (8.0, 18.0, 8.0)


@pytest.fixture
def viewport():
    return Viewport(800, 600)


@pytest.fixture
def camera(viewport):
    return Camera.look_at(EYE, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0),
                          45.0, viewport.aspect, 0.1, 100.0)


@pytest.fixture
def scene(camera, viewport):
    return Scene(camera=camera, viewport=viewport)


class FakeRendererCamera:
    """Stands in for open3d.visualization.rendering.Camera.

    Like the real renderer it reports a projection matrix whose far plane
    sits at infinity.
    """

    def __init__(self, eye=EYE, fov=45.0, aspect=4 / 3, near=0.1, far=100.0):
        self.view = look_at_matrix(eye, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        self.fov = fov
        self.near = near
        self.far = far
        self.projection = perspective_matrix(fov, aspect, near, far)
        self.projection[2, 2] = -1.0
        self.projection[2, 3] = -2.0 * near

    def get_view_matrix(self):
        return self.view.astype(np.float32)

    def get_projection_matrix(self):
        return self.projection.astype(np.float32)

    def get_field_of_view(self):
        return self.fov

    def get_near(self):
        return self.near

    def get_far(self):
        return self.far


@pytest.fixture
def renderer_camera():
    return FakeRendererCamera()

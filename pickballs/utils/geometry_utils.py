"""Geometry creation and material utilities."""
import open3d as o3d
import open3d.visualization.rendering as rendering

from pickballs import config
from pickballs.models.ball import Ball


class GeometryUtils:
    """Utility functions for ball meshes and materials."""

    @staticmethod
    def create_ball_mesh(ball: Ball,
                         resolution: int = config.BALL_RESOLUTION
                         ) -> o3d.geometry.TriangleMesh:
        """Create a sphere mesh centered on the ball."""
        sphere = o3d.geometry.TriangleMesh.create_sphere(
            radius=ball.radius,
            resolution=resolution
        )
        sphere.compute_vertex_normals()
        sphere.translate(ball.center)
        return sphere

    @staticmethod
    def create_ball_material(ball: Ball) -> rendering.MaterialRecord:
        """Lit material for a ball; selected balls glow in their own color."""
        mat = rendering.MaterialRecord()
        mat.shader = "defaultLit"
        mat.base_color = list(ball.color) + [1]
        if ball.selected:
            mat.emissive_color = list(ball.color) + [1]
        else:
            mat.emissive_color = [0, 0, 0, 1]
        return mat

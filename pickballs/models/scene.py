"""Scene aggregate handed to the picking engine."""
from dataclasses import dataclass, field
from typing import List, Optional

from pickballs.models.ball import Ball
from pickballs.models.camera import Camera, Viewport


@dataclass
class Scene:
    """Camera, viewport and the balls they look at."""
    camera: Camera
    viewport: Viewport
    balls: List[Ball] = field(default_factory=list)

    def get_ball_by_id(self, ball_id: int) -> Optional[Ball]:
        """Retrieve ball by ID."""
        return next((b for b in self.balls if b.id == ball_id), None)

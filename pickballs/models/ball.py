"""Ball data model."""
from dataclasses import dataclass, field
from typing import List

import numpy as np


@dataclass
class Ball:
    """A pickable sphere in the scene.

    Only ``selected`` changes after the scene has been built.
    """
    id: int
    center: np.ndarray
    radius: float
    color: List[float] = field(default_factory=lambda: [1.0, 0.0, 0.0])
    selected: bool = False

    def __post_init__(self):
        self.center = np.asarray(self.center, dtype=np.float64)
        assert self.center.shape == (3,), f"center={self.center}"
        assert self.radius > 0, f"radius={self.radius}"

    @property
    def geometry_name(self) -> str:
        """Name of the ball's mesh in the rendered scene."""
        return f"ball_{self.id}"

"""Pseudo-3D projection built from ordered 2D affine operations.

There is no camera or depth. Yaw is a plain rotation, pitch is a vertical
squash followed by a shear, roll is a second rotation. Each operation is
post-multiplied onto the current matrix, so the first operation applied in
code is the last one applied to a point. The order is part of the look and
must not change.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np

Point2D = Tuple[float, float]


@dataclass(frozen=True)
class TransformStep:
    """One recorded operation of an Affine2D."""

    name: str  # translate, scale, rotate, shear
    args: Tuple[float, ...]

    def to_dict(self) -> dict:
        return {"name": self.name, "args": list(self.args)}


class Affine2D:
    """2D affine transform as a 3x3 homogeneous matrix.

    Operations concatenate on the right (``M = M @ op``), matching the way a
    2D graphics context accumulates transforms.
    """

    def __init__(self, matrix: np.ndarray = None):
        self.matrix = np.identity(3) if matrix is None else np.array(matrix, dtype=float)
        self.steps: List[TransformStep] = []

    def _concat(self, op: np.ndarray, name: str, *args: float) -> "Affine2D":
        self.matrix = self.matrix @ op
        self.steps.append(TransformStep(name, tuple(float(a) for a in args)))
        return self

    def translate(self, tx: float, ty: float) -> "Affine2D":
        return self._concat(np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]]), "translate", tx, ty)

    def scale(self, sx: float, sy: float) -> "Affine2D":
        return self._concat(np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]]), "scale", sx, sy)

    def rotate(self, radians: float) -> "Affine2D":
        c, s = math.cos(radians), math.sin(radians)
        return self._concat(np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]), "rotate", radians)

    def shear(self, shx: float, shy: float) -> "Affine2D":
        return self._concat(np.array([[1.0, shx, 0.0], [shy, 1.0, 0.0], [0.0, 0.0, 1.0]]), "shear", shx, shy)

    def apply(self, points: Iterable[Sequence[float]]) -> np.ndarray:
        """Map an iterable of (x, y) points; returns an (N, 2) array."""
        pts = np.asarray(list(points), dtype=float).reshape(-1, 2)
        homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
        return (homogeneous @ self.matrix.T)[:, :2]

    def apply_point(self, x: float, y: float) -> Point2D:
        px, py = self.apply([(x, y)])[0]
        return float(px), float(py)

    def inverse(self) -> "Affine2D":
        """Inverse transform, e.g. for mapping a screen click back to the scene.

        Raises:
            numpy.linalg.LinAlgError: if the transform is singular (pitch of exactly +/-90).
        """
        return Affine2D(np.linalg.inv(self.matrix))

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        """Flat (m00, m10, m01, m11, m02, m12), column-major like a graphics context."""
        m = self.matrix
        return (
            float(m[0, 0]), float(m[1, 0]),
            float(m[0, 1]), float(m[1, 1]),
            float(m[0, 2]), float(m[1, 2]),
        )

    @property
    def step_names(self) -> List[str]:
        return [s.name for s in self.steps]


class PseudoProjector:
    """Builds the per-frame transform that fakes a 3D rotation of the scene."""

    SHEAR_FACTOR = 0.5

    def frame_transform(self, view, surface_size: Tuple[int, int]) -> Affine2D:
        """Compose the frame transform for ``view`` on a surface of ``surface_size``.

        Order: centre, zoom, yaw, pitch (squash then shear), roll.
        """
        width, height = surface_size
        transform = Affine2D()
        transform.translate(width // 2, height // 2)
        transform.scale(view.zoom, view.zoom)
        transform.rotate(math.radians(view.rotation_y))

        tilt = math.radians(view.rotation_x)
        transform.scale(1.0, math.cos(tilt))
        transform.shear(0.0, math.sin(tilt) * self.SHEAR_FACTOR)

        if view.rotation_z != 0:
            transform.rotate(math.radians(view.rotation_z))
        return transform

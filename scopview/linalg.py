"""Small 4x4 matrix and vector helpers working on flat 16-element sequences.

Matrices are stored as flat lists of 16 floats; element ``i * 4 + j`` is
row ``i``, column ``j``.  Every function returns a new value and leaves its
arguments untouched.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

Mat4 = list[float]


def identity(coef: float = 1.0) -> Mat4:
    """Return a matrix with ``coef`` on the diagonal and zeros elsewhere."""
    return [float(coef) if row == col else 0.0 for row in range(4) for col in range(4)]


def mat4_mult(left: Sequence[float], right: Sequence[float]) -> Mat4:
    """Return the product ``left x right``."""
    return [
        sum(left[row * 4 + k] * right[k * 4 + col] for k in range(4))
        for row in range(4)
        for col in range(4)
    ]


def perspective(rad: float, ratio: float, near: float, far: float) -> Mat4:
    """Build a perspective projection for a vertical field of view ``rad``."""
    tan_half = math.tan(rad / 2)
    depth = far - near
    persp = [0.0] * 16
    persp[0] = 1 / (ratio * tan_half)
    persp[5] = 1 / tan_half
    persp[10] = -(far + near) / depth
    persp[11] = -1.0
    persp[14] = -(2 * far * near) / depth
    return persp


def translate(mat: Sequence[float], vec: Sequence[float]) -> Mat4:
    """Apply a translation by ``vec`` to ``mat``."""
    translator = identity(1.0)
    translator[12:15] = [float(v) for v in vec[:3]]
    return mat4_mult(translator, mat)


def rotate(mat: Sequence[float], rad: float, axis: Sequence[float]) -> Mat4:
    """Apply a rotation of ``rad`` radians around ``axis`` to ``mat``."""
    x, y, z = normalize(axis)
    c = math.cos(rad)
    s = math.sin(rad)
    nc = 1 - c
    pivot = [0.0] * 16
    pivot[0] = c + x * x * nc
    pivot[1] = x * y * nc + z * s
    pivot[2] = x * z * nc - y * s
    pivot[4] = x * y * nc - z * s
    pivot[5] = c + y * y * nc
    pivot[6] = y * z * nc + x * s
    pivot[8] = x * z * nc + y * s
    pivot[9] = y * z * nc - x * s
    pivot[10] = c + z * z * nc
    pivot[15] = 1.0
    return mat4_mult(pivot, mat)


def scale(mat: Sequence[float], coef: Sequence[float]) -> Mat4:
    """Apply a per-axis scale ``coef`` to ``mat``."""
    scaler = identity(1.0)
    scaler[0], scaler[5], scaler[10] = (float(c) for c in coef[:3])
    return mat4_mult(scaler, mat)


def normalize(vec: Sequence[float]) -> tuple[float, float, float]:
    """Return ``vec`` scaled to unit length.

    Raises ValueError for a zero-length vector.
    """
    x, y, z = vec[:3]
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return (x / length, y / length, z / length)


def apply_mat4(mat: Sequence[float], vec: Sequence[float]) -> tuple[float, float, float, float]:
    """Return the 4-component vector ``mat x vec``."""
    return tuple(  # type: ignore[return-value]
        sum(mat[row * 4 + k] * vec[k] for k in range(4)) for row in range(4)
    )
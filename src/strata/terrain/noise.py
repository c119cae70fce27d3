"""Coherent noise sampling for terrain generation.

Provides a vectorized 2D Perlin gradient noise and the NoiseField
wrapper used for heightmaps, cave masks and ore veins.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Ken Perlin's reference permutation, repeated so lookups never wrap.
_PERMUTATION = np.array(
    [
        151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
        140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
        247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
        57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
        74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
        60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
        65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
        200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
        52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
        207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
        119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
        129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
        218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
        81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
        184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
        222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
    ],
    dtype=np.int64,
)
_P = np.concatenate([_PERMUTATION, _PERMUTATION])

# Eight gradient directions, indexed by the low three hash bits.
_GRADIENTS = np.array(
    [[1, 1], [-1, 1], [1, -1], [-1, -1], [1, 0], [-1, 0], [0, 1], [0, -1]],
    dtype=np.float64,
)

# Value returned everywhere by a field with frequency <= 0.
FLAT_VALUE = 0.5


def _fade(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: NDArray[np.float64], b: NDArray[np.float64], t: NDArray[np.float64]):
    return a + t * (b - a)


def _gradient(h: NDArray[np.int64], x: NDArray[np.float64], y: NDArray[np.float64]):
    g = _GRADIENTS[h & 7]
    return g[..., 0] * x + g[..., 1] * y


def perlin_2d(x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
    """Raw 2D Perlin noise.

    Args:
        x: Noise-space x coordinates.
        y: Noise-space y coordinates (broadcast against x).

    Returns:
        Noise values roughly in [-1, 1]; exactly 0 on integer lattice points.
    """
    x, y = np.broadcast_arrays(
        np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)
    )
    x0 = np.floor(x)
    y0 = np.floor(y)
    fx = x - x0
    fy = y - y0
    xi = x0.astype(np.int64) & 255
    yi = y0.astype(np.int64) & 255

    aa = _P[_P[xi] + yi]
    ab = _P[_P[xi] + yi + 1]
    ba = _P[_P[xi + 1] + yi]
    bb = _P[_P[xi + 1] + yi + 1]

    u = _fade(fx)
    v = _fade(fy)

    bottom = _lerp(_gradient(aa, fx, fy), _gradient(ba, fx - 1.0, fy), u)
    top = _lerp(_gradient(ab, fx, fy - 1.0), _gradient(bb, fx - 1.0, fy - 1.0), u)
    return _lerp(bottom, top, v)


def sample_noise(
    frequency: float,
    offset_x: float,
    offset_y: float,
    x: ArrayLike,
    y: ArrayLike,
) -> NDArray[np.float64]:
    """Sample normalized coherent noise.

    Evaluates Perlin noise at ``((x + offset_x) * frequency,
    (y + offset_y) * frequency)`` and maps it into [0, 1].

    A frequency of zero or below degenerates to the constant FLAT_VALUE
    rather than failing.

    Returns:
        Array broadcast from x and y, values in [0, 1].
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if frequency <= 0:
        return np.full(np.broadcast_shapes(x.shape, y.shape), FLAT_VALUE)

    raw = perlin_2d((x + offset_x) * frequency, (y + offset_y) * frequency)
    return np.clip((raw + 1.0) * 0.5, 0.0, 1.0)


@dataclass(frozen=True)
class NoiseField:
    """A stateless noise field identified by frequency and offset."""

    frequency: float
    offset_x: float = 0.0
    offset_y: float = 0.0

    def sample(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Sample the field at world coordinates."""
        return sample_noise(self.frequency, self.offset_x, self.offset_y, x, y)

    def value_at(self, x: float, y: float) -> float:
        """Sample a single point."""
        return float(self.sample(x, y))

    def grid(self, width: int, height: int) -> NDArray[np.float64]:
        """Sample every integer cell of a width x height region.

        Returns:
            Array of shape (height, width), indexed [y, x].
        """
        ys, xs = np.meshgrid(np.arange(height), np.arange(width), indexing="ij")
        return self.sample(xs, ys)

"""
Geometric and Radiometric Primitives.
Payload types for the composite parameter shapes of a scene file.
They only carry the components read from the file; the renderer owns the math.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector3f:
    """Direction in 3D space (e.g. the camera `up` vector)."""
    x: float
    y: float
    z: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Vector3i:
    """Integer 3D vector (e.g. grid resolutions)."""
    x: int
    y: int
    z: int

    def to_array(self) -> npt.NDArray[np.int64]:
        return np.array([self.x, self.y, self.z], dtype=np.int64)


@dataclass(frozen=True)
class Point3f:
    """Position in 3D space."""
    x: float
    y: float
    z: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Point2i:
    """Integer 2D point (e.g. pixel coordinates)."""
    x: int
    y: int

    def to_array(self) -> npt.NDArray[np.int64]:
        return np.array([self.x, self.y], dtype=np.int64)


@dataclass(frozen=True)
class Normal3f:
    """Surface normal. Not necessarily unit length as read from the file."""
    x: float
    y: float
    z: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Color:
    """
    RGB color exactly as written in the scene file.
    Components may be in [0, 1] or [0, 255]; the renderer decides.
    """
    r: float
    g: float
    b: float

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.r, self.g, self.b])


@dataclass(frozen=True)
class Spectrum:
    """RGB spectral intensity (light emission, attenuation)."""
    r: float
    g: float
    b: float

    @staticmethod
    def uniform(value: float) -> Spectrum:
        """Same intensity on every channel."""
        return Spectrum(value, value, value)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.r, self.g, self.b])

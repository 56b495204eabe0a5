"""
Typed Parameter Values
======================
A closed set of value shapes and the single value type that carries them.

Why is this file needed?
------------------------
A `ParamSet` stores integers, reals, strings, vectors, colors and arrays of
each side by side. `Value` keeps the shape (`ParamType`) next to the payload
so a consumer can never read a REAL as an INT by accident: every read names
the shape it expects and a mismatch raises `ParamTypeError`.

Classes:
    ParamType: Shape discriminant (scalar and array variants).
    Value: Immutable (shape, payload) pair.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Dict, TYPE_CHECKING

import numpy as np

from rt3scene.errors import ParamTypeError
from rt3scene.model.geometry_primitives import (
    Vector3f, Vector3i, Point3f, Point2i, Normal3f, Color, Spectrum
)

if TYPE_CHECKING:
    import numpy.typing as npt


class ParamType(StrEnum):
    """Shape of a parameter as declared by a tag schema."""
    INT = "int"
    UINT = "uint"
    REAL = "real"
    STRING = "string"
    VEC3F = "vec3f"
    VEC3I = "vec3i"
    POINT3F = "point3f"
    POINT2I = "point2i"
    NORMAL3F = "normal3f"
    COLOR = "color"
    SPECTRUM = "spectrum"

    ARR_INT = "arr_int"
    ARR_UINT = "arr_uint"
    ARR_REAL = "arr_real"
    ARR_STRING = "arr_string"
    ARR_VEC3F = "arr_vec3f"
    ARR_VEC3I = "arr_vec3i"
    ARR_POINT3F = "arr_point3f"
    ARR_POINT2I = "arr_point2i"
    ARR_NORMAL3F = "arr_normal3f"
    ARR_COLOR = "arr_color"
    ARR_SPECTRUM = "arr_spectrum"

    @property
    def is_array(self) -> bool:
        return self.value.startswith("arr_")

    @property
    def base(self) -> ParamType:
        """Element shape of an array shape; scalar shapes are their own base."""
        if self.is_array:
            return ParamType(self.value.removeprefix("arr_"))
        return self

    @property
    def arity(self) -> int:
        """Number of whitespace separated tokens one element occupies."""
        return _ARITY.get(self.base, 1)

    @property
    def is_numeric(self) -> bool:
        return self.base is not ParamType.STRING


_ARITY: Dict[ParamType, int] = {
    ParamType.VEC3F: 3,
    ParamType.VEC3I: 3,
    ParamType.POINT3F: 3,
    ParamType.POINT2I: 2,
    ParamType.NORMAL3F: 3,
    ParamType.COLOR: 3,
    ParamType.SPECTRUM: 3,
}

# Python type of the payload (or of each array element) per scalar shape
PAYLOAD_TYPES: Dict[ParamType, type] = {
    ParamType.INT: int,
    ParamType.UINT: int,
    ParamType.REAL: float,
    ParamType.STRING: str,
    ParamType.VEC3F: Vector3f,
    ParamType.VEC3I: Vector3i,
    ParamType.POINT3F: Point3f,
    ParamType.POINT2I: Point2i,
    ParamType.NORMAL3F: Normal3f,
    ParamType.COLOR: Color,
    ParamType.SPECTRUM: Spectrum,
}


def _check_element(param_type: ParamType, item: Any) -> None:
    expected = PAYLOAD_TYPES[param_type]
    # bool is an int subclass, but booleans are carried as strings
    if isinstance(item, bool) or type(item) is not expected:
        raise ParamTypeError(
            f"Payload {item!r} is not a valid '{param_type}' "
            f"(expected {expected.__name__}, got {type(item).__name__})."
        )
    if param_type is ParamType.UINT and item < 0:
        raise ParamTypeError(f"Payload {item!r} is not a valid 'uint' (negative).")


def _element_text(item: Any) -> str:
    if isinstance(item, (int, float, str)):
        return repr(item) if isinstance(item, float) else str(item)
    # Composite dataclasses: components in declaration order
    return " ".join(_element_text(v) for v in vars(item).values())


@dataclass(frozen=True)
class Value:
    """
    One decoded parameter.

    The shape never changes after construction and the payload is checked
    against it, so `Value(ParamType.INT, 1.5)` fails immediately.
    Array shapes hold a tuple of element payloads.
    """
    param_type: ParamType
    payload: Any

    def __post_init__(self) -> None:
        if self.param_type.is_array:
            if not isinstance(self.payload, tuple):
                raise ParamTypeError(
                    f"Payload of '{self.param_type}' must be a tuple, got {type(self.payload).__name__}."
                )
            for item in self.payload:
                _check_element(self.param_type.base, item)
        else:
            _check_element(self.param_type, self.payload)

    @property
    def is_array(self) -> bool:
        return self.param_type.is_array

    def get(self, expected: ParamType) -> Any:
        """Return the payload, provided the caller asks for the stored shape."""
        if expected != self.param_type:
            raise ParamTypeError(f"Value holds '{self.param_type}', but '{expected}' was requested.")
        return self.payload

    def to_array(self) -> npt.NDArray[Any]:
        """
        Numeric payload as a numpy array.

        Scalars give a 0-d array, composites a 1-d array of components,
        arrays a 1-d (scalar base) or 2-d (composite base) array.
        """
        if not self.param_type.is_numeric:
            raise ParamTypeError(f"'{self.param_type}' has no numeric array form.")

        composite = self.param_type.base.arity > 1
        if not self.is_array:
            return self.payload.to_array() if composite else np.array(self.payload)
        if composite:
            return np.array([item.to_array() for item in self.payload])
        return np.array(self.payload)

    def to_text(self) -> str:
        """Canonical text form, the inverse of decoding."""
        if self.is_array:
            return " ".join(_element_text(item) for item in self.payload)
        return _element_text(self.payload)

    def __str__(self) -> str:
        return f"{self.param_type}({self.to_text()})"

"""
Attribute Decoders
==================
Turn the raw text of an XML attribute into the payload of a declared shape.

One function per shape category (scalar, string, composite, array), selected
by `decode()`. Every failure raises `DecodeError`; the decoders never log,
the extractor decides what to report.

Numeric grammar
---------------
Tokens must match completely (no trailing garbage):
    INT   [+-]?digits
    UINT  +?digits
    REAL  [+-]? (digits[.digits] | .digits) [(e|E)[+-]?digits]
Digits are ASCII `0-9` only. `nan`, `inf`, hex literals, `_` digit separators
and other Unicode digits are rejected even though Python's int()/float()
accept some of them.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Tuple

from rt3scene.errors import DecodeError
from rt3scene.model.geometry_primitives import (
    Vector3f, Vector3i, Point3f, Point2i, Normal3f, Color, Spectrum
)
from rt3scene.model.values import ParamType

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_UINT_RE = re.compile(r"\+?\d+", re.ASCII)
_REAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise DecodeError(f"'{token}' is not an integer.")
    return int(token)


def parse_uint(token: str) -> int:
    if not _UINT_RE.fullmatch(token):
        raise DecodeError(f"'{token}' is not an unsigned integer.")
    return int(token)


def parse_real(token: str) -> float:
    if not _REAL_RE.fullmatch(token):
        raise DecodeError(f"'{token}' is not a real number.")
    value = float(token)
    if value in (float("inf"), float("-inf")):
        raise DecodeError(f"'{token}' overflows a real number.")
    return value


_SCALAR_PARSERS: Dict[ParamType, Callable[[str], Any]] = {
    ParamType.INT: parse_int,
    ParamType.UINT: parse_uint,
    ParamType.REAL: parse_real,
}

# Component parser and constructor of each fixed-arity shape
_COMPOSITES: Dict[ParamType, Tuple[Callable[[str], Any], Callable[..., Any]]] = {
    ParamType.VEC3F: (parse_real, Vector3f),
    ParamType.VEC3I: (parse_int, Vector3i),
    ParamType.POINT3F: (parse_real, Point3f),
    ParamType.POINT2I: (parse_int, Point2i),
    ParamType.NORMAL3F: (parse_real, Normal3f),
    ParamType.COLOR: (parse_real, Color),
    ParamType.SPECTRUM: (parse_real, Spectrum),
}


def decode_scalar(text: str, param_type: ParamType) -> Any:
    """Decode INT, UINT or REAL; the whole text must be one numeric token."""
    tokens = text.split()
    if len(tokens) != 1:
        raise DecodeError(f"Expected a single '{param_type}' token, found {len(tokens)}.")
    return _SCALAR_PARSERS[param_type](tokens[0])


def decode_string(text: str) -> str:
    """Strings (and booleans) are taken verbatim."""
    return text


def _build_composite(tokens: List[str], param_type: ParamType) -> Any:
    parse_component, constructor = _COMPOSITES[param_type]
    return constructor(*(parse_component(token) for token in tokens))


def decode_composite(text: str, param_type: ParamType) -> Any:
    """
    Decode a fixed-arity shape (vectors, points, normals, colors, spectra).

    Exactly `arity` tokens are required. SPECTRUM additionally accepts a
    single token, read as a uniform spectrum.
    """
    tokens = text.split()
    if param_type is ParamType.SPECTRUM and len(tokens) == 1:
        return Spectrum.uniform(parse_real(tokens[0]))
    if len(tokens) != param_type.arity:
        raise DecodeError(
            f"Expected {param_type.arity} tokens for '{param_type}', found {len(tokens)}."
        )
    return _build_composite(tokens, param_type)


def decode_array(text: str, param_type: ParamType) -> Tuple[Any, ...]:
    """
    Decode an array shape: every token (or group of `arity` tokens for
    composite bases) becomes one element. Arrays cannot be empty.
    """
    base = param_type.base
    arity = base.arity
    tokens = text.split()
    if not tokens:
        raise DecodeError(f"Empty value for '{param_type}'.")
    if len(tokens) % arity != 0:
        raise DecodeError(
            f"'{param_type}' needs a multiple of {arity} tokens, found {len(tokens)}."
        )

    match base:
        case ParamType.STRING:
            return tuple(tokens)
        case ParamType.INT | ParamType.UINT | ParamType.REAL:
            parse_token = _SCALAR_PARSERS[base]
            return tuple(parse_token(token) for token in tokens)
        case _:
            return tuple(
                _build_composite(tokens[i:i + arity], base)
                for i in range(0, len(tokens), arity)
            )


def decode(text: str, param_type: ParamType) -> Any:
    """
    Decode `text` as `param_type`.

    Returns:
        The payload to wrap in a `Value` of the same shape.

    Raises:
        DecodeError: `text` does not fit the shape.
    """
    if param_type.is_array:
        return decode_array(text, param_type)

    match param_type:
        case ParamType.STRING:
            return decode_string(text)
        case ParamType.INT | ParamType.UINT | ParamType.REAL:
            return decode_scalar(text, param_type)
        case _:
            return decode_composite(text, param_type)

"""
rt3scene: schema-driven reader for RT3 scene files.
"""
from rt3scene.api import SceneAPI, SceneRecorder
from rt3scene.errors import DecodeError, ParamTypeError, SceneError, SceneLoadError
from rt3scene.model import ParamSet, ParamType, Value
from rt3scene.parser import SceneParser, parse

__all__ = [
    "SceneAPI",
    "SceneRecorder",
    "SceneParser",
    "parse",
    "ParamSet",
    "ParamType",
    "Value",
    "SceneError",
    "SceneLoadError",
    "DecodeError",
    "ParamTypeError",
]

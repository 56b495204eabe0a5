"""
The MODEL layer contains pure data structures.
It has NO knowledge of XML or of the renderer.
It deals with value shapes, geometric payloads and parameter bundles.
"""
from rt3scene.model.paramset import ParamSet
from rt3scene.model.values import ParamType, Value

__all__ = ["ParamSet", "ParamType", "Value"]

"""
Exception Hierarchy
===================
Errors raised by the scene parser.

Only `SceneLoadError` aborts a parse. `DecodeError` is raised by the attribute
decoders and handled by the extractor, which logs it and moves on.
`ParamTypeError` signals that a consumer asked a `ParamSet` for the wrong
shape, i.e. a bug in the setup API integration rather than in the scene file.
"""


class SceneError(Exception):
    """Base class for all rt3scene errors."""


class SceneLoadError(SceneError):
    """The scene source could not be loaded or is structurally unusable."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Scene '{source}': {reason}")
        self.source = source
        self.reason = reason


class DecodeError(SceneError, ValueError):
    """Attribute text does not match its declared shape."""


class ParamTypeError(SceneError, TypeError):
    """A value was requested (or built) under a shape it does not hold."""

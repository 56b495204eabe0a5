"""
Tag Schema Table
================
Static table of the scene tags the parser understands.

Each entry maps a normalised (lowercase) tag name to the attributes it
extracts, the setup API call it triggers and, for bracketing tags, the scope
it opens or closes. Entries are added with the `@register_tag` decorator:

    @register_tag("film", params=FILM_PARAMS)
    def _film(api, ps):
        api.film(ps)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Dict, List, Optional, Tuple

from rt3scene.api import SceneAPI
from rt3scene.model.paramset import ParamSet
from rt3scene.model.values import ParamType

Handler = Callable[[SceneAPI, ParamSet], None]
ParamDecl = Tuple[Tuple[ParamType, str], ...]


class ScopeAction(StrEnum):
    NONE = "none"
    OPEN = "open"
    CLOSE = "close"


@dataclass(frozen=True)
class TagSchema:
    tag: str
    params: ParamDecl
    handler: Handler
    scope: ScopeAction = ScopeAction.NONE
    scope_name: Optional[str] = None


_REGISTRY: Dict[str, TagSchema] = {}


def register_tag(
    tag: str,
    params: ParamDecl = (),
    scope: ScopeAction = ScopeAction.NONE,
    scope_name: Optional[str] = None,
) -> Callable[[Handler], Handler]:
    """Function decorator to register a handler under a tag name."""
    key = tag.lower()
    if scope is not ScopeAction.NONE and not scope_name:
        raise ValueError(f"Scope tag '{key}' must define scope_name")

    def decorator(handler: Handler) -> Handler:
        if key in _REGISTRY:
            raise ValueError(f"Tag '{key}' is already registered")
        _REGISTRY[key] = TagSchema(
            tag=key, params=tuple(params), handler=handler, scope=scope, scope_name=scope_name
        )
        return handler
    return decorator


def find_schema(tag: str) -> Optional[TagSchema]:
    """Exact match on the lowercase tag name."""
    return _REGISTRY.get(tag.lower())


def closing_schema(scope_name: str) -> TagSchema:
    for schema in _REGISTRY.values():
        if schema.scope is ScopeAction.CLOSE and schema.scope_name == scope_name:
            return schema
    raise KeyError(f"No closing tag registered for scope '{scope_name}'")


def list_tags() -> List[str]:
    return list(_REGISTRY.keys())


# ------------------------------------------------------------------------------
# Attribute declarations
# ------------------------------------------------------------------------------
BACKGROUND_PARAMS: ParamDecl = (
    (ParamType.STRING, "type"),
    (ParamType.STRING, "filename"),   # Texture file name.
    (ParamType.STRING, "mapping"),    # Type of mapping required.
    (ParamType.COLOR, "color"),       # Single color for the entire background.
    (ParamType.COLOR, "tl"),          # Top-left corner
    (ParamType.COLOR, "tr"),          # Top-right corner
    (ParamType.COLOR, "bl"),          # Bottom-left corner
    (ParamType.COLOR, "br"),          # Bottom-right corner
)

FILM_PARAMS: ParamDecl = (
    (ParamType.STRING, "type"),
    (ParamType.STRING, "filename"),
    (ParamType.STRING, "img_type"),
    (ParamType.INT, "x_res"),
    (ParamType.INT, "y_res"),
    (ParamType.ARR_REAL, "crop_window"),
    (ParamType.STRING, "gamma_corrected"),  # bool
)

CAMERA_PARAMS: ParamDecl = (
    (ParamType.STRING, "type"),
    (ParamType.REAL, "fovy"),
    (ParamType.REAL, "focal_distance"),
    (ParamType.REAL, "lens_radius"),
    (ParamType.ARR_REAL, "screen_window"),  # left right bottom top
)

LOOKAT_PARAMS: ParamDecl = (
    (ParamType.POINT3F, "look_from"),
    (ParamType.POINT3F, "look_at"),
    (ParamType.VEC3F, "up"),
)

INTEGRATOR_PARAMS: ParamDecl = (
    (ParamType.STRING, "type"),
    (ParamType.UINT, "depth"),
    (ParamType.UINT, "spp"),
)

MATERIAL_PARAMS: ParamDecl = (
    (ParamType.STRING, "type"),
    (ParamType.STRING, "name"),
    (ParamType.COLOR, "color"),
    (ParamType.COLOR, "ambient"),
    (ParamType.COLOR, "diffuse"),
    (ParamType.COLOR, "specular"),
    (ParamType.COLOR, "mirror"),
    (ParamType.REAL, "glossiness"),
)

NAMED_MATERIAL_PARAMS: ParamDecl = (
    (ParamType.STRING, "name"),
)

OBJECT_PARAMS: ParamDecl = (
    (ParamType.STRING, "type"),
    (ParamType.STRING, "filename"),
    (ParamType.REAL, "radius"),
    (ParamType.POINT3F, "center"),
    (ParamType.UINT, "ntriangles"),
    (ParamType.ARR_INT, "indices"),
    (ParamType.ARR_POINT3F, "vertices"),
    (ParamType.ARR_NORMAL3F, "normals"),
    (ParamType.ARR_REAL, "uv"),
    (ParamType.STRING, "reverse_vertex_order"),  # bool
    (ParamType.STRING, "compute_normals"),       # bool
    (ParamType.STRING, "backface_cull"),         # bool
)

LIGHT_PARAMS: ParamDecl = (
    (ParamType.STRING, "type"),
    (ParamType.SPECTRUM, "I"),
    (ParamType.SPECTRUM, "L"),
    (ParamType.VEC3F, "scale"),
    (ParamType.POINT3F, "from"),
    (ParamType.POINT3F, "to"),
    (ParamType.REAL, "cutoff"),
    (ParamType.REAL, "falloff"),
)


# ------------------------------------------------------------------------------
# Handlers
# ------------------------------------------------------------------------------
@register_tag("background", params=BACKGROUND_PARAMS)
def _background(api: SceneAPI, ps: ParamSet) -> None:
    api.background(ps)


@register_tag("film", params=FILM_PARAMS)
def _film(api: SceneAPI, ps: ParamSet) -> None:
    api.film(ps)


@register_tag("camera", params=CAMERA_PARAMS)
def _camera(api: SceneAPI, ps: ParamSet) -> None:
    api.camera(ps)


@register_tag("lookat", params=LOOKAT_PARAMS)
def _look_at(api: SceneAPI, ps: ParamSet) -> None:
    api.look_at(ps)


@register_tag("integrator", params=INTEGRATOR_PARAMS)
def _integrator(api: SceneAPI, ps: ParamSet) -> None:
    api.integrator(ps)


@register_tag("world_begin", scope=ScopeAction.OPEN, scope_name="world")
def _world_begin(api: SceneAPI, ps: ParamSet) -> None:
    api.world_begin()


@register_tag("world_end", scope=ScopeAction.CLOSE, scope_name="world")
def _world_end(api: SceneAPI, ps: ParamSet) -> None:
    api.world_end()


@register_tag("attribute_begin", scope=ScopeAction.OPEN, scope_name="attribute")
def _attribute_begin(api: SceneAPI, ps: ParamSet) -> None:
    api.attribute_begin()


@register_tag("attribute_end", scope=ScopeAction.CLOSE, scope_name="attribute")
def _attribute_end(api: SceneAPI, ps: ParamSet) -> None:
    api.attribute_end()


@register_tag("material", params=MATERIAL_PARAMS)
def _material(api: SceneAPI, ps: ParamSet) -> None:
    api.material(ps)


@register_tag("make_named_material", params=MATERIAL_PARAMS)
def _make_named_material(api: SceneAPI, ps: ParamSet) -> None:
    api.make_named_material(ps)


@register_tag("named_material", params=NAMED_MATERIAL_PARAMS)
def _named_material(api: SceneAPI, ps: ParamSet) -> None:
    api.named_material(ps)


@register_tag("object", params=OBJECT_PARAMS)
def _object(api: SceneAPI, ps: ParamSet) -> None:
    api.object(ps)


@register_tag("light_source", params=LIGHT_PARAMS)
def _light_source(api: SceneAPI, ps: ParamSet) -> None:
    api.light_source(ps)

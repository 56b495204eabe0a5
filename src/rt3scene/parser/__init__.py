"""
The PARSER layer turns scene XML into setup API calls.

Importing this package registers the built-in tag table (`schemas`).
"""
from rt3scene.parser.extractor import parse_parameters, parse_single_attribute
from rt3scene.parser.scene_parser import SceneParser, parse
from rt3scene.parser.schemas import register_tag, find_schema, list_tags

__all__ = [
    "SceneParser",
    "parse",
    "parse_parameters",
    "parse_single_attribute",
    "register_tag",
    "find_schema",
    "list_tags",
]

"""
Scene Parser (Tag Dispatcher)
=============================
Walks a loaded scene tree and drives the setup API.

Why is this file needed?
------------------------
1. Dispatch: Every first-level tag is matched (case-insensitively) against the
   schema table and turned into exactly one setup API call.
2. Robustness: Unknown tags and malformed attributes are logged and skipped;
   only an unreadable or empty scene aborts the parse.
3. Scopes: `world_begin`/`world_end` (and `attribute_begin`/`attribute_end`)
   may be written as flat sibling pairs or as an element wrapping its
   content. The wrapped form is walked recursively and closed automatically.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Iterable, List

from rt3scene.api import SceneAPI
from rt3scene.config import LOG_INDENT
from rt3scene.model.paramset import ParamSet
from rt3scene.parser.document import SceneDocument, normalize_tag
from rt3scene.parser.extractor import parse_parameters
from rt3scene.parser.schemas import ScopeAction, TagSchema, closing_schema, find_schema

logger = logging.getLogger(__name__)


class SceneParser:
    """
    Single pass over one scene document.

    Args:
        api: Setup API receiving one call per recognised tag.
    """
    def __init__(self, api: SceneAPI) -> None:
        self.api = api
        self.scopes: List[str] = []
        self.unknown_tags: List[str] = []

    def parse(self, filename: str) -> None:
        """Entry point for a scene file. Raises SceneLoadError if unusable."""
        self.parse_document(SceneDocument.load(filename))

    def parse_string(self, text: str, source: str = "<string>") -> None:
        self.parse_document(SceneDocument.from_string(text, source=source))

    def parse_document(self, document: SceneDocument) -> None:
        logger.info(f"Parsing scene '{document.source}'")
        self.scopes.clear()
        self.unknown_tags.clear()

        self.parse_tags(document.first_level_tags, level=0)

        for scope in reversed(self.scopes):
            logger.warning(f"Scope '{scope}' opened but never closed in '{document.source}'.")
        if self.unknown_tags:
            logger.info(f"Skipped {len(self.unknown_tags)} unknown tag(s): {', '.join(self.unknown_tags)}")
        logger.info(f"Finished parsing scene '{document.source}'")

    def parse_tags(self, elements: Iterable[ET.Element], level: int) -> None:
        """Main loop that handles each tag on one level of the tree."""
        logger.debug(f"[parse_tags()]: level is {level}")

        for element in elements:
            tag_name = normalize_tag(element.tag)
            logger.debug(f"{' ' * (level * LOG_INDENT)}***** Tag id is '{tag_name}', at level {level}")

            schema = find_schema(tag_name)
            if schema is None:
                logger.warning(f"Undefined tag '{tag_name}' found!")
                self.unknown_tags.append(tag_name)
                continue

            self._dispatch(schema, element, level)

    def _dispatch(self, schema: TagSchema, element: ET.Element, level: int) -> None:
        ps = parse_parameters(element, schema.params) if schema.params else ParamSet()

        match schema.scope:
            case ScopeAction.OPEN:
                depth = len(self.scopes)
                schema.handler(self.api, ps)
                self.scopes.append(schema.scope_name)
                if len(element):
                    # Wrapped form: <world_begin> ... </world_begin>
                    self.parse_tags(element, level + 1)
                    if len(self.scopes) > depth and self.scopes[depth] == schema.scope_name:
                        self._close_scope(closing_schema(schema.scope_name), level)
                    else:
                        logger.warning(
                            f"Scope '{schema.scope_name}' was already closed inside '{schema.tag}'; "
                            f"automatic close skipped."
                        )
            case ScopeAction.CLOSE:
                self._close_scope(schema, level)
            case _:
                if len(element):
                    logger.warning(
                        f"Tag '{schema.tag}' does not open a scope; its {len(element)} child tag(s) were ignored."
                    )
                schema.handler(self.api, ps)

    def _close_scope(self, schema: TagSchema, level: int) -> None:
        if self.scopes and self.scopes[-1] == schema.scope_name:
            self.scopes.pop()
        elif schema.scope_name in self.scopes:
            logger.warning(
                f"Tag '{schema.tag}' closes scope '{schema.scope_name}' while "
                f"'{self.scopes[-1]}' is still open."
            )
            # Drop the innermost occurrence and everything opened after it
            index = len(self.scopes) - 1 - self.scopes[::-1].index(schema.scope_name)
            del self.scopes[index:]
        else:
            logger.warning(f"Tag '{schema.tag}' found at level {level} without a matching open scope.")
        schema.handler(self.api, ParamSet())


def parse(filename: str, api: SceneAPI) -> None:
    """Parse the scene file `filename` into `api`."""
    SceneParser(api).parse(filename)

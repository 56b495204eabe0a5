"""
Scene Document Loader
Reads an RT3 scene file into an element tree and checks its outer structure.

The XML parsing itself is delegated to `xml.etree.ElementTree`; this module
only turns its failures, and an unusable tree, into `SceneLoadError`.
"""
from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import List

from rt3scene.config import ROOT_TAG
from rt3scene.errors import SceneLoadError

logger = logging.getLogger(__name__)


def normalize_tag(tag: str) -> str:
    """Lowercase tag name with any `{namespace}` prefix removed."""
    if tag.startswith("{"):
        tag = tag.split("}", 1)[1]
    return tag.lower()


@dataclass(frozen=True)
class SceneDocument:
    """
    A loaded scene: the root element and the source it came from.
    """
    source: str
    root: ET.Element

    @property
    def first_level_tags(self) -> List[ET.Element]:
        return list(self.root)

    @staticmethod
    def load(filename: str) -> SceneDocument:
        logger.info(f"Loading scene from: {filename}")
        if not os.path.isfile(filename):
            msg = (f"The file either is not available OR contains an invalid "
                   f"{ROOT_TAG.upper()} scene.")
            logger.error(f"{filename}: {msg}")
            raise SceneLoadError(filename, msg)

        try:
            tree = ET.parse(filename)
        except (ET.ParseError, OSError) as e:
            logger.error(f"Failed to read scene '{filename}': {e}")
            raise SceneLoadError(filename, f"not a valid XML document ({e})") from e

        return SceneDocument._validated(filename, tree.getroot())

    @staticmethod
    def from_string(text: str, source: str = "<string>") -> SceneDocument:
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            logger.error(f"Failed to read scene '{source}': {e}")
            raise SceneLoadError(source, f"not a valid XML document ({e})") from e

        return SceneDocument._validated(source, root)

    @staticmethod
    def _validated(source: str, root: ET.Element | None) -> SceneDocument:
        if root is None:
            raise SceneLoadError(source, f"no \"{ROOT_TAG.upper()}\" tag found.")

        if normalize_tag(root.tag) != ROOT_TAG:
            raise SceneLoadError(
                source,
                f"root tag is \"{root.tag}\", expected \"{ROOT_TAG.upper()}\"."
            )

        if len(root) == 0:
            raise SceneLoadError(
                source,
                f"no \"children\" tags found inside the \"{ROOT_TAG.upper()}\" tag. Empty scene file?"
            )

        logger.debug(f"Scene '{source}' has {len(root)} first-level tags.")
        return SceneDocument(source=source, root=root)

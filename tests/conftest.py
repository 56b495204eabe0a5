"""Shared fixtures for the scene parser tests."""
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from rt3scene.api import SceneRecorder
from rt3scene.parser.scene_parser import SceneParser


@pytest.fixture
def recorder():
    """A setup API that records calls instead of building a scene."""
    return SceneRecorder()


@pytest.fixture
def scene_parser(recorder):
    return SceneParser(recorder)


@pytest.fixture
def write_scene(tmp_path):
    """Write scene text to a temporary .xml file and return its path."""
    def _write(text: str, name: str = "scene.xml") -> str:
        path: Path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def element():
    """Build a single XML element from its text."""
    def _element(text: str) -> ET.Element:
        return ET.fromstring(text)
    return _element

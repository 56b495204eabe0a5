"""
Configuration & Path Management
===============================
Central registry for global constants and file paths.

Exports:
    ROOT_TAG (str): Name of the root element every scene file must have.
    LOG_INDENT (int): Spaces per nesting level in walk diagnostics.
    BOOL_TRUE / BOOL_FALSE (frozenset): Literals accepted for boolean flags.
    ASSETS_PATH (str): Absolute path to the assets directory.
    EXAMPLE_SCENES_PATH (str): Absolute path to the bundled example scenes.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/rt3scene/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Scene format
ROOT_TAG: str = "rt3"

# Booleans travel as plain strings and are interpreted by the consumer
BOOL_TRUE: frozenset[str] = frozenset({"true", "yes", "on", "1"})
BOOL_FALSE: frozenset[str] = frozenset({"false", "no", "off", "0"})

# Diagnostics
LOG_INDENT: int = 3

# Paths
ASSETS_PATH: str = get_resource_path("assets")
EXAMPLE_SCENES_PATH: str = os.path.join(ASSETS_PATH, "scenes")

if not os.path.exists(ASSETS_PATH):
    logger.debug(f"Assets path not found at {ASSETS_PATH}")

"""
Universal Parameter Extractor
=============================
Reads the attributes a tag schema declares from one XML element into a
`ParamSet`.

Every declared attribute is optional. A missing attribute is skipped
silently; an attribute whose text does not fit its declared shape is
reported and skipped, and extraction carries on with the next one. The setup
API decides later whether a missing or malformed attribute matters.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Optional, Sequence, Tuple

from rt3scene.errors import DecodeError
from rt3scene.model.paramset import ParamSet
from rt3scene.model.values import ParamType, Value
from rt3scene.parser.decoders import decode
from rt3scene.parser.document import normalize_tag

logger = logging.getLogger(__name__)

ParamList = Sequence[Tuple[ParamType, str]]


def parse_single_attribute(
    element: ET.Element,
    ps: ParamSet,
    param_type: ParamType,
    name: str,
) -> bool:
    """
    Extract one attribute of `element` into `ps`.

    Returns:
        True if the attribute was present, decoded and stored.
    """
    raw = element.get(name)
    if raw is None:
        logger.debug(f"\tAttribute '{name}' absent, skipping.")
        return False

    try:
        payload = decode(raw, param_type)
    except DecodeError as e:
        logger.warning(
            f"Tag '{normalize_tag(element.tag)}': attribute '{name}' = \"{raw}\" "
            f"is not a valid '{param_type}' and was ignored ({e})"
        )
        return False

    ps.set(name, Value(param_type, payload))
    logger.debug(f"\tAdded attribute ({name}: \"{raw}\" as {param_type})")
    return True


def parse_parameters(
    element: ET.Element,
    param_list: ParamList,
    ps_out: Optional[ParamSet] = None,
) -> ParamSet:
    """
    Extract every declared (shape, name) pair of `element`, in order.

    Args:
        element: XML element we are extracting information from.
        param_list: Pairs (shape, attribute name) declared by the tag schema.
        ps_out: Bundle to fill in. A new one is created if omitted.

    Returns:
        The (possibly partial) bundle. Never raises for document content.
    """
    ps = ps_out if ps_out is not None else ParamSet()
    tag = normalize_tag(element.tag)
    logger.debug(f"parse_parameters(): tag '{tag}', {len(param_list)} declared attributes")

    for param_type, name in param_list:
        parse_single_attribute(element, ps, param_type, name)

    declared = {name for _, name in param_list}
    for name in element.keys():
        if name not in declared:
            logger.debug(f"Tag '{tag}': undeclared attribute '{name}' ignored.")

    return ps

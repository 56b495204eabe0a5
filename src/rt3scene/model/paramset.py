"""
Parameter Set
=============
Name-keyed bundle of the values extracted from one tag occurrence.

A ParamSet is created empty for every tag, filled by the extractor, handed to
the setup API and then dropped. Absent names are a normal outcome: most scene
attributes are optional and the setup API decides which ones it needs.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from rt3scene.config import BOOL_FALSE, BOOL_TRUE
from rt3scene.model.values import ParamType, Value

logger = logging.getLogger(__name__)


class ParamSet:
    """
    Mapping from attribute name to `Value`, at most one value per name.
    """
    def __init__(self) -> None:
        self._values: Dict[str, Value] = {}

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}={value}" for name, value in self._values.items())
        return f"{self.__class__.__name__}({inner})"

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParamSet):
            return NotImplemented
        return self._values == other._values

    def set(self, name: str, value: Value) -> None:
        """Insert `value` under `name`. An existing entry is replaced."""
        if name in self._values:
            logger.debug(f"Overwriting parameter '{name}': {self._values[name]} -> {value}")
        self._values[name] = value

    def get(self, name: str) -> Optional[Value]:
        """Stored value, or None if the attribute was not extracted."""
        return self._values.get(name)

    def retrieve(self, name: str, expected: ParamType, default: Any = None) -> Any:
        """
        Payload stored under `name`.

        Args:
            name: Attribute name.
            expected: Shape the caller wants to read.
            default: Returned when the attribute is absent.

        Raises:
            ParamTypeError: The attribute exists with a different shape.
        """
        value = self._values.get(name)
        if value is None:
            return default
        return value.get(expected)

    def retrieve_bool(self, name: str, default: bool = False) -> bool:
        """
        Interpret a STRING attribute as a boolean flag.

        Raises:
            ValueError: The text is not a recognised boolean literal.
        """
        text = self.retrieve(name, ParamType.STRING)
        if text is None:
            return default
        lowered = text.strip().lower()
        if lowered in BOOL_TRUE:
            return True
        if lowered in BOOL_FALSE:
            return False
        raise ValueError(f"Parameter '{name}' = '{text}' is not a boolean.")

    def names(self) -> List[str]:
        return list(self._values)

    def items(self) -> List[Tuple[str, Value]]:
        return list(self._values.items())

    def to_dict(self) -> Dict[str, Any]:
        """Plain payloads keyed by name (for diagnostics and printing)."""
        return {name: value.payload for name, value in self._values.items()}

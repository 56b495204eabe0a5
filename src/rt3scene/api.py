"""
Scene Setup API
===============
Interface between the scene parser and the renderer.

Why is this file needed?
------------------------
1. Decoupling: The parser never touches renderer state. It receives a
   `SceneAPI` object and calls one method per recognised tag.
2. Testability: `SceneRecorder` implements the interface by recording the
   calls, so a whole scene can be parsed without a renderer.

Classes:
    SceneAPI: Abstract setup API, one method per scene tag.
    APICall: One recorded call.
    SceneRecorder: SceneAPI that records calls in order.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from rt3scene.model.paramset import ParamSet

logger = logging.getLogger(__name__)


class SceneAPI(ABC):
    """
    Setup API consumed by `SceneParser`.

    Methods taking a `ParamSet` own it once called; scope bracketing methods
    take no parameters.
    """

    # --- Scene options ---
    @abstractmethod
    def background(self, ps: ParamSet) -> None: ...

    @abstractmethod
    def film(self, ps: ParamSet) -> None: ...

    @abstractmethod
    def camera(self, ps: ParamSet) -> None: ...

    @abstractmethod
    def look_at(self, ps: ParamSet) -> None: ...

    @abstractmethod
    def integrator(self, ps: ParamSet) -> None: ...

    # --- Scope bracketing ---
    @abstractmethod
    def world_begin(self) -> None: ...

    @abstractmethod
    def world_end(self) -> None: ...

    @abstractmethod
    def attribute_begin(self) -> None: ...

    @abstractmethod
    def attribute_end(self) -> None: ...

    # --- World description ---
    @abstractmethod
    def material(self, ps: ParamSet) -> None: ...

    @abstractmethod
    def make_named_material(self, ps: ParamSet) -> None: ...

    @abstractmethod
    def named_material(self, ps: ParamSet) -> None: ...

    @abstractmethod
    def object(self, ps: ParamSet) -> None: ...

    @abstractmethod
    def light_source(self, ps: ParamSet) -> None: ...


@dataclass
class APICall:
    """Return object of `SceneRecorder`: the method name and its bundle."""
    name: str
    ps: Optional[ParamSet] = None

    def __str__(self) -> str:
        if self.ps is None:
            return f"{self.name}()"
        args = ", ".join(f"{name}={value}" for name, value in self.ps.items())
        return f"{self.name}({args})"


@dataclass
class SceneRecorder(SceneAPI):
    """Records every setup call instead of building a scene."""
    calls: List[APICall] = field(default_factory=list)

    @property
    def call_names(self) -> List[str]:
        return [call.name for call in self.calls]

    def find(self, name: str) -> List[APICall]:
        return [call for call in self.calls if call.name == name]

    def _record(self, name: str, ps: Optional[ParamSet] = None) -> None:
        logger.debug(f"API call: {name}")
        self.calls.append(APICall(name, ps))

    def background(self, ps: ParamSet) -> None:
        self._record("background", ps)

    def film(self, ps: ParamSet) -> None:
        self._record("film", ps)

    def camera(self, ps: ParamSet) -> None:
        self._record("camera", ps)

    def look_at(self, ps: ParamSet) -> None:
        self._record("look_at", ps)

    def integrator(self, ps: ParamSet) -> None:
        self._record("integrator", ps)

    def world_begin(self) -> None:
        self._record("world_begin")

    def world_end(self) -> None:
        self._record("world_end")

    def attribute_begin(self) -> None:
        self._record("attribute_begin")

    def attribute_end(self) -> None:
        self._record("attribute_end")

    def material(self, ps: ParamSet) -> None:
        self._record("material", ps)

    def make_named_material(self, ps: ParamSet) -> None:
        self._record("make_named_material", ps)

    def named_material(self, ps: ParamSet) -> None:
        self._record("named_material", ps)

    def object(self, ps: ParamSet) -> None:
        self._record("object", ps)

    def light_source(self, ps: ParamSet) -> None:
        self._record("light_source", ps)

"""Capabilities the map is handed by its host.

Nothing here depends on pygame; the implementations live in host.py.
"""
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Renderer(Protocol):
    def draw(self, texture: Any, quad: Any, x: float, y: float) -> None: ...


@runtime_checkable
class AudioSink(Protocol):
    def set_looping(self, looping: bool) -> None: ...

    def play(self) -> None: ...


@runtime_checkable
class Player(Protocol):
    x: float

    def update(self, dt: float) -> None: ...

    def render(self, renderer: Renderer) -> None: ...


@runtime_checkable
class Atlas(Protocol):
    """A texture plus the quad for each sprite slot."""
    texture: Any
    quads: Mapping[int, Any]

from dataclasses import dataclass
from typing import Iterator, List, Sequence

from .tiles import TileKind


class Animation:
    """Endless cycle over sprite frames, each shown for `interval` seconds."""

    def __init__(self, frames: Sequence[TileKind], interval: float):
        if not frames:
            raise ValueError("animation needs at least one frame")
        if interval <= 0:
            raise ValueError(f"frame interval must be positive, got {interval}")
        self.frames = tuple(frames)
        self.interval = interval
        self.elapsed = 0.0

    @property
    def period(self) -> float:
        return self.interval * len(self.frames)

    @property
    def frame_index(self) -> int:
        return int(self.elapsed // self.interval) % len(self.frames)

    @property
    def current_frame(self) -> TileKind:
        return self.frames[self.frame_index]

    def update(self, dt: float):
        # keep elapsed inside one period so it never drifts
        self.elapsed = (self.elapsed + dt) % self.period

    def restart(self):
        self.elapsed = 0.0


@dataclass
class AnimationEntry:
    x: int
    y: int
    animation: Animation
    xo: int = 0
    yo: int = 0


class AnimationRegistry:
    """Animations bound to grid cells, advanced together every tick."""

    def __init__(self):
        self.entries: List[AnimationEntry] = []

    def add(self, x: int, y: int, animation: Animation, xo: int = 0, yo: int = 0) -> AnimationEntry:
        entry = AnimationEntry(x, y, animation, xo, yo)
        self.entries.append(entry)
        return entry

    def update(self, dt: float):
        for entry in self.entries:
            entry.animation.update(dt)

    def __iter__(self) -> Iterator[AnimationEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

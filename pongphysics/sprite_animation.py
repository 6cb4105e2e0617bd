"""Frame-based sprite sheet animation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Animation:
    """A named run of sprite-sheet frames."""

    frames: List[int] = field(default_factory=list)
    repeat_count: int = 0
    anim_time: float = 0.0
    ended: bool = False
    active: bool = False

    def set(self, repeat: int, time: float, active: bool) -> None:
        """Set the repeat count (-1 loops forever), total time and activity."""
        self.repeat_count = repeat
        self.anim_time = time
        self.active = active

    def add_frame(self, frame: int) -> None:
        self.frames.append(frame)


class SpriteAnimation:
    """Holds several animations over one sprite sheet and tracks the current frame."""

    def __init__(self, mesh_name: str, row: int, col: int) -> None:
        self.mesh_name = mesh_name
        self.row = row
        self.col = col
        self.current_time = 0.0
        self.current_frame = 0
        self.play_count = 0
        self.current_animation = ""
        self.animations: Dict[str, Animation] = {}

    @property
    def current(self) -> Animation:
        """The animation being played; KeyError if none has been added."""
        return self.animations[self.current_animation]

    def update(self, dt: float) -> None:
        """Advance the current animation by ``dt`` seconds."""
        anim = self.current
        if not anim.active:
            return
        self.current_time += dt
        last = len(anim.frames) - 1
        frame_time = anim.anim_time / len(anim.frames)
        index = last if frame_time <= 0 else min(last, int(self.current_time / frame_time))
        self.current_frame = anim.frames[index]

        if self.current_time >= anim.anim_time:
            if self.play_count < anim.repeat_count:
                self.play_count += 1
                self.current_time = 0.0
                self.current_frame = anim.frames[0]
            else:
                anim.active = False
                anim.ended = True
            if anim.repeat_count == -1:
                self.current_time = 0.0
                self.current_frame = anim.frames[0]
                anim.active = True
                anim.ended = False

    def _register(self, name: str, anim: Animation) -> None:
        self.animations[name] = anim
        if self.current_animation == "":
            self.current_animation = name
        anim.active = False

    def add_animation(self, name: str, start: int, end: int) -> None:
        """Add frames ``start`` up to but excluding ``end`` (swapped if reversed)."""
        if start > end:
            start, end = end, start
        self._register(name, Animation(frames=list(range(start, end))))

    def add_sequence_animation(self, name: str, *args: int) -> None:
        """Add an animation made of the given frame numbers in order."""
        self._register(name, Animation(frames=list(args)))

    def play_animation(self, name: str, repeat: int, time: float) -> None:
        """Make ``name`` current and start it; unknown names are ignored."""
        anim = self.animations.get(name)
        if anim is not None:
            self.current_animation = name
            anim.set(repeat, time, True)

    def pause(self) -> None:
        self.current.active = False

    def resume(self) -> None:
        self.current.active = True

    def reset(self) -> None:
        """Return to the first frame and clear the play count."""
        self.current_frame = self.current.frames[0]
        self.play_count = 0
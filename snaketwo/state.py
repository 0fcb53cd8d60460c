"""Screen states, the stack that switches between them, and shared app context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class State(ABC):
    """One screen of the game: menu, shop, play field and so on."""

    active: bool = False

    @abstractmethod
    def update(self, delta: float) -> None:
        """Advance the state by ``delta`` seconds."""

    @abstractmethod
    def draw(self) -> None:
        """Render the state."""

    @abstractmethod
    def input(self) -> None:
        """Consume pending input events."""

    def pause(self) -> None:
        """Mark the state inactive when another state is pushed on top of it."""
        self.active = False

    def start(self) -> None:
        """Mark the state active when it becomes the one on top."""
        self.active = True


class StateManager:
    """A stack of states whose changes are applied between frames."""

    def __init__(self) -> None:
        self._stack: list[State] = []
        self._pending: State | None = None
        self._replace = False
        self._remove = False

    def __len__(self) -> int:
        return len(self._stack)

    def pop(self) -> None:
        """Request removal of the active state at the next change."""
        self._remove = True

    def add(self, state: State, replace: bool = False) -> None:
        """Request ``state`` to be pushed, optionally replacing the active one."""
        self._pending = state
        self._replace = replace

    def state_change(self) -> None:
        """Apply any pending push, replacement or removal."""
        if self._pending is not None:
            if self._replace and self._stack:
                self._stack.pop()
                self._replace = False
            if self._stack:
                self._stack[-1].pause()
            self._stack.append(self._pending)
            self._pending = None
            self._stack[-1].start()

        if self._remove and self._stack:
            self._stack.pop()
            self._remove = False
            if self._stack:
                self._stack[-1].start()

    def current(self) -> State:
        """Return the active state."""
        if not self._stack:
            raise IndexError("no active state")
        return self._stack[-1]


@dataclass
class AppContext:
    """What every screen shares: the state stack, the window and the asset root."""

    states: StateManager = field(default_factory=StateManager)
    window: Any = None
    assets: Path = Path("assets")
    running: bool = True
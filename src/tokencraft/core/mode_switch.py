"""
Mode-switch controller.

Owns the current theme mode and the transient ``transitioning`` flag.
Document mutation is delegated to an injected StyleSink; the controller
never touches a live document itself.

Invariants:
- exactly one mode class is applied after every set_mode call
- at most one pending transition timer; a new switch cancels the previous
  timer before scheduling its own
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

from .modes import (
    SYSTEM_MODE,
    TRANSITION_CLASS,
    ThemeModeRegistry,
    default_registry,
    theme_modes_css,
)

logger = logging.getLogger(__name__)

STYLE_ELEMENT_ID = "tokencraft-theme-modes"

DEFAULT_TRANSITION_MS = 300


class StyleSink(Protocol):
    """Adapter that applies classes and stylesheet text to a document."""

    def add_class(self, class_name: str) -> None: ...

    def remove_class(self, class_name: str) -> None: ...

    def write_style(self, style_id: str, css: str) -> None: ...


class EnvironmentDetector(Protocol):
    """Resolves the ``system`` pseudo-mode to a concrete mode name."""

    def preferred_mode(self) -> str: ...


class Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]


class StaticEnvironment:
    """Environment detector that always prefers one mode."""

    def __init__(self, mode: str = "light"):
        self.mode = mode

    def preferred_mode(self) -> str:
        return self.mode


class InMemoryStyleSink:
    """Style sink that records classes and styles in memory.

    Useful for previews, tests and server-side rendering.
    """

    def __init__(self) -> None:
        self.classes: set[str] = set()
        self.styles: dict[str, str] = {}

    def add_class(self, class_name: str) -> None:
        self.classes.add(class_name)

    def remove_class(self, class_name: str) -> None:
        self.classes.discard(class_name)

    def write_style(self, style_id: str, css: str) -> None:
        self.styles[style_id] = css


def _thread_timer(interval: float, callback: Callable[[], None]) -> Timer:
    timer = threading.Timer(interval, callback)
    timer.daemon = True
    return timer


@dataclass(frozen=True)
class ModeState:
    """Snapshot of the controller state. ``mode`` is None until first set."""

    mode: str | None
    transitioning: bool


class ModeSwitchController:
    """Applies theme modes through a StyleSink.

    Args:
        sink: Receives class and stylesheet mutations.
        registry: Catalog of concrete modes.
        environment: Resolves ``system``; defaults to a light-preferring
            StaticEnvironment.
        transition_ms: How long the transitioning flag stays set.
        timer_factory: Builds a cancellable timer ``(seconds, callback)``.
    """

    def __init__(
        self,
        sink: StyleSink,
        registry: ThemeModeRegistry | None = None,
        *,
        environment: EnvironmentDetector | None = None,
        transition_ms: int = DEFAULT_TRANSITION_MS,
        timer_factory: TimerFactory = _thread_timer,
    ):
        self.sink = sink
        self.registry = registry or default_registry
        self.environment = environment or StaticEnvironment()
        self.transition_ms = transition_ms
        self._timer_factory = timer_factory

        self._lock = threading.Lock()
        self._mode: str | None = None
        self._transitioning = False
        self._timer: Timer | None = None
        self._generation = 0

    @property
    def mode(self) -> str | None:
        return self._mode

    @property
    def transitioning(self) -> bool:
        return self._transitioning

    @property
    def state(self) -> ModeState:
        with self._lock:
            return ModeState(mode=self._mode, transitioning=self._transitioning)

    def install(self) -> None:
        """Write the theme-mode stylesheet into the sink."""
        self.sink.write_style(STYLE_ELEMENT_ID, theme_modes_css(self.registry, self.transition_ms))

    def resolve_mode(self, name: str) -> str:
        """Turn a requested mode (possibly ``system``) into a concrete one."""
        if name == SYSTEM_MODE:
            name = self.environment.preferred_mode()
            logger.debug(f"Resolved system mode to '{name}'")
        return self.registry.get(name).name

    def set_mode(self, name: str) -> ModeState:
        """Apply a mode and start the transition window.

        Raises:
            UnknownModeError: If the mode (after system resolution) is unknown.
        """
        target = self.registry.get(self.resolve_mode(name))

        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

            for mode in self.registry.all_modes():
                if mode.css_class != target.css_class:
                    self.sink.remove_class(mode.css_class)
            self.sink.add_class(target.css_class)
            self.sink.add_class(TRANSITION_CLASS)

            self._mode = target.name
            self._transitioning = True
            self._generation += 1
            generation = self._generation

            timer = self._timer_factory(
                self.transition_ms / 1000, lambda: self._end_transition(generation)
            )
            self._timer = timer
            timer.start()

        logger.debug(f"Theme mode set to '{target.name}'")
        return ModeState(mode=target.name, transitioning=True)

    def _end_transition(self, generation: int) -> None:
        with self._lock:
            # A newer switch owns the flag now
            if generation != self._generation:
                return
            self._transitioning = False
            self._timer = None
            self.sink.remove_class(TRANSITION_CLASS)

    def dispose(self) -> None:
        """Cancel any pending transition timer."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            if self._transitioning:
                self._transitioning = False
                self.sink.remove_class(TRANSITION_CLASS)

    def class_name_for(self, mode: str) -> str:
        return self.registry.class_name_for(self.resolve_mode(mode))

    def effect_flags(self, mode: str) -> dict[str, bool]:
        return self.registry.effect_flags(self.resolve_mode(mode))

    def __enter__(self) -> ModeSwitchController:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.dispose()
